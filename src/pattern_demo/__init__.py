"""pattern-demo — Singleton, Builder and Factory in idiomatic Python.

Three independent object-construction strategies behind a small
demonstration CLI.
"""

from pattern_demo.version import __version__

__all__: list[str] = ["__version__"]
