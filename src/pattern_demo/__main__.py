"""Allow ``python -m pattern_demo`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m pattern_demo`` behaves identically to the
``pattern-demo`` console script.
"""

from __future__ import annotations

from pattern_demo.cli.app import cli

if __name__ == "__main__":
    cli()
