"""Core layer — the three object-construction patterns.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from pattern_demo.core.builder import ComputerSpecBuilder
from pattern_demo.core.factory import AnimalFactory
from pattern_demo.core.models import (
    Animal,
    AnimalKind,
    Cat,
    ComputerSpec,
    Dog,
    SharedInstance,
)
from pattern_demo.core.protocols import ComputerBuilder, SoundMaker
from pattern_demo.core.singleton import LazySingleton, get_instance

__all__: list[str] = [
    "Animal",
    "AnimalFactory",
    "AnimalKind",
    "Cat",
    "ComputerBuilder",
    "ComputerSpec",
    "ComputerSpecBuilder",
    "Dog",
    "LazySingleton",
    "SharedInstance",
    "SoundMaker",
    "get_instance",
]
