"""Domain models for pattern-demo.

All models are **frozen** dataclasses — immutable value objects with no
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from pattern_demo.core.builder import ComputerSpecBuilder


# ---------------------------------------------------------------------------
# Singleton payload
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SharedInstance:
    """The process-wide value handed out by the singleton accessor."""

    data: str = "Singleton data"


# ---------------------------------------------------------------------------
# Builder product
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ComputerSpec:
    """A finalised computer specification.

    Only :meth:`ComputerSpecBuilder.build` is expected to create these,
    which guarantees ``cpu`` and ``ram`` are always present.
    """

    cpu: str
    """Processor description (required)."""

    ram: str
    """Memory description (required)."""

    storage: str | None = None
    """Storage description, or ``None`` if never set."""

    gpu: str | None = None
    """Graphics card description, or ``None`` if never set."""

    def __str__(self) -> str:
        return (
            f"Computer [CPU={self.cpu}, RAM={self.ram}, "
            f"Storage={self.storage}, GPU={self.gpu}]"
        )

    @staticmethod
    def builder() -> ComputerSpecBuilder:
        """Return a fresh, empty builder."""
        from pattern_demo.core.builder import ComputerSpecBuilder

        return ComputerSpecBuilder()


# ---------------------------------------------------------------------------
# Factory products
# ---------------------------------------------------------------------------

class AnimalKind(Enum):
    """Closed set of discriminators understood by the animal factory."""

    DOG = "dog"
    CAT = "cat"


@dataclass(frozen=True, slots=True)
class Dog:
    kind: ClassVar[AnimalKind] = AnimalKind.DOG

    def make_sound(self) -> str:
        return "Woof!"


@dataclass(frozen=True, slots=True)
class Cat:
    kind: ClassVar[AnimalKind] = AnimalKind.CAT

    def make_sound(self) -> str:
        return "Meow!"


Animal = Dog | Cat
"""Every concrete variant the factory can return."""
