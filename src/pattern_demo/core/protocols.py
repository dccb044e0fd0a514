"""Protocols (interfaces) describing the core capabilities.

Callers may depend on these structural contracts rather than on the
concrete classes; any object with matching methods satisfies them
without explicit inheritance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pattern_demo.core.models import ComputerSpec


@runtime_checkable
class SoundMaker(Protocol):
    """Anything that can produce a sound string."""

    def make_sound(self) -> str:
        """Return the sound this animal makes.  Pure and deterministic."""
        ...  # pragma: no cover


@runtime_checkable
class ComputerBuilder(Protocol):
    """Contract for fluent :class:`ComputerSpec` builders.

    Every setter stores its value without validation and returns the
    same builder so calls can be chained.  All validation happens in
    :meth:`build`.
    """

    def set_cpu(self, cpu: str | None) -> ComputerBuilder:
        ...  # pragma: no cover

    def set_ram(self, ram: str | None) -> ComputerBuilder:
        ...  # pragma: no cover

    def set_storage(self, storage: str | None) -> ComputerBuilder:
        ...  # pragma: no cover

    def set_gpu(self, gpu: str | None) -> ComputerBuilder:
        ...  # pragma: no cover

    def build(self) -> ComputerSpec:
        """Return the finalised spec.

        Raises
        ------
        ValidationError
            If ``cpu`` or ``ram`` is missing or empty.
        """
        ...  # pragma: no cover
