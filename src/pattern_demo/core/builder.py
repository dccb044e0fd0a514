"""Fluent builder for :class:`~pattern_demo.core.models.ComputerSpec`.

Setters only record values.  :meth:`ComputerSpecBuilder.build` is the
single place where required fields are checked, and the spec it returns
is a frozen copy: later setter calls never reach it.
"""

from __future__ import annotations

import logging

from pattern_demo.core.models import ComputerSpec
from pattern_demo.core.protocols import ComputerBuilder
from pattern_demo.exceptions import ValidationError

logger = logging.getLogger(__name__)


class ComputerSpecBuilder:
    """Single-use accumulator of computer parts.

    Satisfies the :class:`~pattern_demo.core.protocols.ComputerBuilder`
    protocol.  Each instance is meant for one caller; builders share no
    state with each other.

    Example
    -------
    >>> spec = (
    ...     ComputerSpecBuilder()
    ...     .set_cpu("Intel i7")
    ...     .set_ram("16GB")
    ...     .build()
    ... )
    >>> spec.storage is None
    True
    """

    def __init__(self) -> None:
        self._cpu: str | None = None
        self._ram: str | None = None
        self._storage: str | None = None
        self._gpu: str | None = None

    # ------------------------------------------------------------------
    # Chained setters
    # ------------------------------------------------------------------

    def set_cpu(self, cpu: str | None) -> ComputerBuilder:
        self._cpu = cpu
        return self

    def set_ram(self, ram: str | None) -> ComputerBuilder:
        self._ram = ram
        return self

    def set_storage(self, storage: str | None) -> ComputerBuilder:
        self._storage = storage
        return self

    def set_gpu(self, gpu: str | None) -> ComputerBuilder:
        self._gpu = gpu
        return self

    # ------------------------------------------------------------------
    # Finalisation
    # ------------------------------------------------------------------

    def build(self) -> ComputerSpec:
        """Validate required fields and return an immutable spec.

        Raises
        ------
        ValidationError
            If ``cpu`` or ``ram`` is ``None`` or empty.
        """
        cpu, ram = self._cpu, self._ram
        missing = [
            name
            for name, value in (("CPU", cpu), ("RAM", ram))
            if not value
        ]
        if not cpu or not ram:
            verb = "is" if len(missing) == 1 else "are"
            setters = " and ".join(f"set_{name.lower()}()" for name in missing)
            raise ValidationError(
                f"{' and '.join(missing)} {verb} required!",
                missing_fields=missing,
                hint=f"Call {setters} before build().",
            )

        spec = ComputerSpec(
            cpu=cpu,
            ram=ram,
            storage=self._storage,
            gpu=self._gpu,
        )
        logger.debug("Built %s", spec)
        return spec
