"""The demonstration sequence and its per-pattern output helpers.

Each ``show_*`` function exercises one core component and writes the
outcome to stdout.  :func:`run_demo` calls them in the fixed happy-path
order, which never triggers a builder or factory error.
"""

from __future__ import annotations

from pattern_demo.cli import exit_codes
from pattern_demo.cli.console import console
from pattern_demo.core.factory import AnimalFactory
from pattern_demo.core.models import Animal, ComputerSpec
from pattern_demo.core.protocols import ComputerBuilder
from pattern_demo.core.singleton import get_instance


def show_singleton() -> bool:
    """Fetch the shared instance twice and report whether they match."""
    first = get_instance()
    second = get_instance()
    same = first is second
    console.print(f"Singleton instances are same: {same}")
    return same


def show_computer(spec: ComputerSpec) -> None:
    console.print(f"Built computer: {spec}", markup=False)


def show_animal(animal: Animal | None) -> None:
    if animal is None:
        console.print("No animal created.")
        return
    label = animal.kind.value.capitalize()
    console.print(f"{label} says: {animal.make_sound()}")


def run_demo() -> int:
    """Run every pattern once, in order, and return the exit code."""
    show_singleton()

    builder: ComputerBuilder = ComputerSpec.builder()
    computer = (
        builder
        .set_cpu("Intel i7")
        .set_ram("16GB")
        .set_storage("512GB SSD")
        .build()
    )
    show_computer(computer)

    factory = AnimalFactory()
    show_animal(factory.create_animal("dog"))
    show_animal(factory.create_animal("cat"))

    return exit_codes.SUCCESS
