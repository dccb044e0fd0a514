"""Interactive animal-kind selection for the CLI layer.

Used by ``pattern-demo animal --interactive``.  The prompt only returns
the chosen discriminator; creating the animal stays with the factory.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pattern_demo.exceptions import OptionalDependencyError, SelectionCancelledError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise OptionalDependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _build_choice_label(kind: str) -> str:
    """Label shown in the selector, e.g. ``"Dog"``."""
    return kind.capitalize()


def prompt_animal_kind(kinds: Sequence[str]) -> str:
    """Ask the user to pick one of *kinds* and return it.

    Raises
    ------
    SelectionCancelledError
        If the user dismisses the prompt (Esc / Ctrl+C returns ``None``).
    """
    questionary = _import_questionary()

    choices = [
        questionary.Choice(title=_build_choice_label(kind), value=kind)
        for kind in kinds
    ]

    selected: str | None = questionary.select(
        "Which animal should the factory create?",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()

    if selected is None:
        raise SelectionCancelledError(
            "No animal selected.",
            hint="Use arrow keys to pick an animal, then press Enter.",
        )

    return selected
