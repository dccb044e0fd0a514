"""Animal factory — maps a string discriminator to a concrete variant.

Policy for :meth:`AnimalFactory.create_animal`
----------------------------------------------
* ``None`` or ``""``       → ``None`` (no instance, no error).
* ``"dog"`` / ``"cat"``     → a new variant, matched case-insensitively.
* any other non-empty text → :class:`UnknownKindError`.

The asymmetry between the first and last rows is part of the contract.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from pattern_demo.core.models import Animal, AnimalKind, Cat, Dog
from pattern_demo.exceptions import UnknownKindError

logger = logging.getLogger(__name__)


_CONSTRUCTORS: Mapping[AnimalKind, Callable[[], Animal]] = {
    AnimalKind.DOG: Dog,
    AnimalKind.CAT: Cat,
}

# Every kind must be constructible.
_unmapped = set(AnimalKind) - set(_CONSTRUCTORS)
if _unmapped:  # pragma: no cover
    raise RuntimeError(f"AnimalKind members without a constructor: {_unmapped}")


class AnimalFactory:
    """Stateless factory for :data:`~pattern_demo.core.models.Animal` variants."""

    @staticmethod
    def known_kinds() -> tuple[str, ...]:
        """Return the accepted discriminators, sorted."""
        return tuple(sorted(kind.value for kind in AnimalKind))

    def create_animal(self, kind: str | None) -> Animal | None:
        """Create the animal named by *kind*.

        Returns
        -------
        Animal | None
            A new variant instance, or ``None`` when *kind* is ``None``
            or empty.

        Raises
        ------
        UnknownKindError
            If *kind* is non-empty and names no known variant.
        """
        if not kind:
            logger.debug("Empty animal kind; returning no animal")
            return None

        try:
            animal_kind = AnimalKind(kind.lower())
        except ValueError:
            raise UnknownKindError(
                kind,
                hint=f"Known kinds: {', '.join(self.known_kinds())}",
            ) from None

        animal = _CONSTRUCTORS[animal_kind]()
        logger.debug("Created %s for kind %r", type(animal).__name__, kind)
        return animal
