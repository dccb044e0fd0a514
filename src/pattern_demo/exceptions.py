"""Custom exception hierarchy for pattern-demo.

Every error raised on purpose by this package inherits from
:class:`PatternDemoError`, so the CLI error boundary can render a clean
message (plus an optional hint) instead of a stack trace.

Hierarchy
---------
PatternDemoError
├── ValidationError
├── UnknownKindError
├── SelectionCancelledError
└── OptionalDependencyError
"""

from __future__ import annotations

from collections.abc import Sequence


class PatternDemoError(Exception):
    """Base exception for all pattern-demo errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Builder ---------------------------------------------------------------

class ValidationError(PatternDemoError):
    """Raised by ``build()`` when a required field was never set."""

    def __init__(
        self,
        message: str,
        *,
        missing_fields: Sequence[str] = (),
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.missing_fields: tuple[str, ...] = tuple(missing_fields)


# --- Factory ---------------------------------------------------------------

class UnknownKindError(PatternDemoError):
    """Raised when a non-empty animal kind matches no known variant."""

    def __init__(self, kind: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unknown animal type: {kind!r}", hint=hint)
        self.kind: str = kind


# --- CLI / environment -----------------------------------------------------

class SelectionCancelledError(PatternDemoError):
    """Raised when the user dismisses an interactive prompt."""


class OptionalDependencyError(PatternDemoError):
    """Raised when an optional UI package is needed but not installed."""
