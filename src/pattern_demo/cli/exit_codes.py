"""Process exit codes returned by ``pattern-demo``.

:func:`pattern_demo.cli.app.cli` is the only caller; tests import these
names instead of repeating the integers.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command ran and printed its result."""

GENERAL_ERROR: int = 1
"""A PatternDemoError (bad builder input, unknown kind, cancelled prompt)."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""
