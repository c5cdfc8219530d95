"""Custom exception hierarchy for mvn-cling.

All exceptions that cross layer boundaries must inherit from
:class:`ClingError`.  Raw ``OSError`` / ``argparse`` failures must not
leak past the layer that produced them — they are re-raised as a typed
subclass defined here.

Hierarchy
---------
ClingError
├── ParseError
├── InvalidBasedirError
├── NoGoalsError
└── LegacyCliNotFoundError
"""

from __future__ import annotations


class ClingError(Exception):
    """Base exception for all mvn-cling errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument parsing ------------------------------------------------------

class ParseError(ClingError):
    """Raised when the argument vector does not match the option grammar."""


class NoGoalsError(ClingError):
    """Raised when a valid invocation names no goals and nothing else to do."""


# --- Filesystem layout -----------------------------------------------------

class InvalidBasedirError(ClingError):
    """Raised when a base directory or override has the wrong file type."""


# --- Delegation ------------------------------------------------------------

class LegacyCliNotFoundError(ClingError):
    """Raised when the legacy CLI executable cannot be located."""
