"""Exceptions raised by the UNO engine.

Every error is a caller contract violation: it is raised before any state
changes and never retried internally. Each class also derives from the
builtin exception it refines, so ``except ValueError`` still catches a bad
play.
"""


class UnoError(Exception):
    """Base class for engine errors."""


class InvalidConfigurationError(UnoError, ValueError):
    """Bad player count, target score or deal size."""


class HandEndedError(UnoError, RuntimeError):
    """A mutating call was made after the hand ended."""

    def __init__(self, message: str = "The hand has ended") -> None:
        super().__init__(message)


class IllegalPlayError(UnoError, ValueError):
    """The card does not match the last played card."""


class MissingColorError(UnoError, ValueError):
    """A wild card was played without choosing a color."""


class ExtraneousColorError(UnoError, ValueError):
    """A color was chosen for a card that already has one."""


class IndexOutOfRangeError(UnoError, IndexError):
    """A player or card index is outside the valid range."""
