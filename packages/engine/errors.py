"""
Error kinds raised by the Absurdle manager.

Each concrete error also subclasses the builtin a caller would naturally catch
(ValueError for bad arguments, RuntimeError for bad state), and carries an
`ErrorKind` so value-returning callers can branch without isinstance chains.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_CONFIGURATION = "invalid_configuration"
    EMPTY_STATE = "empty_state"
    LENGTH_MISMATCH = "length_mismatch"


class AbsurdleError(Exception):
    kind: ErrorKind


class InvalidConfiguration(AbsurdleError, ValueError):
    """Word length below 1 at construction."""
    kind = ErrorKind.INVALID_CONFIGURATION


class EmptyState(AbsurdleError, RuntimeError):
    """A guess was recorded with no candidate words left."""
    kind = ErrorKind.EMPTY_STATE


class LengthMismatch(AbsurdleError, ValueError):
    """Guess length differs from the configured word length."""
    kind = ErrorKind.LENGTH_MISMATCH
