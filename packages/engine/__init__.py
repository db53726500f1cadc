from .scoring import pattern_for, all_correct, pattern_key, render
from .partition import group_by_pattern, pick_largest
from .manager import AbsurdleManager, RecordOutcome, Turn
from .errors import AbsurdleError, EmptyState, ErrorKind, InvalidConfiguration, LengthMismatch

__all__ = [
    "pattern_for", "all_correct", "pattern_key", "render",
    "group_by_pattern", "pick_largest",
    "AbsurdleManager", "RecordOutcome", "Turn",
    "AbsurdleError", "EmptyState", "ErrorKind", "InvalidConfiguration", "LengthMismatch",
]
