"""
Absurdle game state.

Unlike Wordle there is no hidden answer. The manager holds every word that is
still a possible solution and, on each guess, keeps whichever feedback bucket
leaves the most of them alive (see partition.py). The game only ends when the
player's guess is the single word left.

The candidate set is an immutable, sorted tuple that is swapped for a new one
after every guess, so any tuple handed out by `words()` stays a valid snapshot.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .errors import AbsurdleError, EmptyState, ErrorKind, InvalidConfiguration, LengthMismatch
from .partition import group_by_pattern, pick_largest


@dataclass(frozen=True)
class Turn:
    """One recorded guess: what was played, what was shown, how many words survived."""
    guess: str
    pattern: str
    remaining: int


@dataclass(frozen=True)
class RecordOutcome:
    """Value form of `record`: exactly one of `pattern` / `error` is set."""
    pattern: Optional[str] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


class AbsurdleManager:
    """
    Adversarial candidate set for one game session.

    Args:
      dictionary : any iterable of words; only words of exactly `length`
                   characters are kept, duplicates collapse
      length     : word length for this game (>= 1)

    Raises:
      InvalidConfiguration if length < 1. A dictionary with no words of the
      requested length is allowed and yields an exhausted manager.
    """

    def __init__(self, dictionary: Iterable[str], length: int):
        if length < 1:
            raise InvalidConfiguration(f"word length must be >= 1; got {length}")
        self._length = length
        self._words: Tuple[str, ...] = tuple(sorted({w for w in dictionary if len(w) == length}))
        self._history: List[Turn] = []

    @property
    def length(self) -> int:
        return self._length

    @property
    def history(self) -> Tuple[Turn, ...]:
        return tuple(self._history)

    def words(self) -> Tuple[str, ...]:
        """Words that are still possible solutions, sorted."""
        return self._words

    # The candidates tuple is never edited in place, so a snapshot is just a reference.
    snapshot = words

    def record(self, guess: str) -> str:
        """
        Play `guess` and return the feedback pattern of the largest bucket.

        Raises:
          EmptyState     : no candidates are left
          LengthMismatch : len(guess) != configured length
        """
        if not self._words:
            raise EmptyState("no candidate words remain")
        if len(guess) != self._length:
            raise LengthMismatch(
                f"guess {guess!r} has length {len(guess)}; expected {self._length}")

        patt, kept = pick_largest(group_by_pattern(self._words, guess))

        self._words = tuple(kept)
        self._history.append(Turn(guess, patt, len(kept)))
        return patt

    def try_record(self, guess: str) -> RecordOutcome:
        """Like `record`, but failures are returned instead of raised."""
        try:
            return RecordOutcome(pattern=self.record(guess))
        except AbsurdleError as e:
            return RecordOutcome(error=e.kind, message=str(e))
