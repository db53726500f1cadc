"""
Wordle-style feedback for a single (word, guess) pair.

Conventions:
  - 'G'  : correct  = right letter in the right position
  - 'Y'  : present  = letter occurs elsewhere in the word
  - '-'  : absent   = letter not present (or present fewer times than guessed)

Tile order for comparing patterns is '-' < 'Y' < 'G'. This is also the order
the display glyphs sort in as strings (⬜ < 🟨 < 🟩), so ranking patterns by
`pattern_key` gives the same sequence as sorting their rendered form.

Algorithm (two-pass, count-decrementing):
  1) Count every letter of the word.
  2) First pass marks ALL exact matches and consumes one count each.
  3) Second pass, left to right, marks 'Y' only while the letter still has a
     remaining count, otherwise '-'.

The second pass must not start before the first has seen every position, or a
later exact match could be double-credited as an earlier 'Y'.
"""

from collections import Counter
from typing import Literal, Tuple

# Each pattern character is one of 'G', 'Y', '-'
PatternChar = Literal["G", "Y", "-"]

CORRECT: PatternChar = "G"
PRESENT: PatternChar = "Y"
ABSENT: PatternChar = "-"

TILE_RANK = {ABSENT: 0, PRESENT: 1, CORRECT: 2}
TILE_GLYPH = {CORRECT: "🟩", PRESENT: "🟨", ABSENT: "⬜"}


def pattern_for(word: str, guess: str) -> str:
    """
    Compute the feedback pattern `guess` earns against `word`.

    Preconditions (the caller's job, nothing is checked here):
      - len(word) == len(guess)
      - both are lowercase a-z

    Examples:
      pattern_for("abcde", "abcde") -> "GGGGG"
      pattern_for("speed", "erase") -> "Y--YY"
      pattern_for("crepe", "eerie") -> "Y-Y-G"
    """
    remaining = Counter(word)
    pattern = [""] * len(word)

    # Pass 1: exact matches
    for i, (w, g) in enumerate(zip(word, guess)):
        if g == w:
            pattern[i] = CORRECT
            remaining[g] -= 1

    # Pass 2: present-elsewhere while copies of the letter are left
    for i, g in enumerate(guess):
        if pattern[i]:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1
        else:
            pattern[i] = ABSENT

    return "".join(pattern)


def all_correct(n: int) -> str:
    """The winning pattern for words of length n."""
    return CORRECT * n


def pattern_key(pattern: str) -> Tuple[int, ...]:
    """Sort key ranking patterns by tile order rather than raw character code."""
    return tuple(TILE_RANK[ch] for ch in pattern)


def render(pattern: str) -> str:
    """Pattern -> coloured squares, e.g. 'G-Y' -> '🟩⬜🟨'."""
    return "".join(TILE_GLYPH[ch] for ch in pattern)
