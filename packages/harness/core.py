"""
Experiment harness core primitives.

- play_script:      play a fixed sequence of guesses against a fresh manager.
- survey_openers:   score many first guesses by how much the adversary keeps.
- summarize_survey: numpy statistics over a survey.

There is no turn limit: Absurdle lets the player keep guessing until the
candidate set collapses to the guessed word.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Sequence

import numpy as np

from packages.engine import (AbsurdleManager, EmptyState, LengthMismatch, all_correct,
                             group_by_pattern, pick_largest)


def play_script(words: Iterable[str], N: int, guesses: Sequence[str]) -> Dict:
    """
    Play `guesses` in order until one comes back all-correct or the script ends.

    Args:
        words:   dictionary (any lengths; filtered by the manager)
        N:       word length
        guesses: guesses to play; a wrong-length guess raises LengthMismatch

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern, remaining)]), remaining (list[str])
    """
    game = AbsurdleManager(words, N)
    win = all_correct(N)
    success = False

    t0 = time.perf_counter()
    for guess in guesses:
        if game.record(guess) == win:
            success = True
            break
    dt = (time.perf_counter() - t0) * 1000.0

    history = [(t.guess, t.pattern, t.remaining) for t in game.history]
    return {
        "success": success, "guesses": len(history), "time_ms": dt,
        "history": history, "remaining": list(game.words()),
    }


def survey_openers(words: Iterable[str], N: int, openers: Iterable[str]) -> List[Dict]:
    """
    For each opener, partition the N-letter pool once and report what the adversary keeps.

    Row keys: opener, pattern, kept (size of the bucket the adversary keeps),
    groups (number of distinct patterns the opener splits the pool into).

    Raises EmptyState / LengthMismatch under the same rules as AbsurdleManager.record.
    """
    pool = AbsurdleManager(words, N).words()

    rows: List[Dict] = []
    for g in openers:
        if not pool:
            raise EmptyState(f"no {N}-letter words to survey")
        if len(g) != N:
            raise LengthMismatch(f"opener {g!r} has length {len(g)}; expected {N}")

        groups = group_by_pattern(pool, g)
        patt, kept = pick_largest(groups)
        rows.append({
            "opener": g,
            "pattern": patt,
            "kept": len(kept),
            "groups": len(groups),
        })
    return rows


def summarize_survey(rows: List[Dict]) -> Dict:
    """
    Aggregate `kept` across a survey. The best opener is the one that leaves the
    adversary the smallest bucket (ties: more groups, then alphabetical).
    """
    if not rows:
        return {"openers": 0}

    kept = np.array([r["kept"] for r in rows], dtype=float)
    best = min(rows, key=lambda r: (r["kept"], -r["groups"], r["opener"]))
    return {
        "openers": len(rows),
        "kept_min": int(kept.min()),
        "kept_max": int(kept.max()),
        "kept_mean": float(kept.mean()),
        "kept_median": float(np.median(kept)),
        "kept_p90": float(np.percentile(kept, 90)),
        "best_opener": best["opener"],
        "best_kept": best["kept"],
    }
