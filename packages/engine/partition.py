"""
Adversarial bucketing of candidates by feedback pattern.

For a guess g, every candidate word produces exactly one pattern against g, so
grouping by pattern is a true partition of the candidate set. The adversary
keeps the biggest bucket.

Tie-break: buckets are scanned in tile order of their pattern
('-' < 'Y' < 'G', see scoring.pattern_key) and only a STRICTLY larger bucket
replaces the current best, so the earliest of several equal-size buckets wins.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple
from .scoring import pattern_for, pattern_key


def group_by_pattern(candidates: Iterable[str], guess: str) -> Dict[str, List[str]]:
    """
    Map pattern -> candidates that would produce it against `guess`.
    Members keep the order they had in `candidates`.
    """
    buckets: Dict[str, List[str]] = defaultdict(list)
    for w in candidates:
        buckets[pattern_for(w, guess)].append(w)
    return dict(buckets)


def pick_largest(groups: Dict[str, List[str]]) -> Tuple[str, List[str]]:
    """
    Return (pattern, members) of the largest group, ties broken by tile order.
    """
    if not groups:
        raise ValueError("cannot pick from an empty set of groups")

    best_patt = ""
    best: List[str] = []
    for patt in sorted(groups, key=pattern_key):
        members = groups[patt]
        if len(members) > len(best):
            best_patt, best = patt, members
    return best_patt, best
