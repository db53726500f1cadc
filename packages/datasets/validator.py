"""
Dictionary validator for the Absurdle engine.

What this module does:
- Validate a dictionary file (one word per line, any lengths mixed).
- Enforce formatting rules (lowercase, a–z only, no blank lines).
- Count words per length and how many match the game's word length N.
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("packages/datasets/data/dictionary.txt", 5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    N: int               # word length the game will be played at
    exists: bool         # did the file exist on disk?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    lines: int           # total lines read
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    count_N: int         # unique valid words of exactly N letters
    invalid_lines: int   # number of invalid lines encountered
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> unique words
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count, total_lines)
    """
    valid: List[str] = []
    invalid = 0
    total = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            total += 1
            w = raw.strip()
            if w and w.islower() and w.isascii() and w.isalpha():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, total


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str, N: int) -> Dict:
    """
    Validate a dictionary file for a game of word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema) with:
          - counts, SHA-256, per-length histogram, invalid-line count
          - `passed` boolean (strict: file exists, no invalids, >= 1 word of length N)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)

    if not p.exists():
        rep = DictionaryReport(path, N, False, "", 0, 0, 0, 0, 0,
                               issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    words, invalid, total = _load_and_check(p)
    unique = set(words)
    lengths = Counter(len(w) for w in unique)

    rep = DictionaryReport(
        path=str(p),
        N=N,
        exists=True,
        sha256=_sha256_file(p),
        lines=total,
        count=len(words),
        unique_count=len(unique),
        count_N=lengths.get(N, 0),
        invalid_lines=invalid,
        lengths=dict(sorted(lengths.items())),
    )

    if rep.count_N == 0:
        rep.issues.append(f"dictionary contains 0 words of length {N}")
    if invalid:
        rep.issues.append(f"dictionary has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("dictionary contains duplicate lines")

    # Duplicates are harmless (the game collapses them), so they don't fail the check
    rep.passed = rep.count_N > 0 and invalid == 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | dictionary=12972 (uniq=12972, N-letter=12972, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | dictionary={report['count']} (uniq={report['unique_count']}, "
        f"N-letter={report['count_N']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
