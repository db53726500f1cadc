"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-opener survey rows into a tidy CSV (one row per opener).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

SURVEY_FIELDS = ["opener", "N", "pattern", "kept", "groups"]


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_csv(rows: List[Dict], path: str, N: int) -> str:
    """
    Serialize survey rows to CSV.

    Schema (columns):
      opener, N, pattern, kept, groups

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=SURVEY_FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow({
                "opener": r["opener"],
                "N": N,
                "pattern": _excel_safe_pattern(r["pattern"]),
                "kept": r["kept"],
                "groups": r["groups"],
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (N, dictionary path, openers, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - summary: output of harness.summarize_survey(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
