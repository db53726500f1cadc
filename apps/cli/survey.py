# apps/cli/survey.py
"""
Batch survey of Absurdle openers.

This script:
  1) Validates the dictionary (prints counts + SHA for the chosen N).
  2) Records every opener on a fresh game and notes the bucket the adversary keeps.
  3) Writes:
       - CSV:  one row per opener (pattern, kept, groups)
       - JSON: manifest with config, dictionary report, summary stats, git commit
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import load_dictionary, validate_dictionary, pretty_summary
from packages.engine import AbsurdleManager
from packages.harness import survey_openers, summarize_survey
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _positive_int(s: str) -> int:
    n = int(s)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1; got {n}")
    return n


def main():
    ap = argparse.ArgumentParser(description="Absurdle: survey opening guesses")
    ap.add_argument("--dictionary", default="packages/datasets/data/dictionary.txt",
                    help="path to word list (one word per line, any lengths)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--openers",
                    help="optional file of openers to try (default: every N-letter dictionary word)")
    ap.add_argument("--sample", type=_positive_int, help="try only a random subset of openers")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate + load
    rep = validate_dictionary(args.dictionary, args.N)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print("; ".join(rep["issues"]), file=sys.stderr)
        sys.exit(1)

    pool = AbsurdleManager(load_dictionary(args.dictionary), args.N).words()
    if not pool:
        print(f"No {args.N}-letter words in {args.dictionary}.", file=sys.stderr)
        sys.exit(1)

    if args.openers:
        openers = [w for w in load_dictionary(args.openers) if len(w) == args.N]
    else:
        openers = list(pool)

    # 2) Deterministic sample
    if args.sample and args.sample < len(openers):
        rng = random.Random(args.seed)
        openers = sorted(rng.sample(openers, args.sample))

    total = len(openers)
    mode = _progress_mode(args.progress)

    rows = []
    start = time.time()
    last_print = 0.0
    iterator = tqdm(openers, ncols=80, desc="Surveying", unit="opener") if mode == "bar" else openers

    # 3) Survey one opener at a time so progress stays live
    for idx, g in enumerate(iterator, 1):
        rows.extend(survey_openers(pool, args.N, [g]))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize_survey(rows)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"survey_{run_id}.csv"
    manifest_path = outdir / f"survey_{run_id}_manifest.json"

    write_csv(rows, str(csv_path), N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "summary": summary,
    }, str(manifest_path))

    if rows:
        print(f"best opener: {summary['best_opener']} (adversary keeps {summary['best_kept']}) | "
              f"kept mean={summary['kept_mean']:.1f} median={summary['kept_median']:.1f} "
              f"p90={summary['kept_p90']:.1f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
