# apps/cli/play.py
"""
Interactive Absurdle in the terminal.

Loads a dictionary, keeps every N-letter word as a possible answer, and lets
the player guess until the adversary is cornered into the guessed word.

Usage:
    python -m apps.cli.play --dictionary packages/datasets/data/dictionary.txt --N 5
"""

from __future__ import annotations

import argparse
import sys

from packages.datasets import load_dictionary, validate_dictionary, pretty_summary
from packages.engine import AbsurdleManager, AbsurdleError, LengthMismatch, all_correct, render


def play(game: AbsurdleManager, *, show_remaining: bool = False, inp=input, out=print) -> int:
    """
    Run the prompt loop until a win or end of input.
    Returns the number of guesses recorded (0 if the player never guessed).
    """
    win = all_correct(game.length)
    while True:
        try:
            guess = inp(f"guess ({game.length} letters)> ").strip().lower()
        except EOFError:
            out("")
            return len(game.history)

        try:
            patt = game.record(guess)
        except LengthMismatch as e:
            out(str(e))
            continue

        left = len(game.words())
        out(f"{render(patt)}  {left} word(s) left")
        if show_remaining:
            out(", ".join(game.words()))
        if patt == win:
            out(f"Absurdle solved in {len(game.history)} guess(es).")
            return len(game.history)


def main():
    ap = argparse.ArgumentParser(description="Absurdle: adversarial Wordle in the terminal")
    ap.add_argument("--dictionary", default="packages/datasets/data/dictionary.txt",
                    help="path to word list (one word per line, any lengths)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--show-remaining", action="store_true",
                    help="print the surviving words after every guess")
    args = ap.parse_args()

    rep = validate_dictionary(args.dictionary, args.N)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print("; ".join(rep["issues"]), file=sys.stderr)
        sys.exit(1)

    try:
        game = AbsurdleManager(load_dictionary(args.dictionary), args.N)
        if not game.words():
            # record() would raise EmptyState on the first guess
            print(f"No {args.N}-letter words in {args.dictionary}.", file=sys.stderr)
            sys.exit(1)
        play(game, show_remaining=args.show_remaining)
    except AbsurdleError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
