"""
Download a word list page and write a clean dictionary for Absurdle.

What it does:
- Downloads the page (HTML or plain text).
- Parses visible text and splits it into tokens.
- Keeps lowercase alphabetic tokens, optionally only those of length N.
- De-duplicates while preserving page order, and writes to file.

Usage:
    python -m script.fetch_wordlist --url <page> --out packages/datasets/data/dictionary.txt
    # only 5-letter words, alphabetically sorted:
    python -m script.fetch_wordlist --url <page> --N 5 --sort
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from packages.datasets import write_lines

TOKEN_RE = re.compile(r"[A-Za-z]+")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(html: str, N: int | None = None) -> list[str]:
    """Visible text -> lowercase words (of length N when given), first occurrence order."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    words = [m.group(0).lower() for m in TOKEN_RE.finditer(text)]
    if N is not None:
        words = [w for w in words if len(w) == N]
    return unique_preserve_order(words)


def fetch_words(url: str, N: int | None = None) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, N)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for Absurdle")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="packages/datasets/data/dictionary.txt")
    ap.add_argument("--N", type=int, help="keep only words of this length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
