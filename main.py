#!/usr/bin/env python3
"""
Money Amount Translator — Entry Point
=====================================

Prints the English words for one or more decimal amounts.

Usage:
    python main.py                          # Demo table of sample amounts
    python main.py 921.015 -0.005           # Translate the given amounts
    python main.py --file amounts.txt       # One amount per line (# comments ok)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from amount_translator.config import get_settings, load_environment
from amount_translator.exceptions import AmountTranslationError
from amount_translator.translator import parse_amount, to_english

logger = logging.getLogger(__name__)


# ─── Demo Amounts ────────────────────────────────────────────────────

SAMPLE_AMOUNTS = [
    "0",
    "0.004",
    "0.005",
    "0.995",
    "1",
    "1.015",
    "921.015",
    "1099.015",
    "999100000.015",
    "-0.005",
    "-0.001",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Input Helpers ───────────────────────────────────────────────────


def read_amounts_file(path: str) -> list[str]:
    """Read one amount per line, skipping blank lines and # comments."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [
        line.strip()
        for line in lines
        if line.strip() and not line.strip().startswith("#")
    ]


def _parse_args(argv: list[str]) -> list[str]:
    if not argv:
        return list(SAMPLE_AMOUNTS)
    if argv[0] == "--file":
        if len(argv) != 2:
            raise SystemExit("usage: python main.py --file PATH")
        return read_amounts_file(argv[1])
    return list(argv)


# ─── Pretty Printer ─────────────────────────────────────────────────


def translate_line(raw: str) -> tuple[bool, str]:
    """Translate one raw amount into a printable line.

    Returns:
        (succeeded, line)
    """
    try:
        words = to_english(parse_amount(raw))
    except AmountTranslationError as exc:
        logger.info("Could not translate %r: %s", raw, exc.code)
        return False, f"  {raw:>24}  {_RED}[{exc.code}] {exc.message}{_RESET}"
    return True, f"  {raw:>24}  {_DIM}→{_RESET}  {words}"


def print_translations(raw_amounts: list[str]) -> int:
    """Print every translation, continuing past failures.

    Returns:
        0 if all amounts translated, 1 otherwise.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  AMOUNT IN WORDS{_RESET}")
    print(f"{'=' * _WIDTH}")

    failures = 0
    for raw in raw_amounts:
        ok, line = translate_line(raw)
        if not ok:
            failures += 1
        print(line)

    print(f"{'=' * _WIDTH}")
    if failures:
        print(f"  {_RED}{_BOLD}{failures} amount(s) could not be translated{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}{len(raw_amounts)} amount(s) translated{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 1 if failures else 0


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Configure logging from the environment and translate the amounts."""
    load_environment()
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    raw_amounts = _parse_args(sys.argv[1:] if argv is None else argv)
    return print_translations(raw_amounts)


if __name__ == "__main__":
    sys.exit(main())
