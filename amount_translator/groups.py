"""
Decompose a dollar magnitude into 3-digit groups with scale words.

    1_099            → [(99, ""), (1, "Thousand")]
    999_100_000      → [(0, ""), (100, "Thousand"), (999, "Million")]

Groups are produced least-significant first. Python ints are unbounded, so
the only limit is the scale lexicon itself: anything at or above 10^36 has
no scale word and is rejected instead of being mislabelled.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from .exceptions import UnsupportedMagnitude
from .models import DigitGroup

logger = logging.getLogger(__name__)

# ─── Scale Lexicon ───────────────────────────────────────────────────
# Indexed by group position: 0 = units, 1 = thousands, 2 = millions, ...

SCALE_WORDS: tuple[str, ...] = (
    "",
    "Thousand",
    "Million",
    "Billion",
    "Trillion",
    "Quadrillion",
    "Quintillion",
    "Sextillion",
    "Septillion",
    "Octillion",
    "Nonillion",
    "Decillion",
)

GROUP_SIZE = 1000
GROUP_DIGITS = 3

# Largest magnitude that still has a scale word: 10^36 - 1
MAX_MAGNITUDE = GROUP_SIZE ** len(SCALE_WORDS) - 1


def _unsupported(groups_required: int) -> UnsupportedMagnitude:
    return UnsupportedMagnitude(
        f"Amount needs {groups_required} digit groups; "
        f"only {len(SCALE_WORDS)} are supported (up to {SCALE_WORDS[-1]})",
        details={
            "groups_required": groups_required,
            "groups_supported": len(SCALE_WORDS),
            "largest_scale_word": SCALE_WORDS[-1],
        },
    )


def scale_word(position: int) -> str:
    """Scale word for a group position; raises UnsupportedMagnitude past Decillion."""
    if position < 0:
        raise ValueError(f"Group position cannot be negative, got {position}")
    if position >= len(SCALE_WORDS):
        raise _unsupported(position + 1)
    return SCALE_WORDS[position]


def require_supported_amount(amount: Decimal) -> None:
    """Reject |amount| >= 10^36 from its exponent alone.

    Runs before any int() conversion: a short literal such as "1e20000000"
    would otherwise expand into a 20-million-digit integer first.

    Raises:
        UnsupportedMagnitude: If the integer part needs more than 12 groups.
    """
    if amount.is_zero():
        return
    # adjusted() is the power of ten of the leading digit, sign ignored
    exponent = amount.adjusted()
    if exponent >= GROUP_DIGITS * len(SCALE_WORDS):
        logger.warning("Rejected amount beyond %s (10^%d)", SCALE_WORDS[-1], exponent)
        raise _unsupported(exponent // GROUP_DIGITS + 1)


def split_into_groups(magnitude: int) -> list[DigitGroup]:
    """Split a non-negative integer into (value, scale word) groups.

    Args:
        magnitude: e.g. 1_099

    Returns:
        Groups least-significant first. Zero yields an empty list.

    Raises:
        ValueError: If magnitude is negative.
        UnsupportedMagnitude: If magnitude is 10^36 or more.
    """
    if magnitude < 0:
        raise ValueError(f"Magnitude cannot be negative, got {magnitude}")

    groups: list[DigitGroup] = []
    remaining = magnitude
    position = 0
    while remaining > 0:
        remaining, value = divmod(remaining, GROUP_SIZE)
        try:
            word = scale_word(position)
        except UnsupportedMagnitude:
            logger.warning("Rejected magnitude beyond %s", SCALE_WORDS[-1])
            raise
        groups.append(DigitGroup(value=value, position=position, scale_word=word))
        position += 1

    logger.debug("Split %d into %d group(s)", magnitude, len(groups))
    return groups
