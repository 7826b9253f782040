"""
Translate a monetary amount into canonical English words.

Flow:
    Decimal ──► normalize_amount ──► split_into_groups ──► three_digits_to_words
                                                                     │
                                          "… Dollars And … Cents" ◄──┘ assemble

    Decimal("921.015")  → "Nine Hundred Twenty-One Dollars And Two Cents"
    Decimal("-0.005")   → "Negative One Cent"
    Decimal("-0.001")   → "Zero"

Every stage is a pure function; nothing is cached or shared between calls,
so translate() is safe to call from any number of threads.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation

from .exceptions import InvalidAmountError
from .groups import split_into_groups
from .models import AmountTranslation, DigitGroup, NormalizedAmount
from .normalizer import normalize_amount
from .number_to_words import three_digits_to_words

logger = logging.getLogger(__name__)

ZERO = "Zero"
NEGATIVE = "Negative"

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


# ─── Input Parsing ───────────────────────────────────────────────────


def parse_amount(text: str) -> Decimal:
    """Parse a standard decimal literal such as "921.015" or "-1e3".

    Raises:
        InvalidAmountError: For empty text, grouping commas, currency
            symbols, NaN/Infinity or anything else that is not a plain literal.
    """
    if text is None or not text.strip():
        raise InvalidAmountError("Empty text cannot be parsed as an amount")

    candidate = text.strip()
    if not _DECIMAL_LITERAL.fullmatch(candidate):
        raise InvalidAmountError(
            f"Not a decimal literal: {text!r}",
            details={"raw": text},
        )
    try:
        return Decimal(candidate)
    except InvalidOperation as exc:
        raise InvalidAmountError(
            f"Not a decimal literal: {text!r}",
            details={"raw": text},
        ) from exc


# ─── Assembly ────────────────────────────────────────────────────────


def _render_group(group: DigitGroup) -> str:
    words = three_digits_to_words(group.value)
    if words and group.scale_word:
        return f"{words} {group.scale_word}"
    return words


def assemble(normalized: NormalizedAmount, groups: list[DigitGroup]) -> str:
    """Join rendered groups, the Dollar clause and the Cent clause.

    Args:
        normalized: Output of normalize_amount().
        groups: Output of split_into_groups(normalized.magnitude),
            least-significant first.

    Returns:
        The final words, e.g. "One Thousand Ninety-Nine Dollars And Two Cents".
        "Zero" when there is nothing to render (never "Negative Zero").
    """
    if normalized.is_zero:
        return ZERO

    parts: list[str] = []
    if normalized.is_negative:
        parts.append(NEGATIVE)

    # Highest scale first; empty groups (e.g. the 000 in 1,000,099) vanish
    for group in reversed(groups):
        rendered = _render_group(group)
        if rendered:
            parts.append(rendered)

    magnitude = normalized.magnitude
    cents = normalized.cents

    if magnitude > 0:
        parts.append("Dollars" if magnitude > 1 else "Dollar")
        if cents > 0:
            parts.append("And")

    if cents > 0:
        parts.append(three_digits_to_words(cents))
        parts.append("Cents" if cents > 1 else "Cent")

    return " ".join(parts)


# ─── Public API ──────────────────────────────────────────────────────


def translate(amount: Decimal) -> AmountTranslation:
    """Run every stage and return the words together with the normalized parts.

    Raises:
        InvalidAmountError: If the amount is not a finite Decimal.
        UnsupportedMagnitude: If the dollar part is 10^36 or more.
    """
    if not isinstance(amount, Decimal):
        raise InvalidAmountError(
            f"Amount must be a Decimal, got {type(amount).__name__}",
            details={"type": type(amount).__name__},
        )

    normalized = normalize_amount(amount)
    if normalized.is_zero:
        words = ZERO
    else:
        words = assemble(normalized, split_into_groups(normalized.magnitude))

    logger.debug("Translated %s -> %r", amount, words)
    return AmountTranslation(amount=amount, words=words, normalized=normalized)


def to_english(amount: Decimal) -> str:
    """Convert a signed decimal amount to English words.

    Args:
        amount: e.g. Decimal("1.015")

    Returns:
        "One Dollar And Two Cents"

    Raises:
        InvalidAmountError: If the amount is not a finite Decimal.
        UnsupportedMagnitude: If the dollar part needs a scale word beyond
            Decillion (10^36 or more).
    """
    return translate(amount).words


convert = to_english
