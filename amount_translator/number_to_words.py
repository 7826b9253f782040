"""
Render integers 0–999 as English words.

Supported patterns:
    7    → "Seven"
    13   → "Thirteen"
    20   → "Twenty"
    21   → "Twenty-One"
    100  → "One Hundred"
    921  → "Nine Hundred Twenty-One"
    0    → ""   (empty: the caller decides whether a group is emitted)

Every function here is pure and works on a single small integer. Scale words
(Thousand, Million, ...) are NOT handled here; see groups.py.
"""

from __future__ import annotations

# ─── Word Lookup Tables ──────────────────────────────────────────────

ONES: tuple[str, ...] = (
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
)

TEENS: tuple[str, ...] = (
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
)

TENS: tuple[str, ...] = (
    "Twenty",
    "Thirty",
    "Forty",
    "Fifty",
    "Sixty",
    "Seventy",
    "Eighty",
    "Ninety",
)


def _check_range(value: int, low: int, high: int, what: str) -> None:
    if not low <= value <= high:
        raise ValueError(f"{what} must be between {low} and {high}, got {value!r}")


# ─── Sub-range Renderers ─────────────────────────────────────────────


def ones_to_words(num: int) -> str:
    """1–9 → "One" … "Nine"."""
    _check_range(num, 1, 9, "Ones value")
    return ONES[num - 1]


def teens_to_words(num: int) -> str:
    """10–19 → "Ten" … "Nineteen"."""
    _check_range(num, 10, 19, "Teens value")
    return TEENS[num - 10]


def tens_to_words(num: int) -> str:
    """20–99 → "Twenty" … "Ninety-Nine".

    The ones word is hyphenated onto the tens word, and only when the ones
    digit is non-zero ("Forty-Two", but plain "Forty").
    """
    _check_range(num, 20, 99, "Tens value")
    tens, ones = divmod(num, 10)
    word = TENS[tens - 2]
    if ones == 0:
        return word
    return f"{word}-{ONES[ones - 1]}"


def tens_and_ones_to_words(num: int) -> str:
    """Dispatch 0–99 to the matching sub-range renderer (0 → "")."""
    _check_range(num, 0, 99, "Tens-and-ones value")
    if num >= 20:
        return tens_to_words(num)
    if num >= 10:
        return teens_to_words(num)
    if num >= 1:
        return ones_to_words(num)
    return ""


def hundreds_to_words(digit: int) -> str:
    """Hundreds digit 1–9 → "<word> Hundred"."""
    _check_range(digit, 1, 9, "Hundreds digit")
    return f"{ONES[digit - 1]} Hundred"


# ─── Main Renderer ───────────────────────────────────────────────────


def three_digits_to_words(num: int) -> str:
    """Convert 0–999 to English words.

    Args:
        num: e.g. 921

    Returns:
        "Nine Hundred Twenty-One" (no scale word, no padding). 0 yields "".

    Raises:
        ValueError: If num is outside 0–999.
    """
    _check_range(num, 0, 999, "Three-digit value")

    if num < 100:
        return tens_and_ones_to_words(num)

    hundreds, remainder = divmod(num, 100)
    words = hundreds_to_words(hundreds)
    if remainder:
        words = f"{words} {tens_and_ones_to_words(remainder)}"
    return words
