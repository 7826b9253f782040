"""
Split a signed decimal amount into sign, dollar magnitude and cents.

The cents rule is deliberately literal: the fractional part is scaled by 100
as a binary double and rounded half-up. That reproduces the established
outputs exactly, including the edge where 0.995 becomes 100 cents. The
100 is NOT carried into the dollar magnitude.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .exceptions import InvalidAmountError
from .groups import require_supported_amount
from .models import NormalizedAmount


def _require_convertible(amount: Decimal) -> None:
    if not amount.is_finite():
        raise InvalidAmountError(
            f"Amount must be a finite decimal, got {amount!r}",
            details={"amount": str(amount)},
        )
    require_supported_amount(amount)


# ─── Unchecked Helpers (absolute value already validated) ───────────


def _truncate(absolute: Decimal) -> int:
    if absolute.is_zero():
        return 0
    return int(absolute)


def _round_cents(absolute: Decimal) -> int:
    fraction = absolute - _truncate(absolute)
    scaled = float(fraction) * 100
    return int(Decimal(scaled).to_integral_value(rounding=ROUND_HALF_UP))


# ─── Public API ──────────────────────────────────────────────────────


def integer_part(amount: Decimal) -> int:
    """Truncated integer part of |amount| (never rounded).

    Raises:
        InvalidAmountError: If the amount is NaN or infinite.
        UnsupportedMagnitude: If |amount| is 10^36 or more.
    """
    _require_convertible(amount)
    return _truncate(amount.copy_abs())


def fraction_cents(amount: Decimal) -> int:
    """Round the fractional part of |amount| to whole cents (0–100).

    The scaled value goes through float, then half-up rounding is applied to
    that exact binary value: 0.015 scales to 1.5 and rounds to 2, while
    0.004 scales to 0.4 and rounds to 0.
    """
    _require_convertible(amount)
    return _round_cents(amount.copy_abs())


def normalize_amount(amount: Decimal) -> NormalizedAmount:
    """Normalize a monetary amount for rendering.

    Args:
        amount: Any finite Decimal, e.g. Decimal("-921.015")

    Returns:
        NormalizedAmount(is_negative=True, magnitude=921, cents=2)

    Raises:
        InvalidAmountError: If the amount is NaN or infinite.
        UnsupportedMagnitude: If |amount| is 10^36 or more. This is decided
            from the exponent, before the integer part is ever built.

    Negative zero ("-0", "-0.00") compares equal to zero and is therefore
    reported as non-negative.
    """
    _require_convertible(amount)
    absolute = amount.copy_abs()
    return NormalizedAmount(
        is_negative=amount < 0,
        magnitude=_truncate(absolute),
        cents=_round_cents(absolute),
    )
