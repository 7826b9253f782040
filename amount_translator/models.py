"""
Pydantic models for translation data, strictly typed at every stage boundary.

Each stage of the translator produces exactly one of these values and the
next stage consumes it. All models are frozen: nothing is mutated after it
is built, and out-of-range values fail loudly at construction time.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


# ─── Normalized Amount ──────────────────────────────────────────────


class NormalizedAmount(BaseModel):
    """Sign, integer magnitude and rounded cents of a monetary amount."""

    model_config = ConfigDict(frozen=True)

    is_negative: bool
    magnitude: int = Field(ge=0)  # Truncated integer part of |amount|
    cents: int = Field(ge=0, le=100)  # 100 is reachable (0.995) and never carried

    @property
    def is_zero(self) -> bool:
        """True when nothing is left to render: the result is plain "Zero"."""
        return self.magnitude == 0 and self.cents == 0


# ─── Digit Group ────────────────────────────────────────────────────


class DigitGroup(BaseModel):
    """A 3-digit chunk of the magnitude paired with its scale word."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0, le=999)
    position: int = Field(ge=0)  # 0 = units, 1 = thousands, ...
    scale_word: str  # "" for position 0


# ─── Translation Result ─────────────────────────────────────────────


class AmountTranslation(BaseModel):
    """The complete outcome of translating one amount."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal
    words: str
    normalized: NormalizedAmount
