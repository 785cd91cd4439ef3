"""
Pricing Package

Price tier derivation for liquidation catalog rows.
"""

from .tiers import (
    APPAREL_CATEGORIES,
    PriceTiers,
    apparel_bracket,
    derive_tiers,
    parse_money_or_zero,
    round_money,
)

__all__ = [
    "APPAREL_CATEGORIES",
    "PriceTiers",
    "apparel_bracket",
    "derive_tiers",
    "parse_money_or_zero",
    "round_money",
]
