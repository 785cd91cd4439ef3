"""
==============================================================================
Price Tier Calculator Module
==============================================================================

Derives liquidation price tiers from a row's retail price.

Rules:
-----
- retail: parsed retail rounded half-up to cents
- tier1:  retail x 0.70, rounded half-up to a whole unit
- tier2:  retail x 0.50, always rounded up to a whole unit
- apparel bracket: fixed step price for apparel categories only

Apparel Brackets:
----------------
    retail <= 15.99  ->  6
    retail <= 22.99  ->  8
    retail <= 27.99  -> 10
    retail <= 30.99  -> 12
    retail <= 36.99  -> 15
    retail <= 44.99  -> 20
    otherwise        -> 25

All arithmetic is done with Decimal so cent values are exact.

==============================================================================
"""

from __future__ import annotations

import re
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict


CENT = Decimal("0.01")
WHOLE = Decimal("1")
ZERO = Decimal("0")

TIER1_RATE = Decimal("0.7")
TIER2_RATE = Decimal("0.5")

# Exact sheet labels; matched after trimming, case-sensitive
APPAREL_CATEGORIES: FrozenSet[str] = frozenset({
    "MENS APPAREL",
    "BASIC APPAREL",
    "ACCESSORIES",
    "LADIES APPAREL",
    "CHILDRENS APPAREL",
})

APPAREL_BRACKETS: Tuple[Tuple[Decimal, int], ...] = (
    (Decimal("15.99"), 6),
    (Decimal("22.99"), 8),
    (Decimal("27.99"), 10),
    (Decimal("30.99"), 12),
    (Decimal("36.99"), 15),
    (Decimal("44.99"), 20),
)
APPAREL_TOP_PRICE = 25

_MONEY_NOISE_RE = re.compile(r"[\s$£€,]")


class PriceTiers(BaseModel):
    """
    Derived prices for one catalog row.

    Attributes:
        retail: Retail price rounded to cents
        tier1: First markdown price (whole units)
        tier2: Second markdown price (whole units)
        apparel_price: Bracket price, None when the category is not apparel
    """

    model_config = ConfigDict(frozen=True)

    retail: float
    tier1: int
    tier2: int
    apparel_price: Optional[int] = None


# =============================================================================
# MONEY HELPERS
# =============================================================================

def parse_money_or_zero(value: Any) -> Decimal:
    """
    Parse a money cell, defaulting to zero.

    Currency symbols, thousands separators and whitespace are removed
    before parsing. Empty, non-numeric and non-finite values give 0.

    Example:
        >>> parse_money_or_zero("$1,299.50")
        Decimal('1299.50')
        >>> parse_money_or_zero("n/a")
        Decimal('0')
    """
    if value is None:
        return ZERO

    cleaned = _MONEY_NOISE_RE.sub("", str(value))
    if not cleaned:
        return ZERO

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return ZERO

    if not amount.is_finite():
        return ZERO
    return amount


def round_money(amount: Decimal) -> Decimal:
    """Round half-up to cents."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def apparel_bracket(retail: Decimal) -> int:
    """Step price for an apparel item with the given retail."""
    for ceiling, price in APPAREL_BRACKETS:
        if retail <= ceiling:
            return price
    return APPAREL_TOP_PRICE


def is_apparel(category: Optional[str]) -> bool:
    return (category or "").strip() in APPAREL_CATEGORIES


# =============================================================================
# TIER DERIVATION
# =============================================================================

def derive_tiers(retail_per_unit_raw: Any, category: Optional[str] = None) -> PriceTiers:
    """
    Compute the price tiers for a retail price cell.

    Args:
        retail_per_unit_raw: Raw retail text from the catalog
        category: Category label of the row

    Returns:
        PriceTiers for the row

    Example:
        >>> derive_tiers("10.01", "HOUSEWARES")
        PriceTiers(retail=10.01, tier1=7, tier2=6, apparel_price=None)
        >>> derive_tiers("15.99", "MENS APPAREL").apparel_price
        6
    """
    retail = round_money(parse_money_or_zero(retail_per_unit_raw))

    tier1 = (retail * TIER1_RATE).quantize(WHOLE, rounding=ROUND_HALF_UP)
    tier2 = (retail * TIER2_RATE).quantize(WHOLE, rounding=ROUND_CEILING)

    return PriceTiers(
        retail=float(retail),
        tier1=int(tier1),
        tier2=int(tier2),
        apparel_price=apparel_bracket(retail) if is_apparel(category) else None,
    )
