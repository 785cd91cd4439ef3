"""
==============================================================================
Row Matcher Module
==============================================================================

Exact-key lookups over a catalog snapshot.

Both lookups are linear scans returning the first match. There is no fuzzy
or partial matching.

==============================================================================
"""

from __future__ import annotations

from typing import Iterable, Optional

from .models import CatalogRow
from .normalizer import digits_only


def find_by_upc(rows: Iterable[CatalogRow], core: Optional[str]) -> Optional[CatalogRow]:
    """
    Find the row whose normalized UPC equals the given core.

    Stored UPCs have their leading zeros stripped, so a core beginning
    with zeros is also compared in its stripped form.

    Args:
        rows: Catalog rows to scan
        core: 11-digit UPC core from normalize_upc

    Returns:
        First matching row or None
    """
    keys = {core or "", (core or "").lstrip("0")} - {""}
    if not keys:
        return None
    for row in rows:
        if row.upc_number in keys:
            return row
    return None


def find_by_item(rows: Iterable[CatalogRow], query: str) -> Optional[CatalogRow]:
    """
    Find the row whose item number matches the query digit-for-digit.

    Both sides are reduced to digits before comparing. A query without
    digits never matches.

    Example:
        >>> row = CatalogRow(item_number="ITM-00412")
        >>> find_by_item([row], "00412") is row
        True
    """
    key = digits_only(query)
    if not key:
        return None
    for row in rows:
        if digits_only(row.item_number) == key:
            return row
    return None
