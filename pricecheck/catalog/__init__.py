"""
==============================================================================
Catalog Package - Liquidation Catalog Resolution
==============================================================================

Barcode normalization, sheet parsing, TTL caching and row matching for the
liquidation catalog.

Classes:
--------
- CatalogRow: Pydantic model for one catalog row
- CatalogSnapshot: Immutable parsed catalog at a point in time
- CatalogCache: TTL cache over a catalog source
- GoogleSheetsSource: Catalog source backed by Google Sheets

==============================================================================
"""

from .models import CatalogRow, CatalogSnapshot
from .normalizer import digits_only, normalize_upc
from .parser import ColumnMapping, ColumnSpec, DEFAULT_COLUMN_MAPPING, parse_rows, parse_values
from .matcher import find_by_item, find_by_upc
from .source import CatalogSource, GoogleSheetsSource
from .cache import CatalogCache, get_catalog_cache, init_catalog_cache

__all__ = [
    "CatalogRow",
    "CatalogSnapshot",
    "digits_only",
    "normalize_upc",
    "ColumnMapping",
    "ColumnSpec",
    "DEFAULT_COLUMN_MAPPING",
    "parse_rows",
    "parse_values",
    "find_by_item",
    "find_by_upc",
    "CatalogSource",
    "GoogleSheetsSource",
    "CatalogCache",
    "get_catalog_cache",
    "init_catalog_cache",
]
