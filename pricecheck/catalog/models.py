"""
==============================================================================
Catalog Models Module
==============================================================================

Pydantic models for parsed liquidation catalog rows and cache snapshots.

==============================================================================
"""

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class CatalogRow(BaseModel):
    """
    One data row of the liquidation catalog.

    Immutable once parsed. All values are kept as the trimmed cell text;
    ``retail_per_unit`` is parsed on demand by the pricing module.

    Attributes:
        import_date: Free-form import date (passthrough)
        description: Item description
        item_number: Internal item identifier
        upc_number: UPC digits with leading zeros stripped
        category_description: Category label used for apparel pricing
        retail_per_unit: Raw retail price text
    """

    model_config = ConfigDict(frozen=True)

    import_date: str = Field(default="", description="Import date")
    description: str = Field(default="", description="Item description")
    item_number: str = Field(default="", description="Internal item number")
    upc_number: str = Field(default="", description="Normalized UPC digits")
    category_description: str = Field(default="", description="Category label")
    retail_per_unit: str = Field(default="", description="Raw retail price")


class CatalogSnapshot(BaseModel):
    """
    A fully parsed copy of the catalog captured at one point in time.

    Attributes:
        rows: Parsed rows in sheet order
        captured_at: Cache clock reading when the fetch started
        fetched_at: UTC wall time of the fetch (diagnostics only)
    """

    model_config = ConfigDict(frozen=True)

    rows: Tuple[CatalogRow, ...] = ()
    captured_at: float
    fetched_at: datetime

    def age(self, now: float) -> float:
        """Seconds elapsed since capture according to the cache clock."""
        return now - self.captured_at
