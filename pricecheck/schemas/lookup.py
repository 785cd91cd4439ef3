"""
==============================================================================
Lookup Schemas Module
==============================================================================

Response schemas for the catalog search endpoint.

Field names are serialized in camelCase for the scanner front end.

==============================================================================
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pricecheck.catalog.models import CatalogRow
from pricecheck.pricing.tiers import PriceTiers


class LookupType(str, Enum):
    """Key the query is matched against."""
    UPC = "upc"
    ITEM = "item"


class CamelModel(BaseModel):
    """Base schema serializing field names as camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# RESULT SCHEMAS
# =============================================================================

class LookupResult(CamelModel):
    """Matched catalog row with derived prices."""
    description: str
    item_number: str
    category: str
    retail: float
    tier1: int
    tier2: int
    upc_number: str
    retail_raw: str
    import_date: str = ""
    apparel_price: Optional[int] = None

    @classmethod
    def from_row(cls, row: CatalogRow, tiers: PriceTiers) -> "LookupResult":
        """Create a result from a catalog row and its price tiers."""
        return cls(
            description=row.description,
            item_number=row.item_number,
            category=row.category_description,
            retail=tiers.retail,
            tier1=tiers.tier1,
            tier2=tiers.tier2,
            upc_number=row.upc_number,
            retail_raw=row.retail_per_unit,
            import_date=row.import_date,
            apparel_price=tiers.apparel_price,
        )


class LookupDebug(CamelModel):
    """Diagnostics attached to a no-match response when requested."""
    query: str
    key: str
    rows_loaded: int
    fetched_at: Optional[datetime] = None
    sample_upc_numbers: List[str] = Field(default_factory=list)


class LookupResponse(CamelModel):
    """Successful search response (match or soft not-found)."""
    ok: bool = True
    found: bool
    searched: Optional[str] = None
    result: Optional[LookupResult] = None
    debug: Optional[LookupDebug] = None

    def to_dict(self) -> dict:
        """Serialize with camelCase keys, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
