"""
==============================================================================
Lookup Service Module
==============================================================================

Resolves a scanned barcode or item number to a priced catalog row.

Flow:
----
    query ─► normalize (UPC mode) ─► CatalogCache ─► matcher ─► derive_tiers

Validation failures raise AppException (400). A valid query with no match
is a successful response with ``found: false``. Catalog source failures
propagate to the application's exception handlers.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from pricecheck.catalog import CatalogCache, digits_only, find_by_item, find_by_upc, normalize_upc
from pricecheck.catalog.models import CatalogRow, CatalogSnapshot
from pricecheck.core import exceptions
from pricecheck.pricing import derive_tiers
from pricecheck.schemas.lookup import LookupDebug, LookupResponse, LookupResult, LookupType


# Module logger
logger = logging.getLogger(__name__)


DEBUG_SAMPLE_SIZE = 5


class LookupService:
    """
    Service for catalog lookups.

    Attributes:
        _cache: Catalog cache supplying rows

    Example:
        >>> service = LookupService(cache)
        >>> response = service.lookup("upc", "193968502553")
        >>> response.searched
        '19396850255'
    """

    def __init__(self, cache: CatalogCache) -> None:
        """
        Initialize lookup service.

        Args:
            cache: Catalog cache to read rows from
        """
        self._cache = cache

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def lookup(
        self,
        lookup_type: Optional[str],
        query: Optional[str],
        refresh: bool = False,
        debug: bool = False,
    ) -> LookupResponse:
        """
        Look up a catalog row.

        Args:
            lookup_type: "upc" or "item" (defaults to "upc")
            query: Scanned or typed value
            refresh: Bypass the catalog cache
            debug: Attach diagnostics to a no-match response

        Returns:
            LookupResponse with found True/False

        Raises:
            AppException: On missing query, unknown type or invalid UPC
        """
        mode = self._parse_type(lookup_type)
        query = (query or "").strip()
        if not query:
            raise exceptions.missing_query()

        if mode is LookupType.ITEM:
            return self._lookup_item(query, refresh, debug)
        return self._lookup_upc(query, refresh, debug)

    def _lookup_upc(self, query: str, refresh: bool, debug: bool) -> LookupResponse:
        core = normalize_upc(query)
        if core is None:
            raise exceptions.invalid_upc(query)

        snapshot = self._cache.get_snapshot(force_refresh=refresh)
        row = find_by_upc(snapshot.rows, core)

        if row is None:
            logger.info(f"UPC {core} not found ({len(snapshot.rows)} rows)")
            return LookupResponse(
                found=False,
                searched=core,
                debug=self._debug_info(query, core, snapshot) if debug else None,
            )

        return LookupResponse(found=True, searched=core, result=self._price(row))

    def _lookup_item(self, query: str, refresh: bool, debug: bool) -> LookupResponse:
        snapshot = self._cache.get_snapshot(force_refresh=refresh)
        row = find_by_item(snapshot.rows, query)

        if row is None:
            logger.info(f"Item {query!r} not found ({len(snapshot.rows)} rows)")
            return LookupResponse(
                found=False,
                debug=self._debug_info(query, digits_only(query), snapshot) if debug else None,
            )

        return LookupResponse(found=True, result=self._price(row))

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _parse_type(lookup_type: Optional[str]) -> LookupType:
        value = (lookup_type or LookupType.UPC.value).strip().lower()
        try:
            return LookupType(value)
        except ValueError:
            raise exceptions.invalid_lookup_type(lookup_type) from None

    @staticmethod
    def _price(row: CatalogRow) -> LookupResult:
        tiers = derive_tiers(row.retail_per_unit, row.category_description)
        return LookupResult.from_row(row, tiers)

    @staticmethod
    def _debug_info(query: str, key: str, snapshot: CatalogSnapshot) -> LookupDebug:
        return LookupDebug(
            query=query,
            key=key,
            rows_loaded=len(snapshot.rows),
            fetched_at=snapshot.fetched_at,
            sample_upc_numbers=[
                row.upc_number for row in snapshot.rows[:DEBUG_SAMPLE_SIZE]
            ],
        )
