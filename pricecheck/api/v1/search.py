"""
==============================================================================
Catalog Search Endpoints
==============================================================================

Barcode and item number lookup against the liquidation catalog.

    GET /search?type=upc&q=193968502553
    GET /search?type=item&q=100234&refresh=1
    GET /search?q=193968502553&debug=1

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from pricecheck.core.dependencies import lookup_service, parse_flag
from pricecheck.services.lookup_service import LookupService


router = APIRouter(prefix="/search", tags=["Search"])


class SearchController:
    """Controller for catalog search operations."""

    def __init__(self, service: LookupService):
        self._service = service

    def search(
        self,
        lookup_type: Optional[str],
        query: Optional[str],
        refresh: Optional[str],
        debug: Optional[str],
    ) -> dict:
        """Run a lookup and shape the response."""
        response = self._service.lookup(
            lookup_type,
            query,
            refresh=parse_flag(refresh),
            debug=parse_flag(debug),
        )
        return response.to_dict()


@router.get("")
def search_catalog(
    type: Optional[str] = Query("upc", description="Lookup key: upc or item"),
    q: Optional[str] = Query(None, description="Scanned or typed value"),
    refresh: Optional[str] = Query(None, description="Bypass the catalog cache"),
    debug: Optional[str] = Query(None, description="Include diagnostics on no match"),
    service: LookupService = Depends(lookup_service),
):
    """
    Look up a catalog row by UPC or item number.

    Returns ``{ok, found, searched?, result?}``; a valid query with no
    match is not an error.
    """
    controller = SearchController(service)
    return controller.search(type, q, refresh, debug)
