"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog cache and lookup service.

Dependency Hierarchy:
--------------------
            ┌─────────────────────┐
            │ catalog_cache()     │
            └──────────┬──────────┘
                       │
            ┌──────────▼──────────┐
            │ lookup_service()    │
            └─────────────────────┘

``catalog_cache`` reads the cache installed with ``init_catalog_cache``;
it can be replaced through ``app.dependency_overrides``.

Usage Examples:
--------------
    @router.get("/search")
    def search(service: LookupService = Depends(lookup_service)):
        ...

==============================================================================
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends

from pricecheck.catalog.cache import CatalogCache, get_catalog_cache
from pricecheck.core import exceptions
from pricecheck.services.lookup_service import LookupService


FALSE_FLAG_VALUES = {"0", "false", "no", "off"}


def catalog_cache() -> CatalogCache:
    """Return the installed catalog cache."""
    cache = get_catalog_cache()
    if cache is None:
        raise exceptions.catalog_not_loaded()
    return cache


def lookup_service(cache: CatalogCache = Depends(catalog_cache)) -> LookupService:
    """Build a lookup service over the catalog cache."""
    return LookupService(cache)


def parse_flag(value: Optional[str]) -> bool:
    """
    Interpret an optional query flag.

    An absent flag is False. A present flag is True unless its value is
    one of 0/false/no/off, so ``?refresh`` and ``?refresh=1`` both enable it.
    """
    if value is None:
        return False
    return value.strip().lower() not in FALSE_FLAG_VALUES
