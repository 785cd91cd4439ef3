"""
==============================================================================
Catalog Cache Module
==============================================================================

Time-bounded in-process cache of the parsed catalog.

Behavior:
--------
- Rows are served from the current snapshot while it is younger than the
  TTL; otherwise the source is fetched, parsed and the snapshot replaced
- ``force_refresh`` always fetches
- A failed fetch propagates and leaves the previous snapshot in place;
  stale rows are never returned in its stead
- The snapshot is replaced by a single assignment of a frozen object, so
  readers never see a partially built catalog
- Concurrent expiry may cause redundant fetches; each produces an
  equivalent snapshot

==============================================================================
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Tuple

from .models import CatalogRow, CatalogSnapshot
from .parser import DEFAULT_COLUMN_MAPPING, ColumnMapping, parse_values
from .source import CatalogSource


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_TTL_SECONDS = 30.0


class CatalogCache:
    """
    TTL cache wrapping a catalog source.

    Attributes:
        ttl_seconds: Maximum snapshot age before a refetch

    Example:
        >>> cache = CatalogCache(source, ttl_seconds=30)
        >>> rows = cache.get_rows()
        >>> rows = cache.get_rows(force_refresh=True)
    """

    def __init__(
        self,
        source: CatalogSource,
        ttl_seconds: Optional[float] = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        mapping: ColumnMapping = DEFAULT_COLUMN_MAPPING,
    ) -> None:
        """
        Initialize the cache.

        Args:
            source: Adapter returning the raw cell grid
            ttl_seconds: Snapshot lifetime; None falls back to 30 seconds
            clock: Monotonic time source in seconds
            mapping: Column mapping used when parsing
        """
        self._source = source
        self.ttl_seconds = DEFAULT_TTL_SECONDS if ttl_seconds is None else float(ttl_seconds)
        self._clock = clock
        self._mapping = mapping
        self._snapshot: Optional[CatalogSnapshot] = None
        self._fetch_count = 0

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def snapshot(self) -> Optional[CatalogSnapshot]:
        """Current snapshot, or None before the first successful fetch."""
        return self._snapshot

    @property
    def fetch_count(self) -> int:
        """Number of successful source fetches."""
        return self._fetch_count

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get_rows(self, force_refresh: bool = False) -> Tuple[CatalogRow, ...]:
        """
        Return catalog rows, refetching when needed.

        Args:
            force_refresh: Bypass the cached snapshot

        Returns:
            Rows of the current snapshot
        """
        return self.get_snapshot(force_refresh).rows

    def get_snapshot(self, force_refresh: bool = False) -> CatalogSnapshot:
        """Return the current snapshot, refetching when stale or forced."""
        snapshot = self._snapshot
        if not force_refresh and self._is_fresh(snapshot):
            logger.debug(f"Catalog cache hit ({len(snapshot.rows)} rows)")
            return snapshot

        return self.refresh()

    def refresh(self) -> CatalogSnapshot:
        """
        Fetch and parse the catalog, replacing the snapshot.

        Source exceptions propagate unchanged.
        """
        started = self._clock()
        values = self._source.fetch_rows()
        rows = parse_values(values, self._mapping)

        snapshot = CatalogSnapshot(
            rows=tuple(rows),
            captured_at=started,
            fetched_at=datetime.now(timezone.utc),
        )
        self._snapshot = snapshot
        self._fetch_count += 1

        logger.info(
            f"Catalog refreshed: {len(rows)} rows "
            f"in {self._clock() - started:.2f}s"
        )
        return snapshot

    def invalidate(self) -> None:
        """Drop the snapshot so the next lookup refetches."""
        self._snapshot = None

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_stats(self) -> Dict:
        """Get cache statistics."""
        snapshot = self._snapshot
        if snapshot is None:
            return {
                "loaded": False,
                "rows": 0,
                "age_seconds": None,
                "fetched_at": None,
                "ttl_seconds": self.ttl_seconds,
                "fetch_count": self._fetch_count,
            }

        return {
            "loaded": True,
            "rows": len(snapshot.rows),
            "age_seconds": round(snapshot.age(self._clock()), 3),
            "fetched_at": snapshot.fetched_at.isoformat(),
            "ttl_seconds": self.ttl_seconds,
            "fetch_count": self._fetch_count,
        }

    def _is_fresh(self, snapshot: Optional[CatalogSnapshot]) -> bool:
        if snapshot is None:
            return False
        return snapshot.age(self._clock()) < self.ttl_seconds


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_cache_instance: Optional[CatalogCache] = None


def get_catalog_cache() -> Optional[CatalogCache]:
    """Get the application's catalog cache."""
    return _cache_instance


def init_catalog_cache(cache: CatalogCache) -> CatalogCache:
    """
    Install the application's catalog cache.

    Args:
        cache: Configured CatalogCache

    Returns:
        The installed cache
    """
    global _cache_instance
    _cache_instance = cache
    return _cache_instance
