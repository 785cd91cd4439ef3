"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides a fake catalog source, a controllable clock, a catalog cache and
an API client wired to them.

==============================================================================
"""

import pytest
from typing import Any, Generator, List
from fastapi.testclient import TestClient

from pricecheck.catalog.cache import CatalogCache
from pricecheck.main import app


HEADER = [
    "Import Date",
    "Description",
    "ItemNumber",
    "UPC Number",
    "Pallet",
    "Category description",
    "Qty",
    "Ext Retail",
    "Cost",
    "Vendor",
    "Retail per Unit",
]

SHEET_ROWS = [
    ["2024-05-01", "Wireless Earbuds", "100234", "0019396850255", "P1", "ELECTRONICS", "2", "", "", "", "$49.99"],
    ["2024-05-01", "Fleece Hoodie", "ITM-200871", "0008874512345", "P1", "MENS APPAREL", "1", "", "", "", "15.99"],
    ["2024-05-02", "Rain Jacket", "200872", "0019396850260", "P2", "LADIES APPAREL", "1", "", "", "", "16.00"],
    ["2024-05-02", "Blank Row", "", "", "P2", "MISC", "1", "", "", "", "5.00"],
    ["2024-05-03", "Stock Pot", "300415", "", "P3", "HOUSEWARES", "4", "", "", "", "1,010.01"],
]


# ============================================================================
# FAKES
# ============================================================================

class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSource:
    """Catalog source returning a fixed grid and counting fetches."""

    def __init__(self, values: List[List[Any]]) -> None:
        self.values = values
        self.fetches = 0
        self.error: Exception = None

    def fetch_rows(self) -> List[List[Any]]:
        self.fetches += 1
        if self.error is not None:
            raise self.error
        return [list(row) for row in self.values]


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def source() -> FakeSource:
    return FakeSource([HEADER] + SHEET_ROWS)


@pytest.fixture
def cache(source: FakeSource, clock: FakeClock) -> CatalogCache:
    return CatalogCache(source, ttl_seconds=30, clock=clock)


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def client(cache: CatalogCache, monkeypatch) -> Generator[TestClient, None, None]:
    """Create test client using the fake catalog cache."""
    monkeypatch.setattr("pricecheck.catalog.cache._cache_instance", cache)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
