"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

from fastapi.testclient import TestClient

from pricecheck.core import exceptions


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check_cold(self, client: TestClient):
        """Test health reports a cold cache before any lookup."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["components"]["catalog"] == "cold"
        assert data["details"]["rows_loaded"] == 0

    def test_health_check_after_lookup(self, client: TestClient):
        """Test health reports loaded rows after a lookup."""
        client.get("/api/v1/search", params={"q": "193968502553"})
        data = client.get("/api/v1/health").json()
        assert data["components"]["catalog"] == "healthy"
        assert data["details"]["rows_loaded"] == 4

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestUpcSearch:
    """Tests for UPC lookups."""

    def test_upc_a_scan_found(self, client: TestClient):
        """Test a 12-digit scan finds the row stored under its core."""
        response = client.get("/api/v1/search", params={"type": "upc", "q": "193968502553"})
        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["found"] is True
        assert data["searched"] == "19396850255"

        result = data["result"]
        assert result["description"] == "Wireless Earbuds"
        assert result["itemNumber"] == "100234"
        assert result["category"] == "ELECTRONICS"
        assert result["upcNumber"] == "19396850255"
        assert result["retail"] == 49.99
        assert result["tier1"] == 35
        assert result["tier2"] == 25
        assert result["retailRaw"] == "$49.99"
        assert "apparelPrice" not in result

    def test_type_defaults_to_upc(self, client: TestClient):
        """Test omitting type performs a UPC lookup."""
        data = client.get("/api/v1/search", params={"q": "19396850255"}).json()
        assert data["found"] is True
        assert data["searched"] == "19396850255"

    def test_unversioned_path(self, client: TestClient):
        """Test the search is also served at /api/search."""
        data = client.get("/api/search", params={"q": "193968502553"}).json()
        assert data["found"] is True

    def test_apparel_price_included(self, client: TestClient):
        """Test apparel rows carry the bracket price."""
        data = client.get("/api/v1/search", params={"q": "193968502607"}).json()
        assert data["found"] is True
        assert data["result"]["category"] == "LADIES APPAREL"
        assert data["result"]["apparelPrice"] == 8

    def test_leading_zero_upc(self, client: TestClient):
        """Test a UPC starting with zero matches its zero-stripped row."""
        data = client.get("/api/v1/search", params={"q": "088745123459"}).json()
        assert data["found"] is True
        assert data["searched"] == "08874512345"
        assert data["result"]["description"] == "Fleece Hoodie"
        assert data["result"]["apparelPrice"] == 6

    def test_ean13_scan_of_zero_led_upc(self, client: TestClient):
        """Test a 13-digit scan of a zero-led UPC-A finds the same row."""
        data = client.get("/api/v1/search", params={"q": "0088745123459"}).json()
        assert data["found"] is True
        assert data["searched"] == "08874512345"
        assert data["result"]["description"] == "Fleece Hoodie"

    def test_upc_not_found(self, client: TestClient):
        """Test an unknown UPC is a soft miss."""
        response = client.get("/api/v1/search", params={"q": "012345678905"})
        assert response.status_code == 200
        data = response.json()
        assert data == {"ok": True, "found": False, "searched": "01234567890"}

    def test_invalid_upc(self, client: TestClient):
        """Test an unreducible UPC is a validation error."""
        response = client.get("/api/v1/search", params={"q": "12345"})
        assert response.status_code == 400
        data = response.json()
        assert data["ok"] is False
        assert data["code"] == "INVALID_UPC"
        assert data["error"]


class TestItemSearch:
    """Tests for item number lookups."""

    def test_item_found(self, client: TestClient):
        """Test an item number lookup returns tiers."""
        data = client.get("/api/v1/search", params={"type": "item", "q": "300415"}).json()
        assert data["found"] is True
        assert "searched" not in data
        assert data["result"]["description"] == "Stock Pot"
        assert data["result"]["retail"] == 1010.01
        assert data["result"]["tier1"] == 707
        assert data["result"]["tier2"] == 506

    def test_item_digits_only_match(self, client: TestClient):
        """Test prefixed stored item numbers match on digits."""
        data = client.get("/api/v1/search", params={"type": "ITEM", "q": "200871"}).json()
        assert data["found"] is True
        assert data["result"]["itemNumber"] == "ITM-200871"

    def test_item_not_found(self, client: TestClient):
        """Test an unknown item returns found false only."""
        response = client.get("/api/v1/search", params={"type": "item", "q": "ABC123"})
        assert response.status_code == 200
        assert response.json() == {"ok": True, "found": False}


class TestSearchValidation:
    """Tests for request validation."""

    def test_missing_query(self, client: TestClient):
        """Test a missing q is rejected."""
        response = client.get("/api/v1/search")
        assert response.status_code == 400
        assert response.json()["ok"] is False
        assert response.json()["error"] == "Missing query"

    def test_blank_query(self, client: TestClient):
        """Test a whitespace q is rejected."""
        response = client.get("/api/v1/search", params={"q": "   "})
        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_QUERY"

    def test_unknown_type(self, client: TestClient):
        """Test an unsupported lookup type is rejected."""
        response = client.get("/api/v1/search", params={"type": "sku", "q": "123"})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_LOOKUP_TYPE"

    def test_validation_does_not_fetch(self, client: TestClient, source):
        """Test rejected queries never contact the catalog source."""
        client.get("/api/v1/search", params={"q": "12345"})
        client.get("/api/v1/search")
        assert source.fetches == 0


class TestCacheBehaviour:
    """Tests for cache use through the API."""

    def test_lookups_share_cache(self, client: TestClient, source):
        """Test consecutive lookups within the TTL fetch once."""
        client.get("/api/v1/search", params={"q": "193968502553"})
        client.get("/api/v1/search", params={"type": "item", "q": "300415"})
        assert source.fetches == 1

    def test_refresh_flag(self, client: TestClient, source):
        """Test refresh forces a new fetch."""
        client.get("/api/v1/search", params={"q": "193968502553"})
        client.get("/api/v1/search", params={"q": "193968502553", "refresh": "1"})
        assert source.fetches == 2

    def test_refresh_false_value(self, client: TestClient, source):
        """Test refresh=0 keeps the cached rows."""
        client.get("/api/v1/search", params={"q": "193968502553"})
        client.get("/api/v1/search", params={"q": "193968502553", "refresh": "0"})
        assert source.fetches == 1

    def test_refetch_after_expiry(self, client: TestClient, source, clock):
        """Test an expired cache refetches."""
        client.get("/api/v1/search", params={"q": "193968502553"})
        clock.advance(31)
        client.get("/api/v1/search", params={"q": "193968502553"})
        assert source.fetches == 2


class TestDebugOutput:
    """Tests for no-match diagnostics."""

    def test_debug_on_miss(self, client: TestClient):
        """Test debug adds diagnostics to a UPC miss."""
        data = client.get(
            "/api/v1/search", params={"q": "012345678905", "debug": "1"}
        ).json()
        assert data["found"] is False
        debug = data["debug"]
        assert debug["rowsLoaded"] == 4
        assert debug["key"] == "01234567890"
        assert debug["query"] == "012345678905"
        assert debug["sampleUpcNumbers"][0] == "19396850255"
        assert "fetchedAt" in debug

    def test_debug_on_item_miss(self, client: TestClient):
        """Test debug on an item miss reports the digit key."""
        data = client.get(
            "/api/v1/search", params={"type": "item", "q": "ABC123", "debug": "true"}
        ).json()
        assert data["debug"]["key"] == "123"

    def test_no_debug_on_hit(self, client: TestClient):
        """Test diagnostics are omitted when a row is found."""
        data = client.get(
            "/api/v1/search", params={"q": "193968502553", "debug": "1"}
        ).json()
        assert "debug" not in data


class TestUpstreamErrors:
    """Tests for catalog source failures."""

    def test_unexpected_source_error(self, client: TestClient, source):
        """Test an adapter exception becomes a 500 with its message."""
        source.error = RuntimeError("quota exceeded")
        response = client.get("/api/v1/search", params={"q": "193968502553"})
        assert response.status_code == 500
        data = response.json()
        assert data["ok"] is False
        assert data["error"] == "quota exceeded"

    def test_app_exception_from_source(self, client: TestClient, source):
        """Test a source-raised upstream error keeps its code."""
        source.error = exceptions.upstream_error("Google Sheets request failed: 403")
        response = client.get("/api/v1/search", params={"q": "193968502553"})
        assert response.status_code == 500
        assert response.json()["code"] == "UPSTREAM_ERROR"

    def test_no_stale_rows_after_failure(self, client: TestClient, source, clock):
        """Test an expired cache with a failing source does not serve old rows."""
        assert client.get("/api/v1/search", params={"q": "193968502553"}).json()["found"]
        clock.advance(60)
        source.error = RuntimeError("timeout")
        response = client.get("/api/v1/search", params={"q": "193968502553"})
        assert response.status_code == 500
