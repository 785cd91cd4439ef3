"""
==============================================================================
Row Matcher Tests
==============================================================================
"""

from pricecheck.catalog.matcher import find_by_item, find_by_upc
from pricecheck.catalog.models import CatalogRow


ROWS = [
    CatalogRow(description="Earbuds", item_number="100234", upc_number="19396850255"),
    CatalogRow(description="Hoodie", item_number="ITM-200871", upc_number="8874512345"),
    CatalogRow(description="Pot", item_number="300415", upc_number=""),
    CatalogRow(description="Earbuds dup", item_number="100235", upc_number="19396850255"),
]


class TestFindByUpc:
    """Tests for UPC core matching."""

    def test_exact_core(self):
        """Test the core matches a stored UPC exactly."""
        assert find_by_upc(ROWS, "19396850255").description == "Earbuds"

    def test_first_match_wins(self):
        """Test duplicates resolve to the first row."""
        assert find_by_upc(ROWS, "19396850255") is ROWS[0]

    def test_leading_zero_core(self):
        """Test a zero-led core matches the zero-stripped stored UPC."""
        assert find_by_upc(ROWS, "08874512345").description == "Hoodie"

    def test_no_partial_match(self):
        """Test prefixes and substrings do not match."""
        assert find_by_upc(ROWS, "1939685025") is None
        assert find_by_upc(ROWS, "193968502553") is None

    def test_all_zero_core_never_matches_blank(self):
        """Test a zero core does not match rows without a UPC."""
        assert find_by_upc(ROWS, "00000000000") is None

    def test_empty_core(self):
        """Test an empty key matches nothing."""
        assert find_by_upc(ROWS, "") is None

    def test_none_core(self):
        """Test a missing core matches nothing."""
        assert find_by_upc(ROWS, None) is None


class TestFindByItem:
    """Tests for item number matching."""

    def test_plain_item_number(self):
        """Test a numeric query matches."""
        assert find_by_item(ROWS, "300415").description == "Pot"

    def test_digits_compared_on_both_sides(self):
        """Test prefixes on either side are ignored."""
        assert find_by_item(ROWS, "200871").description == "Hoodie"
        assert find_by_item(ROWS, "#300-415").description == "Pot"

    def test_no_digits_never_matches(self):
        """Test a query without digits matches nothing."""
        assert find_by_item(ROWS, "ABC") is None

    def test_no_match(self):
        """Test an unknown item returns None."""
        assert find_by_item(ROWS, "ABC123") is None
