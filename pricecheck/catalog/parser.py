"""
==============================================================================
Catalog Row Parser Module
==============================================================================

Turns the raw 2-D cell grid returned by a catalog source into CatalogRow
models.

Column Mapping:
--------------
Each semantic field has an ordered list of accepted header names and a
fallback column index. Headers are matched trimmed and case-insensitively;
the first candidate present wins. When no candidate is found the fallback
index is used. The mapping is resolved once per fetch.

Row Rules:
---------
- Cells beyond the end of a row read as ""
- UPC values are stored digits-only with leading zeros stripped
- Rows with neither an item number nor a UPC are dropped

==============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .models import CatalogRow
from .normalizer import digits_only


# Module logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnSpec:
    """Header candidates and positional fallback for one CatalogRow field."""

    field: str
    candidates: Tuple[str, ...]
    fallback_index: int


class ColumnMapping:
    """
    Ordered set of column specs for the catalog sheet.

    Example:
        >>> mapping = ColumnMapping(DEFAULT_COLUMNS)
        >>> positions = mapping.resolve(["UPC Number", "Description"])
        >>> positions["upc_number"]
        0
    """

    def __init__(self, specs: Sequence[ColumnSpec]) -> None:
        self._specs = tuple(specs)

    @property
    def specs(self) -> Tuple[ColumnSpec, ...]:
        return self._specs

    def resolve(self, header: Sequence[Any]) -> Dict[str, int]:
        """
        Map every field to a column index for the given header row.

        Args:
            header: Header cells (row 0 of the sheet)

        Returns:
            Dict of field name to column index
        """
        lookup: Dict[str, int] = {}
        for index, cell in enumerate(header):
            name = _cell_text(cell).lower()
            # First occurrence of a duplicated header wins
            if name and name not in lookup:
                lookup[name] = index

        positions: Dict[str, int] = {}
        for spec in self._specs:
            position = _first_match(lookup, spec.candidates)
            if position is None:
                logger.warning(
                    f"No header found for '{spec.field}' "
                    f"(tried {', '.join(spec.candidates)}); "
                    f"using column {spec.fallback_index}"
                )
                position = spec.fallback_index
            positions[spec.field] = position

        return positions


DEFAULT_COLUMNS: Tuple[ColumnSpec, ...] = (
    ColumnSpec("import_date", ("Import Date", "Date Imported"), 0),
    ColumnSpec("description", ("Description", "Item Description"), 1),
    ColumnSpec("item_number", ("ItemNumber", "Item Number", "Item #", "Item No"), 2),
    ColumnSpec("upc_number", ("UPC Number", "UPC", "UPC Code"), 3),
    ColumnSpec(
        "category_description",
        ("Category description", "Category Desc", "Category"),
        5,
    ),
    ColumnSpec(
        "retail_per_unit",
        ("Retail per Unit", "Retail Per Unit", "Retail/Unit", "Unit Retail", "Retail"),
        10,
    ),
)

DEFAULT_COLUMN_MAPPING = ColumnMapping(DEFAULT_COLUMNS)


# =============================================================================
# PARSING
# =============================================================================

def parse_rows(
    header: Sequence[Any],
    data_rows: Sequence[Sequence[Any]],
    mapping: ColumnMapping = DEFAULT_COLUMN_MAPPING,
) -> List[CatalogRow]:
    """
    Parse sheet data rows into CatalogRow models.

    Args:
        header: Header cells
        data_rows: Data rows following the header
        mapping: Column mapping to resolve against the header

    Returns:
        Parsed rows in sheet order, identifier-less rows removed
    """
    positions = mapping.resolve(header)

    rows: List[CatalogRow] = []
    dropped = 0

    for raw in data_rows:
        raw = raw or []
        values = {field: _cell_at(raw, index) for field, index in positions.items()}

        item_number = values.get("item_number", "")
        upc_raw = values.get("upc_number", "")

        if not item_number and not upc_raw:
            dropped += 1
            continue

        values["upc_number"] = digits_only(upc_raw).lstrip("0")
        rows.append(CatalogRow(**values))

    if dropped:
        logger.debug(f"Dropped {dropped} rows without item number or UPC")

    return rows


def parse_values(
    values: Sequence[Sequence[Any]],
    mapping: ColumnMapping = DEFAULT_COLUMN_MAPPING,
) -> List[CatalogRow]:
    """
    Parse a full cell grid where row 0 is the header.

    A grid with fewer than two rows has no data and yields an empty list.
    """
    if len(values) < 2:
        return []
    return parse_rows(values[0] or [], values[1:], mapping)


# =============================================================================
# HELPERS
# =============================================================================

def _cell_text(cell: Any) -> str:
    if cell is None:
        return ""
    return str(cell).strip()


def _cell_at(row: Sequence[Any], index: int) -> str:
    if index < 0 or index >= len(row):
        return ""
    return _cell_text(row[index])


def _first_match(lookup: Dict[str, int], candidates: Sequence[str]) -> Optional[int]:
    for candidate in candidates:
        position = lookup.get(candidate.strip().lower())
        if position is not None:
            return position
    return None
