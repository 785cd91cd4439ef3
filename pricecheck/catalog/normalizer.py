"""
==============================================================================
Code Normalizer Module
==============================================================================

Reduces scanned or typed barcodes to the canonical 11-digit UPC core.

Accepted Encodings:
------------------
- 12 digits (UPC-A): check digit dropped, first 11 digits kept
- 13 digits (EAN-13): must start with 0; that one zero is dropped and
  the 12-digit rule applies to the remaining UPC-A
- 11 digits: already a core, returned unchanged

Anything else is rejected with None.

==============================================================================
"""

from __future__ import annotations

import re
from typing import Optional


_NON_DIGIT_RE = re.compile(r"\D")

CORE_LENGTH = 11
UPC_A_LENGTH = 12
EAN_13_LENGTH = 13


def digits_only(value: Optional[str]) -> str:
    """Remove every non-digit character."""
    return _NON_DIGIT_RE.sub("", value or "")


def normalize_upc(value: Optional[str]) -> Optional[str]:
    """
    Convert a scanned barcode into its 11-digit core.

    Args:
        value: Raw scanner or keyboard input

    Returns:
        The 11-digit core, or None when the digit count is not accepted

    Example:
        >>> normalize_upc("193968502553")
        '19396850255'
        >>> normalize_upc("0193968502553")
        '19396850255'
        >>> normalize_upc("12345") is None
        True
    """
    digits = digits_only(value)

    if len(digits) == EAN_13_LENGTH:
        if not digits.startswith("0"):
            return None
        digits = digits[1:]

    if len(digits) == UPC_A_LENGTH:
        return digits[:CORE_LENGTH]

    if len(digits) == CORE_LENGTH:
        return digits

    return None
