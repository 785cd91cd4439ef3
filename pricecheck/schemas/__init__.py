"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas using Pydantic for serialization.

This package provides:
- Lookup: Catalog search result and response schemas

==============================================================================
"""

from .lookup import LookupDebug, LookupResponse, LookupResult, LookupType

__all__ = [
    "LookupDebug",
    "LookupResponse",
    "LookupResult",
    "LookupType",
]
