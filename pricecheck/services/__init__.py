"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing the lookup workflow.

This package provides:
- LookupService: Barcode / item number lookup with price tiers

Architecture Pattern: Service Layer
----------------------------------
Services sit between the API endpoints and the catalog cache.

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Service      │  ← Lookup + pricing
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  CatalogCache   │  ← TTL snapshot of the sheet
    └─────────────────┘

==============================================================================
"""

from .lookup_service import LookupService

__all__ = [
    "LookupService",
]
