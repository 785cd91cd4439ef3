"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- search: Catalog lookup by UPC or item number

==============================================================================
"""

from . import health, search

__all__ = ["health", "search"]
