"""
==============================================================================
Main API Router
==============================================================================

Combines all v1 API routes under /api/v1 prefix.

The search route is also exposed at /api/search, the path the scanner
front end calls.

==============================================================================
"""

from fastapi import APIRouter

from pricecheck.api.v1 import health, search


class MainAPIRouter:
    """
    Main API router combining all versioned routes.

    Provides a single entry point for all API endpoints.
    """

    def __init__(self):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter(prefix="/api")
        self._include_routers()

    def _include_routers(self) -> None:
        """Include all v1 routers, plus the unversioned search alias."""
        v1 = APIRouter(prefix="/v1")
        v1.include_router(health.router)
        v1.include_router(search.router)

        self._router.include_router(v1)
        self._router.include_router(search.router, include_in_schema=False)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


# Create main API router instance
api_router = MainAPIRouter().router
