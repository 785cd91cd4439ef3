"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter

from pricecheck.catalog.cache import get_catalog_cache


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def check_catalog(self) -> dict:
        """Check catalog cache status without triggering a fetch."""
        cache = get_catalog_cache()
        if cache is None:
            return {"status": "not_configured", "rows": 0}

        stats = cache.get_stats()
        status = "healthy" if stats["loaded"] else "cold"
        return {"status": status, **stats}

    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()

        overall = "degraded" if catalog_info["status"] == "not_configured" else "healthy"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "rows_loaded": catalog_info["rows"],
                "snapshot_age_seconds": catalog_info.get("age_seconds"),
                "fetched_at": catalog_info.get("fetched_at"),
            }
        }


@router.get("")
async def health_check():
    """
    Health check endpoint.

    Returns API and catalog cache status. A cold cache (no lookup yet)
    still counts as healthy.
    """
    controller = HealthController()
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
