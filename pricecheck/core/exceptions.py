"""
Application Exception Handling

Single AppException class for all application errors with FastAPI integration.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Every error response has the same shape: ``{"ok": false, "error": ...,
    "code": ...}``.

    Usage:
        raise AppException("Missing query", "MISSING_QUERY", 400)
        raise AppException("Sheets API unavailable", "UPSTREAM_ERROR", 500)

    Error Codes:
        Validation:
            - MISSING_QUERY (400)
            - INVALID_UPC (400)
            - INVALID_LOOKUP_TYPE (400)
            - VALIDATION_ERROR (400)

        Catalog:
            - UPSTREAM_ERROR (500)
            - CONFIGURATION_ERROR (500)
            - CATALOG_NOT_LOADED (500)

        General:
            - INTERNAL_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_UPC")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "ok": False,
            "error": self.message,
            "code": self.code,
        }

        if self.details:
            error_dict["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed query parameters in the standard error shape."""
    messages = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    ]
    error = AppException("; ".join(messages) or "Invalid request", "VALIDATION_ERROR", 400)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last-resort boundary for uncaught failures.

    The original message is preserved in the response for diagnostics.
    """
    logger.exception(f"Unhandled error on {request.url.path}")
    error = internal_error(str(exc) or "Server error")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Call this in main.py after creating the FastAPI instance.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def missing_query() -> AppException:
    """Create missing query exception."""
    return AppException("Missing query", "MISSING_QUERY", 400)


def invalid_upc(value: str) -> AppException:
    """Create exception for a UPC that has no 11-digit core."""
    return AppException(
        "UPC must be 11 digits, 12 digits (UPC-A) or 13 digits (EAN-13).",
        "INVALID_UPC",
        400,
        {"value": value}
    )


def invalid_lookup_type(value: str) -> AppException:
    """Create exception for an unsupported lookup type."""
    return AppException(
        f"Unsupported lookup type '{value}'. Use 'upc' or 'item'.",
        "INVALID_LOOKUP_TYPE",
        400,
        {"type": value}
    )


def upstream_error(message: str) -> AppException:
    """Create exception for a failed catalog fetch."""
    return AppException(message, "UPSTREAM_ERROR", 500)


def missing_setting(name: str) -> AppException:
    """Create exception for a required setting that is not configured."""
    return AppException(
        f"Missing setting: {name}",
        "CONFIGURATION_ERROR",
        500,
        {"setting": name}
    )


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Catalog cache not initialized",
        "CATALOG_NOT_LOADED",
        500
    )


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
