"""
Custom exception classes for the catalog API.
"""
from typing import Dict, Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        headers: Optional[Dict[str, str]] = None
    ):
        self.status_code = status_code
        self.detail = detail
        self.headers = headers
        super().__init__(detail)


class CatalogGenderNotFoundError(AppException):
    """Catalog gender not found."""

    def __init__(self, gender_id: Optional[int] = None):
        detail = "Catalog gender not found"
        if gender_id is not None:
            detail = f"Catalog gender {gender_id} not found"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail
        )


class UpstreamServiceError(AppException):
    """A downstream service call failed or returned an error status."""

    def __init__(self, service: str, upstream_status: Optional[int] = None):
        detail = f"{service} service is unavailable"
        if upstream_status is not None:
            detail = f"{service} service returned status {upstream_status}"
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=detail
        )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Global exception handler for AppException instances.

    Args:
        request: FastAPI request object
        exc: AppException instance

    Returns:
        JSONResponse with error details
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers
    )
