"""
FastAPI dependency functions for database sessions and request context.
"""
from typing import Optional

from fastapi import Header, Request

from eshop.core.config import get_settings
from eshop.database import get_db
from eshop.integrations.catalog_client import CatalogApiClient
from eshop.integrations.context import RequestContext

__all__ = ["get_catalog_client", "get_db", "get_inbound_context", "parse_bearer_token"]


def parse_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extract the token from an ``Authorization: Bearer <token>`` header value.

    Args:
        authorization: Authorization header value (optional)

    Returns:
        Token string, or None when the header is missing or malformed
    """
    if not authorization:
        return None

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]


async def get_inbound_context(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> RequestContext:
    """
    Build the RequestContext for the current inbound request.

    Pass the result explicitly to outbound service calls so they forward the
    caller's access token.
    """
    tokens = {}
    token = parse_bearer_token(authorization)
    if token is not None:
        tokens[get_settings().access_token_name] = token

    return RequestContext(
        tokens=tokens,
        correlation_id=getattr(request.state, "correlation_id", None),
    )


def get_catalog_client(request: Request) -> CatalogApiClient:
    """Return the shared CatalogApiClient created at application startup."""
    return request.app.state.catalog_client
