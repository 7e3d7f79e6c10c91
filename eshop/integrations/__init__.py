"""
Integrations package for outbound service-to-service calls.

This package contains:
- Request context passed from inbound to outbound requests
- Pipeline transport composing outbound steps around httpx
- Authorization forwarding step
- Authenticated service client factory
- Typed catalog API client
"""

from eshop.integrations.auth_forwarding import AuthorizationForwardingHandler, OutboundRequestError
from eshop.integrations.catalog_client import CatalogApiClient
from eshop.integrations.context import RequestContext
from eshop.integrations.pipeline import PipelineTransport
from eshop.integrations.service_client import ServiceClient, add_auth_token, create_service_client

__all__ = [
    "AuthorizationForwardingHandler",
    "CatalogApiClient",
    "OutboundRequestError",
    "PipelineTransport",
    "RequestContext",
    "ServiceClient",
    "add_auth_token",
    "create_service_client",
]
