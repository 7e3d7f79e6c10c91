"""
Request-scoped context handed from inbound requests to outbound service calls.

The context is built once per inbound request and passed explicitly to every
outbound call made on its behalf. Outbound calls carry it (together with an
optional cancellation signal) as httpx request extensions.
"""
import asyncio
from dataclasses import dataclass, field
from typing import Mapping, Optional

import httpx

ACCESS_TOKEN = "access_token"

REQUEST_CONTEXT_EXTENSION = "eshop.request_context"
CANCELLATION_EXTENSION = "eshop.cancellation"


@dataclass(frozen=True)
class RequestContext:
    """Read-only view of the authentication state of one inbound request."""

    tokens: Mapping[str, str] = field(default_factory=dict)
    correlation_id: Optional[str] = None

    def get_token(self, name: str = ACCESS_TOKEN) -> Optional[str]:
        """Return the named token, or None when the inbound request had none."""
        token = self.tokens.get(name)
        # An empty string counts as no token, so no blank Bearer header is sent.
        return token or None


def get_request_context(request: httpx.Request) -> Optional[RequestContext]:
    """Read the RequestContext attached to an outbound request, if any."""
    return request.extensions.get(REQUEST_CONTEXT_EXTENSION)


def get_cancellation(request: httpx.Request) -> Optional[asyncio.Event]:
    """Read the cancellation signal attached to an outbound request, if any."""
    return request.extensions.get(CANCELLATION_EXTENSION)
