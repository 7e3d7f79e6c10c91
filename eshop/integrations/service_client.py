"""
Factory and thin wrapper for authenticated service-to-service HTTP clients.

Clients built here run every request through a PipelineTransport with the
AuthorizationForwardingHandler installed, so calls made on behalf of an
inbound request carry its access token.
"""
import asyncio
from typing import Any, List, Optional, Sequence

import httpx
import structlog

from eshop.core.config import get_settings
from eshop.integrations.auth_forwarding import AuthorizationForwardingHandler
from eshop.integrations.context import (
    CANCELLATION_EXTENSION,
    REQUEST_CONTEXT_EXTENSION,
    RequestContext,
)
from eshop.integrations.pipeline import PipelineStep, PipelineTransport

logger = structlog.get_logger(__name__)


def add_auth_token(steps: Optional[Sequence[PipelineStep]] = None) -> List[PipelineStep]:
    """
    Return a copy of ``steps`` with an AuthorizationForwardingHandler appended.

    The handler is added at most once.
    """
    pipeline = list(steps or [])
    if not any(isinstance(step, AuthorizationForwardingHandler) for step in pipeline):
        pipeline.append(
            AuthorizationForwardingHandler(token_name=get_settings().access_token_name)
        )
    return pipeline


def create_service_client(
    base_url: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    steps: Optional[Sequence[PipelineStep]] = None,
    timeout: Optional[float] = None,
) -> httpx.AsyncClient:
    """
    Build an httpx.AsyncClient that forwards the inbound access token.

    Args:
        base_url: Base URL of the downstream service
        transport: Terminal transport, defaults to httpx.AsyncHTTPTransport
        steps: Additional pipeline steps, run before the auth step
        timeout: Request timeout in seconds, defaults to settings

    Returns:
        Configured AsyncClient; close it with ``aclose()``
    """
    settings = get_settings()
    pipeline = PipelineTransport(add_auth_token(steps), transport=transport)

    logger.info(
        "service_client_created",
        base_url=base_url,
        steps=[type(step).__name__ for step in pipeline.steps],
    )

    return httpx.AsyncClient(
        base_url=base_url,
        transport=pipeline,
        timeout=timeout if timeout is not None else settings.outbound_timeout_seconds,
    )


class ServiceClient:
    """
    Client for calling another service on behalf of an inbound request.

    Example:
        ```python
        async with ServiceClient("http://ordering-api") as client:
            response = await client.send("GET", "/api/v1/orders", context=context)
        ```
    """

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.client = create_service_client(base_url, transport=transport, timeout=timeout)

    async def send(
        self,
        method: str,
        url: str,
        context: Optional[RequestContext] = None,
        cancellation: Optional[asyncio.Event] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Send a request with the inbound context and cancellation attached.

        Extra keyword arguments are passed to ``httpx.AsyncClient.build_request``.
        """
        extensions = dict(kwargs.pop("extensions", None) or {})
        if context is not None:
            extensions[REQUEST_CONTEXT_EXTENSION] = context
        if cancellation is not None:
            extensions[CANCELLATION_EXTENSION] = cancellation

        request = self.client.build_request(method, url, extensions=extensions, **kwargs)
        return await self.client.send(request)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "ServiceClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
