"""
Composable httpx transport that runs outbound requests through ordered steps.

Each step is an async callable ``step(request, call_next)`` that may modify
the request, short-circuit with its own response, or delegate to
``call_next`` and inspect the result. The first step is the outermost one;
the terminal transport performs the actual network call.
"""
from typing import Awaitable, Callable, List, Optional, Sequence

import httpx
import structlog

logger = structlog.get_logger(__name__)

CallNext = Callable[[httpx.Request], Awaitable[httpx.Response]]
PipelineStep = Callable[[httpx.Request, CallNext], Awaitable[httpx.Response]]


class PipelineTransport(httpx.AsyncBaseTransport):
    """
    httpx transport wrapping a terminal transport with an ordered list of steps.

    Example:
        ```python
        transport = PipelineTransport([AuthorizationForwardingHandler()])
        async with httpx.AsyncClient(transport=transport) as client:
            await client.get("http://catalog-api/api/v1/catalog/genders")
        ```
    """

    def __init__(
        self,
        steps: Optional[Sequence[PipelineStep]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.steps: List[PipelineStep] = list(steps or [])
        self.transport = transport or httpx.AsyncHTTPTransport()

        logger.debug(
            "pipeline_transport_initialized",
            steps=[type(step).__name__ for step in self.steps],
            transport=type(self.transport).__name__,
        )

    def _build_chain(self) -> CallNext:
        """Fold the steps around the terminal transport, innermost first."""
        call_next: CallNext = self.transport.handle_async_request
        for step in reversed(self.steps):
            call_next = _bind_step(step, call_next)
        return call_next

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self._build_chain()(request)

    async def aclose(self) -> None:
        await self.transport.aclose()


def _bind_step(step: PipelineStep, call_next: CallNext) -> CallNext:
    async def call(request: httpx.Request) -> httpx.Response:
        return await step(request, call_next)

    return call
