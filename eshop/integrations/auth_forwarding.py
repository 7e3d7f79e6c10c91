"""
Outbound pipeline step that forwards the caller's access token.

Service-to-service calls made while handling an inbound request carry the
inbound request's access token as ``Authorization: Bearer <token>`` so the
downstream service authenticates the same user.
"""
import asyncio
from typing import Any, Optional

import httpx
import structlog

from eshop.integrations.context import (
    ACCESS_TOKEN,
    RequestContext,
    get_cancellation,
    get_request_context,
)
from eshop.integrations.pipeline import CallNext


class OutboundRequestError(httpx.RequestError):
    """Raised when an outbound service call fails for a non-httpx reason.

    The original failure is chained as ``__cause__``.
    """
    pass


class AuthorizationForwardingHandler:
    """
    Pipeline step attaching the inbound access token to outbound requests.

    Holds no per-request state, so one instance is safely shared by every
    concurrent call on a client.
    """

    def __init__(self, logger: Optional[Any] = None, token_name: str = ACCESS_TOKEN):
        self.logger = logger if logger is not None else structlog.get_logger(__name__)
        self.token_name = token_name

    async def __call__(self, request: httpx.Request, call_next: CallNext) -> httpx.Response:
        return await self.intercept(
            request,
            call_next,
            context=get_request_context(request),
            cancellation=get_cancellation(request),
        )

    async def intercept(
        self,
        request: httpx.Request,
        call_next: CallNext,
        context: Optional[RequestContext] = None,
        cancellation: Optional[asyncio.Event] = None,
    ) -> httpx.Response:
        """
        Attach the bearer token and forward the request to the next step.

        Args:
            request: Outbound request, modified in place
            call_next: Next step of the pipeline
            context: Context of the inbound request this call is made for
            cancellation: Signal checked once before dispatch

        Returns:
            The next step's response unchanged, or a synthetic 408 response
            when cancellation was signaled before dispatch

        Raises:
            httpx.RequestError: Re-raised unchanged from the next step
            asyncio.CancelledError: When the calling task itself is cancelled
            OutboundRequestError: Any other failure, with the cause chained
        """
        if cancellation is not None and cancellation.is_set():
            self.logger.warning(
                "outbound_request_cancelled",
                method=request.method,
                url=str(request.url),
            )
            return httpx.Response(408, request=request)

        if context is not None:
            token = context.get_token(self.token_name)
            if token is not None:
                request.headers["Authorization"] = f"Bearer {token}"
            else:
                self.logger.warning(
                    "access_token_missing",
                    token_name=self.token_name,
                    correlation_id=context.correlation_id,
                )

        try:
            return await call_next(request)
        except httpx.RequestError as e:
            self.logger.error(
                "outbound_request_failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
        except (asyncio.CancelledError, asyncio.TimeoutError) as e:
            self.logger.error(
                "outbound_request_cancelled_in_flight",
                method=request.method,
                url=str(request.url),
                error_type=type(e).__name__,
            )
            # Cancellation of the calling task itself must stay a CancelledError.
            task = asyncio.current_task()
            if isinstance(e, asyncio.CancelledError) and task is not None and task.cancelling():
                raise
            raise OutboundRequestError(
                "Request was canceled while sending HTTP request", request=request
            ) from e
        except Exception as e:
            self.logger.error(
                "outbound_request_error",
                method=request.method,
                url=str(request.url),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise OutboundRequestError(
                "Error while sending HTTP request", request=request
            ) from e
