"""
Typed client for the catalog API, used by services that call it on behalf
of an inbound request.
"""
import asyncio
from typing import Optional

import httpx
import structlog

from eshop.core.config import get_settings
from eshop.integrations.context import RequestContext
from eshop.integrations.service_client import ServiceClient
from eshop.schemas.catalog import CatalogGenderListResponse, CatalogGenderResponse

logger = structlog.get_logger(__name__)


class CatalogApiClient(ServiceClient):
    """
    Client for the catalog gender endpoints.

    Non-2xx responses, including the synthetic 408 returned for requests
    cancelled before dispatch, raise httpx.HTTPStatusError.
    """

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(base_url, transport=transport, timeout=timeout)
        self.prefix = f"{get_settings().api_prefix}/catalog"

    async def list_genders(
        self,
        context: Optional[RequestContext] = None,
        cancellation: Optional[asyncio.Event] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> CatalogGenderListResponse:
        response = await self.send(
            "GET",
            f"{self.prefix}/genders",
            context=context,
            cancellation=cancellation,
            params={"skip": skip, "limit": limit},
        )
        response.raise_for_status()
        return CatalogGenderListResponse.model_validate(response.json())

    async def get_gender(
        self,
        gender_id: int,
        context: Optional[RequestContext] = None,
        cancellation: Optional[asyncio.Event] = None,
    ) -> Optional[CatalogGenderResponse]:
        """Fetch one gender; returns None when the catalog answers 404."""
        response = await self.send(
            "GET",
            f"{self.prefix}/genders/{gender_id}",
            context=context,
            cancellation=cancellation,
        )
        if response.status_code == 404:
            logger.info("catalog_gender_not_found", gender_id=gender_id)
            return None
        response.raise_for_status()
        return CatalogGenderResponse.model_validate(response.json())
