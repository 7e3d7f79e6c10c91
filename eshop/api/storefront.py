"""
Storefront endpoints backed by calls to the catalog API.

Each call forwards the caller's bearer token to the catalog service.
"""
import httpx
import structlog
from fastapi import APIRouter, Depends, Query

from eshop.core.dependencies import get_catalog_client, get_inbound_context
from eshop.core.exceptions import UpstreamServiceError
from eshop.integrations.catalog_client import CatalogApiClient
from eshop.integrations.context import RequestContext
from eshop.schemas.catalog import CatalogGenderListResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/storefront", tags=["Storefront"])


@router.get(
    "/genders",
    response_model=CatalogGenderListResponse,
    summary="List genders from the catalog service",
    description="Fetches catalog genders on behalf of the caller, forwarding its access token",
)
async def list_storefront_genders(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    context: RequestContext = Depends(get_inbound_context),
    catalog: CatalogApiClient = Depends(get_catalog_client),
) -> CatalogGenderListResponse:
    try:
        return await catalog.list_genders(context=context, skip=skip, limit=limit)
    except httpx.HTTPStatusError as e:
        logger.warning(
            "catalog_request_rejected",
            upstream_status=e.response.status_code,
            correlation_id=context.correlation_id,
        )
        raise UpstreamServiceError("catalog", e.response.status_code)
    except httpx.RequestError as e:
        logger.warning(
            "catalog_request_failed",
            error=str(e),
            correlation_id=context.correlation_id,
        )
        raise UpstreamServiceError("catalog")
