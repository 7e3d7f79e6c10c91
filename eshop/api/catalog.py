"""
API endpoints for catalog lookup data.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from eshop.core.dependencies import get_db
from eshop.core.exceptions import CatalogGenderNotFoundError
from eshop.repositories.catalog_gender_repository import CatalogGenderRepository
from eshop.schemas.catalog import CatalogGenderListResponse, CatalogGenderResponse

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get(
    "/genders",
    response_model=CatalogGenderListResponse,
    summary="List catalog genders",
)
async def list_genders(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
) -> CatalogGenderListResponse:
    """List catalog genders ordered by id."""
    repository = CatalogGenderRepository(db)
    genders = await repository.get_all(skip=skip, limit=limit)
    total = await repository.count()

    return CatalogGenderListResponse(
        items=[CatalogGenderResponse.model_validate(gender) for gender in genders],
        total=total,
    )


@router.get(
    "/genders/{gender_id}",
    response_model=CatalogGenderResponse,
    summary="Get a catalog gender",
)
async def get_gender(
    gender_id: int,
    db: AsyncSession = Depends(get_db),
) -> CatalogGenderResponse:
    """Get a single catalog gender by id."""
    gender = await CatalogGenderRepository(db).get_by_id(gender_id)
    if not gender:
        raise CatalogGenderNotFoundError(gender_id)

    return CatalogGenderResponse.model_validate(gender)
