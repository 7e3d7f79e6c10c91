"""
Pydantic schemas for catalog lookup responses.
"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from eshop.models import GENDER_MAX_LENGTH


class CatalogGenderResponse(BaseModel):
    """Response schema for a single catalog gender."""

    id: int = Field(..., description="Catalog gender identifier")
    gender: str = Field(..., max_length=GENDER_MAX_LENGTH, description="Gender label")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "gender": "Women"
            }
        }
    )


class CatalogGenderListResponse(BaseModel):
    """Paginated list of catalog genders."""

    items: List[CatalogGenderResponse] = Field(default_factory=list)
    total: int = Field(..., ge=0, description="Total number of genders")
