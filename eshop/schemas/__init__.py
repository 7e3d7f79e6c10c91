"""
Pydantic schemas for API request/response validation.
"""
from eshop.schemas.catalog import CatalogGenderListResponse, CatalogGenderResponse

__all__ = [
    "CatalogGenderListResponse",
    "CatalogGenderResponse",
]
