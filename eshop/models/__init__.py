"""
Models package for database entities.

This module exports all SQLAlchemy models for easy importing
throughout the application.
"""
from eshop.models.base import Base
from eshop.models.catalog_gender import GENDER_MAX_LENGTH, CatalogGender

__all__ = [
    # Base classes
    "Base",

    # Models
    "CatalogGender",
    "GENDER_MAX_LENGTH",
]
