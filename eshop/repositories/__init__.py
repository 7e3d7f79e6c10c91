"""
Repositories package for data access layer.

This module exports all repository classes for easy importing
throughout the application.
"""
from eshop.repositories.base import BaseRepository
from eshop.repositories.catalog_gender_repository import CatalogGenderRepository

__all__ = [
    "BaseRepository",
    "CatalogGenderRepository",
]
