"""
CatalogGenderRepository for catalog gender lookups.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eshop.models import CatalogGender
from eshop.repositories.base import BaseRepository


class CatalogGenderRepository(BaseRepository[CatalogGender]):
    """Repository for CatalogGender model with lookup-specific queries."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, CatalogGender)

    async def get_by_name(self, gender: str) -> Optional[CatalogGender]:
        """Find a gender row by its exact value."""
        result = await self.session.execute(
            select(CatalogGender).where(CatalogGender.gender == gender)
        )
        return result.scalar_one_or_none()
