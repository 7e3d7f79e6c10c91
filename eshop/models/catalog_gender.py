"""
CatalogGender model for the catalog gender lookup table.
"""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from eshop.models.base import Base


GENDER_MAX_LENGTH = 100


class CatalogGender(Base):
    """
    Lookup entity for the gender a catalog item is aimed at.

    One row per distinct value. The length limit on ``gender`` is carried by
    the column type and enforced by the database, not validated here.
    """
    __tablename__ = "CatalogGender"

    id: Mapped[int] = mapped_column("Id", primary_key=True, autoincrement=True)
    gender: Mapped[str] = mapped_column("Gender", String(GENDER_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<CatalogGender(id={self.id}, gender={self.gender})>"
