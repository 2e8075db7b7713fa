"""Product database table model."""

from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from src.catalog.entities.core._base import EntityTable

if TYPE_CHECKING:
    from src.catalog.entities.service.price_entry.table import PriceEntryTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    ``code`` and ``upc_code`` are both unique; either one identifies a product
    during import reconciliation.
    """

    __tablename__ = "products"

    title: str = Field(max_length=255)
    code: str = Field(max_length=100, unique=True, index=True)
    upc_code: str = Field(max_length=100, unique=True, index=True)
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=500)
    dimensions: str | None = None
    other_expectations: str | None = None

    price_x_lists: list["PriceEntryTable"] = Relationship(
        back_populates="product",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
