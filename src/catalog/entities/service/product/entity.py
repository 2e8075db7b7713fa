"""Entity: Product."""

from typing import Any

from pydantic import Field

from src.catalog.entities.core._base import Entity, Schema
from src.catalog.entities.service.price_entry.entity import PriceEntry


class Product(Entity):
    """Product entity representing a catalog item.

    ``price_x_lists`` carries the product's prices across all price lists and
    is populated when the product is read back from the database.
    """

    title: str = Field(max_length=255, description="Display title")
    code: str = Field(max_length=100, description="Internal product code")
    upc_code: str = Field(max_length=100, description="Universal product code")
    description: str | None = Field(default=None, description="Long description")
    image_url: str | None = Field(default=None, max_length=500, description="Image URL")
    dimensions: str | None = Field(default=None, description="Free-text dimensions")
    other_expectations: str | None = Field(
        default=None, description="Free-text additional notes"
    )
    price_x_lists: list[PriceEntry] = Field(default_factory=list)

    def price_for(self, list_price_id: str) -> float | None:
        """Return this product's price under ``list_price_id`` or None when unset."""
        for entry in self.price_x_lists:
            if entry.list_price_id == list_price_id:
                return entry.price
        return None

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.code == other.code
            and self.upc_code == other.upc_code
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.code,
            self.upc_code,
        ))


class ProductCreate(Schema):
    """Payload for creating a product.

    ``prices`` maps price list ids to amounts; zero amounts are ignored.
    """

    title: str = Field(min_length=1, max_length=255)
    code: str = Field(min_length=1, max_length=100)
    upc_code: str = Field(min_length=1, max_length=100)
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=500)
    dimensions: str | None = None
    other_expectations: str | None = None
    prices: dict[str, float] | None = None


class ProductUpdate(Schema):
    """Partial update payload for a product.

    A zero amount in ``prices`` removes the product's price for that list.
    """

    title: str | None = Field(default=None, min_length=1, max_length=255)
    code: str | None = Field(default=None, min_length=1, max_length=100)
    upc_code: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=500)
    dimensions: str | None = None
    other_expectations: str | None = None
    prices: dict[str, float] | None = None
