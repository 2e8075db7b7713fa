"""Entity: PriceEntry."""

from decimal import Decimal
from typing import Any

from pydantic import Field, field_validator

from src.catalog.entities.core._base import Entity, Schema


def _check_cents(value: float | None) -> float | None:
    if value is not None and Decimal(str(value)).as_tuple().exponent < -2:
        raise ValueError("price must have at most 2 decimal places")
    return value


class PriceEntry(Entity):
    """Price of a product under a specific price list."""

    product_id: str = Field(description="Product the price belongs to")
    list_price_id: str = Field(description="Price list the price belongs to")
    price: float = Field(gt=0, description="Price amount")

    def __eq__(self, other: Any) -> bool:
        """Compare price entries by business attributes, ignoring timestamps."""
        if not isinstance(other, PriceEntry):
            return False

        return (
            self.id == other.id
            and self.product_id == other.product_id
            and self.list_price_id == other.list_price_id
            and self.price == other.price
        )

    def __hash__(self) -> int:
        return hash((self.id, self.product_id, self.list_price_id, self.price))


class PriceEntryCreate(Schema):
    """Payload for creating a price entry."""

    product_id: str
    list_price_id: str
    price: float = Field(gt=0)

    @field_validator("price")
    @classmethod
    def check_cents(cls, value: float | None) -> float | None:
        return _check_cents(value)


class PriceEntryUpdate(Schema):
    """Partial update payload for a price entry."""

    product_id: str | None = None
    list_price_id: str | None = None
    price: float | None = Field(default=None, gt=0)

    @field_validator("price")
    @classmethod
    def check_cents(cls, value: float | None) -> float | None:
        return _check_cents(value)
