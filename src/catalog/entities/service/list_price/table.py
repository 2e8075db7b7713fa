"""ListPrice database table model."""

from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from src.catalog.entities.core._base import EntityTable

if TYPE_CHECKING:
    from src.catalog.entities.service.price_entry.table import PriceEntryTable


class ListPriceTable(EntityTable, table=True):
    """Database persistence model for named price lists."""

    __tablename__ = "list_prices"

    title: str = Field(max_length=255)
    description: str | None = None
    is_active: bool = Field(default=True)

    price_x_lists: list["PriceEntryTable"] = Relationship(
        back_populates="list_price",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
