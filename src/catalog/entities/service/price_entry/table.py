"""PriceEntry database table model."""

from typing import TYPE_CHECKING

from sqlalchemy import Numeric, UniqueConstraint
from sqlmodel import Field, Relationship

from src.catalog.entities.core._base import EntityTable

if TYPE_CHECKING:
    from src.catalog.entities.service.list_price.table import ListPriceTable
    from src.catalog.entities.service.product.table import ProductTable


class PriceEntryTable(EntityTable, table=True):
    """Price of one product under one price list.

    Stored in ``price_x_list``; a product has at most one price per list.
    """

    __tablename__ = "price_x_list"
    __table_args__ = (
        UniqueConstraint("product_id", "list_price_id", name="uq_price_x_list_product_list"),
    )

    product_id: str = Field(foreign_key="products.id", ondelete="CASCADE", index=True)
    list_price_id: str = Field(foreign_key="list_prices.id", ondelete="CASCADE", index=True)
    price: float = Field(sa_type=Numeric(10, 2, asdecimal=False))

    product: "ProductTable" = Relationship(back_populates="price_x_lists")
    list_price: "ListPriceTable" = Relationship(back_populates="price_x_lists")
