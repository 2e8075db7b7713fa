"""Entities module with an entity-centric structure.

Each catalog concept has its own package containing:
- entity.py: Domain model and API payload schemas
- table.py: Database persistence model
- repository.py: Data access layer

Importing this package registers every table with the SQLModel metadata.
"""

from .service.catalog_setting import (
    CatalogSetting,
    CatalogSettingRepository,
    CatalogSettingTable,
)
from .service.list_price import ListPrice, ListPriceRepository, ListPriceTable
from .service.price_entry import PriceEntry, PriceEntryRepository, PriceEntryTable
from .service.product import Product, ProductRepository, ProductTable

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
    "ListPrice",
    "ListPriceTable",
    "ListPriceRepository",
    "PriceEntry",
    "PriceEntryTable",
    "PriceEntryRepository",
    "CatalogSetting",
    "CatalogSettingTable",
    "CatalogSettingRepository",
]
