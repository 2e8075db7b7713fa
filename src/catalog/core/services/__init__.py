"""Core services exports."""

# Catalog Services
from .catalog.catalog_settings_service import CatalogSettingsService
from .catalog.list_price_service import ListPriceService
from .catalog.price_entry_service import PriceEntryService
from .catalog.product_import import ProductImportService
from .catalog.product_service import ProductService

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    # Catalog Services
    "CatalogSettingsService",
    "ListPriceService",
    "PriceEntryService",
    "ProductImportService",
    "ProductService",
    # Database Services
    "DbManageService",
    "DbSessionService",
]
