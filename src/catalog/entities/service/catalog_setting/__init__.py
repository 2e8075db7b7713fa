"""Entity package: CatalogSetting."""

from .entity import CatalogSetting
from .repository import CatalogSettingRepository
from .table import CatalogSettingTable

__all__ = ["CatalogSetting", "CatalogSettingRepository", "CatalogSettingTable"]
