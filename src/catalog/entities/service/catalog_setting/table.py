"""CatalogSetting database table model."""

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class CatalogSettingTable(EntityTable, table=True):
    """Database persistence model for catalog key/value settings."""

    __tablename__ = "catalog_settings"

    key: str = Field(max_length=100, unique=True, index=True)
    value: str = Field(max_length=255)
    description: str | None = Field(default=None, max_length=255)
