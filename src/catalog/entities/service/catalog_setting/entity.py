"""Entity: CatalogSetting."""

from typing import Any

from pydantic import Field

from src.catalog.entities.core._base import Entity, Schema


class CatalogSetting(Entity):
    """Generic key/value setting that drives catalog presentation."""

    key: str = Field(max_length=100, description="Unique setting key")
    value: str = Field(max_length=255, description="Setting value")
    description: str | None = Field(default=None, max_length=255)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CatalogSetting):
            return False

        return (
            self.id == other.id
            and self.key == other.key
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.id, self.key, self.value))


class CatalogSettingCreate(Schema):
    key: str = Field(min_length=1, max_length=100)
    value: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=255)


class CatalogSettingUpdate(Schema):
    key: str | None = Field(default=None, min_length=1, max_length=100)
    value: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=255)


class CatalogVisibility(Schema):
    """Body and response of the catalog visibility toggle."""

    visible: bool
