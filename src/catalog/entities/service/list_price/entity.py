"""Entity: ListPrice."""

from typing import Any

from pydantic import Field

from src.catalog.entities.core._base import Entity, Schema


class ListPrice(Entity):
    """A named price list. At most one list is active at a time."""

    title: str = Field(max_length=255, description="Price list name")
    description: str | None = Field(default=None, description="Description")
    is_active: bool = Field(default=True, description="Whether this is the active list")

    def __eq__(self, other: Any) -> bool:
        """Compare price lists by business attributes, ignoring timestamps."""
        if not isinstance(other, ListPrice):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.description == other.description
            and self.is_active == other.is_active
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title, self.description, self.is_active))


class ListPriceCreate(Schema):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    is_active: bool | None = None


class ListPriceUpdate(Schema):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    is_active: bool | None = None
