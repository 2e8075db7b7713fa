"""Outcome of a product import."""

from typing import Literal

from pydantic import Field

from src.catalog.entities.core._base import Schema


class ImportDetail(Schema):
    """What happened to one data row.

    Successful rows carry ``product_id`` and ``action``; rejected rows carry
    ``error``.
    """

    product_id: str | None = None
    title: str
    action: Literal["created", "updated"] | None = None
    error: str | None = None


class ImportResult(Schema):
    """Aggregate report of an import run. Errors are collected, never raised."""

    success: bool = False
    created: int = 0
    updated: int = 0
    errors: list[str] = Field(default_factory=list)
    details: list[ImportDetail] = Field(default_factory=list)

    def add_error(self, message: str, title: str) -> None:
        self.errors.append(message)
        self.details.append(ImportDetail(title=title, error=message))

    def finish(self) -> "ImportResult":
        self.success = (self.created + self.updated) > 0
        return self
