"""Entity package: ListPrice."""

from .entity import ListPrice
from .repository import ListPriceRepository
from .table import ListPriceTable

__all__ = ["ListPrice", "ListPriceRepository", "ListPriceTable"]
