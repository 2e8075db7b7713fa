"""Entity package: PriceEntry."""

from .entity import PriceEntry
from .repository import PriceEntryRepository
from .table import PriceEntryTable

__all__ = ["PriceEntry", "PriceEntryRepository", "PriceEntryTable"]
