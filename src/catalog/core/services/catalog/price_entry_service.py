"""Per-product prices under each price list."""

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.catalog.core.exceptions import ConflictError, NotFoundError
from src.catalog.entities.service.list_price import ListPriceRepository
from src.catalog.entities.service.price_entry import PriceEntry, PriceEntryRepository
from src.catalog.entities.service.price_entry.entity import (
    PriceEntryCreate,
    PriceEntryUpdate,
)
from src.catalog.entities.service.product import ProductRepository

_DUPLICATE_MESSAGE = "Price already exists for this product and list combination"


class PriceEntryService:
    def __init__(self, db_session: Session):
        self._session = db_session
        self._repo = PriceEntryRepository(db_session)
        self._products = ProductRepository(db_session)
        self._list_prices = ListPriceRepository(db_session)

    def _require_product(self, product_id: str) -> None:
        if self._products.get(product_id) is None:
            raise NotFoundError(f"Product with ID {product_id} not found")

    def _require_list_price(self, list_price_id: str) -> None:
        if self._list_prices.get(list_price_id) is None:
            raise NotFoundError(f"List price with ID {list_price_id} not found")

    def create(self, data: PriceEntryCreate) -> PriceEntry:
        self._require_product(data.product_id)
        self._require_list_price(data.list_price_id)

        if self._repo.get_by_product_and_list(data.product_id, data.list_price_id):
            raise ConflictError(_DUPLICATE_MESSAGE)

        entry = PriceEntry(
            product_id=data.product_id,
            list_price_id=data.list_price_id,
            price=data.price,
        )
        try:
            with self._session.begin_nested():
                return self._repo.create(entry)
        except IntegrityError as exc:
            raise ConflictError(_DUPLICATE_MESSAGE) from exc

    def list_all(self) -> list[PriceEntry]:
        return self._repo.list_all()

    def list_by_product(self, product_id: str) -> list[PriceEntry]:
        return self._repo.list_by_product(product_id)

    def list_by_list_price(self, list_price_id: str) -> list[PriceEntry]:
        return self._repo.list_by_list_price(list_price_id)

    def get(self, entry_id: str) -> PriceEntry:
        entry = self._repo.get(entry_id)
        if entry is None:
            raise NotFoundError(f"Price with ID {entry_id} not found")
        return entry

    def get_by_product_and_list(self, product_id: str, list_price_id: str) -> PriceEntry:
        entry = self._repo.get_by_product_and_list(product_id, list_price_id)
        if entry is None:
            raise NotFoundError(
                f"Price not found for product {product_id} and list {list_price_id}"
            )
        return entry

    def get_product_price(
        self, product_id: str, list_price_id: str | None = None
    ) -> float | None:
        """Price of a product under a list, defaulting to the active list.

        Returns None ("price not set") when there is no active list or the
        product has no price under it.
        """
        if list_price_id is None:
            active = self._list_prices.get_active()
            if active is None:
                return None
            list_price_id = active.id

        entry = self._repo.get_by_product_and_list(product_id, list_price_id)
        return entry.price if entry else None

    def update(self, entry_id: str, data: PriceEntryUpdate) -> PriceEntry:
        entry = self.get(entry_id)

        if data.product_id:
            self._require_product(data.product_id)
        if data.list_price_id:
            self._require_list_price(data.list_price_id)

        updated = entry.model_copy(update=data.model_dump(exclude_unset=True, exclude_none=True))
        try:
            with self._session.begin_nested():
                return self._repo.update(updated)
        except IntegrityError as exc:
            raise ConflictError(_DUPLICATE_MESSAGE) from exc

    def set_price(self, product_id: str, list_price_id: str, price: float) -> PriceEntry:
        """Create or overwrite the price of a product under a list."""
        self._require_list_price(list_price_id)
        entry = self._repo.upsert(product_id, list_price_id, price)
        logger.debug("Price of {} under {} set to {}", product_id, list_price_id, price)
        return entry

    def clear_price(self, product_id: str, list_price_id: str) -> bool:
        return self._repo.delete_by_product_and_list(product_id, list_price_id)

    def replace_prices(self, product_id: str) -> int:
        """Drop every price of a product ahead of a full re-price."""
        return self._repo.delete_by_product(product_id)

    def delete(self, entry_id: str) -> None:
        if not self._repo.delete(entry_id):
            raise NotFoundError(f"Price with ID {entry_id} not found")
