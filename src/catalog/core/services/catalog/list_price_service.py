"""Price list management, including the single-active-list rule."""

from loguru import logger
from sqlmodel import Session

from src.catalog.core.exceptions import NotFoundError
from src.catalog.entities.service.list_price import ListPrice, ListPriceRepository
from src.catalog.entities.service.list_price.entity import (
    ListPriceCreate,
    ListPriceUpdate,
)


class ListPriceService:
    """CRUD over price lists.

    At most one list is active after any call: activating a list switches
    every other list off within the same session before the change is flushed.
    """

    def __init__(self, db_session: Session):
        self._repo = ListPriceRepository(db_session)

    def create(self, data: ListPriceCreate) -> ListPrice:
        is_active = data.is_active
        if is_active is None:
            # The first list becomes active so prices resolve out of the box
            is_active = self._repo.get_active() is None

        list_price = ListPrice(
            title=data.title, description=data.description, is_active=is_active
        )
        if is_active:
            switched = self._repo.deactivate_all(except_id=list_price.id)
            if switched:
                logger.info("Deactivated {} price list(s) before activating '{}'", switched, data.title)
        return self._repo.create(list_price)

    def list_all(self, search: str | None = None) -> list[ListPrice]:
        if search:
            return self._repo.search(search)
        return self._repo.list_all()

    def get(self, list_price_id: str) -> ListPrice:
        list_price = self._repo.get(list_price_id)
        if list_price is None:
            raise NotFoundError(f"List price with ID {list_price_id} not found")
        return list_price

    def get_active_list_price(self) -> ListPrice | None:
        """Return the active price list, or None when no list is active."""
        return self._repo.get_active()

    def update(self, list_price_id: str, data: ListPriceUpdate) -> ListPrice:
        list_price = self.get(list_price_id)

        if data.is_active is True:
            switched = self._repo.deactivate_all(except_id=list_price_id)
            logger.info(
                "Activating price list {} ({} other list(s) deactivated)",
                list_price_id,
                switched,
            )

        updated = list_price.model_copy(update=data.model_dump(exclude_unset=True, exclude_none=True))
        return self._repo.update(updated)

    def activate(self, list_price_id: str) -> ListPrice:
        return self.update(list_price_id, ListPriceUpdate(is_active=True))

    def delete(self, list_price_id: str) -> None:
        list_price = self.get(list_price_id)
        self._repo.delete(list_price_id)
        if list_price.is_active:
            logger.warning("Deleted the active price list {}; no list is active now", list_price_id)
