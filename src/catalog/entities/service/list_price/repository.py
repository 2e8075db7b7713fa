"""ListPrice repository for data access operations."""

from sqlmodel import Session, col, func, or_, select

from src.catalog.entities.service.list_price.entity import ListPrice
from src.catalog.entities.service.list_price.table import ListPriceTable


class ListPriceRepository:
    """Data-access layer for price lists."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, list_price_id: str) -> ListPrice | None:
        row = self._session.get(ListPriceTable, list_price_id)
        if row is None:
            return None
        return ListPrice.model_validate(row, from_attributes=True)

    def get_by_title(self, title: str) -> ListPrice | None:
        """Find a price list by title, ignoring case and surrounding whitespace."""
        statement = select(ListPriceTable).where(
            func.lower(ListPriceTable.title) == title.strip().lower()
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return ListPrice.model_validate(row, from_attributes=True)

    def get_active(self) -> ListPrice | None:
        statement = select(ListPriceTable).where(ListPriceTable.is_active == True)  # noqa: E712
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return ListPrice.model_validate(row, from_attributes=True)

    def list_all(self) -> list[ListPrice]:
        statement = select(ListPriceTable).order_by(ListPriceTable.title)
        return [
            ListPrice.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        ]

    def search(self, query: str) -> list[ListPrice]:
        pattern = f"%{query}%"
        statement = select(ListPriceTable).where(
            or_(
                col(ListPriceTable.title).ilike(pattern),
                col(ListPriceTable.description).ilike(pattern),
            )
        )
        return [
            ListPrice.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        ]

    def deactivate_all(self, except_id: str | None = None) -> int:
        """Clear the active flag on every list other than ``except_id``.

        Returns the number of lists that were switched off.
        """
        statement = select(ListPriceTable).where(ListPriceTable.is_active == True)  # noqa: E712
        count = 0
        for row in self._session.exec(statement).all():
            if row.id == except_id:
                continue
            row.is_active = False
            self._session.add(row)
            count += 1
        self._session.flush()
        return count

    def create(self, list_price: ListPrice) -> ListPrice:
        row = ListPriceTable(**list_price.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return ListPrice.model_validate(row, from_attributes=True)

    def update(self, list_price: ListPrice) -> ListPrice:
        row = self._session.get(ListPriceTable, list_price.id)
        if row is None:
            raise ValueError(f"List price with ID {list_price.id} not found")

        row.title = list_price.title
        row.description = list_price.description
        row.is_active = list_price.is_active

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return ListPrice.model_validate(row, from_attributes=True)

    def delete(self, list_price_id: str) -> bool:
        """Delete a price list together with every price recorded under it."""
        row = self._session.get(ListPriceTable, list_price_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        # Products loaded in this session still reference the removed prices
        self._session.expire_all()
        return True
