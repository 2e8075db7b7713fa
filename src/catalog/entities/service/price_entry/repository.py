"""PriceEntry repository for data access operations."""

from sqlmodel import Session, select

from src.catalog.entities.service.price_entry.entity import PriceEntry
from src.catalog.entities.service.price_entry.table import PriceEntryTable


class PriceEntryRepository:
    """Data-access layer for product prices per price list.

    Mutations expire the session after flushing so that products already
    loaded in the same unit of work see their new set of prices.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _sync(self) -> None:
        self._session.flush()
        self._session.expire_all()

    def get(self, entry_id: str) -> PriceEntry | None:
        row = self._session.get(PriceEntryTable, entry_id)
        if row is None:
            return None
        return PriceEntry.model_validate(row, from_attributes=True)

    def get_by_product_and_list(
        self, product_id: str, list_price_id: str
    ) -> PriceEntry | None:
        statement = select(PriceEntryTable).where(
            (PriceEntryTable.product_id == product_id)
            & (PriceEntryTable.list_price_id == list_price_id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return PriceEntry.model_validate(row, from_attributes=True)

    def list_all(self) -> list[PriceEntry]:
        rows = self._session.exec(select(PriceEntryTable)).all()
        return [PriceEntry.model_validate(row, from_attributes=True) for row in rows]

    def list_by_product(self, product_id: str) -> list[PriceEntry]:
        statement = select(PriceEntryTable).where(PriceEntryTable.product_id == product_id)
        rows = self._session.exec(statement).all()
        return [PriceEntry.model_validate(row, from_attributes=True) for row in rows]

    def list_by_list_price(self, list_price_id: str) -> list[PriceEntry]:
        statement = select(PriceEntryTable).where(
            PriceEntryTable.list_price_id == list_price_id
        )
        rows = self._session.exec(statement).all()
        return [PriceEntry.model_validate(row, from_attributes=True) for row in rows]

    def create(self, entry: PriceEntry) -> PriceEntry:
        row = PriceEntryTable(**entry.model_dump())
        self._session.add(row)
        self._sync()
        return PriceEntry.model_validate(row, from_attributes=True)

    def update(self, entry: PriceEntry) -> PriceEntry:
        row = self._session.get(PriceEntryTable, entry.id)
        if row is None:
            raise ValueError(f"Price with ID {entry.id} not found")

        row.product_id = entry.product_id
        row.list_price_id = entry.list_price_id
        row.price = entry.price

        self._session.add(row)
        self._sync()
        return PriceEntry.model_validate(row, from_attributes=True)

    def upsert(self, product_id: str, list_price_id: str, price: float) -> PriceEntry:
        """Set the price of a product under a list, creating the entry if needed."""
        statement = select(PriceEntryTable).where(
            (PriceEntryTable.product_id == product_id)
            & (PriceEntryTable.list_price_id == list_price_id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            row = PriceEntryTable(
                product_id=product_id, list_price_id=list_price_id, price=price
            )
        else:
            row.price = price
        self._session.add(row)
        self._sync()
        return PriceEntry.model_validate(row, from_attributes=True)

    def delete(self, entry_id: str) -> bool:
        row = self._session.get(PriceEntryTable, entry_id)
        if row is None:
            return False
        self._session.delete(row)
        self._sync()
        return True

    def delete_by_product_and_list(self, product_id: str, list_price_id: str) -> bool:
        statement = select(PriceEntryTable).where(
            (PriceEntryTable.product_id == product_id)
            & (PriceEntryTable.list_price_id == list_price_id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return False
        self._session.delete(row)
        self._sync()
        return True

    def delete_by_product(self, product_id: str) -> int:
        """Remove every price of a product. Returns the number of entries removed."""
        statement = select(PriceEntryTable).where(PriceEntryTable.product_id == product_id)
        rows = self._session.exec(statement).all()
        for row in rows:
            self._session.delete(row)
        self._sync()
        return len(rows)
