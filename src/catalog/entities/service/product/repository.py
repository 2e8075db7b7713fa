"""Product repository for data access operations."""

from sqlmodel import Session, col, or_, select

from src.catalog.entities.service.product.entity import Product
from src.catalog.entities.service.product.table import ProductTable

_MUTABLE_FIELDS = (
    "title",
    "code",
    "upc_code",
    "description",
    "image_url",
    "dimensions",
    "other_expectations",
)


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: ProductTable) -> Product:
        return Product.model_validate(row, from_attributes=True)

    def get(self, product_id: str) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return self._to_entity(row)

    def get_by_code(self, code: str) -> Product | None:
        statement = select(ProductTable).where(ProductTable.code == code)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def get_by_upc_code(self, upc_code: str) -> Product | None:
        statement = select(ProductTable).where(ProductTable.upc_code == upc_code)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def find_by_upc_or_code(self, upc_code: str, code: str) -> Product | None:
        """Return the product matching either identifier, preferring a UPC match."""
        statement = select(ProductTable).where(
            or_(ProductTable.upc_code == upc_code, ProductTable.code == code)
        )
        rows = self._session.exec(statement).all()
        if not rows:
            return None
        for row in rows:
            if row.upc_code == upc_code:
                return self._to_entity(row)
        return self._to_entity(rows[0])

    def list_all(self) -> list[Product]:
        statement = select(ProductTable).order_by(ProductTable.title)
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def search(self, query: str) -> list[Product]:
        """Case-insensitive substring search over title, codes and description."""
        pattern = f"%{query}%"
        statement = (
            select(ProductTable)
            .where(
                or_(
                    col(ProductTable.title).ilike(pattern),
                    col(ProductTable.code).ilike(pattern),
                    col(ProductTable.upc_code).ilike(pattern),
                    col(ProductTable.description).ilike(pattern),
                )
            )
            .order_by(ProductTable.title)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def create(self, product: Product) -> Product:
        row = ProductTable(**product.model_dump(exclude={"price_x_lists"}))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, product: Product) -> Product:
        row = self._session.get(ProductTable, product.id)
        if row is None:
            raise ValueError(f"Product with ID {product.id} not found")

        for field in _MUTABLE_FIELDS:
            setattr(row, field, getattr(product, field))

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, product_id: str) -> bool:
        """Delete a product together with its price entries."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
