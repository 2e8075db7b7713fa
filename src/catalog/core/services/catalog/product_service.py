"""Product management."""

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.catalog.core.exceptions import (
    CatalogValidationError,
    ConflictError,
    NotFoundError,
)
from src.catalog.core.services.catalog.price_entry_service import PriceEntryService
from src.catalog.entities.service.product import Product, ProductRepository
from src.catalog.entities.service.product.entity import ProductCreate, ProductUpdate

_DUPLICATE_MESSAGE = "Product with this code or UPC code already exists"


class ProductService:
    """CRUD over products.

    Create and update optionally carry a ``prices`` map of price list id to
    amount, which is applied after the product itself is saved.
    """

    def __init__(self, db_session: Session):
        self._session = db_session
        self._repo = ProductRepository(db_session)
        self._prices = PriceEntryService(db_session)

    def create(self, data: ProductCreate) -> Product:
        product = Product(**data.model_dump(exclude={"prices"}))
        try:
            with self._session.begin_nested():
                created = self._repo.create(product)
        except IntegrityError as exc:
            raise ConflictError(_DUPLICATE_MESSAGE) from exc

        logger.info("Created product {} ({})", created.code, created.id)
        if data.prices:
            self._apply_prices(created.id, data.prices)
            created = self.get(created.id)
        return created

    def list_all(self, search: str | None = None) -> list[Product]:
        if search:
            return self._repo.search(search)
        return self._repo.list_all()

    def get(self, product_id: str) -> Product:
        product = self._repo.get(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID {product_id} not found")
        return product

    def get_by_code(self, code: str) -> Product:
        product = self._repo.get_by_code(code)
        if product is None:
            raise NotFoundError(f"Product with code {code} not found")
        return product

    def get_by_upc_code(self, upc_code: str) -> Product:
        product = self._repo.get_by_upc_code(upc_code)
        if product is None:
            raise NotFoundError(f"Product with UPC code {upc_code} not found")
        return product

    def update(self, product_id: str, data: ProductUpdate) -> Product:
        product = self.get(product_id)
        changes = data.model_dump(exclude_unset=True, exclude={"prices"})
        # Required columns cannot be cleared
        for field in ("title", "code", "upc_code"):
            if field in changes and changes[field] is None:
                del changes[field]

        updated = product.model_copy(update=changes)
        try:
            with self._session.begin_nested():
                updated = self._repo.update(updated)
        except IntegrityError as exc:
            raise ConflictError(_DUPLICATE_MESSAGE) from exc

        if data.prices:
            self._apply_prices(product_id, data.prices)
            updated = self.get(product_id)
        return updated

    def delete(self, product_id: str) -> None:
        if not self._repo.delete(product_id):
            raise NotFoundError(f"Product with ID {product_id} not found")
        logger.info("Deleted product {}", product_id)

    def _apply_prices(self, product_id: str, prices: dict[str, float]) -> None:
        for list_price_id, amount in prices.items():
            if amount < 0:
                raise CatalogValidationError(
                    f"Price for list {list_price_id} must not be negative"
                )
            if amount == 0:
                self._prices.clear_price(product_id, list_price_id)
            else:
                self._prices.set_price(product_id, list_price_id, amount)
