"""Product CRUD with optional per-list prices."""

import pytest
from sqlmodel import Session

from src.catalog.core.exceptions import (
    CatalogValidationError,
    ConflictError,
    NotFoundError,
)
from src.catalog.core.services import ProductService
from src.catalog.entities.service.product.entity import ProductCreate, ProductUpdate


@pytest.fixture
def service(session: Session) -> ProductService:
    return ProductService(session)


def _create(service: ProductService, code: str = "MUG-1", upc_code: str = "0001", **fields):
    fields.setdefault("title", "Mug")
    return service.create(ProductCreate(code=code, upc_code=upc_code, **fields))


class TestProductCreate:
    def test_create(self, service: ProductService):
        product = _create(service, description="Ceramic mug")

        assert service.get(product.id).description == "Ceramic mug"

    def test_duplicate_code_conflicts(self, service: ProductService):
        _create(service)

        with pytest.raises(ConflictError, match="already exists"):
            _create(service, upc_code="0002")

    def test_duplicate_upc_conflicts(self, service: ProductService):
        _create(service)

        with pytest.raises(ConflictError):
            _create(service, code="MUG-2")

    def test_session_usable_after_conflict(self, service: ProductService):
        _create(service)
        with pytest.raises(ConflictError):
            _create(service, upc_code="0002")

        second = _create(service, code="MUG-2", upc_code="0002")

        assert len(service.list_all()) == 2
        assert service.get(second.id).code == "MUG-2"

    def test_create_with_prices(self, service: ProductService, make_list_price):
        retail = make_list_price("Retail")
        wholesale = make_list_price("Wholesale")

        product = _create(service, prices={retail.id: 10.5, wholesale.id: 0})

        assert product.price_for(retail.id) == 10.5
        assert product.price_for(wholesale.id) is None

    def test_create_with_negative_price(self, service: ProductService, make_list_price):
        retail = make_list_price("Retail")

        with pytest.raises(CatalogValidationError):
            _create(service, prices={retail.id: -1})


class TestProductLookup:
    def test_get_missing(self, service: ProductService):
        with pytest.raises(NotFoundError):
            service.get("missing")

    def test_by_code_and_upc(self, service: ProductService):
        product = _create(service)

        assert service.get_by_code("MUG-1") == product
        assert service.get_by_upc_code("0001") == product
        with pytest.raises(NotFoundError):
            service.get_by_code("nope")
        with pytest.raises(NotFoundError):
            service.get_by_upc_code("nope")

    def test_search(self, service: ProductService):
        _create(service, title="Coffee Mug")
        _create(service, code="PL-1", upc_code="0002", title="Plate")

        assert [p.title for p in service.list_all("coffee")] == ["Coffee Mug"]
        assert [p.title for p in service.list_all()] == ["Coffee Mug", "Plate"]


class TestProductUpdate:
    def test_partial_update(self, service: ProductService):
        product = _create(service, description="Old")

        updated = service.update(product.id, ProductUpdate(dimensions="10x10"))

        assert updated.dimensions == "10x10"
        assert updated.description == "Old"
        assert updated.title == "Mug"

    def test_update_to_taken_code_conflicts(self, service: ProductService):
        _create(service)
        other = _create(service, code="MUG-2", upc_code="0002")

        with pytest.raises(ConflictError):
            service.update(other.id, ProductUpdate(code="MUG-1"))

    def test_update_prices(self, service: ProductService, make_list_price):
        retail = make_list_price("Retail")
        wholesale = make_list_price("Wholesale")
        product = _create(service, prices={retail.id: 10, wholesale.id: 8})

        updated = service.update(
            product.id, ProductUpdate(prices={retail.id: 11, wholesale.id: 0})
        )

        assert updated.price_for(retail.id) == 11
        assert updated.price_for(wholesale.id) is None

    def test_update_missing(self, service: ProductService):
        with pytest.raises(NotFoundError):
            service.update("missing", ProductUpdate(title="X"))


class TestProductDelete:
    def test_delete(self, service: ProductService, make_list_price):
        retail = make_list_price("Retail")
        product = _create(service, prices={retail.id: 10})

        service.delete(product.id)

        with pytest.raises(NotFoundError):
            service.get(product.id)

    def test_delete_missing(self, service: ProductService):
        with pytest.raises(NotFoundError):
            service.delete("missing")
