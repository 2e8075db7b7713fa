"""Product API router with CRUD, lookup and bulk import operations."""

from fastapi import APIRouter, Depends, Response, status

from src.catalog.api.http.deps import get_product_import_service, get_product_service
from src.catalog.api.http.errors import to_http_exception
from src.catalog.core.exceptions import CatalogError
from src.catalog.core.models import ImportResult
from src.catalog.core.services import ProductImportService, ProductService
from src.catalog.entities.core._base import Schema
from src.catalog.entities.service.product import Product
from src.catalog.entities.service.product.entity import ProductCreate, ProductUpdate

router = APIRouter(prefix="/products", tags=["products"])


class ImportProductsRequest(Schema):
    """Tab-separated import blob, header line first."""

    csv_data: str


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product, optionally with its prices."""
    try:
        return service.create(product)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.get("", response_model=list[Product])
def list_products(
    search: str | None = None,
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List products ordered by title, optionally filtered by a search term."""
    return service.list_all(search)


@router.post("/import", response_model=ImportResult, response_model_exclude_none=True)
def import_products(
    payload: ImportProductsRequest,
    service: ProductImportService = Depends(get_product_import_service),
) -> ImportResult:
    """Bulk create or update products from a tab-separated blob.

    Row failures are reported in the result; the request itself succeeds.
    """
    return service.import_products(payload.csv_data)


@router.get("/code/{code}", response_model=Product)
def get_product_by_code(
    code: str,
    service: ProductService = Depends(get_product_service),
) -> Product:
    try:
        return service.get_by_code(code)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.get("/upc/{upc_code}", response_model=Product)
def get_product_by_upc_code(
    upc_code: str,
    service: ProductService = Depends(get_product_service),
) -> Product:
    try:
        return service.get_by_upc_code(upc_code)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.get("/{item_id}", response_model=Product)
def get_product(
    item_id: str,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID."""
    try:
        return service.get(item_id)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.patch("/{item_id}", response_model=Product)
def update_product(
    item_id: str,
    product_update: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Partially update a product."""
    try:
        return service.update(item_id, product_update)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    item_id: str,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product together with its prices."""
    try:
        service.delete(item_id)
    except CatalogError as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
