"""Price list API router."""

from fastapi import APIRouter, Depends, Response, status

from src.catalog.api.http.deps import get_list_price_service
from src.catalog.api.http.errors import to_http_exception
from src.catalog.core.exceptions import CatalogError
from src.catalog.core.services import ListPriceService
from src.catalog.entities.service.list_price import ListPrice
from src.catalog.entities.service.list_price.entity import (
    ListPriceCreate,
    ListPriceUpdate,
)

router = APIRouter(prefix="/list-prices", tags=["list-prices"])


@router.post("", response_model=ListPrice, status_code=status.HTTP_201_CREATED)
def create_list_price(
    list_price: ListPriceCreate,
    service: ListPriceService = Depends(get_list_price_service),
) -> ListPrice:
    """Create a price list. Creating an active list deactivates the others."""
    return service.create(list_price)


@router.get("", response_model=list[ListPrice])
def list_list_prices(
    search: str | None = None,
    service: ListPriceService = Depends(get_list_price_service),
) -> list[ListPrice]:
    return service.list_all(search)


@router.get("/active", response_model=ListPrice | None)
def get_active_list_price(
    service: ListPriceService = Depends(get_list_price_service),
) -> ListPrice | None:
    """Return the active price list, or null when none is active."""
    return service.get_active_list_price()


@router.get("/{item_id}", response_model=ListPrice)
def get_list_price(
    item_id: str,
    service: ListPriceService = Depends(get_list_price_service),
) -> ListPrice:
    try:
        return service.get(item_id)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.patch("/{item_id}", response_model=ListPrice)
def update_list_price(
    item_id: str,
    list_price_update: ListPriceUpdate,
    service: ListPriceService = Depends(get_list_price_service),
) -> ListPrice:
    try:
        return service.update(item_id, list_price_update)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_list_price(
    item_id: str,
    service: ListPriceService = Depends(get_list_price_service),
) -> Response:
    """Delete a price list and every price recorded under it."""
    try:
        service.delete(item_id)
    except CatalogError as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
