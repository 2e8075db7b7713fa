"""Router for product prices under price lists."""

from fastapi import APIRouter, Depends, Response, status

from src.catalog.api.http.deps import get_price_entry_service
from src.catalog.api.http.errors import to_http_exception
from src.catalog.core.exceptions import CatalogError
from src.catalog.core.services import PriceEntryService
from src.catalog.entities.service.price_entry import PriceEntry
from src.catalog.entities.service.price_entry.entity import (
    PriceEntryCreate,
    PriceEntryUpdate,
)

router = APIRouter(prefix="/price-x-list", tags=["price-x-list"])


@router.post("", response_model=PriceEntry, status_code=status.HTTP_201_CREATED)
def create_price_entry(
    entry: PriceEntryCreate,
    service: PriceEntryService = Depends(get_price_entry_service),
) -> PriceEntry:
    try:
        return service.create(entry)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.get("", response_model=list[PriceEntry])
def list_price_entries(
    service: PriceEntryService = Depends(get_price_entry_service),
) -> list[PriceEntry]:
    return service.list_all()


@router.get("/product/{product_id}", response_model=list[PriceEntry])
def list_price_entries_by_product(
    product_id: str,
    service: PriceEntryService = Depends(get_price_entry_service),
) -> list[PriceEntry]:
    return service.list_by_product(product_id)


@router.get("/list-price/{list_price_id}", response_model=list[PriceEntry])
def list_price_entries_by_list_price(
    list_price_id: str,
    service: PriceEntryService = Depends(get_price_entry_service),
) -> list[PriceEntry]:
    return service.list_by_list_price(list_price_id)


@router.get(
    "/product/{product_id}/list-price/{list_price_id}", response_model=PriceEntry
)
def get_price_entry_by_product_and_list(
    product_id: str,
    list_price_id: str,
    service: PriceEntryService = Depends(get_price_entry_service),
) -> PriceEntry:
    try:
        return service.get_by_product_and_list(product_id, list_price_id)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.get("/{item_id}", response_model=PriceEntry)
def get_price_entry(
    item_id: str,
    service: PriceEntryService = Depends(get_price_entry_service),
) -> PriceEntry:
    try:
        return service.get(item_id)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.patch("/{item_id}", response_model=PriceEntry)
def update_price_entry(
    item_id: str,
    entry_update: PriceEntryUpdate,
    service: PriceEntryService = Depends(get_price_entry_service),
) -> PriceEntry:
    try:
        return service.update(item_id, entry_update)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_price_entry(
    item_id: str,
    service: PriceEntryService = Depends(get_price_entry_service),
) -> Response:
    try:
        service.delete(item_id)
    except CatalogError as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
