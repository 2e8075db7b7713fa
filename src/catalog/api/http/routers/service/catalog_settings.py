"""Catalog settings router, including the catalog visibility toggle."""

from fastapi import APIRouter, Depends, Response, status

from src.catalog.api.http.deps import get_catalog_settings_service
from src.catalog.api.http.errors import to_http_exception
from src.catalog.core.exceptions import CatalogError
from src.catalog.core.services import CatalogSettingsService
from src.catalog.entities.service.catalog_setting import CatalogSetting
from src.catalog.entities.service.catalog_setting.entity import (
    CatalogSettingCreate,
    CatalogSettingUpdate,
    CatalogVisibility,
)

router = APIRouter(prefix="/catalog-settings", tags=["catalog-settings"])


@router.post("", response_model=CatalogSetting, status_code=status.HTTP_201_CREATED)
def create_setting(
    setting: CatalogSettingCreate,
    service: CatalogSettingsService = Depends(get_catalog_settings_service),
) -> CatalogSetting:
    try:
        return service.create(setting)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.get("", response_model=list[CatalogSetting])
def list_settings(
    service: CatalogSettingsService = Depends(get_catalog_settings_service),
) -> list[CatalogSetting]:
    return service.list_all()


@router.get("/catalog-visibility", response_model=CatalogVisibility)
def get_catalog_visibility(
    service: CatalogSettingsService = Depends(get_catalog_settings_service),
) -> CatalogVisibility:
    """Whether the product catalog is shown; visible unless switched off."""
    return CatalogVisibility(visible=service.is_catalog_visible())


@router.post("/catalog-visibility", response_model=CatalogVisibility)
def set_catalog_visibility(
    visibility: CatalogVisibility,
    service: CatalogSettingsService = Depends(get_catalog_settings_service),
) -> CatalogVisibility:
    service.set_catalog_visibility(visibility.visible)
    return CatalogVisibility(visible=visibility.visible)


@router.get("/key/{key}", response_model=CatalogSetting)
def get_setting_by_key(
    key: str,
    service: CatalogSettingsService = Depends(get_catalog_settings_service),
) -> CatalogSetting:
    try:
        return service.get_by_key(key)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.get("/{item_id}", response_model=CatalogSetting)
def get_setting(
    item_id: str,
    service: CatalogSettingsService = Depends(get_catalog_settings_service),
) -> CatalogSetting:
    try:
        return service.get(item_id)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.patch("/{item_id}", response_model=CatalogSetting)
def update_setting(
    item_id: str,
    setting_update: CatalogSettingUpdate,
    service: CatalogSettingsService = Depends(get_catalog_settings_service),
) -> CatalogSetting:
    try:
        return service.update(item_id, setting_update)
    except CatalogError as e:
        raise to_http_exception(e) from e


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_setting(
    item_id: str,
    service: CatalogSettingsService = Depends(get_catalog_settings_service),
) -> Response:
    try:
        service.delete(item_id)
    except CatalogError as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
