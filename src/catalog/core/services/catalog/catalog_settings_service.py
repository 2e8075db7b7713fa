"""Catalog key/value settings and the catalog visibility toggle."""

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.catalog.core.exceptions import ConflictError, NotFoundError
from src.catalog.entities.service.catalog_setting import (
    CatalogSetting,
    CatalogSettingRepository,
)
from src.catalog.entities.service.catalog_setting.entity import (
    CatalogSettingCreate,
    CatalogSettingUpdate,
)
from src.catalog.runtime.config.config_data import CatalogConfig
from src.catalog.runtime.context import get_config


class CatalogSettingsService:
    def __init__(self, db_session: Session, catalog_config: CatalogConfig | None = None):
        self._session = db_session
        self._repo = CatalogSettingRepository(db_session)
        self._config = catalog_config or get_config().catalog

    def create(self, data: CatalogSettingCreate) -> CatalogSetting:
        if self._repo.get_by_key(data.key) is not None:
            raise ConflictError(f"Setting with key '{data.key}' already exists")
        try:
            with self._session.begin_nested():
                return self._repo.create(CatalogSetting(**data.model_dump()))
        except IntegrityError as exc:
            raise ConflictError(f"Setting with key '{data.key}' already exists") from exc

    def list_all(self) -> list[CatalogSetting]:
        return self._repo.list_all()

    def get(self, setting_id: str) -> CatalogSetting:
        setting = self._repo.get(setting_id)
        if setting is None:
            raise NotFoundError(f"Catalog setting with ID {setting_id} not found")
        return setting

    def get_by_key(self, key: str) -> CatalogSetting:
        setting = self._repo.get_by_key(key)
        if setting is None:
            raise NotFoundError(f"Catalog setting with key '{key}' not found")
        return setting

    def update(self, setting_id: str, data: CatalogSettingUpdate) -> CatalogSetting:
        setting = self.get(setting_id)
        changes = data.model_dump(exclude_unset=True)
        for field in ("key", "value"):
            if field in changes and changes[field] is None:
                del changes[field]

        try:
            with self._session.begin_nested():
                return self._repo.update(setting.model_copy(update=changes))
        except IntegrityError as exc:
            raise ConflictError(f"Setting with key '{changes.get('key')}' already exists") from exc

    def delete(self, setting_id: str) -> None:
        if not self._repo.delete(setting_id):
            raise NotFoundError(f"Catalog setting with ID {setting_id} not found")

    def is_catalog_visible(self) -> bool:
        """Catalog visibility; an unset toggle means visible."""
        setting = self._repo.get_by_key(self._config.visibility_key)
        if setting is None:
            return True
        return setting.value.strip().lower() == "true"

    def set_catalog_visibility(self, visible: bool) -> CatalogSetting:
        value = "true" if visible else "false"
        setting = self._repo.get_by_key(self._config.visibility_key)
        if setting is None:
            setting = self._repo.create(
                CatalogSetting(
                    key=self._config.visibility_key,
                    value=value,
                    description=self._config.visibility_description,
                )
            )
        else:
            setting = self._repo.update(setting.model_copy(update={"value": value}))

        logger.info("Catalog visibility set to {}", value)
        return setting
