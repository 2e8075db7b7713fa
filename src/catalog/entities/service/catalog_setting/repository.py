"""CatalogSetting repository for data access operations."""

from sqlmodel import Session, select

from src.catalog.entities.service.catalog_setting.entity import CatalogSetting
from src.catalog.entities.service.catalog_setting.table import CatalogSettingTable


class CatalogSettingRepository:
    """Data-access layer for catalog settings."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, setting_id: str) -> CatalogSetting | None:
        row = self._session.get(CatalogSettingTable, setting_id)
        if row is None:
            return None
        return CatalogSetting.model_validate(row, from_attributes=True)

    def get_by_key(self, key: str) -> CatalogSetting | None:
        statement = select(CatalogSettingTable).where(CatalogSettingTable.key == key)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return CatalogSetting.model_validate(row, from_attributes=True)

    def list_all(self) -> list[CatalogSetting]:
        statement = select(CatalogSettingTable).order_by(CatalogSettingTable.key)
        return [
            CatalogSetting.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        ]

    def create(self, setting: CatalogSetting) -> CatalogSetting:
        row = CatalogSettingTable(**setting.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return CatalogSetting.model_validate(row, from_attributes=True)

    def update(self, setting: CatalogSetting) -> CatalogSetting:
        row = self._session.get(CatalogSettingTable, setting.id)
        if row is None:
            raise ValueError(f"Catalog setting with ID {setting.id} not found")

        row.key = setting.key
        row.value = setting.value
        row.description = setting.description

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return CatalogSetting.model_validate(row, from_attributes=True)

    def delete(self, setting_id: str) -> bool:
        row = self._session.get(CatalogSettingTable, setting_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
