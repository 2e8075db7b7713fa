"""Engine, session and schema management services."""

from collections.abc import Generator

import pytest
from sqlalchemy import inspect
from sqlmodel import select

from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.entities.service.list_price import ListPriceTable
from src.catalog.runtime.config.config_data import ConfigData, DatabaseConfig
from src.catalog.runtime.init_db import init_db

CATALOG_TABLES = {"products", "list_prices", "price_x_list", "catalog_settings"}


@pytest.fixture
def db_service(tmp_path) -> Generator[DbSessionService]:
    config = ConfigData(database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'catalog.db'}"))
    service = DbSessionService(config)
    DbManageService(service.engine).create_all()
    yield service
    service.engine.dispose()


class TestDbManageService:
    def test_create_and_drop(self, db_service: DbSessionService):
        manager = DbManageService(db_service.engine)

        assert CATALOG_TABLES <= set(inspect(db_service.engine).get_table_names())

        manager.drop_all()
        assert not CATALOG_TABLES & set(inspect(db_service.engine).get_table_names())

    def test_init_db_uses_configured_database(self):
        # The test configuration points at an in-memory database
        init_db()


class TestDbSessionService:
    def test_session_scope_commits(self, db_service: DbSessionService):
        with db_service.session_scope() as session:
            session.add(ListPriceTable(title="Retail"))

        with db_service.session_scope() as session:
            titles = [row.title for row in session.exec(select(ListPriceTable)).all()]

        assert titles == ["Retail"]

    def test_session_scope_rolls_back(self, db_service: DbSessionService):
        with pytest.raises(RuntimeError):
            with db_service.session_scope() as session:
                session.add(ListPriceTable(title="Retail"))
                session.flush()
                raise RuntimeError("boom")

        with db_service.session_scope() as session:
            assert session.exec(select(ListPriceTable)).all() == []

    def test_foreign_keys_enforced(self, db_service: DbSessionService):
        with db_service.session_scope() as session:
            assert session.connection().exec_driver_sql("PRAGMA foreign_keys").scalar() == 1

    def test_health_check(self, db_service: DbSessionService):
        assert db_service.health_check() is True
        assert set(db_service.get_pool_status()) == {
            "size",
            "checked_in",
            "checked_out",
            "overflow",
        }
