"""Schema management for the catalog database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all catalog tables that do not exist yet."""
        import src.catalog.entities  # noqa: F401  registers tables

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        import src.catalog.entities  # noqa: F401

        SQLModel.metadata.drop_all(self._engine)
        logger.warning("All catalog tables dropped.")
