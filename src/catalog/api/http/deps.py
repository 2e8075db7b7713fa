"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import (
    CatalogSettingsService,
    DbSessionService,
    ListPriceService,
    PriceEntryService,
    ProductImportService,
    ProductService,
)


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a database session tied to the current request lifecycle."""

    db = database_service.get_session()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(session)


def get_product_import_service(
    session: Session = Depends(get_session),
) -> ProductImportService:
    return ProductImportService(session)


def get_list_price_service(session: Session = Depends(get_session)) -> ListPriceService:
    return ListPriceService(session)


def get_price_entry_service(session: Session = Depends(get_session)) -> PriceEntryService:
    return PriceEntryService(session)


def get_catalog_settings_service(
    session: Session = Depends(get_session),
) -> CatalogSettingsService:
    return CatalogSettingsService(session)
