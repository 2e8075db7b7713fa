"""Translation of catalog domain errors into HTTP errors."""

from fastapi import HTTPException, status

from src.catalog.core.exceptions import (
    CatalogError,
    CatalogValidationError,
    ConflictError,
    NotFoundError,
)

# Looked up along the error's MRO; CatalogError catches any other subclass
_STATUS_BY_ERROR: dict[type[CatalogError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    CatalogValidationError: status.HTTP_400_BAD_REQUEST,
    CatalogError: status.HTTP_400_BAD_REQUEST,
}


def to_http_exception(exc: CatalogError) -> HTTPException:
    """Map a domain error to the HTTPException a router should raise."""
    status_code = next(
        _STATUS_BY_ERROR[error_type]
        for error_type in type(exc).__mro__
        if error_type in _STATUS_BY_ERROR
    )
    return HTTPException(status_code=status_code, detail=str(exc))
