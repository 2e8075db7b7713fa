"""Domain errors raised by catalog services.

Routers translate these into HTTP responses; services never raise
``HTTPException`` themselves.
"""


class CatalogError(Exception):
    """Base class for catalog domain errors."""


class NotFoundError(CatalogError):
    """A referenced entity does not exist."""


class ConflictError(CatalogError):
    """A unique key (product code, UPC, setting key, product/list pair) is taken."""


class CatalogValidationError(CatalogError):
    """Input is well-formed but violates a catalog rule."""
