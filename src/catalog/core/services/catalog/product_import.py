"""Tab-separated product import.

The first line is a header. Cells named after product fields (matched
case-insensitively) fill the product; every other named column is a price list
title whose cells hold that list's price for the row's product::

    title  code  description  imageUrl  dimensions  otherExpectations  upcCode  Retail  Wholesale

Each data row is reconciled against existing products by UPC or code: a match
is overwritten and re-priced from scratch, otherwise a new product is created.
"""

import math
from dataclasses import dataclass, field

from loguru import logger
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from src.catalog.core.models.import_result import ImportDetail, ImportResult
from src.catalog.core.services.catalog.price_entry_service import PriceEntryService
from src.catalog.entities.service.list_price import ListPrice, ListPriceRepository
from src.catalog.entities.service.product import Product, ProductRepository

# Header name -> Product attribute
PRODUCT_COLUMNS = {
    "title": "title",
    "code": "code",
    "description": "description",
    "imageurl": "image_url",
    "dimensions": "dimensions",
    "otherexpectations": "other_expectations",
    "upccode": "upc_code",
}
REQUIRED_FIELDS = ("title", "code", "upc_code")
OVERWRITTEN_FIELDS = ("title", "description", "image_url", "dimensions", "other_expectations")

MISSING_DATA_MESSAGE = "CSV must contain a header row and at least one data row"


class ImportFormatError(ValueError):
    """The blob cannot be read as an import table at all."""


def parse_price(cell: str | None) -> float | None:
    """Read a price cell; ``,`` or ``.`` may separate decimals.

    Returns None for blank, non-numeric or non-finite values and for values
    that round to zero or below.
    """
    if not cell:
        return None
    try:
        value = float(cell.strip().replace(",", "."))
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    value = round(value, 2)
    if value <= 0:
        return None
    return value


@dataclass
class ImportRow:
    number: int
    fields: dict[str, str | None]
    prices: dict[str, str]

    @property
    def label(self) -> str:
        return self.fields.get("title") or f"Row {self.number}"

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not self.fields.get(name)]


@dataclass
class ImportTable:
    field_columns: dict[str, int] = field(default_factory=dict)
    price_columns: dict[str, int] = field(default_factory=dict)
    rows: list[ImportRow] = field(default_factory=list)


def _summarize(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


def _cell(cells: list[str], index: int) -> str:
    return cells[index] if index < len(cells) else ""


def parse_import_table(text: str) -> ImportTable:
    """Split the blob into header mapping and data rows.

    Data rows are numbered from 1 after the header; blank rows are dropped but
    still consume their number.
    """
    lines = [line.rstrip("\r") for line in text.strip().split("\n")]
    if len(lines) < 2:
        raise ImportFormatError(MISSING_DATA_MESSAGE)

    table = ImportTable()
    for index, header in enumerate(cell.strip() for cell in lines[0].split("\t")):
        if not header:
            continue
        attribute = PRODUCT_COLUMNS.get(header.lower())
        if attribute is not None:
            table.field_columns.setdefault(attribute, index)
        else:
            table.price_columns.setdefault(header, index)

    for number, line in enumerate(lines[1:], start=1):
        cells = [cell.strip() for cell in line.split("\t")]
        if not any(cells):
            continue
        fields = {
            attribute: _cell(cells, index) or None
            for attribute, index in table.field_columns.items()
        }
        prices = {
            name: _cell(cells, index) for name, index in table.price_columns.items()
        }
        table.rows.append(ImportRow(number=number, fields=fields, prices=prices))

    return table


class ProductImportService:
    """Reconcile an import table against the catalog, one row at a time.

    Each row runs inside its own savepoint so a failing row is rolled back
    alone and never stops the rows after it.
    """

    def __init__(self, db_session: Session):
        self._session = db_session
        self._products = ProductRepository(db_session)
        self._list_prices = ListPriceRepository(db_session)
        self._prices = PriceEntryService(db_session)
        self._list_cache: dict[str, ListPrice | None] = {}

    def import_products(self, csv_data: str) -> ImportResult:
        result = ImportResult()
        try:
            table = parse_import_table(csv_data)
        except ImportFormatError as exc:
            logger.warning("Rejected product import: {}", exc)
            result.errors.append(str(exc))
            return result.finish()

        logger.bind(
            rows=len(table.rows),
            price_columns=list(table.price_columns),
        ).info("Importing products")

        try:
            for row in table.rows:
                self._import_row(row, result)
        except Exception as exc:  # report, never raise
            logger.exception("Product import aborted")
            result.errors.append(f"Import failed: {exc}")

        result.finish()
        logger.bind(
            created=result.created,
            updated=result.updated,
            errors=len(result.errors),
        ).info("Product import finished")
        return result

    def _import_row(self, row: ImportRow, result: ImportResult) -> None:
        missing = row.missing_fields()
        if missing:
            message = f"Row {row.number}: Missing required fields (title, code, upcCode)"
            logger.warning(message)
            result.add_error(message, row.label)
            return

        try:
            with self._session.begin_nested():
                product, action = self._reconcile(row)
        except IntegrityError:
            message = (
                f"Row {row.number}: Product with code '{row.fields['code']}' "
                f"or UPC '{row.fields['upc_code']}' already exists"
            )
            logger.warning(message)
            result.add_error(message, row.label)
            return
        except SQLAlchemyError as exc:
            message = f"Row {row.number}: {exc.__class__.__name__}: {exc}"
            logger.warning(message)
            result.add_error(message, row.label)
            return
        except ValidationError as exc:
            message = f"Row {row.number}: Invalid product data: {_summarize(exc)}"
            logger.warning(message)
            result.add_error(message, row.label)
            return

        if action == "created":
            result.created += 1
        else:
            result.updated += 1
        result.details.append(
            ImportDetail(product_id=product.id, title=product.title, action=action)
        )

        self._apply_prices(row, product, result)

    def _reconcile(self, row: ImportRow) -> tuple[Product, str]:
        fields = row.fields
        existing = self._products.find_by_upc_or_code(
            fields["upc_code"], fields["code"]
        )
        if existing is not None:
            changes = {name: fields.get(name) for name in OVERWRITTEN_FIELDS}
            product = self._products.update(
                Product.model_validate({**existing.model_dump(), **changes})
            )
            removed = self._prices.replace_prices(product.id)
            logger.debug("Row {}: updated {} and dropped {} price(s)", row.number, product.code, removed)
            return product, "updated"

        product = self._products.create(
            Product(**{name: fields.get(name) for name in PRODUCT_COLUMNS.values()})
        )
        logger.debug("Row {}: created {}", row.number, product.code)
        return product, "created"

    def _resolve_list(self, name: str) -> ListPrice | None:
        key = name.lower()
        if key not in self._list_cache:
            self._list_cache[key] = self._list_prices.get_by_title(name)
        return self._list_cache[key]

    def _apply_prices(self, row: ImportRow, product: Product, result: ImportResult) -> None:
        for name, cell in row.prices.items():
            price = parse_price(cell)
            if price is None:
                continue

            list_price = self._resolve_list(name)
            if list_price is None:
                message = f"Row {row.number}: Price list '{name}' not found"
                logger.warning(message)
                result.errors.append(message)
                continue

            try:
                with self._session.begin_nested():
                    self._prices.set_price(product.id, list_price.id, price)
            except (SQLAlchemyError, ValidationError) as exc:
                message = f"Row {row.number}: Failed to set price for list '{name}': {exc}"
                logger.warning(message)
                result.errors.append(message)
