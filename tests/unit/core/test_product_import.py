"""Tab-separated product import and reconciliation."""

import pytest
from sqlmodel import Session

from src.catalog.core.services import PriceEntryService, ProductImportService
from src.catalog.core.services.catalog.product_import import (
    MISSING_DATA_MESSAGE,
    ImportFormatError,
    parse_import_table,
    parse_price,
)
from src.catalog.entities.service.product import ProductRepository

HEADER = "title\tcode\tdescription\timageUrl\tdimensions\totherExpectations\tupcCode"


def _blob(*rows: str, header: str = HEADER) -> str:
    return "\n".join([header, *rows])


@pytest.fixture
def importer(session: Session) -> ProductImportService:
    return ProductImportService(session)


@pytest.fixture
def products(session: Session) -> ProductRepository:
    return ProductRepository(session)


class TestParsePrice:
    @pytest.mark.parametrize(
        ("cell", "expected"),
        [
            ("10", 10.0),
            ("10.5", 10.5),
            ("10,5", 10.5),
            (" 3,999 ", 4.0),
            ("0,006", 0.01),
        ],
    )
    def test_valid(self, cell, expected):
        assert parse_price(cell) == expected

    @pytest.mark.parametrize("cell", [None, "", "abc", "0", "-5", "nan", "inf", "0,001", "0.004"])
    def test_skipped(self, cell):
        assert parse_price(cell) is None


class TestParseImportTable:
    def test_header_mapping_is_case_insensitive(self):
        table = parse_import_table(
            _blob("Mug\tM1\t\t\t\t\t001\t9", header="TITLE\tCode\tDescription\tIMAGEURL\tdimensions\tOtherExpectations\tUpcCode\tRetail")
        )

        assert table.field_columns["upc_code"] == 6
        assert table.field_columns["image_url"] == 3
        assert table.price_columns == {"Retail": 7}

    def test_crlf_and_trimming(self):
        table = parse_import_table("title\tcode\tupcCode\r\n  Mug \t M1\t001 \r\n")

        row = table.rows[0]
        assert row.fields == {"title": "Mug", "code": "M1", "upc_code": "001"}

    def test_blank_rows_keep_numbering(self):
        table = parse_import_table(
            "title\tcode\tupcCode\nA\tA1\t1\n\t\t\nB\tB1\t2"
        )

        assert [row.number for row in table.rows] == [1, 3]

    def test_empty_cells_are_none(self):
        table = parse_import_table(_blob("Mug\tM1\t\t\t\t\t001"))

        assert table.rows[0].fields["description"] is None

    def test_short_rows(self):
        table = parse_import_table("title\tcode\tupcCode\tRetail\nMug\tM1")

        row = table.rows[0]
        assert row.fields["upc_code"] is None
        assert row.prices == {"Retail": ""}
        assert row.missing_fields() == ["upc_code"]

    @pytest.mark.parametrize("text", ["", "   ", "title\tcode\tupcCode", "\n\ntitle\n\n"])
    def test_too_few_lines(self, text):
        with pytest.raises(ImportFormatError, match=MISSING_DATA_MESSAGE):
            parse_import_table(text)


class TestImportCreate:
    def test_creates_products(self, importer: ProductImportService, products):
        result = importer.import_products(
            _blob(
                "Mug\tM1\tCeramic\thttp://img/m\t10x8\tfragile\t001",
                "Plate\tP1\t\t\t\t\t002",
            )
        )

        assert result.success is True
        assert result.created == 2
        assert result.updated == 0
        assert result.errors == []
        assert [d.action for d in result.details] == ["created", "created"]
        mug = products.get_by_upc_code("001")
        assert mug.image_url == "http://img/m"
        assert mug.other_expectations == "fragile"
        assert result.details[0].product_id == mug.id

    def test_header_only_is_top_level_error(self, importer: ProductImportService):
        result = importer.import_products(HEADER)

        assert result.success is False
        assert result.errors == [MISSING_DATA_MESSAGE]
        assert result.details == []

    def test_missing_code_reports_row(self, importer: ProductImportService, products):
        result = importer.import_products(
            _blob(
                "Mug\tM1\t\t\t\t\t001",
                "Broken\t\t\t\t\t\t002",
            )
        )

        assert result.created == 1
        assert result.errors == [
            "Row 2: Missing required fields (title, code, upcCode)"
        ]
        assert result.details[1].title == "Broken"
        assert result.details[1].error == result.errors[0]
        assert result.details[1].action is None
        assert products.get_by_upc_code("002") is None

    def test_only_invalid_rows_is_not_success(self, importer: ProductImportService):
        result = importer.import_products(_blob("\t\t\t\t\t\t001"))

        assert result.success is False
        assert result.created == 0
        assert len(result.errors) == 1
        assert result.details[0].title == "Row 1"

    def test_invalid_field_row_does_not_stop_later_rows(
        self, importer: ProductImportService, products
    ):
        long_url = "http://img/" + "x" * 600
        result = importer.import_products(
            _blob(
                "Mug\tM1\t\t\t\t\t001",
                f"Poster\tP1\t\t{long_url}\t\t\t002",
                "Plate\tL1\t\t\t\t\t003",
            )
        )

        assert result.success is True
        assert result.created == 2
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Row 2: Invalid product data: ")
        assert [d.action for d in result.details] == ["created", None, "created"]
        assert result.details[1].error == result.errors[0]
        assert products.get_by_upc_code("002") is None
        assert products.get_by_upc_code("003") is not None


class TestImportReconcile:
    def test_upc_match_updates_and_replaces_prices(
        self, session: Session, importer: ProductImportService, products, make_product, make_list_price
    ):
        retail = make_list_price("Retail")
        wholesale = make_list_price("Wholesale")
        existing = make_product(
            "M1", "001", title="Mug", description="Old", image_url="http://old"
        )
        prices = PriceEntryService(session)
        prices.set_price(existing.id, retail.id, 10)
        prices.set_price(existing.id, wholesale.id, 8)

        result = importer.import_products(
            _blob(
                "Big Mug\tOTHER-CODE\tNew\thttp://new\t\t\t001\t12",
                header=HEADER + "\tRetail",
            )
        )

        assert result.updated == 1
        assert result.created == 0
        assert result.details[0].action == "updated"
        assert result.details[0].product_id == existing.id
        product = products.get(existing.id)
        assert product.title == "Big Mug"
        assert product.description == "New"
        assert product.image_url == "http://new"
        # The identifiers are match keys, not overwritten
        assert product.code == "M1"
        assert product.price_for(retail.id) == 12
        assert product.price_for(wholesale.id) is None

    def test_code_match_updates(
        self, importer: ProductImportService, products, make_product
    ):
        existing = make_product("M1", "001", title="Mug")

        result = importer.import_products(_blob("Mug v2\tM1\t\t\t\t\t999"))

        assert result.updated == 1
        assert products.get(existing.id).title == "Mug v2"
        assert len(products.list_all()) == 1

    def test_update_clears_omitted_fields(
        self, importer: ProductImportService, products, make_product
    ):
        existing = make_product("M1", "001", description="Old", dimensions="1x1")

        importer.import_products(_blob("Mug\tM1\t\t\t\t\t001"))

        product = products.get(existing.id)
        assert product.description is None
        assert product.dimensions is None

    def test_unique_violation_is_row_error(
        self, monkeypatch, importer: ProductImportService, products, make_product
    ):
        make_product("M1", "001")
        # Simulate a product inserted after the lookup ran
        monkeypatch.setattr(
            importer._products, "find_by_upc_or_code", lambda upc_code, code: None
        )

        result = importer.import_products(
            _blob(
                "Clash\tM1\t\t\t\t\t009",
                "Fresh\tN1\t\t\t\t\t003",
            )
        )

        assert result.created == 1
        assert result.errors == [
            "Row 1: Product with code 'M1' or UPC '009' already exists"
        ]
        assert result.details[0].error == result.errors[0]
        assert products.get_by_code("N1") is not None
        assert products.get_by_upc_code("009") is None

    def test_invalid_update_keeps_existing_product(
        self, importer: ProductImportService, products, make_product
    ):
        existing = make_product("M1", "001", title="Mug", image_url="http://old")
        long_url = "http://img/" + "x" * 600

        result = importer.import_products(
            _blob(
                f"Mug v2\tM1\t\t{long_url}\t\t\t001",
                "Plate\tL1\t\t\t\t\t003",
            )
        )

        assert result.updated == 0
        assert result.created == 1
        assert result.errors[0].startswith("Row 1: Invalid product data: ")
        product = products.get(existing.id)
        assert product.title == "Mug"
        assert product.image_url == "http://old"

    def test_duplicate_rows_in_same_blob_update(
        self, importer: ProductImportService, products
    ):
        result = importer.import_products(
            _blob(
                "Mug\tM1\t\t\t\t\t001",
                "Mug again\tM1\t\t\t\t\t001",
            )
        )

        assert result.created == 1
        assert result.updated == 1
        assert products.get_by_code("M1").title == "Mug again"


class TestImportPrices:
    def test_prices_by_list_title(
        self, importer: ProductImportService, products, make_list_price
    ):
        retail = make_list_price("Retail")
        wholesale = make_list_price("Wholesale")

        result = importer.import_products(
            _blob("Mug\tM1\t\t\t\t\t001\t10,50\t8", header=HEADER + "\tretail\tWHOLESALE")
        )

        assert result.errors == []
        product = products.get_by_code("M1")
        assert product.price_for(retail.id) == 10.5
        assert product.price_for(wholesale.id) == 8

    @pytest.mark.parametrize("cell", ["abc", "0", "-3", "", "0,001"])
    def test_invalid_price_skipped_silently(
        self, cell, importer: ProductImportService, products, make_list_price
    ):
        retail = make_list_price("Retail")

        result = importer.import_products(
            _blob(f"Mug\tM1\t\t\t\t\t001\t{cell}", header=HEADER + "\tRetail")
        )

        assert result.errors == []
        assert result.created == 1
        assert products.get_by_code("M1").price_for(retail.id) is None

    def test_unknown_list_is_row_error_but_product_kept(
        self, importer: ProductImportService, products
    ):
        result = importer.import_products(
            _blob("Mug\tM1\t\t\t\t\t001\t10", header=HEADER + "\tPromo")
        )

        assert result.success is True
        assert result.created == 1
        assert result.errors == ["Row 1: Price list 'Promo' not found"]
        assert result.details[0].action == "created"
        assert products.get_by_code("M1") is not None

    def test_unknown_list_ignored_when_price_invalid(
        self, importer: ProductImportService
    ):
        result = importer.import_products(
            _blob("Mug\tM1\t\t\t\t\t001\tn/a", header=HEADER + "\tPromo")
        )

        assert result.errors == []

    def test_sub_cent_price_does_not_stop_later_rows(
        self, importer: ProductImportService, products, make_list_price
    ):
        retail = make_list_price("Retail")

        result = importer.import_products(
            _blob(
                "Mug\tM1\t\t\t\t\t001\t0,001",
                "Plate\tL1\t\t\t\t\t003\t4,20",
                header=HEADER + "\tRetail",
            )
        )

        assert result.errors == []
        assert result.created == 2
        assert products.get_by_code("M1").price_for(retail.id) is None
        assert products.get_by_code("L1").price_for(retail.id) == 4.2
