"""Tests for Shopify CSV export."""

import csv
import io
from dataclasses import astuple, fields
from decimal import Decimal
from pathlib import Path

import pytest

from productgen.catalog.export import (
    CSV_HEADERS,
    SHARED_FIELDS,
    escape_csv_field,
    expand_rows,
    generate_csv_row,
    render_csv,
    write_csv,
)
from productgen.catalog.models import CatalogRow, GeneratedProduct, Variant

# Fields set on every row of a group
SIZE_FIELDS = (
    "handle", "option1_value", "variant_sku", "variant_grams",
    "variant_inventory_tracker", "variant_inventory_qty",
    "variant_inventory_policy", "variant_fulfillment_service",
    "variant_price", "variant_compare_at_price", "variant_requires_shipping",
    "variant_taxable", "gift_card", "variant_weight_unit", "cost_per_item",
    "status",
)


def make_product(sizes: list[str], description: str = "A fine, \"bold\" hat.") -> GeneratedProduct:
    """Build a product with one variant per size."""
    return GeneratedProduct(
        title="Bold Hat",
        handle="bold-hat",
        description=description,
        category="Accessories",
        collection_name="Everyday Accessories",
        tags=("accessories", "everyday"),
        price=25,
        vendor="Demo Apparel Co",
        image_src="https://img.example/hat.png",
        variants=tuple(
            Variant(
                size=size,
                sku=f"BOLD-HAT-{size}",
                price=25,
                compare_at_price=40,
                grams=300 + i,
                inventory_quantity=10 + i,
            )
            for i, size in enumerate(sizes)
        ),
    )


class TestRowExpansion:
    """Tests for grouping variants into rows."""

    @pytest.mark.parametrize("sizes", [["M"], ["S", "M"], ["XS", "S", "M", "L", "XL"]])
    def test_one_row_per_size(self, sizes: list[str]) -> None:
        """Row count equals size count, in size order."""
        rows = expand_rows(make_product(sizes))
        assert len(rows) == len(sizes)
        assert [r.option1_value for r in rows] == sizes

    def test_only_first_row_has_shared_fields(self) -> None:
        """Continuation rows leave product-level fields blank."""
        rows = expand_rows(make_product(["S", "M", "L"]))

        for name in SHARED_FIELDS:
            assert getattr(rows[0], name) != ""
        for row in rows[1:]:
            for name in SHARED_FIELDS:
                assert getattr(row, name) == ""

    def test_all_rows_have_size_fields(self) -> None:
        """Every row carries the size-specific fields."""
        for row in expand_rows(make_product(["S", "M", "L"])):
            for name in SIZE_FIELDS:
                assert getattr(row, name) not in ("", None)

    def test_first_row_values(self) -> None:
        """First row carries product data and Shopify defaults."""
        first = expand_rows(make_product(["S", "M"]))[0]

        assert first.title == "Bold Hat"
        assert first.vendor == "Demo Apparel Co"
        assert first.product_type == "Accessories"
        assert first.tags == "accessories, everyday"
        assert first.published == "TRUE"
        assert first.option1_name == "Size"
        assert first.image_position == "1"
        assert first.image_alt_text == "Bold Hat"
        assert first.seo_title == "Bold Hat"
        assert first.variant_inventory_policy == "deny"
        assert first.cost_per_item == Decimal("10.00")
        assert first.status == "active"

    def test_seo_description_truncated(self) -> None:
        """SEO description is capped at 160 characters."""
        product = make_product(["M"], description="x" * 400)
        assert len(expand_rows(product)[0].seo_description) == 160

    def test_row_fields_match_headers(self) -> None:
        """CatalogRow has one field per CSV column."""
        assert len(fields(CatalogRow)) == len(CSV_HEADERS)


class TestEscaping:
    """Tests for CSV field escaping."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("plain", "plain"),
            ("a,b", '"a,b"'),
            ('say "hi"', '"say ""hi"""'),
            ("line1\nline2", '"line1\nline2"'),
            (None, ""),
            ("", ""),
            (42, "42"),
            (Decimal("10.00"), "10.00"),
        ],
    )
    def test_escape(self, value, expected: str) -> None:
        """Fields are quoted only when they need to be."""
        assert escape_csv_field(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["a,b", 'quote " inside', "multi\nline", 'all, of "them"\nhere', "plain text"],
    )
    def test_round_trip_through_csv_reader(self, value: str) -> None:
        """Escaped fields parse back to the original value."""
        line = generate_csv_row(["first", value, "last"])
        parsed = next(csv.reader(io.StringIO(line)))
        assert parsed == ["first", value, "last"]

    def test_row_join(self) -> None:
        """Fields are joined with commas."""
        assert generate_csv_row(["a", None, 3]) == "a,,3"


class TestRenderCsv:
    """Tests for the full CSV payload."""

    def test_header_row(self) -> None:
        """First line is the fixed header."""
        payload = render_csv([])
        assert payload == ",".join(CSV_HEADERS)

    def test_payload_parses(self) -> None:
        """Rendered payload parses into header plus one record per row."""
        rows = expand_rows(make_product(["S", "M", "L"]))
        payload = render_csv(rows)

        records = list(csv.reader(io.StringIO(payload)))
        assert records[0] == CSV_HEADERS
        assert len(records) == 4
        assert records[1][CSV_HEADERS.index("Body (HTML)")] == 'A fine, "bold" hat.'
        assert records[2][CSV_HEADERS.index("Title")] == ""
        assert records[2][CSV_HEADERS.index("Variant SKU")] == "BOLD-HAT-M"
        assert all(len(r) == len(CSV_HEADERS) for r in records)

    def test_no_trailing_newline(self) -> None:
        """Rows are joined, not terminated, by newlines."""
        payload = render_csv(expand_rows(make_product(["S"])))
        assert not payload.endswith("\n")

    def test_write_csv(self, tmp_path: Path) -> None:
        """Payload is written to the given path."""
        rows = expand_rows(make_product(["S", "M"]))
        path = write_csv(tmp_path / "products.csv", rows)

        assert path.exists()
        assert path.read_text(encoding="utf-8") == render_csv(rows)
        assert astuple(rows[0])[0] == "bold-hat"
