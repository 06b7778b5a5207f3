"""Shopify product-import CSV export.

Expands generated products into grouped variant rows and serializes
them with the quoting rule Shopify's importer expects.
"""

from dataclasses import astuple
from pathlib import Path
from typing import Any, Iterable, Sequence

from productgen.catalog.models import CatalogRow, GeneratedProduct

# Column order matches the CatalogRow field order exactly
CSV_HEADERS = [
    "Handle", "Title", "Body (HTML)", "Vendor", "Type", "Tags", "Published",
    "Option1 Name", "Option1 Value", "Option2 Name", "Option2 Value",
    "Option3 Name", "Option3 Value",
    "Variant SKU", "Variant Grams", "Variant Inventory Tracker",
    "Variant Inventory Qty", "Variant Inventory Policy",
    "Variant Fulfillment Service", "Variant Price", "Variant Compare At Price",
    "Variant Requires Shipping", "Variant Taxable", "Variant Barcode",
    "Image Src", "Image Position", "Image Alt Text", "Gift Card",
    "SEO Title", "SEO Description", "Variant Image", "Variant Weight Unit",
    "Variant Tax Code", "Cost per item", "Status",
]

# Fields on the first row of a product group only
SHARED_FIELDS = (
    "title", "body_html", "vendor", "product_type", "tags", "published",
    "option1_name", "image_src", "image_position", "image_alt_text",
    "seo_title", "seo_description",
)

_QUOTE_TRIGGERS = (",", '"', "\n")


# ============================================================================
# Row Expansion
# ============================================================================


def _variant_row(
    product: GeneratedProduct,
    index: int,
    first_in_group: bool,
) -> CatalogRow:
    variant = product.variants[index]
    size_fields: dict[str, Any] = {
        "handle": product.handle,
        "option1_value": variant.size,
        "variant_sku": variant.sku,
        "variant_grams": variant.grams,
        "variant_inventory_tracker": "shopify",
        "variant_inventory_qty": variant.inventory_quantity,
        "variant_inventory_policy": "deny",
        "variant_fulfillment_service": "manual",
        "variant_price": variant.price,
        "variant_compare_at_price": variant.compare_at_price,
        "variant_requires_shipping": "TRUE",
        "variant_taxable": "TRUE",
        "gift_card": "FALSE",
        "variant_weight_unit": "g",
        "cost_per_item": product.cost_per_item,
        "status": "active",
    }
    if not first_in_group:
        return CatalogRow(**size_fields)

    return CatalogRow(
        **size_fields,
        title=product.title,
        body_html=product.description,
        vendor=product.vendor,
        product_type=product.category,
        tags=product.tags_text,
        published="TRUE",
        option1_name="Size",
        image_src=product.image_src,
        image_position="1",
        image_alt_text=product.title,
        seo_title=product.title,
        seo_description=product.seo_description,
    )


def expand_rows(product: GeneratedProduct) -> list[CatalogRow]:
    """Expand a product into one CSV row per variant.

    Only the first row carries the shared product fields.

    Args:
        product: Generated product.

    Returns:
        Rows in variant order.
    """
    return [
        _variant_row(product, index, first_in_group=index == 0)
        for index in range(len(product.variants))
    ]


# ============================================================================
# Serialization
# ============================================================================


def escape_csv_field(value: Any) -> str:
    """Stringify and quote a single CSV field.

    Values containing a comma, a double quote or a newline are wrapped
    in double quotes with inner quotes doubled.

    Args:
        value: Field value. ``None`` becomes an empty string.

    Returns:
        Escaped field text.
    """
    text = "" if value is None else str(value)
    if any(trigger in text for trigger in _QUOTE_TRIGGERS):
        return '"' + text.replace('"', '""') + '"'
    return text


def generate_csv_row(fields: Sequence[Any]) -> str:
    """Escape fields and join them with commas."""
    return ",".join(escape_csv_field(f) for f in fields)


def render_csv(rows: Iterable[CatalogRow]) -> str:
    """Render the header and all rows as one CSV payload.

    Args:
        rows: Catalog rows in output order.

    Returns:
        CSV text, rows joined by newlines.
    """
    lines = [generate_csv_row(CSV_HEADERS)]
    lines.extend(generate_csv_row(astuple(row)) for row in rows)
    return "\n".join(lines)


def write_csv(path: str | Path, rows: Iterable[CatalogRow]) -> Path:
    """Write the CSV payload to ``path`` in one call.

    Args:
        path: Output file path.
        rows: Catalog rows.

    Returns:
        Resolved output path.
    """
    path = Path(path).resolve()
    path.write_text(render_csv(rows), encoding="utf-8")
    return path
