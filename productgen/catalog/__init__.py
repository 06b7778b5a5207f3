"""Product Catalog Generation.

Composes synthetic products and exports them as a Shopify
product-import CSV.
"""

from productgen.catalog.export import CSV_HEADERS, expand_rows, render_csv, write_csv
from productgen.catalog.generator import ProductGenerator, generate_handle
from productgen.catalog.models import CatalogRow, GeneratedProduct, ProductDraft, Variant

__all__ = [
    # Models
    "CatalogRow",
    "GeneratedProduct",
    "ProductDraft",
    "Variant",
    # Generator
    "ProductGenerator",
    "generate_handle",
    # Export
    "CSV_HEADERS",
    "expand_rows",
    "render_csv",
    "write_csv",
]
