"""In-memory models for generated products.

Products and variants are immutable once built. They live for a
single iteration of the generation loop and are consumed by the row
expander and, when enabled, the Shopify uploader.
"""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ProductDraft:
    """Composed listing text and pricing, before image and variants.

    Attributes:
        title: Product title.
        handle: URL-safe slug derived from the title.
        description: Paragraph description.
        category: Collection category label (Shopify product type).
        collection_name: Name of the collection the product belongs to.
        tags: Collection tags.
        price: Unit price in whole currency units.
    """

    title: str
    handle: str
    description: str
    category: str
    collection_name: str
    tags: tuple[str, ...]
    price: int

    @property
    def tags_text(self) -> str:
        """Tags as written to the CSV and sent to Shopify."""
        return ", ".join(self.tags)


@dataclass(frozen=True)
class Variant:
    """One size-specific inventory line of a product.

    Attributes:
        size: Size label (Shopify option1 value).
        sku: Stock keeping unit, at most 30 characters.
        price: Unit price.
        compare_at_price: Reference price shown struck through.
        grams: Shipping weight in grams.
        inventory_quantity: Stock on hand.
    """

    size: str
    sku: str
    price: int
    compare_at_price: int
    grams: int
    inventory_quantity: int


@dataclass(frozen=True)
class GeneratedProduct:
    """A fully generated product with its size variants."""

    title: str
    handle: str
    description: str
    category: str
    collection_name: str
    tags: tuple[str, ...]
    price: int
    vendor: str
    image_src: str
    variants: tuple[Variant, ...] = field(default_factory=tuple)

    def __repr__(self) -> str:
        """String representation."""
        return f"<GeneratedProduct(handle={self.handle}, variants={len(self.variants)})>"

    @property
    def tags_text(self) -> str:
        return ", ".join(self.tags)

    @property
    def sizes(self) -> list[str]:
        return [v.size for v in self.variants]

    @property
    def cost_per_item(self) -> Decimal:
        """Unit cost at 40% of price, rounded to cents."""
        return (Decimal(self.price) * Decimal("0.4")).quantize(Decimal("0.01"))

    @property
    def seo_description(self) -> str:
        return self.description[:160]


@dataclass(frozen=True)
class CatalogRow:
    """One line of the Shopify product-import CSV.

    The first row of a product's variant group carries the shared
    product fields; continuation rows leave them empty so Shopify
    attaches them to the preceding product by handle.
    """

    handle: str
    title: str = ""
    body_html: str = ""
    vendor: str = ""
    product_type: str = ""
    tags: str = ""
    published: str = ""
    option1_name: str = ""
    option1_value: str = ""
    option2_name: str = ""
    option2_value: str = ""
    option3_name: str = ""
    option3_value: str = ""
    variant_sku: str = ""
    variant_grams: int | None = None
    variant_inventory_tracker: str = ""
    variant_inventory_qty: int | None = None
    variant_inventory_policy: str = ""
    variant_fulfillment_service: str = ""
    variant_price: int | None = None
    variant_compare_at_price: int | None = None
    variant_requires_shipping: str = ""
    variant_taxable: str = ""
    variant_barcode: str = ""
    image_src: str = ""
    image_position: str = ""
    image_alt_text: str = ""
    gift_card: str = ""
    seo_title: str = ""
    seo_description: str = ""
    variant_image: str = ""
    variant_weight_unit: str = ""
    variant_tax_code: str = ""
    cost_per_item: Decimal | None = None
    status: str = ""
