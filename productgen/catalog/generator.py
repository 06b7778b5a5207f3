"""Synthetic product generator.

Composes product titles, descriptions, handles, prices and size
variants from fixed word pools. All randomness goes through one
``random.Random`` so a configured seed makes a run reproducible.
"""

import random
import re
from typing import Sequence, TypeVar

from productgen.catalog.models import GeneratedProduct, ProductDraft, Variant
from productgen.catalog.templates import (
    ADJECTIVES,
    DEFAULT_CATEGORY,
    DESCRIPTION_TEMPLATES,
    ITEMS,
    PRODUCT_TEMPLATES,
)
from productgen.infrastructure.config import CatalogConfig, CollectionConfig

T = TypeVar("T")

MAX_SKU_LENGTH = 30

# Variant shipping weight range in grams
GRAMS_RANGE = (200, 800)

# Compare-at price markup over unit price
COMPARE_AT_MARKUP_RANGE = (10, 30)

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


# ============================================================================
# Random Selection
# ============================================================================


def random_in_range(rng: random.Random, minimum: int, maximum: int) -> int:
    """Pick a uniformly random integer in ``[minimum, maximum]``."""
    return rng.randint(minimum, maximum)


def random_element(rng: random.Random, items: Sequence[T]) -> T:
    """Pick a uniformly random element of a non-empty sequence."""
    return rng.choice(items)


# ============================================================================
# Names, Descriptions, Handles
# ============================================================================


def generate_product_name(rng: random.Random, category: str) -> str:
    """Generate a product title for a collection category.

    Unknown categories use the default category's templates and items.

    Args:
        rng: Random number generator.
        category: Collection category label.

    Returns:
        Product title.
    """
    templates = PRODUCT_TEMPLATES.get(category, PRODUCT_TEMPLATES[DEFAULT_CATEGORY])
    items = ITEMS.get(category, ITEMS[DEFAULT_CATEGORY])

    template = random_element(rng, templates)
    adjective = random_element(rng, ADJECTIVES)
    item = random_element(rng, items)

    return template.replace("{adjective}", adjective).replace("{item}", item)


def generate_description(rng: random.Random, title: str, collection_name: str) -> str:
    """Pick one of the description paragraphs for a product.

    Args:
        rng: Random number generator.
        title: Product title.
        collection_name: Display name of the product's collection.

    Returns:
        Description paragraph.
    """
    template = random_element(rng, DESCRIPTION_TEMPLATES)
    return template.format(title=title, collection=collection_name)


def generate_handle(title: str) -> str:
    """Turn a title into a lowercase, hyphenated catalog handle.

    Args:
        title: Product title.

    Returns:
        Handle containing only ``[a-z0-9]`` separated by single hyphens.
    """
    return _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")


def make_sku(handle: str, size: str) -> str:
    """Build a variant SKU from handle and size, capped at 30 characters.

    Long handles are shortened before the size suffix so every size of
    a product keeps a distinct SKU.
    """
    sku = f"{handle.upper()}-{size}"
    if len(sku) <= MAX_SKU_LENGTH:
        return sku

    keep = MAX_SKU_LENGTH - len(size) - 1
    if keep <= 0:
        return sku[:MAX_SKU_LENGTH]
    return f"{handle.upper()[:keep]}-{size}"


# ============================================================================
# Product Generator
# ============================================================================


class ProductGenerator:
    """Generates products for the collections of a catalog configuration.

    Example usage:
        generator = ProductGenerator(config)
        draft = generator.compose(config.collections[0])
        product = generator.build_product(draft, image_src)
    """

    def __init__(self, config: CatalogConfig, rng: random.Random | None = None) -> None:
        """Initialize generator with configuration.

        Args:
            config: Catalog configuration.
            rng: Random number generator. Seeded from ``config.seed`` if omitted.
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)

    def compose(self, collection: CollectionConfig) -> ProductDraft:
        """Compose title, handle, description and price for one product.

        Args:
            collection: Collection the product belongs to.

        Returns:
            Product draft.
        """
        title = generate_product_name(self.rng, collection.category)
        description = generate_description(self.rng, title, collection.name)
        price = random_in_range(self.rng, *self.config.pricing.as_tuple())

        return ProductDraft(
            title=title,
            handle=generate_handle(title),
            description=description,
            category=collection.category,
            collection_name=collection.name,
            tags=tuple(collection.tags),
            price=price,
        )

    def generate_variants(self, handle: str, price: int) -> list[Variant]:
        """Generate one variant per configured size, in configured order.

        Args:
            handle: Product handle.
            price: Product unit price.

        Returns:
            Variants, one per size.
        """
        variants = []
        for size in self.config.sizes:
            variants.append(
                Variant(
                    size=size,
                    sku=make_sku(handle, size),
                    price=price,
                    compare_at_price=price + random_in_range(self.rng, *COMPARE_AT_MARKUP_RANGE),
                    grams=random_in_range(self.rng, *GRAMS_RANGE),
                    inventory_quantity=random_in_range(self.rng, *self.config.stock.as_tuple()),
                )
            )
        return variants

    def build_product(self, draft: ProductDraft, image_src: str) -> GeneratedProduct:
        """Attach image and variants to a draft.

        Args:
            draft: Composed product draft.
            image_src: Image reference shared by all variants.

        Returns:
            Generated product.
        """
        return GeneratedProduct(
            title=draft.title,
            handle=draft.handle,
            description=draft.description,
            category=draft.category,
            collection_name=draft.collection_name,
            tags=draft.tags,
            price=draft.price,
            vendor=self.config.vendor,
            image_src=image_src,
            variants=tuple(self.generate_variants(draft.handle, draft.price)),
        )
