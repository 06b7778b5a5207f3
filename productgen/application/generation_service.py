"""Catalog generation service.

Drives one forward pass over the configured collections: composes each
product, requests its image, expands its variant rows and optionally
uploads it, strictly one product at a time.
"""

import math
from dataclasses import dataclass, field

import structlog

from productgen.catalog.export import expand_rows, render_csv
from productgen.catalog.generator import ProductGenerator
from productgen.catalog.models import CatalogRow, GeneratedProduct
from productgen.infrastructure.config import CatalogConfig, CollectionConfig
from productgen.infrastructure.image_client import ImageProvider
from productgen.infrastructure.shopify_client import CatalogUploader

logger = structlog.get_logger()


def allocate_quotas(total: int, collection_count: int) -> list[int]:
    """Split a product count across collections in order.

    Each collection gets ``ceil(total / collection_count)`` products
    until the total is reached; collections past that point get none.

    Args:
        total: Target number of products.
        collection_count: Number of collections.

    Returns:
        Non-zero product counts for the leading collections.
    """
    if total <= 0 or collection_count <= 0:
        return []

    per_collection = math.ceil(total / collection_count)
    quotas: list[int] = []
    remaining = total
    for _ in range(collection_count):
        if remaining <= 0:
            break
        count = min(per_collection, remaining)
        quotas.append(count)
        remaining -= count
    return quotas


@dataclass
class GenerationResult:
    """Outcome of a generation run.

    Attributes:
        products: Generated products in order.
        rows: CSV rows for all products, grouped by product.
        collections_used: Number of collections that received products.
        sizes_per_product: Number of configured sizes.
    """

    products: list[GeneratedProduct] = field(default_factory=list)
    rows: list[CatalogRow] = field(default_factory=list)
    collections_used: int = 0
    sizes_per_product: int = 0

    @property
    def product_count(self) -> int:
        return len(self.products)

    @property
    def variant_count(self) -> int:
        return len(self.rows)

    def to_csv(self) -> str:
        """Render all rows as CSV text."""
        return render_csv(self.rows)

    def summary(self) -> dict[str, int]:
        return {
            "products": self.product_count,
            "variants": self.variant_count,
            "collections": self.collections_used,
            "sizes_per_product": self.sizes_per_product,
        }


class CatalogGenerationService:
    """Orchestrates product generation for a catalog configuration.

    Image generation and upload are injected collaborators so they can
    be replaced in tests.
    """

    def __init__(
        self,
        config: CatalogConfig,
        image_provider: ImageProvider,
        uploader: CatalogUploader,
        generator: ProductGenerator | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            config: Catalog configuration.
            image_provider: Produces one image reference per product.
            uploader: Receives each product once, after its rows are built.
            generator: Product generator. Built from ``config`` if omitted.
        """
        self.config = config
        self.image_provider = image_provider
        self.uploader = uploader
        self.generator = generator or ProductGenerator(config)

    async def generate_product(self, collection: CollectionConfig) -> GeneratedProduct:
        """Generate one product for a collection, including its image."""
        draft = self.generator.compose(collection)
        image_src = await self.image_provider.generate_image(draft.title, draft.description)
        return self.generator.build_product(draft, image_src)

    async def run(self) -> GenerationResult:
        """Generate all products.

        Returns:
            Generated products and their CSV rows.
        """
        collections = self.config.collections
        quotas = allocate_quotas(self.config.product_count, len(collections))
        result = GenerationResult(sizes_per_product=len(self.config.sizes))

        for collection, count in zip(collections, quotas):
            logger.info(
                "Generating products for collection",
                collection=collection.name,
                count=count,
            )
            result.collections_used += 1

            for _ in range(count):
                product = await self.generate_product(collection)
                result.products.append(product)
                result.rows.extend(expand_rows(product))
                await self.uploader.upload_product(product)

        logger.info(
            "Generation complete",
            products=result.product_count,
            variants=result.variant_count,
        )
        return result
