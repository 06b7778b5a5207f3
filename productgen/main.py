"""Product catalog generator entry point.

Loads the catalog configuration, generates products, writes the
Shopify import CSV and prints a summary.

Usage:
    productgen
    python -m productgen

Environment:
    CATALOG_CONFIG_PATH, CATALOG_OUTPUT_PATH, OPENAI_API_KEY,
    SHOPIFY_STORE_URL, SHOPIFY_ACCESS_TOKEN, LOG_LEVEL
"""

import asyncio
import logging
import sys

import structlog

from productgen.application.generation_service import (
    CatalogGenerationService,
    GenerationResult,
)
from productgen.catalog.export import write_csv
from productgen.infrastructure.config import Settings, load_catalog_config
from productgen.infrastructure.image_client import OpenAIImageProvider
from productgen.infrastructure.shopify_client import ShopifyUploader

logger = structlog.get_logger()


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog over stdlib logging on stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


async def main(settings: Settings | None = None) -> GenerationResult:
    """Run one generation pass.

    Args:
        settings: Process settings. Loaded from the environment if omitted.

    Returns:
        Generation result.
    """
    settings = settings or Settings()
    config = load_catalog_config(settings.catalog_config_path)

    print("=" * 60)
    print("Shopify Product Generator")
    print("=" * 60)
    print(f"Products: {config.product_count}")
    print(f"AI images: {config.use_ai_images}")
    print(f"Shopify upload: {config.enable_shopify_upload}")
    print()

    image_provider = OpenAIImageProvider(config, api_key=settings.openai_api_key)
    uploader = ShopifyUploader(
        config,
        store_url=settings.shopify_store_url,
        access_token=settings.shopify_access_token,
        api_version=settings.shopify_api_version,
    )
    service = CatalogGenerationService(config, image_provider, uploader)

    try:
        result = await service.run()
    finally:
        await image_provider.close()
        await uploader.close()

    output_path = write_csv(settings.catalog_output_path, result.rows)

    print(f"Generated {result.variant_count} product variants "
          f"({result.product_count} unique products)")
    print(f"CSV file: {output_path}")
    print()
    print("Summary:")
    print(f"  - Total products: {result.product_count}")
    print(f"  - Total variants: {result.variant_count}")
    print(f"  - Collections: {result.collections_used}")
    print(f"  - Sizes per product: {result.sizes_per_product}")
    print("=" * 60)

    return result


def run() -> None:
    """Console script entry point."""
    try:
        settings = Settings()
        configure_logging(settings.log_level)
        asyncio.run(main(settings))
    except Exception as e:
        print(f"Error generating products: {e}", file=sys.stderr)
        sys.exit(1)
