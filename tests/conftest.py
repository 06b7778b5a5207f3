"""Shared fixtures for generator tests."""

import random

import pytest

from productgen.catalog.generator import ProductGenerator
from productgen.infrastructure.config import CatalogConfig

PLACEHOLDER = "https://placehold.co/1024x1024"


def make_config(**overrides) -> CatalogConfig:
    """Build a catalog configuration from the on-disk field names."""
    data = {
        "productCount": 10,
        "collections": [
            {"name": "Summer Collection", "type": "Apparel", "tags": ["summer", "apparel"]},
            {"name": "Winter Essentials", "type": "Apparel", "tags": ["winter"]},
            {"name": "Everyday Accessories", "type": "Accessories", "tags": ["accessories"]},
        ],
        "pricing": {"min": 25, "max": 150},
        "stock": {"min": 10, "max": 100},
        "variants": {"sizes": ["XS", "S", "M", "L", "XL"]},
        "vendor": "Demo Apparel Co",
        "useAIImages": False,
        "enableShopifyUpload": False,
        "imagePlaceholder": PLACEHOLDER,
        "seed": 42,
    }
    data.update(overrides)
    return CatalogConfig.model_validate(data)


@pytest.fixture
def catalog_config() -> CatalogConfig:
    """Default catalog configuration."""
    return make_config()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator."""
    return random.Random(1234)


@pytest.fixture
def generator(catalog_config: CatalogConfig) -> ProductGenerator:
    """Product generator over the default configuration."""
    return ProductGenerator(catalog_config)


@pytest.fixture
def config_factory():
    """Factory building configurations with overridden document fields."""
    return make_config
