"""Application configuration.

Secrets and paths come from environment variables (or a ``.env`` file).
The catalog shape comes from a JSON document that is loaded once and
passed explicitly to every component.
"""

import json
from pathlib import Path

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings

from productgen.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Process settings loaded from environment variables."""

    # Image generation
    openai_api_key: str | None = None

    # Shopify Admin API
    shopify_store_url: str | None = None
    shopify_access_token: str | None = None
    shopify_api_version: str = "2024-01"

    # Files
    catalog_config_path: str = "config.json"
    catalog_output_path: str = "products.csv"

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# ============================================================================
# Catalog Document
# ============================================================================


class _Document(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Range(_Document):
    """Inclusive integer range."""

    min: int = Field(ge=0)
    max: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "Range":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    def as_tuple(self) -> tuple[int, int]:
        return self.min, self.max


class CollectionConfig(_Document):
    """A named grouping of products sharing a category and tags.

    Attributes:
        name: Display name, interpolated into descriptions.
        category: Category label selecting name templates ("type" in the file).
        tags: Tags applied to every product of the collection.
    """

    name: str = Field(min_length=1)
    category: str = Field(validation_alias=AliasChoices("type", "category"))
    tags: tuple[str, ...] = ()


class VariantsConfig(_Document):
    sizes: tuple[str, ...] = Field(min_length=1)

    @field_validator("sizes")
    @classmethod
    def _unique_sizes(cls, sizes: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(sizes)) != len(sizes):
            raise ValueError("size labels must be unique")
        return sizes


class CatalogConfig(_Document):
    """Catalog generation configuration.

    Attributes:
        product_count: Total number of products to generate.
        collections: Collections iterated in order.
        pricing: Unit price range.
        stock: Per-variant stock quantity range.
        variants: Size labels, one variant per size.
        vendor: Vendor name written on every product.
        use_ai_images: Whether to request generated images.
        enable_shopify_upload: Whether to push products to Shopify.
        image_placeholder: Image reference used when no image is generated.
        seed: Optional random seed for a reproducible run.
    """

    product_count: int = Field(alias="productCount", gt=0)
    collections: tuple[CollectionConfig, ...] = Field(min_length=1)
    pricing: Range
    stock: Range
    variants: VariantsConfig
    vendor: str
    use_ai_images: bool = Field(default=False, alias="useAIImages")
    enable_shopify_upload: bool = Field(default=False, alias="enableShopifyUpload")
    image_placeholder: str = Field(default="", alias="imagePlaceholder")
    seed: int | None = None

    @property
    def sizes(self) -> tuple[str, ...]:
        return self.variants.sizes


def load_catalog_config(path: str | Path) -> CatalogConfig:
    """Load and validate the catalog configuration file.

    Args:
        path: Path to the JSON document.

    Returns:
        Validated, immutable configuration.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(str(path), e.strerror or str(e)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(str(path), f"malformed JSON: {e}") from e

    try:
        return CatalogConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(str(path), str(e)) from e
