"""Product image generation.

Requests one synthetic product photograph per product from the OpenAI
Images API. Any failure falls back to the configured placeholder.
"""

from typing import Protocol

import structlog
from openai import AsyncOpenAI

from productgen.infrastructure.config import CatalogConfig

logger = structlog.get_logger()

IMAGE_MODEL = "dall-e-3"
IMAGE_SIZE = "1024x1024"

PROMPT_TEMPLATE = (
    "Professional product photography of {title} displayed on a headless "
    "mannequin. {description}. Warm beige background, soft studio lighting "
    "with natural shadows, high resolution, minimalist warm aesthetic."
)


class ImageProvider(Protocol):
    """Produces an image reference for a product."""

    async def generate_image(self, title: str, description: str) -> str:
        ...


class OpenAIImageProvider:
    """Image provider backed by the OpenAI Images API.

    The client is created on first use, so a run with AI images
    disabled never constructs it.
    """

    def __init__(
        self,
        config: CatalogConfig,
        api_key: str | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Initialize image provider.

        Args:
            config: Catalog configuration (flag and placeholder).
            api_key: OpenAI API key.
            client: Preconfigured client, mainly for tests.
        """
        self.config = config
        self.api_key = api_key
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def close(self) -> None:
        """Close the underlying client."""
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def generate_image(self, title: str, description: str) -> str:
        """Generate an image for a product.

        Args:
            title: Product title.
            description: Product description.

        Returns:
            Image URL, or the placeholder when disabled or on failure.
        """
        if not self.config.use_ai_images:
            return self.config.image_placeholder

        logger.info("Generating AI image", title=title)
        try:
            client = self._get_client()
            response = await client.images.generate(
                model=IMAGE_MODEL,
                prompt=PROMPT_TEMPLATE.format(title=title, description=description),
                n=1,
                size=IMAGE_SIZE,
            )
            url = response.data[0].url if response.data else None
            if not url:
                raise ValueError("image response contained no URL")
            return url
        except Exception as e:
            logger.warning(
                "Failed to generate image",
                title=title,
                error=str(e),
            )
            return self.config.image_placeholder
