"""Shopify Admin API client for uploading generated products.

Each product is created with a single POST to the REST products
endpoint. Failures are logged and never interrupt the run.
"""

from typing import Any, Protocol

import httpx
import structlog

from productgen.catalog.models import GeneratedProduct
from productgen.exceptions import ShopifyUploadError
from productgen.infrastructure.config import CatalogConfig

logger = structlog.get_logger()


class CatalogUploader(Protocol):
    """Pushes a generated product to a remote catalog."""

    async def upload_product(self, product: GeneratedProduct) -> None:
        ...


def build_product_payload(product: GeneratedProduct) -> dict[str, Any]:
    """Build the Shopify product creation body.

    Args:
        product: Generated product with variants.

    Returns:
        JSON body for ``POST products.json``.
    """
    return {
        "product": {
            "title": product.title,
            "body_html": product.description,
            "vendor": product.vendor,
            "product_type": product.category,
            "tags": product.tags_text,
            "status": "active",
            "images": [{"src": product.image_src}],
            "variants": [
                {
                    "option1": v.size,
                    "price": v.price,
                    "sku": v.sku,
                    "inventory_management": "shopify",
                    "inventory_quantity": v.inventory_quantity,
                    "requires_shipping": True,
                    "taxable": True,
                }
                for v in product.variants
            ],
            "options": [{"name": "Size", "values": product.sizes}],
        }
    }


class ShopifyUploader:
    """Uploads products through the Shopify Admin REST API."""

    def __init__(
        self,
        config: CatalogConfig,
        store_url: str | None = None,
        access_token: str | None = None,
        api_version: str = "2024-01",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize uploader.

        Args:
            config: Catalog configuration (upload flag).
            store_url: Shop domain, e.g. ``my-shop.myshopify.com``.
            access_token: Admin API access token.
            api_version: Admin API version.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config
        self.store_url = store_url
        self.access_token = access_token
        self.api_version = api_version
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        host = (self.store_url or "").removeprefix("https://").removeprefix("http://").rstrip("/")
        return f"https://{host}/admin/api/{self.api_version}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if not self.store_url or not self.access_token:
            raise ShopifyUploadError(
                "SHOPIFY_STORE_URL and SHOPIFY_ACCESS_TOKEN must be set"
            )
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={
                    "X-Shopify-Access-Token": self.access_token,
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def create_product(self, product: GeneratedProduct) -> dict[str, Any]:
        """Create a product in the store.

        Args:
            product: Generated product.

        Returns:
            Created product object from the response.

        Raises:
            ShopifyUploadError: On transport error or non-2xx response.
        """
        client = await self._get_client()
        try:
            response = await client.post("/products.json", json=build_product_payload(product))
        except httpx.HTTPError as e:
            raise ShopifyUploadError(f"Request failed: {e}") from e

        if response.status_code >= 400:
            try:
                body: Any = response.json()
            except ValueError:
                body = response.text or None
            raise ShopifyUploadError(
                f"Shopify responded with HTTP {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        return response.json()["product"]

    async def upload_product(self, product: GeneratedProduct) -> None:
        """Upload a product, logging the outcome.

        No-op when upload is disabled. Never raises.

        Args:
            product: Generated product.
        """
        if not self.config.enable_shopify_upload:
            return

        logger.info("Uploading product to Shopify", title=product.title)
        try:
            created = await self.create_product(product)
            logger.info(
                "Uploaded product",
                title=product.title,
                product_id=created.get("id"),
            )
        except ShopifyUploadError as e:
            logger.error(
                "Failed to upload product to Shopify",
                title=product.title,
                error=e.message,
                status_code=e.status_code,
                details=e.body,
            )
        except Exception as e:
            logger.error(
                "Failed to upload product to Shopify",
                title=product.title,
                error=str(e),
            )
