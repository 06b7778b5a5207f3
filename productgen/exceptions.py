"""Generator exceptions.

Configuration errors are fatal and propagate to the entry point.
Upload errors are raised inside the Shopify client and downgraded
to a logged warning there.
"""

from typing import Any


class ProductgenError(Exception):
    """Base class for all generator exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize generator error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ProductgenError):
    """Raised when the catalog configuration cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Invalid configuration file '{path}': {reason}",
            details={"path": path, "reason": reason},
        )


class ShopifyUploadError(ProductgenError):
    """Raised when the Shopify Admin API rejects or fails a product upload."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(
            message,
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body
