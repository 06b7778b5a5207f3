"""Application layer module.

Contains the service that orchestrates generation, image and
upload collaborators.
"""

from productgen.application.generation_service import (
    CatalogGenerationService,
    GenerationResult,
    allocate_quotas,
)

__all__ = [
    "CatalogGenerationService",
    "GenerationResult",
    "allocate_quotas",
]
