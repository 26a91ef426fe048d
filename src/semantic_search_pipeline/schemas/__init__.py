"""Wire schemas for external endpoints."""

from semantic_search_pipeline.schemas.embedding import (
    EmbeddingConfig,
    EmbeddingRequest,
    EmbeddingResponse,
)

__all__ = [
    "EmbeddingConfig",
    "EmbeddingRequest",
    "EmbeddingResponse",
]
