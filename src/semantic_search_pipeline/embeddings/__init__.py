"""
Embeddings module - image and text embedding generation.

1. Protocol (EmbeddingProvider) defines the interface
2. Production implementation (BedrockEmbeddings)
3. Test double (MockEmbeddings) for fast testing
4. Factory function (get_embedding_provider)
"""

from semantic_search_pipeline.core.protocols import EmbeddingProvider
from semantic_search_pipeline.embeddings.bedrock_embeddings import (
    BedrockEmbeddings,
    MockEmbeddings,
    get_embedding_provider,
)

__all__ = [
    "EmbeddingProvider",
    "BedrockEmbeddings",
    "MockEmbeddings",
    "get_embedding_provider",
]
