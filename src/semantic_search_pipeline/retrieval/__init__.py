"""
Retrieval module - vector persistence and similarity search.

This module provides:
- Document: The document model
- VectorStoreConfig: Configuration for stores
- PgVectorStore: PostgreSQL production store
- InMemoryVectorStore: Testing/development store
- get_vector_store(): Factory function
"""

from semantic_search_pipeline.retrieval.document import Document
from semantic_search_pipeline.retrieval.store import (
    InMemoryVectorStore,
    PgVectorStore,
    VectorStoreConfig,
    get_vector_store,
)

__all__ = [
    # Document
    "Document",
    # Config
    "VectorStoreConfig",
    # Implementations
    "PgVectorStore",
    "InMemoryVectorStore",
    # Factory
    "get_vector_store",
]
