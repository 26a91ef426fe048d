"""
Core module - shared protocols, result types and error kinds.

USAGE:
------
from semantic_search_pipeline.core import VectorStore, EmbeddingProvider

class MyVectorStore:
    '''Implements VectorStore protocol.'''
    ...
"""

from semantic_search_pipeline.core.errors import (
    ConfigurationError,
    DimensionMismatchError,
    PipelineError,
    RemoteCallError,
    SourceReadError,
    StoreConnectionError,
    StoreReadError,
    StoreWriteError,
)
from semantic_search_pipeline.core.protocols import (
    # Protocols
    EmbeddingProvider,
    VectorStore,
    # Types
    EmbeddingMode,
    SearchResult,
)

__all__ = [
    # Protocols
    "EmbeddingProvider",
    "VectorStore",
    # Types
    "EmbeddingMode",
    "SearchResult",
    # Errors
    "PipelineError",
    "ConfigurationError",
    "SourceReadError",
    "RemoteCallError",
    "DimensionMismatchError",
    "StoreConnectionError",
    "StoreWriteError",
    "StoreReadError",
]
