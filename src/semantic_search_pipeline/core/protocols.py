"""
Core protocols defining contracts for the search pipeline.

Every infrastructure component implements one of these protocols,
so the pipelines can be wired with production backends or test
doubles without changing a line of orchestration code.

PATTERN:
- Protocol defines the contract
- Production implementation (BedrockEmbeddings, PgVectorStore)
- Test double (MockEmbeddings, InMemoryVectorStore)
- Factory function for instantiation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal, Protocol, Sequence, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from semantic_search_pipeline.retrieval.document import Document


# Which kind of input a deployment embeds. Fixed per process, never sniffed.
EmbeddingMode = Literal["image", "text"]


# ---------------------------------------------------------------------------
# EMBEDDING PROVIDER PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class EmbeddingProvider(Protocol):
    """
    Contract for embedding generation.

    Implementations:
    - BedrockEmbeddings (production)
    - MockEmbeddings (testing)
    """

    @property
    def dimensions(self) -> int:
        """Length of every vector this provider returns."""
        ...

    def embed(self, text: str) -> np.ndarray:
        """Generate embedding for a single canonical content string."""
        ...

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        """Generate embeddings for multiple inputs."""
        ...


# ---------------------------------------------------------------------------
# VECTOR STORE PROTOCOL
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SearchResult:
    """
    A retrieved document with its cosine distance to the query.

    The distance is whatever the store reports; similarity is derived
    as ``1 - distance`` and is only meaningful for cosine distance.
    """

    metadata: dict[str, Any]
    distance: float
    content: str = field(default="", repr=False)

    @property
    def source(self) -> Any:
        return self.metadata.get("source")

    @property
    def similarity(self) -> float:
        return 1 - self.distance


@runtime_checkable
class VectorStore(Protocol):
    """
    Contract for vector persistence and similarity search.

    Implementations:
    - PgVectorStore (production with PostgreSQL)
    - InMemoryVectorStore (testing/development)
    """

    def connect(self) -> None:
        """Establish connection to the store."""
        ...

    def close(self) -> None:
        """Close connection to the store."""
        ...

    def insert(self, documents: Sequence[Document]) -> list[Document]:
        """Embed (where needed) and persist documents as one logical write."""
        ...

    def similarity_search(self, query: str, k: int = 5) -> list[SearchResult]:
        """Return the k nearest documents to the embedded query, closest first."""
        ...

    def search_by_vector(self, vector: Sequence[float], k: int = 5) -> list[SearchResult]:
        """Return the k nearest documents to a precomputed vector, closest first."""
        ...
