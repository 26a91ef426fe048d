"""
Document model for the retrieval system.

Single responsibility: Define the unit that is embedded, stored and
retrieved.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

import numpy as np


@dataclass(frozen=True)
class Document:
    """
    Canonical content plus provenance metadata and, once computed, its embedding.

    ``content`` is base64 of the source bytes for images and the raw text
    otherwise. ``metadata["source"]`` names the file path or URL it came from.
    Documents are immutable; ``with_embedding`` returns a new one.
    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    embedding: np.ndarray | None = field(default=None, compare=False, repr=False)

    @property
    def source(self) -> Any:
        return self.metadata.get("source")

    def with_embedding(self, embedding: np.ndarray) -> "Document":
        return replace(self, embedding=np.asarray(embedding, dtype=np.float32))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization (embedding omitted)."""
        return {
            "content": self.content,
            "metadata": self.metadata,
        }
