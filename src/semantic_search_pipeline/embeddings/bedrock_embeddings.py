"""
Embeddings Module - Single Responsibility: turn canonical content into vectors.

It has ONE job: send one input to the remote model and hand back a
fixed-length float vector. No database logic, no file handling.

The deployment mode (image or text) is chosen at construction time and
decides which request field the input goes under.
"""

from __future__ import annotations

import hashlib
import json
import logging

import boto3
import numpy as np
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from semantic_search_pipeline.core.errors import (
    ConfigurationError,
    DimensionMismatchError,
    RemoteCallError,
)
from semantic_search_pipeline.core.protocols import EmbeddingMode, EmbeddingProvider
from semantic_search_pipeline.schemas.embedding import (
    EmbeddingRequest,
    EmbeddingResponse,
)

logger = logging.getLogger(__name__)


class BedrockEmbeddings:
    """
    Amazon Bedrock embedding provider.

    Uses amazon.titan-embed-image-v1 by default (1024 dimensions).
    The boto3 client is created once and reused for every call;
    credentials come from the standard AWS chain.
    """

    def __init__(
        self,
        model_id: str = "amazon.titan-embed-image-v1",
        dimensions: int = 1024,
        mode: EmbeddingMode = "image",
        client=None,
        region_name: str | None = None,
        timeout: float | None = None,
    ):
        if mode not in ("image", "text"):
            raise ConfigurationError(f"Unknown embedding mode: {mode!r}")
        self.model_id = model_id
        self.mode = mode
        self._dimensions = dimensions
        self._region_name = region_name
        self._timeout = timeout
        self._client = client

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def client(self):
        """Lazily create the bedrock-runtime client."""
        if self._client is None:
            config = Config(read_timeout=self._timeout) if self._timeout else None
            self._client = boto3.client(
                "bedrock-runtime",
                region_name=self._region_name,
                config=config,
            )
        return self._client

    def embed(self, text: str) -> np.ndarray:
        """Generate embedding for a single input (base64 image or raw text)."""
        request = EmbeddingRequest.for_input(text, self.mode, self._dimensions)

        try:
            result = self.client.invoke_model(
                modelId=self.model_id,
                contentType="application/json",
                accept="application/json",
                body=request.to_json(),
            )
            raw = result["body"].read()
        except (BotoCoreError, ClientError) as e:
            raise RemoteCallError(f"Model {self.model_id} invocation failed: {e}") from e

        response = self._parse(raw)
        vector = np.array(response.embedding, dtype=np.float32)

        if len(vector) != self._dimensions:
            raise DimensionMismatchError(self._dimensions, len(vector))

        logger.debug(f"Embedded {len(text)} chars of {self.mode} input with {self.model_id}")
        return vector

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        """Embed each input with its own call; the endpoint takes one input per request."""
        return [self.embed(text) for text in texts]

    def _parse(self, raw: bytes | str) -> EmbeddingResponse:
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise RemoteCallError(f"Model {self.model_id} returned an undecodable body") from e

        try:
            return EmbeddingResponse.model_validate(payload)
        except ValidationError as e:
            message = payload.get("message") if isinstance(payload, dict) else None
            detail = message or "missing embedding"
            raise RemoteCallError(f"Model {self.model_id} returned an error envelope: {detail}") from e


class MockEmbeddings:
    """
    Mock embedding provider for testing without API calls.

    Generates deterministic unit vectors from input hashes.
    NOT for production use - only for testing/development.
    """

    def __init__(self, dimensions: int = 1024):
        self._dimensions = dimensions

    @property
    def dimensions(self) -> int:
        return self._dimensions

    def embed(self, text: str) -> np.ndarray:
        """Generate deterministic pseudo-embedding from input hash."""
        seed = int.from_bytes(hashlib.sha256(text.encode()).digest()[:8], "big")
        vector = np.random.default_rng(seed).standard_normal(self._dimensions)
        return (vector / np.linalg.norm(vector)).astype(np.float32)

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        return [self.embed(text) for text in texts]


def get_embedding_provider(config=None, use_mock: bool | None = None) -> EmbeddingProvider:
    """
    Factory function to get the appropriate embedding provider.

    Args:
        config: PipelineConfig (loaded from env if not provided)
        use_mock: Override config.use_mock_embeddings
    """
    if config is None:
        from semantic_search_pipeline.config import get_config

        config = get_config()

    if use_mock is None:
        use_mock = config.use_mock_embeddings

    if use_mock:
        return MockEmbeddings(dimensions=config.vector_dimension)
    return BedrockEmbeddings(
        model_id=config.model_id,
        dimensions=config.vector_dimension,
        mode=config.embedding_mode,
        region_name=config.aws_region,
        timeout=config.embedding_timeout,
    )
