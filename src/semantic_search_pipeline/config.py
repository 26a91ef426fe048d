"""
Pipeline Configuration

Loads store, embedding and search settings from environment variables.
Defaults match a local Postgres with pgvector and the Titan multimodal
embedding model.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import quote

from semantic_search_pipeline.core.errors import ConfigurationError

_TRUTHY = ("true", "1", "yes")


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str) -> float | None:
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


@dataclass
class PipelineConfig:
    """Configuration for the ingestion and query pipelines.

    Environment Variables:
        PGHOST, PGPORT, PGUSER, PGPASSWORD, PGDATABASE, PGSSLMODE:
            Postgres connection parts (default: postgres@localhost:5432/postgres)
        DATABASE_URL: Full connection string, overrides the parts above
        VECTOR_TABLE: Table holding the embeddings (default: embeddings)
        VECTOR_DIMENSION: Embedding length (default: 1024)
        SEARCH_K: Results per query (default: 5)
        EMBEDDING_MODEL_ID: Bedrock model id (default: amazon.titan-embed-image-v1)
        EMBEDDING_MODE: "image" or "text" (default: image)
        AWS_REGION: Bedrock region (default: boto3 credential chain)
        EMBEDDING_TIMEOUT: Read timeout in seconds per remote call (optional)
        SOURCE_DIR: Directory walked by ingestion (default: sample_images)
        USE_MOCK_EMBEDDINGS: Use hash-based embeddings, no AWS calls (default: false)
        USE_POSTGRES: Use pgvector; false selects the in-memory store (default: true)
        LOG_LEVEL: Logging level for the CLI (default: INFO)
    """

    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "postgres"
    db_sslmode: str = "disable"
    database_url: str | None = None
    table_name: str = "embeddings"

    vector_dimension: int = 1024
    search_k: int = 5

    model_id: str = "amazon.titan-embed-image-v1"
    embedding_mode: str = "image"
    aws_region: str | None = None
    embedding_timeout: float | None = None

    source_dir: str = "sample_images"
    use_mock_embeddings: bool = False
    use_postgres: bool = True
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.vector_dimension <= 0:
            raise ConfigurationError(
                f"vector_dimension must be positive, got {self.vector_dimension}"
            )
        if self.search_k <= 0:
            raise ConfigurationError(f"search_k must be positive, got {self.search_k}")
        if self.embedding_mode not in ("image", "text"):
            raise ConfigurationError(
                f"embedding_mode must be 'image' or 'text', got {self.embedding_mode!r}"
            )

    @property
    def connection_string(self) -> str:
        """Postgres URL; the password is URL-quoted."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.db_user}:{quote(self.db_password, safe='')}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?sslmode={self.db_sslmode}"
        )

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        """Load config from environment variables."""
        return cls(
            db_host=os.environ.get("PGHOST", "localhost"),
            db_port=_env_int("PGPORT", 5432),
            db_user=os.environ.get("PGUSER", "postgres"),
            db_password=os.environ.get("PGPASSWORD", "postgres"),
            db_name=os.environ.get("PGDATABASE", "postgres"),
            db_sslmode=os.environ.get("PGSSLMODE", "disable"),
            database_url=os.environ.get("DATABASE_URL") or None,
            table_name=os.environ.get("VECTOR_TABLE", "embeddings"),
            vector_dimension=_env_int("VECTOR_DIMENSION", 1024),
            search_k=_env_int("SEARCH_K", 5),
            model_id=os.environ.get("EMBEDDING_MODEL_ID", "amazon.titan-embed-image-v1"),
            embedding_mode=os.environ.get("EMBEDDING_MODE", "image").lower(),
            aws_region=os.environ.get("AWS_REGION") or None,
            embedding_timeout=_env_float("EMBEDDING_TIMEOUT"),
            source_dir=os.environ.get("SOURCE_DIR", "sample_images"),
            use_mock_embeddings=_env_flag("USE_MOCK_EMBEDDINGS", "false"),
            use_postgres=_env_flag("USE_POSTGRES", "true"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )


# Global config singleton
_config: PipelineConfig | None = None


def get_config() -> PipelineConfig:
    """Get the global pipeline config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = PipelineConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
