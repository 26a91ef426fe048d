import pytest

from semantic_search_pipeline.config import reset_config

PIPELINE_ENV_VARS = [
    "PGHOST",
    "PGPORT",
    "PGUSER",
    "PGPASSWORD",
    "PGDATABASE",
    "PGSSLMODE",
    "DATABASE_URL",
    "VECTOR_TABLE",
    "VECTOR_DIMENSION",
    "SEARCH_K",
    "EMBEDDING_MODEL_ID",
    "EMBEDDING_MODE",
    "AWS_REGION",
    "EMBEDDING_TIMEOUT",
    "SOURCE_DIR",
    "USE_MOCK_EMBEDDINGS",
    "USE_POSTGRES",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_pipeline_env(monkeypatch):
    """Start every test from default config, unaffected by the host environment."""
    for name in PIPELINE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
