"""
Pipelines - ingestion (write path) and query (read path).

Both take an explicitly constructed VectorStore; neither owns it.
"""

from semantic_search_pipeline.pipelines.content import (
    encode_bytes,
    fetch_url,
    load_query_content,
    read_file,
)
from semantic_search_pipeline.pipelines.ingestion import (
    IngestReport,
    ingest_all,
    ingest_file,
    iter_files,
    load_document,
)
from semantic_search_pipeline.pipelines.query import (
    format_result,
    run_query,
    run_query_loop,
)

__all__ = [
    # Content
    "encode_bytes",
    "fetch_url",
    "load_query_content",
    "read_file",
    # Ingestion
    "IngestReport",
    "ingest_all",
    "ingest_file",
    "iter_files",
    "load_document",
    # Query
    "format_result",
    "run_query",
    "run_query_loop",
]
