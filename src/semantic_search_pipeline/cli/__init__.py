"""
CLI module - command-line interface.

Provides entry points for:
- Loading a directory of files into the vector store
- Interactive similarity search
"""

from semantic_search_pipeline.cli.commands import (
    ingest_main,
    main,
    query_main,
    run_ingest_cli,
    run_query_cli,
)

__all__ = [
    "main",
    "ingest_main",
    "query_main",
    "run_ingest_cli",
    "run_query_cli",
]
