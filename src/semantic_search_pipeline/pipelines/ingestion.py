"""
Ingestion pipeline - walk a directory and load every file into the store.

Each file becomes one Document whose ``metadata.source`` is its path.
By default the first failure aborts the run. ``continue_on_error=True``
records per-file failures in the report and keeps going instead.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterator

from semantic_search_pipeline.core.errors import PipelineError, SourceReadError
from semantic_search_pipeline.core.protocols import EmbeddingMode, VectorStore
from semantic_search_pipeline.pipelines.content import encode_bytes, read_file
from semantic_search_pipeline.retrieval.document import Document

logger = logging.getLogger(__name__)


@dataclass
class IngestReport:
    """Outcome of one ingestion run."""

    ingested: list[str] = field(default_factory=list)
    failed: list[tuple[str, PipelineError]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.ingested) + len(self.failed)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed


def iter_files(root_path: str) -> Iterator[str]:
    """Yield every regular file under ``root_path`` in walk order."""
    if not os.path.isdir(root_path):
        raise SourceReadError(f"Source directory does not exist: {root_path}")

    def _raise(err: OSError) -> None:
        raise SourceReadError(f"Could not walk {err.filename}: {err}") from err

    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            path = os.path.join(dirpath, name)
            if os.path.isfile(path):
                yield path


def load_document(path: str, mode: EmbeddingMode) -> Document:
    """Read one file into a Document with its path as provenance."""
    content = encode_bytes(read_file(path), mode)
    return Document(content=content, metadata={"source": path})


def ingest_file(path: str, store: VectorStore, mode: EmbeddingMode) -> Document:
    doc = load_document(path, mode)
    stored = store.insert([doc])
    logger.info(f"Loaded {path} into vector store")
    return stored[0]


def ingest_all(
    root_path: str,
    store: VectorStore,
    mode: EmbeddingMode = "image",
    continue_on_error: bool = False,
) -> IngestReport:
    """
    Ingest every file under ``root_path``.

    Args:
        root_path: Directory to walk recursively
        store: Vector store receiving the documents
        mode: "image" (base64 content) or "text" (UTF-8 content)
        continue_on_error: Record per-file failures instead of aborting

    Returns:
        IngestReport listing ingested paths and per-file failures
    """
    report = IngestReport()

    for path in iter_files(root_path):
        try:
            ingest_file(path, store, mode)
        except PipelineError as e:
            if not continue_on_error:
                raise
            logger.warning(f"Skipping {path}: {e}")
            report.failed.append((path, e))
            continue
        report.ingested.append(path)

    logger.info(
        f"Ingested {len(report.ingested)}/{report.total} file(s) from {root_path}"
    )
    return report
