"""
Query pipeline - interactive nearest-neighbor lookup.

Each input line is converted to canonical content, searched, and the
results are printed most similar first. Errors are not caught here:
the caller decides that a failed query ends the session.
"""

from __future__ import annotations

import logging
from typing import Callable

import httpx

from semantic_search_pipeline.core.protocols import EmbeddingMode, SearchResult, VectorStore
from semantic_search_pipeline.pipelines.content import load_query_content

logger = logging.getLogger(__name__)

IMAGE_PROMPT = "\nEnter image source: "
TEXT_PROMPT = "\nEnter your message: "


def default_prompt(mode: EmbeddingMode) -> str:
    return IMAGE_PROMPT if mode == "image" else TEXT_PROMPT


def format_result(result: SearchResult) -> str:
    return f"[search result with score]: {result.source} {result.similarity}"


def run_query(
    line: str,
    store: VectorStore,
    mode: EmbeddingMode,
    k: int,
    http_client: httpx.Client | None = None,
) -> list[SearchResult]:
    """Search the store for one already-trimmed query line."""
    content = load_query_content(line, mode, http_client)
    return store.similarity_search(content, k)


def run_query_loop(
    store: VectorStore,
    mode: EmbeddingMode = "image",
    k: int = 5,
    prompt_text: str | None = None,
    read_line: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
    http_client: httpx.Client | None = None,
) -> None:
    """
    Prompt, search and print until input runs out.

    Blank lines are ignored. EOF ends the loop; any pipeline error
    propagates to the caller.
    """
    prompt_text = prompt_text if prompt_text is not None else default_prompt(mode)
    read_line = read_line or input
    write = write or print

    while True:
        try:
            line = read_line(prompt_text)
        except EOFError:
            logger.debug("End of input, leaving query loop")
            return

        line = line.strip()
        if not line:
            continue

        results = run_query(line, store, mode, k, http_client)

        write("=====RESULTS=======")
        for result in results:
            write(format_result(result))
        write("============")
