"""
Unit Tests for the Query Pipeline

Covers canonical content loading (local file vs URL vs text) and the
interactive loop, driven by scripted input instead of stdin.
"""

import base64
from unittest.mock import MagicMock

import httpx
import pytest

from semantic_search_pipeline.core.errors import RemoteCallError, SourceReadError
from semantic_search_pipeline.core.protocols import SearchResult
from semantic_search_pipeline.embeddings import MockEmbeddings
from semantic_search_pipeline.pipelines import (
    format_result,
    load_query_content,
    run_query_loop,
)
from semantic_search_pipeline.retrieval.document import Document
from semantic_search_pipeline.retrieval.store import InMemoryVectorStore

IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------


def _http_client(status: int = 200, content: bytes = IMAGE_BYTES):
    """httpx client served by a MockTransport; returns (client, requested urls)."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(status, content=content)

    return httpx.Client(transport=httpx.MockTransport(handler)), seen


def _scripted(lines):
    """read_line replacement that raises EOFError when lines run out."""
    remaining = iter(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    read_line.prompts = prompts
    return read_line


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "query.png"
    path.write_bytes(IMAGE_BYTES)
    return path


# ---------------------------------------------------------------------------
# CANONICAL CONTENT
# ---------------------------------------------------------------------------


class TestLoadQueryContent:
    def test_local_file_is_base64(self, image_file):
        content = load_query_content(str(image_file), "image")

        assert content == base64.b64encode(IMAGE_BYTES).decode()

    def test_url_is_fetched(self):
        client, seen = _http_client()

        content = load_query_content("https://example.com/cat.png", "image", client)

        assert seen == ["https://example.com/cat.png"]
        assert base64.b64decode(content) == IMAGE_BYTES

    def test_url_and_file_give_same_content(self, image_file):
        from_url = load_query_content("http://images.local/q.png", "image", _http_client()[0])
        from_file = load_query_content(str(image_file), "image")

        assert from_url == from_file

    def test_local_path_reads_from_disk(self, image_file):
        client, seen = _http_client()

        load_query_content(str(image_file), "image", client)

        assert seen == []

    def test_http_error_status(self):
        with pytest.raises(SourceReadError):
            load_query_content("https://example.com/missing.png", "image", _http_client(404)[0])

    def test_missing_local_file(self, tmp_path):
        with pytest.raises(SourceReadError):
            load_query_content(str(tmp_path / "nope.png"), "image")

    def test_text_mode_is_verbatim(self):
        assert load_query_content("http is a protocol", "text") == "http is a protocol"


# ---------------------------------------------------------------------------
# QUERY LOOP
# ---------------------------------------------------------------------------


class TestRunQueryLoop:
    def test_prints_ranked_results(self):
        store = MagicMock()
        store.similarity_search.return_value = [
            SearchResult(metadata={"source": "cat.jpg"}, distance=0.25),
            SearchResult(metadata={"source": "dog.jpg"}, distance=0.5),
        ]
        output = []

        run_query_loop(store, mode="text", k=2, read_line=_scripted(["  kitten  "]), write=output.append)

        store.similarity_search.assert_called_once_with("kitten", 2)
        assert output == [
            "=====RESULTS=======",
            "[search result with score]: cat.jpg 0.75",
            "[search result with score]: dog.jpg 0.5",
            "============",
        ]

    def test_blank_lines_skipped(self):
        store = MagicMock()
        store.similarity_search.return_value = []

        run_query_loop(store, mode="text", read_line=_scripted(["", "   ", "a", "b"]), write=lambda s: None)

        assert store.similarity_search.call_count == 2

    def test_prompt_text(self):
        store = MagicMock()
        store.similarity_search.return_value = []
        read_line = _scripted(["x"])

        run_query_loop(store, mode="text", prompt_text="> ", read_line=read_line, write=lambda s: None)

        assert read_line.prompts[0] == "> "

    def test_default_prompt_per_mode(self):
        read_line = _scripted([])

        run_query_loop(MagicMock(), mode="image", read_line=read_line)

        assert "image source" in read_line.prompts[0]

    def test_empty_store_prints_only_banners(self):
        store = InMemoryVectorStore(MockEmbeddings(dimensions=8))
        output = []

        run_query_loop(store, mode="text", k=5, read_line=_scripted(["anything"]), write=output.append)

        assert output == ["=====RESULTS=======", "============"]

    def test_errors_propagate(self):
        store = MagicMock()
        store.similarity_search.side_effect = RemoteCallError("endpoint down")

        with pytest.raises(RemoteCallError):
            run_query_loop(store, mode="text", read_line=_scripted(["q", "never reached"]), write=lambda s: None)

    def test_image_query_end_to_end(self, image_file):
        store = InMemoryVectorStore(MockEmbeddings(dimensions=8))
        content = base64.b64encode(IMAGE_BYTES).decode()
        store.insert([
            Document(content=content, metadata={"source": "same.png"}),
            Document(content="other", metadata={"source": "other.png"}),
        ])
        output = []

        run_query_loop(store, mode="image", k=1, read_line=_scripted([str(image_file)]), write=output.append)

        assert output[1].startswith("[search result with score]: same.png")


class TestFormatResult:
    def test_format(self):
        result = SearchResult(metadata={"source": "a.jpg"}, distance=0.0)

        assert format_result(result) == "[search result with score]: a.jpg 1.0"
