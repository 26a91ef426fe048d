"""
Error kinds raised by the pipeline.

Remote and store errors are usually transient; source, dimension and
configuration errors are permanent. Keeping them distinct lets callers
decide which ones are worth retrying.
"""


class PipelineError(Exception):
    """Base class for every error the pipeline raises on purpose."""


class ConfigurationError(PipelineError):
    """A configuration value is missing or invalid."""


class SourceReadError(PipelineError, OSError):
    """A source file, directory or URL could not be read."""


class RemoteCallError(PipelineError):
    """The embedding endpoint failed, timed out or returned an undecodable body."""


class DimensionMismatchError(PipelineError):
    """An embedding does not have the configured vector dimension."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Embedding dimension mismatch: expected {expected}, got {actual}"
        )


class StoreConnectionError(PipelineError):
    """The vector store session could not be established."""


class StoreWriteError(PipelineError):
    """Writing documents to the vector store failed."""


class StoreReadError(PipelineError):
    """Querying the vector store failed."""
