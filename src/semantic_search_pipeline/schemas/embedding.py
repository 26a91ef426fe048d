"""
Wire schemas for the remote embedding endpoint.

These Pydantic models are the contract between the pipeline and the
model invocation API. The request carries exactly one input field,
either ``inputImage`` (base64) or ``inputText``, plus the desired
output length. The response must carry an ``embedding`` list; any
other envelope (e.g. an error ``message``) fails validation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EmbeddingConfig(BaseModel):
    """Output options for one embedding call."""

    model_config = ConfigDict(populate_by_name=True)

    output_embedding_length: int = Field(
        alias="outputEmbeddingLength",
        gt=0,
        description="Length of the returned vector (256, 384 or 1024 for Titan)",
    )


class EmbeddingRequest(BaseModel):
    """Request body for a single embedding call."""

    model_config = ConfigDict(populate_by_name=True)

    input_image: str | None = Field(
        default=None,
        alias="inputImage",
        description="Base64-encoded image bytes",
    )
    input_text: str | None = Field(
        default=None,
        alias="inputText",
        description="Raw text input",
    )
    embedding_config: EmbeddingConfig = Field(alias="embeddingConfig")

    @model_validator(mode="after")
    def _exactly_one_input(self) -> "EmbeddingRequest":
        if (self.input_image is None) == (self.input_text is None):
            raise ValueError("exactly one of inputImage or inputText must be set")
        return self

    @classmethod
    def for_input(cls, content: str, mode: str, dimensions: int) -> "EmbeddingRequest":
        """Tag ``content`` under the field that matches ``mode``."""
        config = EmbeddingConfig(output_embedding_length=dimensions)
        if mode == "image":
            return cls(input_image=content, embedding_config=config)
        return cls(input_text=content, embedding_config=config)

    def to_json(self) -> str:
        """Serialize with camelCase keys, omitting the unused input field."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class EmbeddingResponse(BaseModel):
    """Response body of a single embedding call. Extra keys are ignored."""

    embedding: list[float]
