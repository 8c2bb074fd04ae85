"""Chunking configuration models. Read-only; no business logic."""

from pydantic import BaseModel, ConfigDict, Field


class ChunkingConfig(BaseModel):
    """
    Chunking strategy and parameters. Immutable once built.
    Unrecognized strategy names are accepted here and resolved to 'sentence' at dispatch.
    """

    model_config = ConfigDict(frozen=True)

    strategy: str = Field(default="sentence", description="sentence|paragraph|fixed")
    chunk_size: int = Field(default=1000, ge=1, description="Soft upper bound on chunk length (codepoints)")
    overlap: int = Field(default=200, ge=0, description="Codepoints of trailing context carried into the next chunk")
