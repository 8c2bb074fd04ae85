"""Request/response schemas for the /chunk endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ChunkRequest(BaseModel):
    """POST /chunk request body. Config comes from a profile; strategy/chunk_size/overlap can be overridden."""

    content: str = Field(..., description="Document text to chunk")
    document_id: str | None = Field(default=None, min_length=1, description="Caller document id; generated when omitted")
    profile: str | None = Field(default=None, min_length=1, description="Chunking profile; defaults to the configured one")
    strategy: str | None = Field(default=None, description="Optional override: sentence|paragraph|fixed")
    chunk_size: int | None = Field(default=None, ge=1, le=100000, description="Optional override for chunk size")
    overlap: int | None = Field(default=None, ge=0, le=100000, description="Optional override for overlap")
    validate_output: bool = Field(default=False, description="Drop too-short or symbol-heavy chunks")


class ChunkRecord(BaseModel):
    """One chunk with its stable id and hash."""

    chunk_id: str
    document_id: str
    chunk_text: str
    chunk_index: int = Field(..., ge=0)
    chunking_strategy: str
    chunking_config: dict[str, Any]
    char_count: int = Field(..., ge=0)
    overlap_size: int = Field(..., ge=0)
    chunk_hash: str
    created_at: datetime


class ChunkResponse(BaseModel):
    """POST /chunk response body."""

    document_id: str
    strategy: str = Field(..., description="Strategy actually applied")
    total_chunks: int = Field(..., ge=0)
    chunks: list[ChunkRecord] = Field(default_factory=list)


class ValidateRequest(BaseModel):
    """POST /chunk/validate request body."""

    chunks: list[str] = Field(default_factory=list)


class ValidateResponse(BaseModel):
    """POST /chunk/validate response body: surviving chunks, trimmed, in order."""

    chunks: list[str] = Field(default_factory=list)
    dropped: int = Field(default=0, ge=0)


class OptimalSizeRequest(BaseModel):
    """POST /chunk/optimal-size request body."""

    content: str = Field(..., description="Content to size")
    profile: str | None = Field(default=None, min_length=1)
    chunk_size: int | None = Field(default=None, ge=1, le=100000, description="Override for the configured chunk size")


class OptimalSizeResponse(BaseModel):
    """POST /chunk/optimal-size response body."""

    chunk_size: int = Field(..., ge=0)
