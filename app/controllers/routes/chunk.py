"""POST /chunk endpoints: chunk inline content, validate chunks, and suggest a chunk size."""

from typing import Any

from fastapi import APIRouter, HTTPException

from app.config.chunking.models import ChunkingConfig
from app.config.chunking.static import resolve_chunking_config
from app.config.logging import get_logger, log_extra
from app.config.settings import get_settings
from app.controllers.schema.chunk import (
    ChunkRequest,
    ChunkResponse,
    OptimalSizeRequest,
    OptimalSizeResponse,
    ValidateRequest,
    ValidateResponse,
)
from app.services.chunking.chunker import DocumentChunker, build_chunk_records
from app.services.chunking.validation import validate_chunks
from app.utils.ids import generate_document_id

logger = get_logger(__name__)

router = APIRouter(prefix="/chunk", tags=["chunking"])


def _resolve_config(profile: str | None, overrides: dict[str, Any]) -> ChunkingConfig:
    """Profile (or the configured default) with non-null overrides merged in. Bad input → 400."""
    profile_name = profile or get_settings().chunking_profile
    inline = {k: v for k, v in overrides.items() if v is not None}
    try:
        return resolve_chunking_config(profile_name, inline or None)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("", response_model=ChunkResponse)
async def chunk_content(body: ChunkRequest) -> ChunkResponse:
    """
    Chunk the submitted content. Empty or whitespace-only content returns zero chunks.
    With validate_output, degenerate chunks are dropped before records are built.
    """
    config = _resolve_config(
        body.profile,
        {"strategy": body.strategy, "chunk_size": body.chunk_size, "overlap": body.overlap},
    )
    chunker = DocumentChunker(config)
    document_id = body.document_id or generate_document_id()

    chunk_texts = chunker.chunk(body.content)
    if body.validate_output:
        chunk_texts = chunker.validate_chunks(chunk_texts)

    records = build_chunk_records(chunk_texts, document_id, config)
    logger.info(
        "Chunked document",
        **log_extra({
            "document_id": document_id,
            "strategy": chunker.strategy,
            "chunk_size": config.chunk_size,
            "overlap": config.overlap,
            "total_chunks": len(records),
        }),
    )
    return ChunkResponse(
        document_id=document_id,
        strategy=chunker.strategy,
        total_chunks=len(records),
        chunks=records,
    )


@router.post("/validate", response_model=ValidateResponse)
async def validate_chunk_list(body: ValidateRequest) -> ValidateResponse:
    """Drop chunks that are too short or mostly symbols. Order is preserved."""
    valid = validate_chunks(body.chunks)
    return ValidateResponse(chunks=valid, dropped=len(body.chunks) - len(valid))


@router.post("/optimal-size", response_model=OptimalSizeResponse)
async def optimal_chunk_size(body: OptimalSizeRequest) -> OptimalSizeResponse:
    """Suggest a chunk size for the content. Advisory; nothing is stored."""
    config = _resolve_config(body.profile, {"chunk_size": body.chunk_size})
    return OptimalSizeResponse(chunk_size=DocumentChunker(config).get_optimal_chunk_size(body.content))
