"""
Chunker: takes raw content + ChunkingConfig and returns ordered chunk strings.
Pure and deterministic; the same content and config always give the same chunks.
Chunk records add chunk_id/chunk_hash for callers that embed or store chunks.
"""

import hashlib
import json
from typing import Any

from app.config.chunking.models import ChunkingConfig
from app.config.chunking.static import get_active_chunking_config
from app.config.logging import get_logger, log_extra
from app.services.chunking.normalizer import drop_blank, normalize_content
from app.services.chunking.sizing import estimate_chunk_size
from app.services.chunking.strategies import get_strategy_fn, resolve_strategy_name
from app.services.chunking.validation import validate_chunks
from app.utils.ids import generate_chunk_id
from app.utils.time import utc_now

logger = get_logger(__name__)


def chunk_text(content: str, config: ChunkingConfig) -> list[str]:
    """
    Trim content and split it with the configured strategy.
    Empty or whitespace-only content gives []. Unknown strategies use sentence chunking.
    Every returned chunk is trimmed and non-empty.
    """
    text = normalize_content(content)
    if not text:
        return []
    strategy_name = resolve_strategy_name(config.strategy)
    if strategy_name != config.strategy:
        logger.debug(
            "Unrecognized chunking strategy, using default",
            **log_extra({"requested": config.strategy, "strategy": strategy_name}),
        )
    chunks = drop_blank(get_strategy_fn(strategy_name)(text, config))
    logger.debug(
        "Chunked content",
        **log_extra({
            "strategy": strategy_name,
            "content_length": len(text),
            "chunk_count": len(chunks),
        }),
    )
    return chunks


def compute_chunk_hash(text: str, strategy: str, config: ChunkingConfig) -> str:
    """Chunk hash = SHA-256(chunk_text + strategy + canonical config JSON)."""
    config_canonical = json.dumps(config.model_dump(mode="json"), sort_keys=True)
    payload = f"{text}|{strategy}|{config_canonical}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def build_chunk_records(
    chunk_texts: list[str],
    document_id: str,
    config: ChunkingConfig,
) -> list[dict[str, Any]]:
    """
    Wrap chunk strings in records with chunk_id, chunk_hash and position.
    chunk_id and chunk_hash are stable for the same document, text and config.
    """
    strategy_name = resolve_strategy_name(config.strategy)
    config_dict = config.model_dump(mode="json")
    now = utc_now()
    records: list[dict[str, Any]] = []
    for i, text in enumerate(chunk_texts):
        chunk_hash = compute_chunk_hash(text, strategy_name, config)
        records.append({
            "chunk_id": generate_chunk_id(document_id, i, chunk_hash),
            "document_id": document_id,
            "chunk_text": text,
            "chunk_index": i,
            "chunking_strategy": strategy_name,
            "chunking_config": config_dict,
            "char_count": len(text),
            "overlap_size": config.overlap,
            "chunk_hash": chunk_hash,
            "created_at": now,
        })
    return records


class DocumentChunker:
    """
    Chunking façade bound to one immutable config, read once at construction.
    Defaults to the active profile from static.json.
    """

    def __init__(self, config: ChunkingConfig | None = None):
        self.config = config if config is not None else get_active_chunking_config()

    @property
    def strategy(self) -> str:
        """Strategy actually used for chunking (after fallback)."""
        return resolve_strategy_name(self.config.strategy)

    def chunk(self, content: str) -> list[str]:
        return chunk_text(content, self.config)

    def validate_chunks(self, chunks: list[str]) -> list[str]:
        return validate_chunks(chunks)

    def get_optimal_chunk_size(self, content: str) -> int:
        return estimate_chunk_size(content, self.config.chunk_size)

    def chunk_records(self, content: str, document_id: str) -> list[dict[str, Any]]:
        """Chunk content and wrap the result with build_chunk_records."""
        return build_chunk_records(self.chunk(content), document_id, self.config)
