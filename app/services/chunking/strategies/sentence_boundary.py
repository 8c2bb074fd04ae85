"""Sentence-boundary chunking. Packs whole sentences up to chunk_size codepoints, with overlap."""

import re

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.normalizer import drop_blank
from app.services.chunking.overlap import overlap_for

# Whitespace run preceded by ., ! or ?
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str) -> list[str]:
    """Split on sentence boundaries (period, !, ? followed by whitespace). No boundary → one sentence."""
    if not text or not text.strip():
        return []
    parts = _SENTENCE_BOUNDARY.split(text)
    return [p.strip() for p in parts if p.strip()]


def sentence_chunks(text: str, config: ChunkingConfig) -> list[str]:
    """
    Accumulate sentences until adding the next one would exceed chunk_size (in codepoints).
    Each new chunk starts with the overlap tail of the one just closed.
    A single sentence longer than chunk_size is emitted whole, never split.
    """
    if not text or not text.strip():
        return []
    sentences = split_sentences(text) or [text.strip()]
    chunks: list[str] = []
    buf = ""
    for sentence in sentences:
        if buf and len(f"{buf} {sentence}") > config.chunk_size:
            chunks.append(buf.strip())
            buf = overlap_for(buf, config.overlap) + sentence
        else:
            buf = f"{buf} {sentence}" if buf else sentence
    if buf.strip():
        chunks.append(buf.strip())
    return drop_blank(chunks)
