"""Paragraph chunking. Groups blank-line separated paragraphs; oversized ones go through sentence chunking."""

import re

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.normalizer import drop_blank
from app.services.chunking.strategies.sentence_boundary import sentence_chunks

# Newline, optional whitespace (further blank lines), newline
_PARAGRAPH_BOUNDARY = re.compile(r"\n\s*\n")
PARAGRAPH_SEPARATOR = "\n\n"


def split_paragraphs(text: str) -> list[str]:
    """Split on one or more blank lines. No boundary → one paragraph."""
    if not text or not text.strip():
        return []
    parts = _PARAGRAPH_BOUNDARY.split(text)
    return [p.strip() for p in parts if p.strip()]


def paragraph_chunks(text: str, config: ChunkingConfig) -> list[str]:
    """
    Join paragraphs with a blank line while the result fits chunk_size.
    A paragraph longer than chunk_size flushes the buffer and is re-chunked by sentence.
    Starting a new buffer carries no overlap.
    """
    if not text or not text.strip():
        return []
    paragraphs = split_paragraphs(text) or [text.strip()]
    chunks: list[str] = []
    buf = ""
    for paragraph in paragraphs:
        if len(paragraph) > config.chunk_size:
            if buf:
                chunks.append(buf.strip())
                buf = ""
            chunks.extend(sentence_chunks(paragraph, config))
            continue
        if buf and len(buf + PARAGRAPH_SEPARATOR + paragraph) > config.chunk_size:
            chunks.append(buf.strip())
            buf = paragraph
        else:
            buf = buf + PARAGRAPH_SEPARATOR + paragraph if buf else paragraph
    if buf.strip():
        chunks.append(buf.strip())
    return drop_blank(chunks)
