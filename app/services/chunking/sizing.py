"""Chunk size heuristic based on content shape. Advisory only; config is never mutated."""

import re

SHORT_CONTENT_BYTES = 500
SPECIAL_CHAR_RATIO = 0.3
CODE_CHUNK_SIZE = 800

# ASCII letters, digits and whitespace; everything else counts as special (by byte)
_PLAIN_CHARS = re.compile(r"[^a-zA-Z0-9 \t\n\r\f\v]")


def special_char_ratio(content: str) -> float:
    """Share of UTF-8 bytes belonging to characters outside ASCII alphanumerics and whitespace."""
    total = len(content.encode("utf-8"))
    if total == 0:
        return 0.0
    plain = len(_PLAIN_CHARS.sub("", content).encode("utf-8"))
    return (total - plain) / total


def estimate_chunk_size(content: str, chunk_size: int) -> int:
    """
    Propose a chunk size for content, measured in UTF-8 bytes.
    Short content (<= 500 bytes) is one chunk: returns its byte length.
    Code-like content (special ratio > 0.3) gets min(800, chunk_size).
    Anything else keeps chunk_size.
    """
    length = len(content.encode("utf-8"))
    if length <= SHORT_CONTENT_BYTES:
        return length
    if special_char_ratio(content) > SPECIAL_CHAR_RATIO:
        return min(CODE_CHUNK_SIZE, chunk_size)
    return chunk_size
