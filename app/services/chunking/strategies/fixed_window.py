"""Fixed-window chunking. Windows of chunk_size codepoints snapped to the nearest space, with overlap."""

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.normalizer import drop_blank


def snap_to_word_boundary(text: str, chunk_end: int) -> int:
    """
    Move chunk_end to the closest space: the first at or after it, or the last before it.
    Ties go to the earlier space. Without any space, chunk_end is returned unchanged.
    """
    next_space = text.find(" ", chunk_end)
    prev_space = text.rfind(" ", 0, chunk_end)
    if next_space != -1 and prev_space != -1:
        return next_space if (next_space - chunk_end) < (chunk_end - prev_space) else prev_space
    if prev_space != -1:
        return prev_space
    if next_space != -1:
        return next_space
    return chunk_end


def fixed_window_chunks(text: str, config: ChunkingConfig) -> list[str]:
    """
    Slide a window of chunk_size codepoints over text. Every window except the last is
    snapped to a word boundary; the next window starts `overlap` codepoints before the
    previous end but always at least one codepoint further, so the loop terminates for
    any overlap (including overlap >= chunk_size).
    """
    if not text or not text.strip():
        return []
    length = len(text)
    chunks: list[str] = []
    position = 0
    while position < length:
        chunk_end = min(position + config.chunk_size, length)
        if chunk_end < length:
            chunk_end = snap_to_word_boundary(text, chunk_end)
        chunks.append(text[position:chunk_end].strip())
        position = max(position + 1, chunk_end - config.overlap)
    return drop_blank(chunks)
