"""Post-filter for degenerate chunks. Independent of strategy; callers run it around the pipeline."""

MIN_CHUNK_LENGTH = 10
MIN_ALNUM_RATIO = 0.1


def _alnum_ratio(text: str) -> float:
    if not text:
        return 0.0
    return sum(1 for ch in text if ch.isalnum()) / len(text)


def validate_chunks(chunks: list[str]) -> list[str]:
    """
    Keep chunks that are at least MIN_CHUNK_LENGTH codepoints after trimming and whose
    alphanumeric ratio is at least MIN_ALNUM_RATIO. Survivors are returned trimmed, in order.
    """
    valid: list[str] = []
    for chunk in chunks:
        chunk = chunk.strip()
        if len(chunk) < MIN_CHUNK_LENGTH:
            continue
        if _alnum_ratio(chunk) < MIN_ALNUM_RATIO:
            continue
        valid.append(chunk)
    return valid
