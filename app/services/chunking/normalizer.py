"""Text normalization before chunking. Trims the document; internal whitespace is kept."""


def normalize_content(text: str | None) -> str:
    """
    Trim leading/trailing whitespace. Returns "" for None, empty or whitespace-only input.
    Blank lines inside the text are preserved; the paragraph strategy splits on them.
    """
    if not text or not isinstance(text, str):
        return ""
    return text.strip()


def is_blank(text: str | None) -> bool:
    """True when text is None, empty or whitespace-only."""
    return not normalize_content(text)


def drop_blank(chunks: list[str]) -> list[str]:
    """Remove chunks that are empty after trimming. Order preserved."""
    return [c for c in chunks if not is_blank(c)]
