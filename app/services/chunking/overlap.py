"""Trailing-context overlap carried from one chunk into the next (sentence strategy)."""


def overlap_for(previous_chunk: str, overlap: int) -> str:
    """
    Return the prefix that seeds the next chunk: the last `overlap` codepoints of
    previous_chunk, trimmed, with one trailing space. Empty string when overlap is
    disabled or the previous chunk is not longer than the overlap window.

    If a space falls in the first half of the window, the text before it (a partial
    word) is dropped.
    """
    if overlap <= 0 or len(previous_chunk) <= overlap:
        return ""
    tail = previous_chunk[-overlap:]
    first_space = tail.find(" ")
    if first_space != -1 and first_space < overlap / 2:
        tail = tail[first_space + 1 :]
    tail = tail.strip()
    return f"{tail} " if tail else ""
