"""Tests for the overlap prefix carried into the next sentence chunk."""

from app.services.chunking.overlap import overlap_for


def test_overlap_disabled_returns_empty() -> None:
    assert overlap_for("Some reasonably long previous chunk.", 0) == ""


def test_chunk_not_longer_than_overlap_returns_empty() -> None:
    assert overlap_for("short", 10) == ""
    assert overlap_for("exactly10!", 10) == ""


def test_leading_partial_word_is_dropped() -> None:
    # Window is "nd sentence follows."; space at index 2 is in the first half
    assert overlap_for("Second sentence follows.", 20) == "sentence follows. "


def test_space_in_second_half_keeps_whole_window() -> None:
    assert overlap_for("0123456789abcdef ghi", 10) == "abcdef ghi "


def test_window_without_space_is_kept() -> None:
    assert overlap_for("abcdefghijklmnopqrstuvwxyz", 10) == "qrstuvwxyz "


def test_whitespace_only_window_returns_empty() -> None:
    assert overlap_for("word" + " " * 20, 10) == ""


def test_multibyte_tail_is_sliced_by_codepoint() -> None:
    overlap = overlap_for("Some text before 世界 🌍 end", 10)

    assert overlap == "世界 🌍 end "
    assert overlap.encode("utf-8").decode("utf-8") == overlap
