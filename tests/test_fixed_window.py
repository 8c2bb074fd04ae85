"""Tests for fixed-window chunking with word-boundary snapping."""

import pytest

from conftest import UTF8_MIXED

from app.services.chunking.strategies.fixed_window import fixed_window_chunks, snap_to_word_boundary


class TestSnapToWordBoundary:
    def test_picks_closer_space(self) -> None:
        # spaces at 3 and 9; 8 is closer to 9
        assert snap_to_word_boundary("abc defgh ij", 8) == 9
        assert snap_to_word_boundary("abc defgh ij", 4) == 3

    def test_tie_goes_backward(self) -> None:
        # spaces at 2 and 6, cut at 4
        assert snap_to_word_boundary("ab cde fg", 4) == 2

    def test_only_one_side_has_a_space(self) -> None:
        assert snap_to_word_boundary("abcdef ghij", 3) == 6
        assert snap_to_word_boundary("ab cdefghij", 7) == 2

    def test_no_space_keeps_cut(self) -> None:
        assert snap_to_word_boundary("abcdefghij", 5) == 5


class TestFixedWindowChunks:
    def test_repeated_text_stays_near_chunk_size(self, make_config) -> None:
        text = ("This is a test sentence. " * 10).strip()

        chunks = fixed_window_chunks(text, make_config(strategy="fixed", chunk_size=50, overlap=20))

        assert len(chunks) > 1
        for chunk in chunks:
            assert len(chunk) <= 60

    def test_text_without_spaces_is_cut_mid_word(self, make_config) -> None:
        chunks = fixed_window_chunks("a" * 250, make_config(strategy="fixed", chunk_size=100, overlap=20))

        # Once a window reaches the end, the cursor still steps forward one codepoint at a time
        assert [len(c) for c in chunks] == [100, 100, 90] + list(range(20, 0, -1))

    def test_without_overlap_no_content_is_lost(self, make_config) -> None:
        text = " ".join(f"word{i}" for i in range(200))

        chunks = fixed_window_chunks(text, make_config(strategy="fixed", chunk_size=40, overlap=0))

        assert "".join(chunks).replace(" ", "") == text.replace(" ", "")

    def test_short_text_without_overlap_is_one_chunk(self, make_config) -> None:
        config = make_config(strategy="fixed", chunk_size=50, overlap=0)

        assert fixed_window_chunks("tiny text", config) == ["tiny text"]

    def test_overlap_past_the_end_emits_suffix_chunks(self, make_config) -> None:
        chunks = fixed_window_chunks("tiny text", make_config(strategy="fixed", chunk_size=50, overlap=20))

        assert chunks == ["tiny text", "iny text", "ny text", "y text", "text", "text", "ext", "xt", "t"]

    @pytest.mark.parametrize("overlap", [50, 100, 1000])
    def test_terminates_when_overlap_exceeds_chunk_size(self, make_config, overlap) -> None:
        text = " ".join(["lorem ipsum dolor sit amet"] * 20)

        chunks = fixed_window_chunks(text, make_config(strategy="fixed", chunk_size=10, overlap=overlap))

        assert chunks
        assert len(chunks) <= len(text)
        assert all(c and c == c.strip() for c in chunks)

    def test_multibyte_text_is_cut_on_codepoints(self, make_config) -> None:
        chunks = fixed_window_chunks(UTF8_MIXED, make_config(strategy="fixed", chunk_size=50, overlap=20))

        assert chunks
        for chunk in chunks:
            assert chunk in UTF8_MIXED
            assert chunk.encode("utf-8").decode("utf-8") == chunk
