"""
Tests for vsort.versioning.chunks module.

Tests chunking and chunk-level comparison including:
- Lazy tokenization and exact reconstruction
- Digit-run magnitude comparison of any length
- Missing digit runs counting as zero
- Exhausted sides producing empty chunks
"""

from __future__ import annotations

import pytest

from vsort.versioning.chunks import (
    Chunk,
    compare_chunked,
    compare_digit_runs,
    digit_run,
    iter_chunks,
    non_digit_run,
)


class TestRuns:
    """Tests for the run scanners."""

    def test_non_digit_run(self):
        """Test scanning non-digit runs from different offsets."""
        s = "file_1.txt"
        assert non_digit_run(s) == ("file_", 5)
        assert non_digit_run(s, 5) == ("", 5)
        assert non_digit_run(s, 6) == (".txt", 10)

    def test_digit_run(self):
        """Test scanning digit runs."""
        assert digit_run("123abc") == ("123", 3)
        assert digit_run("abc") == ("", 0)
        assert digit_run("a42", 1) == ("42", 3)

    def test_only_ascii_digits_are_digits(self):
        """Test that non-ASCII digits stay in the non-digit run."""
        assert non_digit_run("a٣b1") == ("a٣b", 3)


class TestIterChunks:
    """Tests for iter_chunks generator."""

    def test_basic_chunks(self):
        """Test chunking a typical file name."""
        assert list(iter_chunks("file_1.txt")) == [
            Chunk("file_", "1"),
            Chunk(".txt", ""),
        ]

    def test_leading_digits(self):
        """Test that a leading digit run yields an empty prefix."""
        assert list(iter_chunks("10a")) == [Chunk("", "10"), Chunk("a", "")]

    def test_empty_string(self):
        """Test that an empty string yields no chunks."""
        assert list(iter_chunks("")) == []

    def test_is_lazy(self):
        """Test that chunks are produced on demand."""
        chunks = iter_chunks("a1b2c3")
        assert next(chunks) == Chunk("a", "1")
        assert next(chunks) == Chunk("b", "2")

    def test_restartable(self):
        """Test that a fresh call starts over."""
        s = "gcc-10.8rc2"
        assert list(iter_chunks(s)) == list(iter_chunks(s))

    @pytest.mark.parametrize(
        "s",
        [
            "gcc-c++-10.8.12-0.7rc2.fc9.tar.bz2",
            "007",
            "~",
            "αβγ1.txt",
            "a\x01c-027.txt",
            "1" * 80,
        ],
    )
    def test_reconstructs_input(self, s):
        """Test that prefixes and digit runs reconstruct the string."""
        chunks = list(iter_chunks(s))
        assert "".join(c.prefix + c.digits for c in chunks) == s
        assert all(c.prefix or c.digits for c in chunks)


class TestCompareDigitRuns:
    """Tests for magnitude comparison of digit runs."""

    def test_leading_zeros_ignored(self):
        """Test that leading zeros do not affect ordering."""
        assert compare_digit_runs("008", "8") == 0
        assert compare_digit_runs("0", "") == 0
        assert compare_digit_runs("000", "") == 0

    def test_magnitude_not_length(self):
        """Test that magnitude wins over textual order."""
        assert compare_digit_runs("9", "10") == -1
        assert compare_digit_runs("010", "9") == 1
        assert compare_digit_runs("100", "99") == 1

    def test_very_long_runs(self):
        """Test runs far beyond any fixed-width integer."""
        big = "1" + "0" * 60
        assert compare_digit_runs(big, "9" * 60) == 1
        assert compare_digit_runs("0" * 50 + "27", "27") == 0
        assert compare_digit_runs("18446744073709551616", "18446744073709551615") == 1

    def test_runs_beyond_int_conversion_limit(self):
        """Test runs longer than Python's int/str conversion limit."""
        a = "5" * 5000
        b = "5" * 4999 + "6"
        assert compare_digit_runs(a, b) == -1
        assert compare_digit_runs(b, a) == 1


class TestCompareChunked:
    """Tests for chunk-by-chunk comparison."""

    @pytest.mark.parametrize(
        "items",
        [
            ["a", "a0", "a0000"],
            [
                "a\x01c-27.txt",
                "a\x01c-027.txt",
                "a\x01c-" + "0" * 54 + "27.txt",
            ],
            [
                ".a\x01c-27.txt",
                ".a\x01c-027.txt",
                ".a\x01c-" + "0" * 54 + "27.txt",
            ],
            ["a\x01c-", "a\x01c-0", "a\x01c-00"],
            [".a\x01c-", ".a\x01c-0", ".a\x01c-00"],
            ["a\x01c-0.txt", "a\x01c-00.txt"],
            [".a\x01c-1\x01.txt", ".a\x01c-001\x01.txt"],
            ["a0001", "a1"],
        ],
    )
    def test_equal_at_chunk_level(self, items):
        """Test strings that tie chunk by chunk."""
        for i, a in enumerate(items):
            for b in items[i + 1 :]:
                assert compare_chunked(a, b) == 0
                assert compare_chunked(b, a) == 0

    def test_numbers_by_magnitude(self):
        """Test that digit runs compare numerically."""
        assert compare_chunked("file9", "file10") == -1
        assert compare_chunked("b 11", "b 5") == 1

    def test_exhausted_side_still_loses_to_tilde(self):
        """Test that a trailing tilde sorts before the shorter string."""
        assert compare_chunked("1~", "1") == -1
        assert compare_chunked("1", "1~") == 1

    def test_shorter_string_first(self):
        """Test that an exhausted side sorts before non-tilde text."""
        assert compare_chunked("1", "1%") == -1
        assert compare_chunked("1.2", "1") == 1
