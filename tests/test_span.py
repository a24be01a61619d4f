"""Tests for byte-offset spans."""

import pytest

from chemfigpy import Span


class TestSpan:
    """Test Span construction and helpers."""

    def test_fields(self):
        """Span stores start and end."""
        span = Span(2, 5)
        assert span.start == 2
        assert span.end == 5

    def test_len(self):
        """len() is the byte width."""
        assert len(Span(2, 5)) == 3
        assert len(Span(4, 4)) == 0

    def test_at(self):
        """Span.at builds a span from an offset and width."""
        assert Span.at(3) == Span(3, 4)
        assert Span.at(3, 0) == Span(3, 3)

    def test_reversed_rejected(self):
        """start greater than end is invalid."""
        with pytest.raises(ValueError):
            Span(5, 2)

    def test_negative_rejected(self):
        """Negative offsets are invalid."""
        with pytest.raises(ValueError):
            Span(-1, 2)

    def test_immutable(self):
        """Spans cannot be modified."""
        span = Span(0, 1)
        with pytest.raises(AttributeError):
            span.start = 3

    def test_hashable_and_ordered(self):
        """Spans hash and sort by position."""
        assert len({Span(0, 1), Span(0, 1), Span(1, 2)}) == 2
        assert sorted([Span(3, 4), Span(0, 2)]) == [Span(0, 2), Span(3, 4)]

    def test_slice_ascii(self):
        """slice() returns the covered text."""
        assert Span(1, 3).slice("C=Cl") == "=C"

    def test_slice_multibyte(self):
        """slice() works on byte offsets, not character indexes."""
        source = "C≡N"
        assert Span(1, 4).slice(source) == "≡"
        assert Span(4, 5).slice(source) == "N"

    def test_slice_after_lone_surrogate(self):
        """A lone surrogate counts as three bytes."""
        assert Span(3, 4).slice("\ud800N") == "N"

    def test_str(self):
        """str() shows the range."""
        assert str(Span(1, 4)) == "1..4"
