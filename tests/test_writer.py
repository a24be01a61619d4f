"""Tests for writing tokens back to fragment notation."""

import pytest

from chemfigpy import Bond, ChemfigWriter, Element, Group, Ring, TokenStream, parse, to_chemfig


class TestWriter:
    """Test notation output."""

    @pytest.mark.parametrize(
        "order,text",
        [(1, "-"), (2, "="), (3, "≡"), (0, "-[0]"), (7, "-[7]")],
    )
    def test_bonds(self, order, text):
        """Named orders use glyphs, others use brackets."""
        assert to_chemfig([Bond(order)]) == text

    def test_branches(self):
        """Groups and rings are parenthesized."""
        tokens = [
            Element("C"),
            Group((Bond(1), Element("H"))),
            Ring((Element("C"), Bond(1), Element("C")), 2),
        ]
        assert to_chemfig(tokens) == "C(-H)*(C-C=)"

    def test_repetition_expanded(self):
        """Repetition shorthand is written out in full."""
        assert to_chemfig(parse("Cl_3")) == "ClClCl"

    def test_empty(self):
        """An empty stream writes an empty string."""
        assert to_chemfig(TokenStream()) == ""

    def test_writer_class(self):
        """ChemfigWriter matches to_chemfig."""
        tokens = parse("C(=O)-O")
        assert ChemfigWriter(tokens).to_chemfig() == to_chemfig(tokens) == "C(=O)-O"

    def test_rejects_non_tokens(self):
        """Only tokens can be written."""
        with pytest.raises(TypeError):
            to_chemfig(["C"])

    def test_round_trip(self, valid_fragments):
        """Written output parses back to the same tokens."""
        for source in valid_fragments:
            tokens = parse(source)
            assert parse(to_chemfig(tokens)) == tokens
