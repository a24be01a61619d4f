"""
Fragment notation writer.

This module converts token streams back to fragment notation. Output
always re-parses to an equal token stream; repetition shorthand is never
emitted since streams hold expanded copies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Iterable

from chemfigpy.tokens import Bond, BondOrder, Element, Group, Ring

if TYPE_CHECKING:
    from chemfigpy.tokens import Token


_BOND_GLYPHS: Final[dict[int, str]] = {
    BondOrder.SINGLE: "-",
    BondOrder.DOUBLE: "=",
    BondOrder.TRIPLE: "≡",
}


class ChemfigWriter:
    """Fragment notation writer.

    Example:
        >>> from chemfigpy import parse
        >>> ChemfigWriter(parse("C_3*(C=C-)")).to_chemfig()
        'CCC*(C=C-)'
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = tokens

    def to_chemfig(self) -> str:
        """Serialize the tokens to a notation string."""
        parts: list[str] = []
        for token in self._tokens:
            self._write(token, parts)
        return "".join(parts)

    def _write(self, token: Token, parts: list[str]) -> None:
        if isinstance(token, Element):
            parts.append(token.symbol)
        elif isinstance(token, Bond):
            parts.append(_bond_text(token))
        elif isinstance(token, Group):
            parts.append("(")
            for child in token.children:
                self._write(child, parts)
            parts.append(")")
        elif isinstance(token, Ring):
            parts.append("*(")
            for child in token.children:
                self._write(child, parts)
            parts.append(_bond_text(Bond(token.bond_order)))
            parts.append(")")
        else:
            raise TypeError(f"Not a token: {token!r}")


def _bond_text(bond: Bond) -> str:
    if bond.is_named:
        return _BOND_GLYPHS[bond.order]
    return f"-[{bond.order}]"


def to_chemfig(tokens: Iterable[Token]) -> str:
    """Convert tokens to a fragment notation string.

    Args:
        tokens: A TokenStream or any iterable of tokens.

    Returns:
        Notation string that parses back to the same tokens.
    """
    return ChemfigWriter(tokens).to_chemfig()
