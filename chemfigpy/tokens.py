"""
Token data model.

This module defines the four token shapes produced by the parser and the
TokenStream collection that accumulates them:

    Element - an atom placeholder such as ``C`` or ``Cl``
    Bond    - a bond with an integer order
    Group   - a parenthesized branch holding child tokens
    Ring    - a branch whose trailing bond closes a ring

Tokens are immutable values that compare structurally.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Union


class BondOrder(IntEnum):
    """Named bond orders."""

    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3


@dataclass(frozen=True, slots=True)
class Element:
    """An atom placeholder.

    Attributes:
        symbol: One uppercase ASCII letter followed by lowercase ASCII
            letters. Not checked against the periodic table.
    """

    symbol: str


@dataclass(frozen=True, slots=True)
class Bond:
    """A bond between adjacent structure.

    Attributes:
        order: Bond order (1=single, 2=double, 3=triple, or an explicit
            ``-[n]`` value, which may be 0).
    """

    order: int

    @property
    def is_named(self) -> bool:
        """Whether the order has a dedicated glyph (single, double, triple)."""
        return self.order in (BondOrder.SINGLE, BondOrder.DOUBLE, BondOrder.TRIPLE)


@dataclass(frozen=True, slots=True)
class Group:
    """A parenthesized branch.

    Attributes:
        children: Tokens inside the parentheses, in source order.
    """

    children: tuple[Token, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True, slots=True)
class Ring:
    """A branch marked as a ring.

    The bond that closed the branch in the source is not kept among the
    children; its order is stored separately.

    Attributes:
        children: Tokens inside the parentheses, minus the closing bond.
        bond_order: Order of the ring-closing bond.
    """

    children: tuple[Token, ...]
    bond_order: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


Token = Union[Element, Bond, Group, Ring]


class TokenStream:
    """Ordered, mutable sequence of tokens.

    The parser threads a single TokenStream through every nesting level
    and recovers nested branches by draining ranges off its tail.

    Example:
        >>> stream = TokenStream()
        >>> stream.push_token(Element("C"))
        >>> stream.token_count()
        1
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: list[Token] = list(tokens)

    def token_count(self) -> int:
        """Number of tokens in the stream."""
        return len(self._tokens)

    def push_token(self, token: Token) -> None:
        """Append a token to the end of the stream."""
        self._tokens.append(token)

    def remove(self, idx: int) -> Token:
        """Remove and return the token at ``idx``.

        Raises:
            IndexError: If ``idx`` is out of range.
        """
        return self._tokens.pop(idx)

    def remove_range(self, start: int, stop: int | None = None) -> list[Token]:
        """Remove the tokens in ``[start, stop)`` and return them in order.

        Args:
            start: First index to remove.
            stop: One past the last index to remove; defaults to the end.

        Returns:
            The removed tokens.
        """
        if stop is None:
            stop = len(self._tokens)
        drained = self._tokens[start:stop]
        del self._tokens[start:stop]
        return drained

    def last(self) -> Token | None:
        """Last token, or None if the stream is empty."""
        return self._tokens[-1] if self._tokens else None

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __getitem__(self, idx: int) -> Token:
        return self._tokens[idx]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenStream):
            return self._tokens == other._tokens
        if isinstance(other, (list, tuple)):
            return self._tokens == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenStream({self._tokens!r})"


def copy_token(token: Token) -> Token:
    """Return an independent structural copy of `token`.

    Branch children are copied recursively, so the copy shares no
    containers with the original.
    """
    if isinstance(token, Group):
        return Group(tuple(copy_token(child) for child in token.children))
    if isinstance(token, Ring):
        return Ring(
            tuple(copy_token(child) for child in token.children),
            token.bond_order,
        )
    if isinstance(token, Bond):
        return Bond(token.order)
    return Element(token.symbol)
