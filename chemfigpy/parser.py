"""
Chemical fragment notation parser.

This module converts fragment strings into TokenStream objects using a
recursive-descent parser with one character of lookahead.

Grammar:
    stream      := form*
    form        := ring | group | element | bond | repetition
    ring        := '*' group            (last inner token must be a bond)
    group       := '(' form* ')'
    element     := UPPER LOWER*
    bond        := '=' | '≡' | '-' ('[' DIGIT* ']')?
    repetition  := '_' DIGIT+           (repeats the last token n-1 more times)

Parsing is fail-fast: the first malformed construct raises a ParseError
subclass located by a byte span into the source.
"""

from __future__ import annotations

import logging
from typing import Iterator, NoReturn

from chemfigpy.exceptions import (
    InvalidBondIdentError,
    InvalidCharError,
    InvalidElementIdentError,
    NestingTooDeepError,
    NothingToRepeatError,
    ParseError,
    RingMissingBondError,
    UnenclosedGroupError,
    UnexpectedEOFError,
    ZeroRepetitionCountError,
)
from chemfigpy.options import ParserOptions
from chemfigpy.span import Span
from chemfigpy.tokens import Bond, Element, Group, Ring, TokenStream, copy_token

logger = logging.getLogger(__name__)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _fold_digits(digits: str) -> int:
    """Base-10 value of an ASCII digit run; empty is 0.

    Folds digit by digit so long runs are not subject to the int() string
    conversion limit.
    """
    value = 0
    for char in digits:
        value = value * 10 + (ord(char) - ord("0"))
    return value


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


class CharCursor:
    """Lookahead-1 cursor over ``(byte_offset, char)`` pairs.

    Offsets are UTF-8 byte offsets into the source string.

    Example:
        >>> cursor = CharCursor("C≡N")
        >>> [pair for pair in cursor]
        [(0, 'C'), (1, '≡'), (4, 'N')]
    """

    __slots__ = ("_string", "_pos", "_offset")

    def __init__(self, string: str) -> None:
        self._string = string
        self._pos = 0
        self._offset = 0

    @property
    def offset(self) -> int:
        """Byte offset of the next character, or the source byte length at end."""
        return self._offset

    @property
    def remaining(self) -> str:
        """Remaining unconsumed text."""
        return self._string[self._pos:]

    def peek(self) -> tuple[int, str] | None:
        """Return the next pair without consuming it, or None at end."""
        if self._pos >= len(self._string):
            return None
        return self._offset, self._string[self._pos]

    def next(self) -> tuple[int, str] | None:
        """Consume and return the next pair, or None at end."""
        if self._pos >= len(self._string):
            return None
        char = self._string[self._pos]
        pair = (self._offset, char)
        self._pos += 1
        self._offset += len(char.encode("utf-8", errors="surrogatepass"))
        return pair

    def is_eof(self) -> bool:
        """Check if every character has been consumed."""
        return self._pos >= len(self._string)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return self

    def __next__(self) -> tuple[int, str]:
        pair = self.next()
        if pair is None:
            raise StopIteration
        return pair


class ChemfigParser:
    """Fragment notation parser.

    A parser is built for one source string. It owns a cursor over the
    source and a single TokenStream accumulator. Nested groups are
    recovered by recording the accumulator length when a group opens and
    draining everything pushed since when it closes.

    Example:
        >>> ChemfigParser.parse("C=C")
        TokenStream([Element(symbol='C'), Bond(order=2), Element(symbol='C')])

    Callers that only want a prefix of the input can drive the parser
    themselves and keep the rest of the cursor:
        >>> parser = ChemfigParser("C=C")
        >>> parser.parse_one()
        >>> tokens, cursor = parser.early_finalise()
        >>> cursor.remaining
        '=C'
    """

    def __init__(self, source: str, options: ParserOptions | None = None) -> None:
        """Initialize parser with a source string.

        Args:
            source: Fragment string to parse.
            options: Parser options; defaults to ParserOptions().
        """
        self._source = source
        self._options = options if options is not None else ParserOptions()
        self._cursor: CharCursor | None = CharCursor(source)
        self._tokens: TokenStream | None = TokenStream()
        self._depth = 0

    @property
    def depth(self) -> int:
        """Number of groups currently open."""
        return self._depth

    @classmethod
    def parse(cls, source: str, options: ParserOptions | None = None) -> TokenStream:
        """Parse ``source`` to exhaustion and return its tokens.

        Raises:
            ParseError: On the first malformed construct.
        """
        parser = cls(source, options)
        parser.parse_stream()
        return parser.finalise()

    def parse_stream(self) -> None:
        """Dispatch forms until the cursor is exhausted."""
        cursor = self._live_cursor()
        logger.debug("Parsing %r", self._source)
        while cursor.peek() is not None:
            self.parse_one()
        logger.debug("Parsed %r into %d tokens", self._source, len(self._live_tokens()))

    def parse_one(self) -> None:
        """Parse exactly one form starting at the next character.

        Does nothing at end of input.
        """
        cursor = self._live_cursor()
        peeked = cursor.peek()
        if peeked is None:
            return
        idx, char = peeked

        if char == "*":
            cursor.next()
            self._parse_group(ring=True)
        elif char == "(":
            self._parse_group(ring=False)
        elif char.isascii() and char.isalpha():
            self._parse_element()
        elif char in "-=≡":
            self._parse_bond()
        elif char == "_":
            self._parse_repetition()
        else:
            self._fail(InvalidCharError(char, self._source, Span.at(idx)))

    def finalise(self) -> TokenStream:
        """Return all tokens parsed so far and retire the parser.

        Assumes the cursor has been exhausted, as after parse_stream().
        """
        tokens = self._live_tokens()
        self._tokens = None
        self._cursor = None
        return tokens

    def early_finalise(self) -> tuple[TokenStream, CharCursor]:
        """Return tokens like finalise() along with the unexhausted cursor."""
        tokens = self._live_tokens()
        cursor = self._live_cursor()
        self._tokens = None
        self._cursor = None
        return tokens, cursor

    def _live_cursor(self) -> CharCursor:
        if self._cursor is None:
            raise RuntimeError("Parser has already been finalised")
        return self._cursor

    def _live_tokens(self) -> TokenStream:
        if self._tokens is None:
            raise RuntimeError("Parser has already been finalised")
        return self._tokens

    def _fail(self, error: ParseError) -> NoReturn:
        logger.debug("Parse failed with %s at %s", error.kind, error.span)
        raise error

    def _eof_span(self) -> Span:
        return Span.at(self._live_cursor().offset, 0)

    def _parse_group(self, ring: bool) -> None:
        """Parse ``( form* )`` and push a Group, or a Ring when ``ring`` is set."""
        cursor = self._live_cursor()
        tokens = self._live_tokens()

        opened = cursor.next()
        if opened is None:
            self._fail(UnexpectedEOFError("(", self._source, self._eof_span()))
        idx, char = opened
        if char != "(":
            self._fail(UnenclosedGroupError("(", char, self._source, Span.at(idx)))

        max_depth = self._options.max_depth
        if max_depth is not None and self._depth >= max_depth:
            self._fail(NestingTooDeepError(max_depth, self._source, Span.at(idx)))

        start = tokens.token_count()
        self._depth += 1
        try:
            while True:
                peeked = cursor.peek()
                if peeked is None:
                    self._fail(UnexpectedEOFError(")", self._source, self._eof_span()))
                if peeked[1] == ")":
                    break
                self.parse_one()
        except ParseError:
            # Leave the accumulator as it was before the group opened
            tokens.remove_range(start)
            raise
        finally:
            self._depth -= 1

        close_idx, _ = cursor.next()
        children = tokens.remove_range(start)

        if not ring:
            tokens.push_token(Group(children))
            return

        if not children or not isinstance(children[-1], Bond):
            self._fail(RingMissingBondError(self._source, Span.at(close_idx)))
        closing = children.pop()
        tokens.push_token(Ring(children, closing.order))

    def _parse_element(self) -> None:
        """Parse an uppercase letter followed by any lowercase letters."""
        cursor = self._live_cursor()

        first = cursor.next()
        if first is None:
            self._fail(UnexpectedEOFError("A-Z", self._source, self._eof_span()))
        idx, char = first
        if not _is_upper(char):
            self._fail(InvalidElementIdentError(char, self._source, Span.at(idx)))

        symbol = [char]
        while (peeked := cursor.peek()) is not None and _is_lower(peeked[1]):
            symbol.append(peeked[1])
            cursor.next()

        self._live_tokens().push_token(Element("".join(symbol)))

    def _parse_bond(self) -> None:
        """Parse ``=``, ``≡``, ``-`` or an explicit ``-[n]`` bond."""
        cursor = self._live_cursor()
        tokens = self._live_tokens()

        first = cursor.next()
        if first is None:
            self._fail(UnexpectedEOFError("-", self._source, self._eof_span()))
        idx, char = first
        if char == "=":
            tokens.push_token(Bond(2))
            return
        if char == "≡":
            tokens.push_token(Bond(3))
            return
        if char != "-":
            self._fail(InvalidBondIdentError(char, self._source, Span.at(idx)))

        peeked = cursor.peek()
        if peeked is None or peeked[1] != "[":
            tokens.push_token(Bond(1))
            return
        cursor.next()

        digits = self._read_digits()

        closing = cursor.next()
        if closing is None:
            self._fail(UnenclosedGroupError("]", None, self._source, self._eof_span()))
        close_idx, close_char = closing
        if close_char != "]":
            self._fail(UnenclosedGroupError("]", close_char, self._source, Span.at(close_idx)))

        tokens.push_token(Bond(_fold_digits(digits)))

    def _parse_repetition(self) -> None:
        """Parse ``_n`` and append n-1 copies of the last accumulated token."""
        cursor = self._live_cursor()
        tokens = self._live_tokens()

        # Dispatch only routes here on '_'
        idx, _ = cursor.next()

        peeked = cursor.peek()
        if peeked is None:
            self._fail(UnexpectedEOFError("0-9", self._source, self._eof_span()))
        if not _is_digit(peeked[1]):
            self._fail(InvalidCharError(peeked[1], self._source, Span.at(peeked[0])))
        digits = self._read_digits()

        target = tokens.last()
        if target is None:
            self._fail(NothingToRepeatError(self._source, Span.at(idx)))
        if digits.strip("0") == "":
            self._fail(ZeroRepetitionCountError(self._source, Span(idx, cursor.offset)))
        count = _fold_digits(digits)

        for _ in range(count - 1):
            tokens.push_token(copy_token(target))

    def _read_digits(self) -> str:
        """Consume a (possibly empty) run of ASCII digits."""
        cursor = self._live_cursor()
        digits = []
        while (peeked := cursor.peek()) is not None and _is_digit(peeked[1]):
            digits.append(peeked[1])
            cursor.next()
        return "".join(digits)


def parse(source: str, options: ParserOptions | None = None) -> TokenStream:
    """Parse a fragment string into a TokenStream.

    This is a convenience function that creates a ChemfigParser and runs
    it to the end of the input.

    Args:
        source: Fragment string to parse.
        options: Parser options; defaults to ParserOptions().

    Returns:
        Parsed TokenStream.

    Raises:
        ParseError: If the fragment syntax is invalid.

    Example:
        >>> parse("C(-H)")
        TokenStream([Element(symbol='C'), Group(children=(Bond(order=1), Element(symbol='H')))])
    """
    return ChemfigParser.parse(source, options)
