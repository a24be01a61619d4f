"""
Custom exceptions for chemfigpy.

Every parse failure is a subclass of ParseError carrying the byte span
of the offending input. Subclasses add the characters involved and
expose a stable ``kind`` name.
"""

from __future__ import annotations

from chemfigpy.span import Span


class ChemError(Exception):
    """Base exception for all chemfigpy errors."""

    pass


class ParseError(ChemError):
    """Error during fragment parsing.

    Attributes:
        message: Description of what went wrong.
        source: The original source string being parsed.
        span: Byte span of the offending input.
        kind: Short name of the error kind.
    """

    kind = "ParseError"

    def __init__(
        self,
        message: str,
        source: str | None = None,
        span: Span | None = None,
    ) -> None:
        self.message = message
        self.source = source
        self.span = span

        # Build detailed error message
        parts = [message]
        if source is not None and span is not None:
            parts.append(f"\n  {source}")
            parts.append(f"\n  {' ' * _char_column(source, span.start)}^")
        elif source is not None:
            parts.append(f" in: {source}")

        super().__init__("".join(parts))

    @property
    def position(self) -> int | None:
        """Byte offset where the error starts."""
        return self.span.start if self.span is not None else None


def _char_column(source: str, byte_offset: int) -> int:
    """Convert a byte offset into a character column for the caret line."""
    prefix = source.encode("utf-8", errors="surrogatepass")[:byte_offset]
    return len(prefix.decode("utf-8", errors="ignore"))


class InvalidCharError(ParseError):
    """A character that starts no known form."""

    kind = "InvalidChar"

    def __init__(self, found: str, source: str | None = None, span: Span | None = None) -> None:
        self.found = found
        super().__init__(f"Invalid char {found!r}", source, span)


class UnenclosedGroupError(ParseError):
    """An opening or closing delimiter was expected but something else was found.

    Attributes:
        expected: The delimiter that was required.
        found: The character found instead, or None at end of input.
    """

    kind = "UnenclosedGroup"

    def __init__(
        self,
        expected: str,
        found: str | None,
        source: str | None = None,
        span: Span | None = None,
    ) -> None:
        self.expected = expected
        self.found = found
        shown = "EOF" if found is None else repr(found)
        super().__init__(f"Unenclosed group, expected {expected!r}, found {shown}", source, span)


class UnexpectedEOFError(ParseError):
    """Input ended where a specific character was required."""

    kind = "UnexpectedEOF"

    def __init__(self, expected: str, source: str | None = None, span: Span | None = None) -> None:
        self.expected = expected
        super().__init__(f"Expected {expected!r}, found EOF", source, span)


class InvalidBondIdentError(ParseError):
    """Bond dispatch met a character that is not a bond glyph."""

    kind = "InvalidBondIdent"

    def __init__(self, found: str, source: str | None = None, span: Span | None = None) -> None:
        self.found = found
        super().__init__(
            f"Expected bond identifier (-, =, ≡, -[n]), found {found!r}",
            source,
            span,
        )


class InvalidElementIdentError(ParseError):
    """Element dispatch met a character that is not an uppercase ASCII letter."""

    kind = "InvalidElementIdent"

    def __init__(self, found: str, source: str | None = None, span: Span | None = None) -> None:
        self.found = found
        super().__init__(f"Expected uppercase element letter, found {found!r}", source, span)


class NothingToRepeatError(ParseError):
    """Repetition with no preceding token."""

    kind = "NothingToRepeat"

    def __init__(self, source: str | None = None, span: Span | None = None) -> None:
        super().__init__("Nothing to repeat", source, span)


class ZeroRepetitionCountError(ParseError):
    """Repetition count of zero."""

    kind = "ZeroRepetitionCount"

    def __init__(self, source: str | None = None, span: Span | None = None) -> None:
        super().__init__("Repetition count must be at least 1", source, span)


class RingMissingBondError(ParseError):
    """Ring whose last inner token is not a bond."""

    kind = "RingMissingBond"

    def __init__(self, source: str | None = None, span: Span | None = None) -> None:
        super().__init__("Ring must end with a closing bond", source, span)


class NestingTooDeepError(ParseError):
    """Groups nested beyond the configured depth limit.

    Attributes:
        max_depth: The limit that was exceeded.
    """

    kind = "NestingTooDeep"

    def __init__(self, max_depth: int, source: str | None = None, span: Span | None = None) -> None:
        self.max_depth = max_depth
        super().__init__(f"Groups nested deeper than {max_depth} levels", source, span)
