"""Byte-offset source spans used to locate parse errors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Half-open byte interval ``[start, end)`` into a source string.

    Offsets count UTF-8 bytes, not characters, so a multi-byte character
    such as the triple bond glyph shifts every later offset.

    Attributes:
        start: First byte covered by the span.
        end: One past the last byte covered by the span.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    @classmethod
    def at(cls, offset: int, width: int = 1) -> "Span":
        """Span of ``width`` bytes starting at ``offset``."""
        return cls(offset, offset + width)

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, source: str) -> str:
        """Return the text of ``source`` covered by this span.

        Bytes that only partially cover a character are dropped.
        """
        raw = source.encode("utf-8", errors="surrogatepass")[self.start:self.end]
        return raw.decode("utf-8", errors="ignore")

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"
