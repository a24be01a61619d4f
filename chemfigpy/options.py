"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_MAX_DEPTH: Final[int] = 256


@dataclass(frozen=True)
class ParserOptions:
    """Options controlling a single parse.

    Attributes:
        max_depth: Maximum group/ring nesting depth. None disables the
            check, leaving only the interpreter's recursion limit.
    """

    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
