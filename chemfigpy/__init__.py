"""
Chemfigpy - Pure Python parser for chemical fragment notation.

A zero-dependency library that turns compact fragment strings (elements,
bonds, branches, rings and repetition) into a token tree.

    >>> from chemfigpy import parse, to_chemfig
    >>> tokens = parse("C(-H)_2")
    >>> to_chemfig(tokens)
    'C(-H)(-H)'

Errors are raised as ParseError subclasses carrying a byte span into
the source.
"""

import logging

__version__ = "0.1.0"

# Core types
from chemfigpy.span import Span
from chemfigpy.tokens import Bond, BondOrder, Element, Group, Ring, Token, TokenStream

# Parsing and writing
from chemfigpy.options import ParserOptions
from chemfigpy.parser import parse, ChemfigParser, CharCursor
from chemfigpy.writer import to_chemfig, ChemfigWriter

# Exceptions
from chemfigpy.exceptions import (
    ChemError,
    ParseError,
    InvalidCharError,
    UnenclosedGroupError,
    UnexpectedEOFError,
    InvalidBondIdentError,
    InvalidElementIdentError,
    NothingToRepeatError,
    ZeroRepetitionCountError,
    RingMissingBondError,
    NestingTooDeepError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "Span", "Element", "Bond", "BondOrder", "Group", "Ring", "Token", "TokenStream",
    # Parsing
    "parse", "ChemfigParser", "CharCursor", "ParserOptions",
    # Writing
    "to_chemfig", "ChemfigWriter",
    # Exceptions
    "ChemError", "ParseError", "InvalidCharError", "UnenclosedGroupError",
    "UnexpectedEOFError", "InvalidBondIdentError", "InvalidElementIdentError",
    "NothingToRepeatError", "ZeroRepetitionCountError", "RingMissingBondError",
    "NestingTooDeepError",
]
