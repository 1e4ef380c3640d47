"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox scripting language.

Key Features:
- Single pass with at most two characters of lookahead
- Code point scanning, so non-ASCII text survives in strings,
  comments and identifiers
- Fail-fast diagnostics with line and column information
- Shared, read-only keyword table

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, scan, tokenize_string, tokenize_file
from .errors import LexerError, LexerErrorKind, SourceLocation, Diagnostic

__all__ = [
    "Lexer",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "LexerErrorKind",
]
