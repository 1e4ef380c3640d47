"""
Lox Scanner Package

Front end for the Lox scripting language: turns source text into tokens
and provides the expression tree a parser builds on.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    ├── syntax/          # Expression tree and AST printer
    └── cli.py           # `lox` command: script runner and prompt

Author: xwest
License: MIT
"""

from .version import __version__

__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, LexerError, Token, TokenType, scan
from .syntax import AstPrinter

__all__ = [
    # Core classes
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "AstPrinter",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
