"""
Lox Syntax Package

Expression tree types and the AST printer. Parsing tokens into these
trees is left to a later front-end stage.

Author: xwest
"""

from .ast_nodes import Expr, Binary, Grouping, Literal, Unary
from .printer import AstPrinter

__all__ = [
    "Expr",
    "Binary",
    "Grouping",
    "Literal",
    "Unary",
    "AstPrinter",
]
