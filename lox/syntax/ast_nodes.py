"""
Expression tree node definitions for Lox.

The set of expression forms is closed: Binary, Grouping, Literal and
Unary. Consumers dispatch on the concrete class in one place instead of
going through a visitor hierarchy.

Author: xwest
"""

from dataclasses import dataclass
from typing import Optional

from ..lexer.tokens import Token


class Expr:
    """Base class for all expression nodes."""


@dataclass(frozen=True)
class Binary(Expr):
    """Infix operation: ``left operator right``."""
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    expression: Expr


@dataclass(frozen=True)
class Literal(Expr):
    """Literal value in its textual form; None stands for nil."""
    value: Optional[str]


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operation: ``operator right``."""
    operator: Token
    right: Expr
