"""
Lisp-style printer for Lox expression trees.

Author: xwest
"""

from .ast_nodes import Binary, Expr, Grouping, Literal, Unary


class AstPrinter:
    """
    Renders an expression as a fully parenthesized string.

    ``-123 * (45.67)`` prints as ``(* (- 123) (group 45.67))``.
    """

    def print(self, expr: Expr) -> str:
        if isinstance(expr, Binary):
            return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)
        if isinstance(expr, Grouping):
            return self._parenthesize("group", expr.expression)
        if isinstance(expr, Literal):
            return expr.value if expr.value else "nil"
        if isinstance(expr, Unary):
            return self._parenthesize(expr.operator.lexeme, expr.right)
        raise TypeError(f"Unknown expression node: {type(expr).__name__}")

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name]
        parts.extend(self.print(expr) for expr in exprs)
        return "(" + " ".join(parts) + ")"
