"""
Error handling for the Lox lexer.

Provides error reporting with source location information and
IDE-friendly diagnostics. The lexer is fail-fast: the first error
aborts the scan and is raised to the caller.

Author: xwest
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Code point offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


class LexerErrorKind(Enum):
    """The lexical faults the scanner can detect, valued by error code."""
    UNEXPECTED_CHARACTER = "L001"
    UNTERMINATED_STRING = "L002"

    @property
    def code(self) -> str:
        return self.value


# Common error codes for categorization
ERROR_CODES = {
    LexerErrorKind.UNEXPECTED_CHARACTER.code: "Unexpected character",
    LexerErrorKind.UNTERMINATED_STRING.code: "Unterminated string literal",
}


@dataclass
class Diagnostic:
    """A rendered lexer diagnostic."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a malformed construct.

    Carries the error kind, the plain message and a full diagnostic.
    ``line`` and ``message`` together form the ``(line, message)`` pair
    that drivers print.
    """

    def __init__(
        self,
        kind: LexerErrorKind,
        message: str,
        location: SourceLocation,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=kind.code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        return str(self.diagnostic)


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character no scanning rule accepts."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        LexerErrorKind.UNEXPECTED_CHARACTER,
        message="Unexpected character.",
        location=location,
        help_text=help_text,
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that runs to the end of input."""
    return LexerError(
        LexerErrorKind.UNTERMINATED_STRING,
        message="Unterminated string.",
        location=location,
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote'],
    )
