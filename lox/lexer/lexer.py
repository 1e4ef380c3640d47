"""
Lox Lexer - turns source text into a flat list of tokens

Single left-to-right pass over the source, never looking more than two
characters ahead. The scan stops at the first malformed construct and
raises it; there is no error recovery.

xwest
"""

import unicodedata
from typing import List, Optional

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS
)
from .errors import (
    SourceLocation, create_unexpected_character_error,
    create_unterminated_string_error
)


class Lexer:
    """
    Lox lexical analyzer.

    Holds the cursor state for exactly one source text. ``start`` marks the
    first character of the lexeme being built, ``current`` the next
    character to read.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

        # Line of the lexeme's first character; strings may span lines
        self.start_line = 1
        # Offset of the first character of the current line, for columns
        self.line_start = 0

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with exactly one EOF token

        Raises:
            LexerError: On the first unexpected character or unterminated string
        """
        self.tokens = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self.line_start = 0

        while not self._is_at_end():
            self.start = self.current
            self.start_line = self.line
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line, self.current))
        return list(self.tokens)

    def _scan_token(self):
        """Consume one lexeme, adding at most one token."""
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            with_equal, alone = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(with_equal if self._match("=") else alone)
        elif char == "/":
            if self._match("/"):
                # Line comment runs up to, not including, the newline
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in (" ", "\r", "\t"):
            pass
        elif char == "\n":
            self._newline()
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            raise create_unexpected_character_error(char, self._location(self.start))

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._advance() == "\n":
                self._newline()

        if self._is_at_end():
            raise create_unterminated_string_error(self._location(self.current))

        self._advance()  # Closing quote

        # No escape sequences: the payload is the raw text between the quotes
        self._add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def _number(self):
        """Scan an integer or decimal literal."""
        while _is_digit(self._peek()):
            self._advance()

        # A trailing '.' without a digit after it belongs to the next token
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, self.source[self.start:self.current])

    def _identifier(self):
        """Scan an identifier, promoting reserved words to their own type."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal: Optional[str] = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line, self.start))

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _newline(self):
        """Record a consumed newline character."""
        self.line += 1
        self.line_start = self.current

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _location(self, offset: int) -> SourceLocation:
        return SourceLocation(
            self.filename, self.line, offset - self.line_start + 1, offset
        )


def _is_digit(char: str) -> bool:
    """ASCII decimal digits only; other Unicode digits are not numbers in Lox."""
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return char == "_" or char.isalpha()


def _is_alphanumeric(char: str) -> bool:
    """Identifier continuation; combining marks keep decomposed letters whole."""
    return (_is_alpha(char) or _is_digit(char) or
            unicodedata.category(char) in ("Mn", "Mc"))


def scan(source: str) -> List[Token]:
    """
    Scan a source text into tokens.

    Raises:
        LexerError: If the source contains a lexical fault
    """
    return Lexer(source).scan_tokens()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a named source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).scan_tokens()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
