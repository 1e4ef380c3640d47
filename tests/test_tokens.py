"""
Tests for token values and the keyword table.

Author: xwest
"""

import unittest
import sys
import os
from dataclasses import FrozenInstanceError

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.tokens import Token, TokenType, KEYWORDS


class TestToken(unittest.TestCase):
    """Token value semantics."""

    def test_display(self):
        self.assertEqual(str(Token(TokenType.PLUS, "+", None, 1, 0)), "PLUS + ")
        self.assertEqual(str(Token(TokenType.NUMBER, "12", "12", 1, 0)), "NUMBER 12 12")
        self.assertEqual(str(Token(TokenType.STRING, '"hi"', "hi", 3, 0)), 'STRING "hi" hi')
        self.assertEqual(str(Token(TokenType.EOF, "", None, 1, 0)), "EOF  ")

    def test_structural_equality(self):
        a = Token(TokenType.IDENTIFIER, "x", None, 2, 5)
        b = Token(TokenType.IDENTIFIER, "x", None, 2, 5)
        self.assertEqual(a, b)
        self.assertEqual(len({a, b}), 1)
        self.assertNotEqual(a, Token(TokenType.IDENTIFIER, "x", None, 3, 5))

    def test_immutable(self):
        token = Token(TokenType.DOT, ".", None, 1, 0)
        with self.assertRaises(FrozenInstanceError):
            token.line = 2

    def test_offset_is_required(self):
        with self.assertRaises(TypeError):
            Token(TokenType.DOT, ".", None, 1)

    def test_span(self):
        token = Token(TokenType.STRING, '"abc"', "abc", 1, 4)
        self.assertEqual(token.span, (4, 9))

    def test_classification(self):
        self.assertTrue(Token(TokenType.WHILE, "while", None, 1, 0).is_keyword)
        self.assertFalse(Token(TokenType.IDENTIFIER, "whale", None, 1, 0).is_keyword)
        self.assertTrue(Token(TokenType.NUMBER, "1", "1", 1, 0).is_literal)
        self.assertFalse(Token(TokenType.TRUE, "true", None, 1, 0).is_literal)


class TestKeywordTable(unittest.TestCase):
    """The shared reserved-word table."""

    def test_contents(self):
        self.assertEqual(len(KEYWORDS), 16)
        self.assertEqual(sorted(KEYWORDS), [
            "and", "class", "else", "false", "for", "fun", "if", "nil",
            "or", "print", "return", "super", "this", "true", "var", "while",
        ])
        for spelling, token_type in KEYWORDS.items():
            self.assertEqual(token_type.name.lower(), spelling)

    def test_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["let"] = TokenType.VAR
        self.assertNotIn("let", KEYWORDS)


if __name__ == '__main__':
    unittest.main()
