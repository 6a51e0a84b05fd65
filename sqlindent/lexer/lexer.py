"""
SQL Lexer - Tokenizes SQL statements

Converts raw SQL strings into a stream of classified tokens for the
formatter. The lexer never fails: unknown characters, unterminated
strings and digits running into letters all produce some token.
"""

import logging
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Iterator, List, Optional


logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Lexical categories of SQL tokens"""
    KEYWORD = auto()
    IDENTIFIER = auto()
    LITERAL = auto()
    OPERATOR = auto()
    PUNCTUATION = auto()
    WHITESPACE = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A single token. Position is not part of equality."""
    type: TokenType
    value: Optional[str] = None
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)

    def __repr__(self):
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"


class Lexer:
    """SQL Lexer - converts SQL text to tokens"""

    KEYWORDS = frozenset({
        'SELECT', 'FROM', 'WHERE', 'AND', 'OR', 'INSERT', 'INTO', 'UPDATE',
        'SET', 'DELETE', 'JOIN', 'LEFT', 'RIGHT', 'OUTER', 'INNER', 'ON',
        'GROUP', 'BY', 'ORDER', 'HAVING', 'AS', 'CREATE', 'TABLE', 'DROP',
        'ALTER',
    })

    WHITESPACE = ' \t\n\r'
    PUNCTUATION = ',;()'
    OPERATORS = '+-*/=<>'
    DIGITS = '0123456789'

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def _current_char(self) -> Optional[str]:
        """Get current character or None if at end"""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def _advance(self) -> str:
        """Advance position and return current char"""
        char = self._current_char()
        self.pos += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _read_string(self, line: int, column: int) -> Token:
        """Read a single-quoted literal, keeping both quotes"""
        value = [self._advance()]  # Opening quote

        while self._current_char() is not None and self._current_char() != "'":
            value.append(self._advance())

        # Unterminated literals just end with the input
        if self._current_char() == "'":
            value.append(self._advance())

        return Token(TokenType.LITERAL, ''.join(value), line, column)

    def _read_number(self, line: int, column: int) -> Token:
        """Read a run of decimal digits"""
        value = []
        while self._current_char() is not None and self._current_char() in self.DIGITS:
            value.append(self._advance())
        return Token(TokenType.LITERAL, ''.join(value), line, column)

    def _read_identifier(self, line: int, column: int) -> Token:
        """Read an identifier or keyword"""
        value = []
        while self._current_char() is not None and self._current_char().isalnum():
            value.append(self._advance())

        identifier = ''.join(value)
        upper_id = identifier.upper()

        if upper_id in self.KEYWORDS:
            return Token(TokenType.KEYWORD, upper_id, line, column)

        return Token(TokenType.IDENTIFIER, identifier, line, column)

    def next_token(self) -> Token:
        """Return the next token; EOF forever once the input is used up"""
        char = self._current_char()
        line, column = self.line, self.column

        if char is None:
            return Token(TokenType.EOF, None, line, column)

        if char in self.WHITESPACE:
            self._advance()
            return Token(TokenType.WHITESPACE, None, line, column)

        if char in self.PUNCTUATION:
            self._advance()
            return Token(TokenType.PUNCTUATION, char, line, column)

        if char in self.OPERATORS:
            self._advance()
            return Token(TokenType.OPERATOR, char, line, column)

        if char == "'":
            return self._read_string(line, column)

        if char.isalpha():
            return self._read_identifier(line, column)

        if char in self.DIGITS:
            return self._read_number(line, column)

        # Anything else becomes a one-character identifier
        self._advance()
        return Token(TokenType.IDENTIFIER, char, line, column)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, EOF"""
        while True:
            token = self.next_token()
            if token.type == TokenType.EOF:
                return
            yield token

    def tokenize(self) -> List[Token]:
        """Tokenize the entire input, EOF included"""
        tokens = list(self)
        tokens.append(self.next_token())
        logger.debug("Tokenized %d characters into %d tokens", len(self.text), len(tokens))
        return tokens


def tokenize(sql: str) -> List[Token]:
    """Tokenize a SQL string, EOF included"""
    return Lexer(sql).tokenize()
