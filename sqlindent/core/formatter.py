"""
SQL Formatter - Re-indents a token stream

Walks the tokens once and lays them out with line breaks and
indentation chosen purely from token identity. No parsing is done:
clause keywords open a deeper level, parentheses open and close one,
commas and conjunctions break the line.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from ..lexer.lexer import Lexer, Token, TokenType


logger = logging.getLogger(__name__)


class UnbalancedPolicy(Enum):
    """What to do with a closing parenthesis at indentation level zero"""
    ERROR = auto()
    CLAMP = auto()


@dataclass
class FormatOptions:
    """Formatter configuration"""
    indent: str = "\t"
    on_unbalanced: UnbalancedPolicy = UnbalancedPolicy.ERROR


class FormatError(Exception):
    """Base class for formatter errors"""


class UnbalancedParenthesesError(FormatError):
    """Closing parenthesis with nothing left to close"""
    def __init__(self, token: Token):
        self.token = token
        super().__init__(
            f"Unbalanced closing parenthesis at line {token.line}, column {token.column}"
        )


class Formatter:
    """
    Single-pass SQL re-indenter.

    Usage:
        tokens = Lexer(sql).tokenize()[:-1]
        text = Formatter(tokens).format()

    A Formatter is good for one format() call.
    """

    CLAUSE_KEYWORDS = frozenset({
        'SELECT', 'FROM', 'WHERE', 'UPDATE', 'SET', 'GROUP', 'ORDER',
        'LEFT', 'RIGHT', 'INNER',
    })

    CONJUNCTIONS = frozenset({'AND', 'OR'})

    def __init__(self, tokens: List[Token], options: Optional[FormatOptions] = None):
        self.tokens = tokens
        self.options = options or FormatOptions()
        self.indent_level = 0
        self.lines: List[str] = []
        self.current: List[str] = []
        self.line_open = False
        self.last_token: Optional[Token] = None

    def format(self) -> str:
        """Format the tokens and return the trimmed text"""
        for token in self.tokens:
            if token.type == TokenType.EOF:
                break

            if token.type == TokenType.WHITESPACE:
                continue

            if token.type == TokenType.KEYWORD:
                self._format_keyword(token)
            elif token.type == TokenType.PUNCTUATION:
                self._format_punctuation(token)
            else:
                self._append_with_space(token)

            self.last_token = token

        self._end_line()
        # Only the formatter's own blank lines are trimmed; edge tokens
        # such as an unterminated string may end in whitespace.
        while self.lines and not self.lines[-1]:
            self.lines.pop()
        logger.debug("Formatted %d tokens into %d lines", len(self.tokens), len(self.lines))
        return '\n'.join(self.lines)

    def _format_keyword(self, token: Token) -> None:
        if token.value in self.CLAUSE_KEYWORDS:
            self._new_line()
            self._append(token)
            self._new_line()
            self.indent_level += 1
        elif token.value in self.CONJUNCTIONS:
            self._new_line()
            self._append(token)
        else:
            self._append_with_space(token)

    def _format_punctuation(self, token: Token) -> None:
        if token.value == '(':
            self._append_with_space(token)
            self.indent_level += 1
            self._new_line()
        elif token.value == ')':
            self._dedent(token)
            self._new_line()
            self._append(token)
        elif token.value == ',':
            self._append(token)
            self._new_line()
        else:
            self._append_with_space(token)

    def _dedent(self, token: Token) -> None:
        """Drop one level for a closing parenthesis"""
        if self.indent_level > 0:
            self.indent_level -= 1
            return

        if self.options.on_unbalanced == UnbalancedPolicy.CLAMP:
            logger.warning(
                "Ignoring unbalanced closing parenthesis at line %d, column %d",
                token.line, token.column,
            )
            return

        raise UnbalancedParenthesesError(token)

    def _append(self, token: Token) -> None:
        """Write token text with no separator"""
        if not self.line_open:
            self.current.append(self.options.indent * self.indent_level)
            self.line_open = True
        self.current.append(token.value)

    def _append_with_space(self, token: Token) -> None:
        """Write token text, space-separated unless after '(' or at line start"""
        if self.line_open and not self._after_open_paren():
            self.current.append(' ')
        self._append(token)

    def _after_open_paren(self) -> bool:
        last = self.last_token
        return last is not None and last.type == TokenType.PUNCTUATION and last.value == '('

    def _new_line(self) -> None:
        """End the current line; a second break in a row leaves a blank line"""
        if self.line_open:
            self._end_line()
        elif self.lines:
            self.lines.append('')

    def _end_line(self) -> None:
        if self.line_open:
            self.lines.append(''.join(self.current))
            self.current = []
            self.line_open = False


def format_sql(sql: str, options: Optional[FormatOptions] = None) -> str:
    """Tokenize and re-indent a SQL string"""
    tokens = Lexer(sql).tokenize()
    return Formatter(tokens[:-1], options).format()
