"""
SQLIndent - A lexical SQL re-indenter

Tokenizes a SQL statement and lays it out again with one clause per
line and indented bodies.
"""

__version__ = "1.0.0"

from .lexer import Lexer, Token, TokenType, tokenize
from .core.formatter import (
    Formatter, FormatOptions, UnbalancedPolicy,
    FormatError, UnbalancedParenthesesError, format_sql,
)

__all__ = [
    "Lexer", "Token", "TokenType", "tokenize",
    "Formatter", "FormatOptions", "UnbalancedPolicy",
    "FormatError", "UnbalancedParenthesesError", "format_sql",
]
