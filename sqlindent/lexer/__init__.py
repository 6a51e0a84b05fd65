"""Lexer module - Tokens and the SQL Lexer"""

from .lexer import Lexer, Token, TokenType, tokenize

__all__ = ['Lexer', 'Token', 'TokenType', 'tokenize']
