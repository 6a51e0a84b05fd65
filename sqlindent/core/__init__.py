"""Core module - Formatter, options, errors and the shell"""

from .formatter import (
    Formatter, FormatOptions, UnbalancedPolicy,
    FormatError, UnbalancedParenthesesError, format_sql,
)
from .shell import FormatShell

__all__ = [
    'Formatter', 'FormatOptions', 'UnbalancedPolicy',
    'FormatError', 'UnbalancedParenthesesError', 'format_sql',
    'FormatShell',
]
