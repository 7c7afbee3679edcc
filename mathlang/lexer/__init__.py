"""
MathLang Lexer Package

Implements the token reader for the MathLang expression language. The
parser pulls one token at a time from a Scanner until it returns None.

Key Features:
- Four token kinds: symbols, numbers, names and strings
- Statement terminators are always split off the preceding lexeme
- Source location tracking for error messages
- Legacy single-digit or greedy number scanning

Author: xwest
"""

from .tokens import (
    Token, TokenType, SourceLocation, SYMBOLS,
    symbol_token, number_token, name_token, string_token,
)
from .scanner import Scanner, tokenize_string, tokenize_file
from .config import ScannerConfig, NumericMode
from .errors import LexerError, ERROR_CODES

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "SourceLocation",
    "SYMBOLS",
    "symbol_token",
    "number_token",
    "name_token",
    "string_token",
    "tokenize_string",
    "tokenize_file",
    "ScannerConfig",
    "NumericMode",
    "LexerError",
    "ERROR_CODES",
]
