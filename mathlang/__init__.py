"""
MathLang Package

Front end for the MathLang teaching language: a small expression language
of assignments and prints.

Architecture:
    mathlang/
    ├── lexer/           # Tokenization
    └── cli.py           # Token dump for debugging programs

Parsing and evaluation live with the consumers of the token stream.

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, LexerError

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "LexerError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
