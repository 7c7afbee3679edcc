"""
Token definitions for the MathLang scanner.

MathLang only has four kinds of lexical unit:
- Symbols (the single-character operators ; + - =)
- Numbers
- Names (identifiers and keywords, the parser tells them apart)
- Strings (double-quoted, no escapes)

End of input is not a token. The scanner returns None instead.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional, Union


class TokenType(Enum):
    """Enumeration of all token types in MathLang."""

    SYMBOL = auto()                 # ; + - =
    NUMBER = auto()                 # 5
    NAME = auto()                   # x, print, let
    STRING = auto()                 # "hello world"


# The operators and punctuation the language recognizes. Never mutated.
SYMBOLS = frozenset({';', '+', '-', '='})

# Only ASCII digits count, str.isdigit() would also accept things like '²'
DIGITS = frozenset('0123456789')

SEMICOLON = ';'
QUOTE = '"'


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and the token dump of the CLI.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the MathLang language.

    Tokens compare by type, lexeme and value only, so a token built by hand
    in a parser test equals the one the scanner produced at some location.
    """
    type: TokenType
    lexeme: str                                 # Raw text from source
    value: Union[str, float]                    # Semantic value
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_symbol(self) -> bool:
        return self.type == TokenType.SYMBOL

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_name(self) -> bool:
        return self.type == TokenType.NAME

    @property
    def is_string(self) -> bool:
        return self.type == TokenType.STRING


def is_symbol_char(char: str) -> bool:
    return char in SYMBOLS


def is_digit_char(char: str) -> bool:
    return char in DIGITS


def symbol_token(char: str, location: Optional[SourceLocation] = None) -> Token:
    """Create a symbol token. Raises ValueError for anything outside SYMBOLS."""
    if char not in SYMBOLS:
        raise ValueError(f"Not a MathLang symbol: {char!r}")
    return Token(TokenType.SYMBOL, char, char, location)


def number_token(value: float, lexeme: Optional[str] = None,
                 location: Optional[SourceLocation] = None) -> Token:
    """
    Create a number token.

    Args:
        value: Numeric value, stored as a float
        lexeme: Source text of the literal, defaults to the integral form of value
        location: Where the literal starts
    """
    value = float(value)
    if lexeme is None:
        lexeme = str(int(value)) if value.is_integer() else repr(value)
    return Token(TokenType.NUMBER, lexeme, value, location)


def name_token(name: str, location: Optional[SourceLocation] = None) -> Token:
    return Token(TokenType.NAME, name, name, location)


def string_token(content: str, location: Optional[SourceLocation] = None) -> Token:
    # lexeme keeps the quotes, value is what the parser wants
    return Token(TokenType.STRING, f'{QUOTE}{content}{QUOTE}', content, location)
