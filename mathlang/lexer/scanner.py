"""
MathLang Scanner - turns source text into tokens, one per call

The parser pulls tokens with next() until it gets None. There is no
lookahead buffer, classification only ever looks at the first character of
the current whitespace-delimited run:

    a + b;   ->  NAME a, SYMBOL +, NAME b, SYMBOL ;
    x=5;     ->  NAME x, SYMBOL =, NUMBER 5, SYMBOL ;

Numbers are one digit long unless the config says otherwise, see config.py.

xwest
"""

import bisect
import logging
from typing import Iterator, List, Optional

from .tokens import (
    Token, SourceLocation, QUOTE, SEMICOLON,
    is_symbol_char, is_digit_char,
    symbol_token, number_token, name_token, string_token,
)
from .errors import (
    create_malformed_string_error, create_unterminated_string_error,
    create_buffer_overrun_error,
)
from .config import ScannerConfig, NumericMode, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class Scanner:
    """
    MathLang token reader.

    Holds the whole source and a cursor into it. The scanner is forward-only
    and not thread safe; build a new one to scan the same text again.
    """

    def __init__(self, source: str, filename: str = "<string>",
                 config: Optional[ScannerConfig] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: The whole program text (0 or more lines)
            filename: Name of source file for error reporting
            config: Scanner options, defaults to single-digit numbers

        Raises:
            TypeError: If source is missing or not a string
        """
        if source is None:
            raise TypeError("Scanner requires source text, got None")
        if not isinstance(source, str):
            raise TypeError(f"Scanner source must be str, not {type(source).__name__}")

        self._source = source
        self.filename = filename
        self.config = config if config is not None else DEFAULT_CONFIG
        self._pos = 0

        # Offsets where each line begins, for location lookups
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, c in enumerate(source) if c == '\n')

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        """Current cursor offset into the source."""
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._remaining() <= 0

    def next(self) -> Optional[Token]:
        """
        Read the next token.

        Returns:
            The next token, or None once the source is exhausted

        Raises:
            LexerError: On an unterminated string or a read past the source
        """
        # skip leading whitespace
        while self._remaining() > 0 and self._peek().isspace():
            self._pos += 1

        if self._remaining() <= 0:
            logger.debug("End of input in %s at offset %d", self.filename, self._pos)
            return None

        if self._peek() == QUOTE:
            token = self._scan_string()
        else:
            token = self._scan_bare()

        logger.debug("Scanned %s at %s", token, token.location)
        return token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            if token is None:
                return
            yield token

    def tokenize(self) -> List[Token]:
        """Drain the remaining tokens into a list."""
        return list(self)

    def _remaining(self) -> int:
        return len(self._source) - self._pos

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        raise create_buffer_overrun_error(
            self._pos, len(self._source), self._location(len(self._source))
        )

    def _read(self) -> str:
        char = self._peek()
        self._pos += 1
        return char

    def _location(self, offset: int) -> SourceLocation:
        line_index = bisect.bisect_right(self._line_starts, offset) - 1
        column = offset - self._line_starts[line_index] + 1
        return SourceLocation(self.filename, line_index + 1, column, offset)

    def _scan_string(self) -> Token:
        """Scan a double-quoted string. There are no escape sequences."""
        location = self._location(self._pos)

        opening = self._read()
        if opening != QUOTE:
            raise create_malformed_string_error(opening, location)

        end = self._source.find(QUOTE, self._pos)
        if end < 0:
            self._pos = len(self._source)
            raise create_unterminated_string_error(location)

        content = self._source[self._pos:end]
        self._pos = end + 1  # past the closing quote
        return string_token(content, location)

    def _scan_bare(self) -> Token:
        """Scan a symbol, number or name out of the run at the cursor."""
        start = self._pos
        location = self._location(start)

        while self._remaining() > 0 and not self._peek().isspace():
            self._pos += 1
        run = self._source[start:self._pos]

        # a statement terminator is never glued to what precedes it
        if len(run) > 1 and run.endswith(SEMICOLON):
            run = run[:-1]
            self._pos -= 1

        first = run[0]
        if is_symbol_char(first):
            self._pos = start + 1
            return symbol_token(first, location)

        if is_digit_char(first):
            return self._scan_number(run, start, location)

        return self._scan_name(run, start, location)

    def _scan_number(self, run: str, start: int, location: SourceLocation) -> Token:
        length = 1
        if self.config.numeric_mode == NumericMode.GREEDY:
            while length < len(run) and is_digit_char(run[length]):
                length += 1

        digits = run[:length]
        self._pos = start + length
        return number_token(float(digits), digits, location)

    def _scan_name(self, run: str, start: int, location: SourceLocation) -> Token:
        # The name stops in front of the first symbol or digit. The first
        # character is neither, or we would not be here.
        end = 1
        while end < len(run) and not (is_symbol_char(run[end]) or is_digit_char(run[end])):
            end += 1

        name = run[:end]
        self._pos = start + end
        return name_token(name, location)


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[ScannerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        config: Scanner options

    Returns:
        List of tokens, without an end marker

    Raises:
        LexerError: If scanning fails
    """
    return Scanner(source, filename, config).tokenize()


def tokenize_file(filepath: str, config: Optional[ScannerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If scanning fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath, config)
