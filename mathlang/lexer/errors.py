"""
Error handling for the MathLang scanner.

Every failure surfaces straight to the caller of Scanner.next(). There is
no recovery or partial token, the scanner just reports where it stopped.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A scanner diagnostic with its location and optional help."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the scanner cannot produce a token.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Malformed string literal",
    "L002": "Unterminated string literal",
    "L003": "Read past end of source",
}


def create_malformed_string_error(found: str, location: SourceLocation) -> LexerError:
    """Create an error for a string scan that did not start on a quote."""
    return LexerError(
        message="Strings must start with opening quotes",
        location=location,
        code="L001",
        help_text=f"Found {found!r} where a '\"' was expected."
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for an unterminated string literal."""
    return LexerError(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text="String literals must be closed with a matching \" quote.",
        suggestions=["Add a closing \" quote",
                     "Strings cannot contain quotes, there are no escape sequences"]
    )


def create_buffer_overrun_error(offset: int, length: int, location: SourceLocation) -> LexerError:
    """Create an error for a read beyond the end of the source."""
    return LexerError(
        message=f"Read at offset {offset} is outside of the source (length {length})",
        location=location,
        code="L003",
        help_text="This is a scanner bug, the cursor should never leave the source."
    )
