"""
Error handling for the TinyScript scanner.

Every lexical error goes through one reporting path: the diagnostic names the
offending character and its position, then quotes the source line with a
caret under the offending column.

Author: xwest
"""

import unicodedata
from typing import Optional, Sequence
from dataclasses import dataclass

from .tokens import SourceLocation


ERROR_MARKER = "❌ Lexical error"


@dataclass
class Diagnostic:
    """A formatted lexical diagnostic."""
    message: str
    location: SourceLocation
    source_line: str
    pointer: str
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"{ERROR_MARKER}: {self.message}\n{self.source_line}\n{self.pointer}"


class LexerError(Exception):
    """
    Exception raised when the scanner encounters an invalid construct.

    Always fatal to the current scan. ``str(error)`` is the full multi-line
    diagnostic; the structured fields are kept for callers that want to
    render it themselves.
    """

    def __init__(
        self,
        message: str,
        char: str,
        location: SourceLocation,
        source_line: str = "",
        code: Optional[str] = None,
    ):
        self.char = char
        self.location = location
        self.source_line = source_line
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            source_line=source_line,
            pointer=make_pointer(location.column),
            code=code,
        )
        super().__init__(str(self.diagnostic))

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def __str__(self) -> str:
        return str(self.diagnostic)


def make_pointer(column: int) -> str:
    """Return ``column - 1`` spaces followed by a caret."""
    return " " * max(column - 1, 0) + "^"


def printable(char: str) -> str:
    """Render control characters as ``\\uXXXX``, anything else literally."""
    if unicodedata.category(char) == "Cc":
        return f"\\u{ord(char):04x}"
    return char


def create_invalid_character_error(
    char: str,
    location: SourceLocation,
    lines: Sequence[str],
) -> LexerError:
    """
    Create an error for a character that cannot start or continue a token.

    Args:
        char: The offending character
        location: Where to point the caret
        lines: The source split on newlines; out-of-range lines quote as ""
    """
    index = location.line - 1
    source_line = lines[index] if 0 <= index < len(lines) else ""

    return LexerError(
        message=(
            f"invalid character '{printable(char)}' "
            f"at line {location.line}, column {location.column}"
        ),
        char=char,
        location=location,
        source_line=source_line,
        code="L001",
    )
