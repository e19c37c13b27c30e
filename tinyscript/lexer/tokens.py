"""
Token definitions for the TinyScript scanner.

This module defines the token kinds produced by the scanner and the
classification tables it consults:
- Keywords (`var`, `print`)
- Single-character and two-character symbols
- Parens and braces

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenKind(Enum):
    """
    Enumeration of all token kinds in TinyScript.

    The set is closed: parens and braces each share one kind, and the
    lexeme tells the opening and closing forms apart.
    """

    IDENTIFIER = auto()             # x, total, _tmp, año
    KEYWORD = auto()                # var, print
    NUMBER = auto()                 # 10, 12.5
    SYMBOL = auto()                 # + - * / % = ; , . : == != <= >=
    PAREN = auto()                  # ( )
    BRACE = auto()                  # { }
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Lines and columns are 1-based; offset is the index into the source string.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the TinyScript language.

    Tokens are created once per recognized unit and never mutated.
    """
    kind: TokenKind
    lexeme: str                     # Raw text from source
    location: SourceLocation        # Position of the first character

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def __str__(self) -> str:
        return f"<{self.kind.name}, '{self.lexeme}', line={self.line}, col={self.column}>"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.location!r})"

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.kind == TokenKind.IDENTIFIER

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenKind.EOF


# Lookup tables for token recognition.
# Module-level and immutable, shared by every scanner instance.

KEYWORDS = frozenset({
    "var",
    "print",
})

SINGLE_CHAR_SYMBOLS = frozenset({
    "+", "-", "*", "/", "%", "=", ";", ",", ".", ":",
})

TWO_CHAR_SYMBOLS = frozenset({
    "==", "!=", "<=", ">=",
})

PARENS = frozenset({"(", ")"})

BRACES = frozenset({"{", "}"})

WHITESPACE = frozenset({" ", "\t", "\r", "\n"})
