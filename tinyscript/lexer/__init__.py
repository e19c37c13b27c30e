"""
TinyScript Lexer Package

Implements a hand-written lexical scanner for the TinyScript language.

Key Features:
- Single-pass scanning with two-character lookahead for ==, !=, <=, >=
- Integer and decimal number literals
- Unicode letters in identifiers
- Source location tracking (1-based line and column)
- Caret-pointer diagnostics for invalid characters

Author: xwest
"""

from .tokens import Token, TokenKind, SourceLocation
from .lexer import Scanner, scan, scan_file
from .errors import LexerError, Diagnostic

__all__ = [
    "Scanner",
    "scan",
    "scan_file",
    "Token",
    "TokenKind",
    "SourceLocation",
    "LexerError",
    "Diagnostic",
]
