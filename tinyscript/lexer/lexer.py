"""
TinyScript Scanner - turns source text into tokens

Single forward pass, one character of lookahead (two for the compound
comparison operators). No recovery: the first bad character aborts the scan
with a LexerError carrying the formatted diagnostic.

xwest
"""

from typing import List

from .tokens import (
    Token, TokenKind, SourceLocation, KEYWORDS, SINGLE_CHAR_SYMBOLS,
    TWO_CHAR_SYMBOLS, PARENS, BRACES, WHITESPACE
)
from .errors import LexerError, create_invalid_character_error
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """
    TinyScript lexical analyzer.

    A scanner is built from one source string and consumed once by scan().
    It holds mutable cursor state and is not safe to share between threads.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            filename: Name of the source for locations and logging
        """
        self.source = source
        self.filename = filename
        # Kept for quoting the offending line in diagnostics
        self.lines = source.split("\n")
        self.pos = 0
        self.line = 1
        self.column = 1
        self._consumed = False

    def scan(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens terminated by exactly one EOF token

        Raises:
            LexerError: On the first invalid character or malformed number
            RuntimeError: If this scanner has already been used
        """
        if self._consumed:
            raise RuntimeError("Scanner instances are single-use; create a new Scanner")
        self._consumed = True

        tokens: List[Token] = []

        while not self._is_at_end():
            self._skip_whitespace()
            if self._is_at_end():
                break

            start_pos = self.pos
            start_line = self.line
            start_column = self.column
            location = SourceLocation(self.filename, start_line, start_column, start_pos)

            c = self._peek()

            # Identifiers and keywords
            if self._is_identifier_start(c):
                lexeme = self._read_identifier()
                kind = TokenKind.KEYWORD if lexeme in KEYWORDS else TokenKind.IDENTIFIER
                tokens.append(Token(kind, lexeme, location))
                continue

            # Numbers (integers and decimals)
            if c.isdecimal():
                tokens.append(Token(TokenKind.NUMBER, self._read_number(), location))
                continue

            if c in PARENS:
                self._advance()
                tokens.append(Token(TokenKind.PAREN, c, location))
                continue

            if c in BRACES:
                self._advance()
                tokens.append(Token(TokenKind.BRACE, c, location))
                continue

            # Two-character operators before single ones, so == never splits
            two = self._lookahead2()
            if two in TWO_CHAR_SYMBOLS:
                self._advance()
                self._advance()
                tokens.append(Token(TokenKind.SYMBOL, two, location))
                continue

            if c in SINGLE_CHAR_SYMBOLS:
                self._advance()
                tokens.append(Token(TokenKind.SYMBOL, c, location))
                continue

            raise self._invalid_character(c, start_line, start_column, start_pos)

        eof_location = SourceLocation(self.filename, self.line, self.column, self.pos)
        tokens.append(Token(TokenKind.EOF, "", eof_location))

        logger.debug("Scanned %d tokens from %s", len(tokens), self.filename)
        return tokens

    # ------------------------------------------------------------------
    # Reading helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _peek(self) -> str:
        return self.source[self.pos]

    def _lookahead2(self) -> str:
        """Return the next two characters, or "" if fewer than two remain."""
        if self.pos + 1 >= len(self.source):
            return ""
        return self.source[self.pos:self.pos + 2]

    def _advance(self):
        """Advance position by one character, updating line/column."""
        c = self.source[self.pos]
        self.pos += 1
        if c == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

    def _skip_whitespace(self):
        while not self._is_at_end() and self._peek() in WHITESPACE:
            self._advance()

    def _is_identifier_start(self, c: str) -> bool:
        return c.isalpha() or c == "_"

    def _is_identifier_part(self, c: str) -> bool:
        return c.isalpha() or c.isdecimal() or c == "_"

    def _read_identifier(self) -> str:
        start = self.pos
        self._advance()  # first character already validated
        while not self._is_at_end() and self._is_identifier_part(self._peek()):
            self._advance()
        return self.source[start:self.pos]

    def _read_number(self) -> str:
        """
        Read digits with at most one decimal point.

        A consumed dot must be followed by a digit. A second dot ends the
        number and is left for the next token.
        """
        start = self.pos
        seen_dot = False

        while not self._is_at_end():
            c = self._peek()
            if c.isdecimal():
                self._advance()
            elif c == "." and not seen_dot:
                seen_dot = True
                self._advance()
                if self._is_at_end():
                    # Nothing follows the dot: report the dot at the cursor
                    raise self._invalid_character(c, self.line, self.column, self.pos)
                if not self._peek().isdecimal():
                    raise self._invalid_character(self._peek(), self.line, self.column, self.pos)
            else:
                break

        return self.source[start:self.pos]

    def _invalid_character(self, c: str, line: int, column: int, offset: int) -> LexerError:
        location = SourceLocation(self.filename, line, column, offset)
        logger.debug("Invalid character %r at %s", c, location)
        return create_invalid_character_error(c, location, self.lines)


def scan(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        filename: Filename for locations

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning fails
    """
    return Scanner(source, filename).scan()


def scan_file(filepath: str) -> List[Token]:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning fails
        OSError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    return scan(source, filepath)
