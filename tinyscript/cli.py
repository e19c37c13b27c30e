"""
Console front end for the TinyScript scanner.

Reads source either from a file or from the console until a sentinel line,
scans it, and lists the tokens. Lexical errors are printed to stderr and
turn into a non-zero exit status.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .lexer import LexerError, Scanner, Token, TokenKind, scan_file
from .utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SENTINEL = "EOF"

EXIT_OK = 0
EXIT_LEXICAL_ERROR = 1
EXIT_IO_ERROR = 2


def read_until_sentinel(stream: TextIO, sentinel: str = DEFAULT_SENTINEL) -> str:
    """
    Collect lines from ``stream`` until one equals ``sentinel``.

    Each collected line keeps a trailing newline. End of stream also stops
    reading, so piping a file without the sentinel works.
    """
    lines = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if line == sentinel:
            break
        lines.append(line + "\n")
    return "".join(lines)


def print_tokens(tokens: List[Token], out: TextIO, show_eof: bool = False):
    print("\n=== TOKENS ===", file=out)
    for token in tokens:
        if token.kind == TokenKind.EOF and not show_eof:
            continue
        print(token, file=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinyscript",
        description="Scan TinyScript source and list its tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    tinyscript                      # Paste code, finish with a line: EOF
    tinyscript program.ts           # Scan a file
    tinyscript --sentinel END       # Use END as the terminating line
        """
    )

    parser.add_argument('file', nargs='?',
                      help='Source file to scan (reads the console if omitted)')
    parser.add_argument('--sentinel', default=DEFAULT_SENTINEL,
                      help=f'Line that ends console input (default: {DEFAULT_SENTINEL})')
    parser.add_argument('--show-eof', action='store_true',
                      help='Include the EOF token in the listing')
    parser.add_argument('-v', '--verbose', action='store_true',
                      help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the scanner front end."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.file:
            tokens = scan_file(args.file)
        else:
            print(f"Paste your code. Finish with a line containing only: {args.sentinel}")
            code = read_until_sentinel(sys.stdin, args.sentinel)
            tokens = Scanner(code, "<stdin>").scan()
    except LexerError as e:
        print(e, file=sys.stderr)
        return EXIT_LEXICAL_ERROR
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read %s", args.file, exc_info=True)
        print(f"💥 Cannot read {args.file}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    print_tokens(tokens, sys.stdout, show_eof=args.show_eof)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
