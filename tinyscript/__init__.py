"""
TinyScript Package

Front-end tooling for TinyScript, a small scripting language with `var`
declarations, `print` statements and arithmetic expressions.

Architecture:
    tinyscript/
    ├── lexer/           # Tokenization and lexical analysis
    ├── utils/           # Logging helpers
    └── cli.py           # Console front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenKind, LexerError, scan, scan_file

__all__ = [
    "Scanner",
    "Token",
    "TokenKind",
    "LexerError",
    "scan",
    "scan_file",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
