"""
Lox Lexer Package

Implements a single-pass lexical analyzer (scanner) for the Lox language.

Key Features:
- Two-character lookahead, no backtracking
- Line and block comments (block comments do not nest)
- Multi-line string literals, taken verbatim
- Decimal number literals decoded to float
- Non-fatal error reporting through a pluggable reporter

Author: xwest
"""

from .tokens import Token, TokenType, LiteralKind, KEYWORDS
from .scanner import Scanner, scan_tokens, check_tokens, tokenize_file
from .errors import Diagnostic, ErrorReporter, LexerError

__all__ = [
    "Scanner",
    "scan_tokens",
    "check_tokens",
    "tokenize_file",
    "Token",
    "TokenType",
    "LiteralKind",
    "KEYWORDS",
    "Diagnostic",
    "ErrorReporter",
    "LexerError",
]
