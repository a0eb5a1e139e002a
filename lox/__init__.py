"""
Lox Front End Package

Lexical analysis for the Lox scripting language. The scanner turns source
text into the token list consumed by a parser.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # lox-scan command

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, ErrorReporter, scan_tokens

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "ErrorReporter",
    "scan_tokens",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
