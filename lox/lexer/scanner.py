"""
Lox Scanner - turns source text into tokens

Single pass over the source with a two-character lookahead. Two cursors
delimit the lexeme being scanned: `start` marks its first character and
`current` the next character to read. Errors are reported and the scan
keeps going, so the caller always gets a complete token list back.

xwest
"""

import logging
from typing import List

from .tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS, LiteralValue
from .errors import (
    ErrorReporter, as_reporter,
    UNEXPECTED_CHARACTER, UNTERMINATED_STRING, UNTERMINATED_BLOCK_COMMENT,
)

logger = logging.getLogger(__name__)

# Returned by peek() past the end of input
NUL = "\0"


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def is_alpha_numeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


class Scanner:
    """
    Lox lexical analyzer.

    A scanner is built for one source string and scanned once; it is not
    safe to share between threads. Independent scanners share only the
    read-only keyword table.
    """

    def __init__(self, source: str, reporter=None, filename: str = "<stdin>"):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            reporter: Receives ``error(line, message)`` for every lexical
                error; an ErrorReporter is created when omitted
            filename: Name used in diagnostics
        """
        self.source = source
        self.filename = filename
        self.reporter = as_reporter(reporter, filename)
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self._scanned = False

    def scan_tokens(self) -> List[Token]:
        """
        Scan the whole source.

        Returns:
            List of tokens ending in exactly one EOF token
        """
        if self._scanned:
            return self.tokens

        while not self._is_at_end():
            # We are at the beginning of the next lexeme
            self.start = self.current
            self.start_line = self.line
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        self._scanned = True

        logger.debug(
            "scanned %s: %d tokens, %d lines",
            self.filename, len(self.tokens), self.line,
        )
        return self.tokens

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            plain, with_equal = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(with_equal if self._match("=") else plain)
        elif char == "/":
            if self._match("/"):
                # A comment goes until the end of the line
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            elif self._match("*"):
                self._block_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif char in " \r\t":
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._string()
        elif is_digit(char):
            self._number()
        elif is_alpha(char):
            self._identifier()
        else:
            self._error(UNEXPECTED_CHARACTER)

    def _identifier(self):
        while is_alpha_numeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _number(self):
        while is_digit(self._peek()):
            self._advance()

        # Look for a fractional part
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()  # the "."
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _string(self):
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self._error(UNTERMINATED_STRING)
            return

        self._advance()  # the closing "

        # Trim the surrounding quotes, no escape processing
        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _block_comment(self):
        """Skip a /* ... */ comment. The first */ closes it; no nesting."""
        while not self._is_block_comment_end() and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            # Nothing left to consume
            self._error(UNTERMINATED_BLOCK_COMMENT)
            return

        self._advance()  # "*"
        self._advance()  # "/"

    def _is_block_comment_end(self) -> bool:
        return self._peek() == "*" and self._peek_next() == "/"

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line))

    def _error(self, message: str):
        self.reporter.error(self.line, message)

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is `expected`."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _advance(self) -> str:
        # Callers check _is_at_end() first; reading past the end is a bug
        char = self.source[self.current]
        self.current += 1
        return char

    def _peek(self) -> str:
        if self._is_at_end():
            return NUL
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return NUL
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    @property
    def had_error(self) -> bool:
        """True when the reporter tracks errors and has seen at least one."""
        return bool(getattr(self.reporter, "had_error", False))


def scan_tokens(source: str, reporter=None, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to scan a source string.

    Lexical errors go to `reporter` and do not stop the scan.
    """
    return Scanner(source, reporter, filename).scan_tokens()


def check_tokens(source: str, filename: str = "<string>") -> List[Token]:
    """
    Scan a source string, failing on the first lexical error.

    Raises:
        LexerError: If any lexical error was reported
    """
    reporter = ErrorReporter(filename)
    tokens = Scanner(source, reporter, filename).scan_tokens()

    error = reporter.first_error()
    if error is not None:
        raise error

    return tokens


def tokenize_file(filepath: str, reporter=None) -> List[Token]:
    """
    Convenience function to scan a source file.

    The whole file is read before scanning starts.

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, "r", encoding="utf-8") as f:
        source = f.read()

    return scan_tokens(source, reporter, filepath)
