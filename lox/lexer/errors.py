"""
Error handling for the Lox lexer.

Lexical errors never abort a scan. The scanner reports each one to an
error reporter (a line number and a message) and carries on; callers
inspect the reporter afterwards to decide whether to proceed.

Author: xwest
"""

import logging
from typing import Callable, List, Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)


# Messages the scanner reports, verbatim
UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."
UNTERMINATED_BLOCK_COMMENT = "Unterminated block comment."

# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
    "L003": "Unterminated block comment",
}

# Exact message reported for each code
MESSAGES = {
    "L001": UNEXPECTED_CHARACTER,
    "L002": UNTERMINATED_STRING,
    "L003": UNTERMINATED_BLOCK_COMMENT,
}

_MESSAGE_CODES = {message: code for code, message in MESSAGES.items()}

_HELP_TEXT = {
    "L001": "Only ASCII letters, digits, '_' and Lox punctuation may start a token.",
    "L002": 'String literals must be closed with a matching " quote.',
    "L003": "Block comments must be closed with */ and do not nest.",
}


@dataclass
class Diagnostic:
    """A single reported problem in the source."""
    message: str
    line: int
    severity: str = "error"  # "error", "warning"
    filename: Optional[str] = None
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        where = f"[line {self.line}]"
        if self.filename:
            where = f"{self.filename}: {where}"
        result = f"{where} {self.severity.capitalize()}: {self.message}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class LexerError(Exception):
    """
    Exception carrying a lexical diagnostic.

    The scanner itself never raises this; it is used by the strict helpers
    that turn a reported error into a failure.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorReporter:
    """
    Collects diagnostics reported during a scan.

    Each reporter is independent, so scanners holding separate reporters
    share no mutable state.
    """

    def __init__(self, filename: Optional[str] = None):
        self.filename = filename
        self.diagnostics: List[Diagnostic] = []

    def error(self, line: int, message: str) -> None:
        """Record an error at the given 1-based line."""
        code = _MESSAGE_CODES.get(message)
        diagnostic = Diagnostic(
            message=message,
            line=line,
            filename=self.filename,
            code=code,
            help_text=_HELP_TEXT.get(code) if code else None,
        )
        self.diagnostics.append(diagnostic)
        logger.debug("lexical error %s at line %d: %s", code, line, message)

    @property
    def had_error(self) -> bool:
        return any(d.severity == "error" for d in self.diagnostics)

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == "error")

    @property
    def messages(self) -> List[str]:
        return [d.message for d in self.diagnostics]

    def first_error(self) -> Optional[LexerError]:
        for diagnostic in self.diagnostics:
            if diagnostic.severity == "error":
                return LexerError(diagnostic)
        return None

    def reset(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)


class CallbackReporter:
    """Adapts a plain ``(line, message)`` callable to the reporter interface."""

    def __init__(self, callback: Callable[[int, str], None]):
        self.callback = callback

    def error(self, line: int, message: str) -> None:
        self.callback(line, message)


def as_reporter(reporter, filename: Optional[str] = None):
    """
    Normalize the reporter argument accepted by the scanner.

    Accepts None (a fresh ErrorReporter), any object with an
    ``error(line, message)`` method, or a bare callable.
    """
    if reporter is None:
        return ErrorReporter(filename)
    if hasattr(reporter, "error"):
        return reporter
    if callable(reporter):
        return CallbackReporter(reporter)
    raise TypeError(
        f"reporter must provide error(line, message) or be callable, "
        f"got {type(reporter).__name__}"
    )
