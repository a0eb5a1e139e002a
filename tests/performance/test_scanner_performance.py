#!/usr/bin/env python3
"""
Scanner Performance Test Suite
==============================

Checks that scanning stays linear in the size of the input and measures
throughput on a representative program with pytest-benchmark.
"""

import pytest
import time
import sys
import os
from dataclasses import dataclass

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from lox.lexer import Scanner, ErrorReporter, TokenType


SAMPLE_PROGRAM = '''
// Compute a few Fibonacci numbers
fun fib(n) {
  if (n <= 1) return n;
  return fib(n - 2) + fib(n - 1);
}

/* Classes and fields */
class Point {
  init(x, y) {
    this.x = x;
    this.y = y;
  }
}

var i = 0;
while (i < 20) {
  print fib(i) * 1.5;
  i = i + 1;
}
var greeting = "hello
world";
'''


@dataclass
class ScanResult:
    """Outcome of a timed scan."""
    size: int
    token_count: int
    elapsed_s: float


def _timed_scan(source: str, rounds: int = 5) -> ScanResult:
    """Best of `rounds` scans, so one slow run on a busy machine is ignored."""
    best = float("inf")
    tokens = []
    for _ in range(rounds):
        reporter = ErrorReporter()
        start = time.perf_counter()
        tokens = Scanner(source, reporter).scan_tokens()
        best = min(best, time.perf_counter() - start)
        assert not reporter.had_error
    return ScanResult(len(source), len(tokens), best)


class TestScannerPerformance:
    """
    Throughput and scaling checks for the scanner.
    """

    def test_sample_program_benchmark(self, benchmark):
        tokens = benchmark(lambda: Scanner(SAMPLE_PROGRAM).scan_tokens())

        assert tokens[-1].type == TokenType.EOF
        assert len(tokens) == 88

    @pytest.mark.parametrize("copies", [100, 1000])
    def test_large_input_benchmark(self, benchmark, copies):
        source = SAMPLE_PROGRAM * copies
        tokens = benchmark.pedantic(
            lambda: Scanner(source).scan_tokens(), rounds=3, iterations=1
        )

        assert tokens[-1].line == SAMPLE_PROGRAM.count("\n") * copies + 1

    def test_scaling_is_roughly_linear(self):
        small = _timed_scan(SAMPLE_PROGRAM * 200)
        large = _timed_scan(SAMPLE_PROGRAM * 2000)

        assert large.token_count == (small.token_count - 1) * 10 + 1
        # Generous bound; a quadratic scanner would be ~100x slower
        assert large.elapsed_s < max(small.elapsed_s, 0.001) * 40

    def test_long_unterminated_comment(self):
        source = "/*" + "x\n" * 50000
        reporter = ErrorReporter()
        tokens = Scanner(source, reporter).scan_tokens()

        assert [t.type for t in tokens] == [TokenType.EOF]
        assert reporter.error_count == 1
        assert tokens[-1].line == 50001
