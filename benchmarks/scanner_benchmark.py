#!/usr/bin/env python3
"""
Scanner Throughput Benchmark
============================

Measures how fast the Lox scanner turns source text into tokens for
inputs of increasing size.

Features:
- Tokens per second and MB/s for each input size
- Memory growth tracking while the token list is built
- Statistical summary over several runs
"""

import argparse
import gc
import platform
import statistics
import sys
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import List

import psutil

# Add the project root to the path so the package imports without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from lox.lexer import Scanner, ErrorReporter


UNIT_PROGRAM = '''
fun fib(n) {
  if (n <= 1) return n; // base case
  return fib(n - 2) + fib(n - 1);
}
/* a block
   comment */
class Counter {
  init() { this.count = 0; }
  tick() { this.count = this.count + 1; return this; }
}
var label = "iterations";
for (var i = 0; i < 10; i = i + 1) print fib(i) >= 2.75 and !false;
'''


@dataclass
class BenchmarkResult:
    """Results from scanning one input size."""
    copies: int
    source_bytes: int
    token_count: int
    median_ms: float
    stdev_ms: float
    memory_delta_mb: float

    @property
    def tokens_per_second(self) -> float:
        return self.token_count / (self.median_ms / 1000) if self.median_ms else 0.0

    @property
    def megabytes_per_second(self) -> float:
        return (self.source_bytes / 1e6) / (self.median_ms / 1000) if self.median_ms else 0.0


class ScannerBenchmark:
    """Runs the scanner over growing inputs and reports throughput."""

    def __init__(self, runs: int = 5):
        self.runs = runs
        self.last_memory_usage = 0.0

    @contextmanager
    def _memory_tracker(self):
        """Context manager to track memory growth during a scan."""
        process = psutil.Process()
        start_memory = process.memory_info().rss / (1024**2)  # MB

        try:
            yield
        finally:
            end_memory = process.memory_info().rss / (1024**2)  # MB
            self.last_memory_usage = end_memory - start_memory

    def benchmark_size(self, copies: int) -> BenchmarkResult:
        source = UNIT_PROGRAM * copies
        timings = []
        token_count = 0

        for _ in range(self.runs):
            gc.collect()
            reporter = ErrorReporter()

            with self._memory_tracker():
                start_time = time.perf_counter()
                tokens = Scanner(source, reporter).scan_tokens()
                end_time = time.perf_counter()

            if reporter.had_error:
                raise RuntimeError(f"benchmark input produced errors: {reporter.messages}")

            timings.append((end_time - start_time) * 1000)
            token_count = len(tokens)

        return BenchmarkResult(
            copies=copies,
            source_bytes=len(source.encode("utf-8")),
            token_count=token_count,
            median_ms=statistics.median(timings),
            stdev_ms=statistics.stdev(timings) if len(timings) > 1 else 0.0,
            memory_delta_mb=self.last_memory_usage,
        )

    def print_system_info(self):
        print("\n💻 System Information")
        print("=" * 40)
        print(f"CPU: {platform.processor() or 'Unknown CPU'}")
        print(f"Memory: {psutil.virtual_memory().total / (1024**3):.1f} GB")
        print(f"Python: {platform.python_version()}")

    def print_results_summary(self, results: List[BenchmarkResult]):
        print(f"\n📊 Scanner Benchmark Results ({self.runs} runs each)")
        print("=" * 80)
        print(f"{'Copies':<8} {'Bytes':<10} {'Tokens':<10} {'Median ms':<11} "
              f"{'Stdev':<8} {'Tok/s':<12} {'MB/s':<8} {'Mem MB':<8}")
        print("-" * 80)
        for r in results:
            print(f"{r.copies:<8} {r.source_bytes:<10} {r.token_count:<10} "
                  f"{r.median_ms:<11.2f} {r.stdev_ms:<8.2f} {r.tokens_per_second:<12.0f} "
                  f"{r.megabytes_per_second:<8.2f} {r.memory_delta_mb:<8.1f}")
        print("-" * 80)


def main():
    """Main benchmark execution."""
    parser = argparse.ArgumentParser(description="Benchmark the Lox scanner.")
    parser.add_argument("--runs", type=int, default=5, help="runs per input size")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 5000],
        help="number of copies of the sample program to scan",
    )
    args = parser.parse_args()

    print("Lox Scanner Benchmark")
    print("=" * 50)

    benchmark = ScannerBenchmark(runs=args.runs)
    benchmark.print_system_info()

    results = [benchmark.benchmark_size(copies) for copies in args.sizes]
    benchmark.print_results_summary(results)

    print("\n🏁 Benchmark Complete!")


if __name__ == "__main__":
    main()
