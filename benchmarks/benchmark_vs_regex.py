"""Benchmark the scanner against the usual one-line regex stripper.

Run with:
    python benchmarks/benchmark_vs_regex.py

The regex only knows CSI and two-character escapes, so its output differs on
OSC/DCS input; this compares speed, not results.
"""

import re
import time

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def build_corpus(lines: int = 5_000) -> list[str]:
    """Colored log lines with an occasional terminal title."""
    corpus = []
    for i in range(lines):
        line = f"\x1b[32mINFO\x1b[0m [{i:05d}] \x1b[1mworker\x1b[22m processed item {i}"
        if i % 50 == 0:
            line = f"\x1b]0;job {i}\x07" + line
        corpus.append(line)
    return corpus


def benchmark_ansistrip(docs: list[str], iterations: int = 10) -> float:
    from ansistrip import strip

    for doc in docs[:10]:
        strip(doc)

    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            strip(doc)
    return (time.perf_counter() - start) / iterations


def benchmark_regex(docs: list[str], iterations: int = 10) -> float:
    sub = ANSI_ESCAPE_PATTERN.sub

    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            sub("", doc)
    return (time.perf_counter() - start) / iterations


def main() -> None:
    docs = build_corpus()
    total_chars = sum(len(d) for d in docs)
    print(f"Corpus: {len(docs)} lines, {total_chars:,} characters")

    scanner_time = benchmark_ansistrip(docs)
    regex_time = benchmark_regex(docs)

    print(f"ansistrip: {scanner_time * 1000:8.2f} ms/iteration")
    print(f"regex:     {regex_time * 1000:8.2f} ms/iteration")
    print(f"ratio:     {scanner_time / regex_time:8.2f}x")


if __name__ == "__main__":
    main()
