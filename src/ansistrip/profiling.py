"""ansistrip StripAccumulator — opt-in profiling for escape stripping.

This module provides accumulated metrics during stripping:
- Total elapsed time
- Source length
- Fragments produced
- Characters removed as escape-sequence content

Zero overhead when disabled (get_strip_accumulator() returns None).

Example:
    from ansistrip import strip
    from ansistrip.profiling import profiled_strip

    with profiled_strip() as metrics:
        strip("\\x1b[1mbold\\x1b[0m")

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 12, "fragment_count": 1, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class StripAccumulator:
    """Accumulated metrics during stripping.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total characters scanned.
        fragment_count: Plain-text fragments produced.
        removed_length: Characters discarded as escape-sequence content.
        strip_calls: Number of strip() calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    fragment_count: int = 0
    removed_length: int = 0
    strip_calls: int = 0

    def record_strip(
        self, source_length: int, output_length: int, fragment_count: int
    ) -> None:
        """Record a strip call.

        Args:
            source_length: Length of the source string scanned.
            output_length: Length of the stripped result.
            fragment_count: Number of fragments the scanner produced.

        """
        self.strip_calls += 1
        self.source_length += source_length
        self.fragment_count += fragment_count
        self.removed_length += source_length - output_length

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of strip metrics.

        Returns:
            Dict with total_ms, source_length, fragment_count,
            removed_length, strip_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "fragment_count": self.fragment_count,
            "removed_length": self.removed_length,
            "strip_calls": self.strip_calls,
        }


_accumulator: ContextVar[StripAccumulator | None] = ContextVar(
    "strip_accumulator",
    default=None,
)


def get_strip_accumulator() -> StripAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_strip() -> Iterator[StripAccumulator]:
    """Context manager for profiled stripping.

    Creates a StripAccumulator and makes it available via
    get_strip_accumulator() for the duration of the with block.

    Yields:
        StripAccumulator that will be populated during strip calls.

    """
    acc = StripAccumulator()
    token: Token[StripAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
