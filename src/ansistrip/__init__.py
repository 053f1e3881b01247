"""
ansistrip — ANSI/VT100 escape sequence stripper

Removes terminal escape sequences (CSI, OSC, DCS, SOS, PM, APC) from text,
leaving only the characters a terminal would render as plain text. Built on
a single-pass state-machine scanner: O(n), no regex, zero runtime
dependencies.

Quick Start:
    >>> from ansistrip import strip
    >>> strip("Hello, \\x1b[0mworld\\x1b[123m!")
    'Hello, world!'

    >>> # Or consume fragments lazily
    >>> from ansistrip import iter_fragments
    >>> list(iter_fragments("n\\x1b]0;title\\x07m"))
    ['n', 'm']

Command line:
    $ some-command | ansistrip
    $ python -m ansistrip < colored.log > plain.log
"""

from collections.abc import Iterator

from ansistrip.config import (
    StripConfig,
    get_strip_config,
    reset_strip_config,
    set_strip_config,
    strip_config_context,
)
from ansistrip.errors import AnsiStripError, InputReadError, OutputWriteError
from ansistrip.profiling import StripAccumulator, get_strip_accumulator, profiled_strip
from ansistrip.scanner import EscapeAwareScanner, ScannerMode

__version__ = "0.1.0"


def iter_fragments(text: str) -> EscapeAwareScanner:
    """Return a lazy iterator over the plain-text fragments of text.

    Args:
        text: Text that may contain escape sequences

    Returns:
        An EscapeAwareScanner; each item is a non-empty substring of text

    Example:
        >>> list(iter_fragments("o\\x1b[mn"))
        ['o', 'n']
    """
    return EscapeAwareScanner(text)


def iter_spans(text: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) offsets of each plain-text fragment of text.

    Example:
        >>> list(iter_spans("o\\x1b[mn"))
        [(0, 1), (4, 5)]
    """
    return EscapeAwareScanner(text).spans()


def strip(text: str) -> str:
    """Remove all recognized escape sequences from text.

    Args:
        text: Text that may contain escape sequences

    Returns:
        The concatenated plain-text fragments

    Example:
        >>> strip("\\x1b[1;31mred\\x1b[0m")
        'red'
    """
    fragments = list(EscapeAwareScanner(text))
    result = "".join(fragments)

    acc = get_strip_accumulator()
    if acc is not None:
        acc.record_strip(
            source_length=len(text),
            output_length=len(result),
            fragment_count=len(fragments),
        )

    return result


__all__ = [
    "AnsiStripError",
    "EscapeAwareScanner",
    "InputReadError",
    "OutputWriteError",
    "ScannerMode",
    "StripAccumulator",
    "StripConfig",
    "__version__",
    "get_strip_accumulator",
    "get_strip_config",
    "iter_fragments",
    "iter_spans",
    "profiled_strip",
    "reset_strip_config",
    "set_strip_config",
    "strip",
    "strip_config_context",
]
