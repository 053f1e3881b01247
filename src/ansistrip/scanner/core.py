"""Escape-aware scanner with O(n) single-pass performance.

Walks the source once, left to right, classifying every character as
plain text or as part of an escape sequence. Plain-text runs are produced
lazily, one fragment per request, as offsets into the caller's string.

No regex in the hot path. Terminators are context-sensitive (CSI ends on a
byte range, OSC on BEL or ST, DCS/SOS/PM/APC on ST only), so each grammar
gets its own mode.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from ansistrip.scanner.modes import (
    BEL,
    CSI,
    CSI_FINAL_FIRST,
    CSI_FINAL_LAST,
    ESC,
    OSC,
    ST_CHAR,
    STRING_INTRODUCERS,
    ScannerMode,
)


class EscapeAwareScanner:
    """Lazy iterator over the plain-text fragments of a string.

    Each fragment is a maximal, non-empty run of characters lying outside
    any recognized escape sequence. Fragments come out in source order and
    never contain ESC. Unterminated sequences at end of input are dropped.

    Usage:
            >>> scanner = EscapeAwareScanner("Hello, \\x1b[0mworld\\x1b[123m!")
            >>> list(scanner)
        ['Hello, ', 'world', '!']

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",  # Next unconsumed character
        "_fragment_start",
        "_pending",  # Offset of an ESC carried into the next scan
        "_mode",
    )

    def __init__(self, source: str) -> None:
        """Initialize scanner with source text.

        Args:
            source: Text that may contain escape sequences

        Raises:
            TypeError: If source is not a str
        """
        if not isinstance(source, str):
            raise TypeError(
                f"EscapeAwareScanner expects str, got {type(source).__name__}"
            )
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._fragment_start = 0
        self._pending: int | None = None
        self._mode = ScannerMode.NORMAL

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        span = self.next_span()
        if span is None:
            raise StopIteration
        start, end = span
        return self._source[start:end]

    def __repr__(self) -> str:
        return (
            f"EscapeAwareScanner(mode={self._mode.name}, "
            f"pos={self._pos}/{self._source_len})"
        )

    @property
    def source(self) -> str:
        """The text being scanned."""
        return self._source

    @property
    def mode(self) -> ScannerMode:
        """Mode the scanner was in when it last stopped."""
        return self._mode

    def spans(self) -> Iterator[tuple[int, int]]:
        """Yield remaining fragments as (start, end) offsets into the source.

        Shares state with iteration: fragments taken here are not produced
        again by next().
        """
        while (span := self.next_span()) is not None:
            yield span

    def next_span(self) -> tuple[int, int] | None:
        """Scan forward to the next plain-text fragment.

        Returns:
            Half-open (start, end) offsets of the fragment, or None once the
            source is exhausted. Exhaustion is permanent.

        Complexity: O(k) where k = characters consumed by this call
        """
        source = self._source
        source_len = self._source_len

        # First character: replay the carried ESC, or pull a fresh one
        if self._pending is not None:
            index = self._pending
            self._pending = None
        elif self._pos < source_len:
            index = self._pos
            self._pos += 1
        else:
            return None

        start = index
        end = index + 1
        mode = ScannerMode.IN_ESCAPE if source[index] == ESC else ScannerMode.NORMAL
        pos = self._pos

        while True:
            if pos >= source_len:
                self._pos = pos
                self._mode = mode
                self._fragment_start = start
                if mode is ScannerMode.NORMAL and end > start:
                    self._fragment_start = end
                    return start, end
                # Partial escape sequence at end of input is discarded
                return None

            index = pos
            char = source[index]
            pos += 1
            end = pos

            if mode is ScannerMode.NORMAL:
                if char == ESC:
                    if index > start:
                        self._pending = index
                        self._pos = pos
                        self._mode = ScannerMode.IN_ESCAPE
                        self._fragment_start = index
                        return start, index
                    mode = ScannerMode.IN_ESCAPE

            elif mode is ScannerMode.IN_ESCAPE:
                if char in STRING_INTRODUCERS:
                    mode = ScannerMode.AWAIT_TERMINATOR
                elif char == OSC:
                    mode = ScannerMode.IN_OSC
                elif char == CSI:
                    mode = ScannerMode.IN_CSI
                elif char == ESC:
                    # Doubled ESC: drop the first, restart at the second
                    start = index
                else:
                    # Unsupported introducer: drop the lone ESC only
                    start = index
                    mode = ScannerMode.NORMAL

            elif mode is ScannerMode.IN_CSI:
                if CSI_FINAL_FIRST <= char <= CSI_FINAL_LAST:
                    start = end
                    mode = ScannerMode.NORMAL

            elif mode is ScannerMode.IN_OSC:
                if char == BEL:
                    start = end
                    mode = ScannerMode.NORMAL
                elif char == ESC:
                    mode = ScannerMode.OSC_AWAIT_ST

            elif mode is ScannerMode.OSC_AWAIT_ST:
                # BEL after ESC is not ECMA-48, but terminals accept it
                if char == ST_CHAR or char == BEL:
                    start = end
                    mode = ScannerMode.NORMAL
                elif char != ESC:
                    mode = ScannerMode.IN_OSC

            elif mode is ScannerMode.AWAIT_TERMINATOR:
                if char == ESC:
                    mode = ScannerMode.MAYBE_ST

            elif mode is ScannerMode.MAYBE_ST:
                if char == ST_CHAR:
                    start = end
                    mode = ScannerMode.NORMAL
                else:
                    mode = ScannerMode.AWAIT_TERMINATOR
