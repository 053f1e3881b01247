"""Tests ensuring scanner state is consistent across fragment boundaries.

These tests verify the carried ESC lookahead, the mode the scanner stops
in, and that exhaustion is permanent.
"""

from __future__ import annotations

import pytest

from ansistrip.scanner import EscapeAwareScanner, ScannerMode

ESC = "\x1b"


class TestLookahead:
    """The ESC ending a fragment is replayed on the next call."""

    def test_pending_set_after_fragment_ends_on_esc(self) -> None:
        scanner = EscapeAwareScanner(f"ab{ESC}[mc")
        assert next(scanner) == "ab"
        assert scanner._pending == 2
        assert scanner.mode is ScannerMode.IN_ESCAPE

    def test_pending_consumed_on_next_call(self) -> None:
        scanner = EscapeAwareScanner(f"ab{ESC}[mc")
        next(scanner)
        assert next(scanner) == "c"
        assert scanner._pending is None

    def test_esc_not_double_counted(self) -> None:
        """Replaying the ESC must not leak it or the introducer into output."""
        scanner = EscapeAwareScanner(f"a{ESC}[mb{ESC}]t\x07c")
        assert list(scanner) == ["a", "b", "c"]

    def test_no_pending_when_fragment_ends_at_eof(self) -> None:
        scanner = EscapeAwareScanner("plain")
        next(scanner)
        assert scanner._pending is None
        assert scanner.mode is ScannerMode.NORMAL


class TestPositionInvariants:
    """fragment_start never runs ahead of the cursor."""

    def test_fragment_start_le_cursor(self) -> None:
        scanner = EscapeAwareScanner(f"x{ESC}[1my{ESC}Pz{ESC}\\w{ESC}")
        while scanner.next_span() is not None:
            assert scanner._fragment_start <= scanner._pos
        assert scanner._fragment_start <= scanner._pos

    def test_cursor_reaches_end(self) -> None:
        source = f"x{ESC}[1my"
        scanner = EscapeAwareScanner(source)
        list(scanner)
        assert scanner._pos == len(source)


class TestFinalMode:
    """The mode after exhaustion shows where input ended."""

    @pytest.mark.parametrize(
        "source,mode",
        [
            ("", ScannerMode.NORMAL),
            ("text", ScannerMode.NORMAL),
            (f"a{ESC}[m", ScannerMode.NORMAL),
            (ESC, ScannerMode.IN_ESCAPE),
            (f"a{ESC}{ESC}", ScannerMode.IN_ESCAPE),
            (f"{ESC}[12", ScannerMode.IN_CSI),
            (f"{ESC}]title", ScannerMode.IN_OSC),
            (f"{ESC}]title{ESC}", ScannerMode.OSC_AWAIT_ST),
            (f"{ESC}]title{ESC}{ESC}", ScannerMode.OSC_AWAIT_ST),
            (f"{ESC}Pdata", ScannerMode.AWAIT_TERMINATOR),
            (f"{ESC}Pdata{ESC}", ScannerMode.MAYBE_ST),
            (f"{ESC}Pdata{ESC}{ESC}", ScannerMode.AWAIT_TERMINATOR),
        ],
    )
    def test_mode_at_end(self, source: str, mode: ScannerMode) -> None:
        scanner = EscapeAwareScanner(source)
        list(scanner)
        assert scanner.mode is mode


class TestExhaustion:
    """Once exhausted, a scanner stays exhausted."""

    def test_next_after_exhaustion_raises(self) -> None:
        scanner = EscapeAwareScanner("a")
        assert list(scanner) == ["a"]
        with pytest.raises(StopIteration):
            next(scanner)

    def test_next_span_after_truncated_sequence(self) -> None:
        scanner = EscapeAwareScanner(f"a{ESC}[")
        assert next(scanner) == "a"
        assert scanner.next_span() is None
        assert scanner.next_span() is None

    def test_iter_returns_self(self) -> None:
        scanner = EscapeAwareScanner("a")
        assert iter(scanner) is scanner

    def test_independent_instances(self) -> None:
        source = f"a{ESC}[mb"
        first = EscapeAwareScanner(source)
        second = EscapeAwareScanner(source)
        assert next(first) == "a"
        assert list(second) == ["a", "b"]
        assert list(first) == ["b"]


class TestIntrospection:
    def test_source_is_not_copied(self) -> None:
        source = "some text"
        assert EscapeAwareScanner(source).source is source

    def test_repr(self) -> None:
        scanner = EscapeAwareScanner("abc")
        assert repr(scanner) == "EscapeAwareScanner(mode=NORMAL, pos=0/3)"
