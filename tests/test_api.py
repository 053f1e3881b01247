"""Tests for the top-level ansistrip API."""

import pytest

from ansistrip import EscapeAwareScanner, iter_fragments, iter_spans, strip

ESC = "\x1b"
BEL = "\x07"


class TestStrip:
    """strip() joins all plain-text fragments."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("", ""),
            ("Hello, world!", "Hello, world!"),
            (f"Hello, {ESC}[0mworld{ESC}[123m!", "Hello, world!"),
            (f"{ESC}[mn", "n"),
            (f"n{ESC}]{BEL}m", "nm"),
            (f"n{ESC}]{ESC}\\m", "nm"),
            (f"o{ESC}[mn", "on"),
        ],
    )
    def test_scenarios(self, source: str, expected: str) -> None:
        assert strip(source) == expected

    def test_colored_log_line(self) -> None:
        line = f"{ESC}[32mINFO{ESC}[0m {ESC}[1mserver{ESC}[22m started on :8080"
        assert strip(line) == "INFO server started on :8080"

    def test_terminal_title_and_prompt(self) -> None:
        line = f"{ESC}]0;user@host: ~{BEL}{ESC}[01;32muser@host{ESC}[00m:~$ ls"
        assert strip(line) == "user@host:~$ ls"

    def test_rejects_bytes(self) -> None:
        with pytest.raises(TypeError, match="expects str"):
            strip(b"\x1b[31mred")  # type: ignore[arg-type]


class TestIterFragments:
    def test_returns_scanner(self) -> None:
        assert isinstance(iter_fragments("x"), EscapeAwareScanner)

    def test_lazy(self) -> None:
        """Fragments are computed on request, not up front."""
        fragments = iter_fragments(f"a{ESC}[mb{ESC}[mc")
        assert next(fragments) == "a"
        assert fragments._pos == 2
        assert list(fragments) == ["b", "c"]

    def test_scenarios(self) -> None:
        assert list(iter_fragments(f"Hello, {ESC}[0mworld{ESC}[123m!")) == [
            "Hello, ",
            "world",
            "!",
        ]
        assert list(iter_fragments(f"n{ESC}]{BEL}m")) == ["n", "m"]


class TestIterSpans:
    def test_offsets(self) -> None:
        assert list(iter_spans(f"o{ESC}[mn")) == [(0, 1), (4, 5)]

    def test_empty(self) -> None:
        assert list(iter_spans("")) == []

    def test_whole_input(self) -> None:
        assert list(iter_spans("abc")) == [(0, 3)]
