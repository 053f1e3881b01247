"""Line-oriented stdin to stdout driver.

Reads newline-delimited input, strips escape sequences from each line and
writes the result followed by a newline. There are no flags; encoding and
line terminator come from the active StripConfig.

A read or decode failure stops processing and reports "Error reading input"
on stderr. A write failure is fatal. Both exit with status 1.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from typing import BinaryIO, TextIO

from ansistrip import strip
from ansistrip.config import StripConfig, get_strip_config
from ansistrip.errors import InputReadError, OutputWriteError
from ansistrip.utils.logger import get_logger

logger = get_logger(__name__)


def _decode_line(raw: bytes, config: StripConfig) -> str:
    """Drop the line terminator (LF or CRLF) and decode."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw.decode(config.encoding, config.errors)


def strip_stream(reader: Iterable[bytes], writer: BinaryIO) -> int:
    """Strip every line of reader into writer.

    Args:
        reader: Binary line source (e.g. sys.stdin.buffer)
        writer: Binary sink (e.g. sys.stdout.buffer)

    Returns:
        Number of lines written

    Raises:
        InputReadError: A line could not be read or decoded
        OutputWriteError: The sink rejected a write
    """
    config = get_strip_config()
    newline = config.newline.encode(config.encoding)
    lines = iter(reader)
    lineno = 0

    try:
        while True:
            try:
                raw = next(lines)
            except StopIteration:
                break
            except OSError as exc:
                raise InputReadError(str(exc), lineno=lineno + 1) from exc
            lineno += 1

            try:
                line = _decode_line(raw, config)
            except UnicodeDecodeError as exc:
                raise InputReadError(str(exc), lineno=lineno) from exc

            try:
                writer.write(strip(line).encode(config.encoding, config.errors))
                writer.write(newline)
            except (OSError, UnicodeEncodeError) as exc:
                raise OutputWriteError(str(exc)) from exc
    finally:
        try:
            writer.flush()
        except OSError as exc:
            raise OutputWriteError(str(exc)) from exc

    logger.debug("Stripped %d line(s)", lineno)
    return lineno


def _silence_stdout() -> None:
    """Point stdout at devnull so interpreter shutdown doesn't flush into a closed pipe."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(
    *,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the driver over stdin/stdout.

    Streams default to the process's standard streams; tests pass their own.

    Returns:
        Exit status: 0 on end of input, 1 on a read or write failure
    """
    reader = stdin if stdin is not None else sys.stdin.buffer
    writer = stdout if stdout is not None else sys.stdout.buffer
    err = stderr if stderr is not None else sys.stderr

    try:
        strip_stream(reader, writer)
    except InputReadError as exc:
        logger.error("Stopped reading input at line %s: %s", exc.lineno, exc.message)
        print("Error reading input", file=err)
        return 1
    except OutputWriteError as exc:
        logger.error("Failed to write output: %s", exc)
        if stdout is None and isinstance(exc.__cause__, BrokenPipeError):
            _silence_stdout()
        else:
            print(f"Error writing output: {exc}", file=err)
        return 1
    return 0
