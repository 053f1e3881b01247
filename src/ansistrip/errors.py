"""Exception classes for ansistrip.

The scanner itself never raises on any text input. These exceptions cover
the stream driver, where reading and writing can fail.
"""

from __future__ import annotations


class AnsiStripError(Exception):
    """Base exception for all ansistrip errors.

    Subclass this for specific error categories.
    """

    pass


class InputReadError(AnsiStripError):
    """Error reading or decoding a line of input.

    Raised by the stream driver; processing stops at the failing line.
    """

    def __init__(self, message: str, lineno: int | None = None) -> None:
        """Initialize read error with optional line number.

        Args:
            message: Error description
            lineno: Line number that failed to read (1-indexed)
        """
        self.message = message
        self.lineno = lineno

        location = f"{lineno}: " if lineno is not None else ""
        super().__init__(f"{location}{message}")


class OutputWriteError(AnsiStripError):
    """Error writing stripped output to the sink.

    Always fatal for the driver; there is no retry.
    """

    pass
