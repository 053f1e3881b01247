"""ContextVar-based stream configuration for ansistrip.

Provides context-local configuration using Python's ContextVars (PEP 567).
The scanner has no options; this configuration only governs how the stream
driver decodes input lines and terminates output lines.

Thread Safety:
    ContextVars are context-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    from ansistrip.config import StripConfig, strip_config_context
    from ansistrip.cli import strip_stream

    with strip_config_context(StripConfig(errors="replace")):
        strip_stream(reader, writer)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StripConfig:
    """Immutable stream configuration.

    Attributes:
        encoding: Codec used to decode input lines and encode output
        errors: Codec error policy ("strict" stops on undecodable input)
        newline: Terminator written after every output line

    """

    encoding: str = "utf-8"
    errors: str = "strict"
    newline: str = "\n"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "StripConfig":
        """Create StripConfig from dictionary.

        Only includes keys that are valid StripConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                StripConfig attribute names.

        Returns:
            New StripConfig instance with values from dict.

        Example:
            >>> config = StripConfig.from_dict({"errors": "replace", "x": 1})
            >>> config.errors
            'replace'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: StripConfig = StripConfig()

_strip_config: ContextVar[StripConfig] = ContextVar(
    "strip_config",
    default=_DEFAULT_CONFIG,
)


def get_strip_config() -> StripConfig:
    """Get current stream configuration (context-local).

    Returns:
        The active StripConfig for this thread/context.

    """
    return _strip_config.get()


def set_strip_config(config: StripConfig) -> None:
    """Set stream configuration for current context.

    Args:
        config: StripConfig instance to use for this context.

    """
    _strip_config.set(config)


def reset_strip_config() -> None:
    """Reset to default configuration."""
    _strip_config.set(_DEFAULT_CONFIG)


@contextmanager
def strip_config_context(config: StripConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: StripConfig to use within the context.

    Yields:
        None

    Example:
        >>> with strip_config_context(StripConfig(newline="\\r\\n")):
        ...     get_strip_config().newline
        '\\r\\n'

    Thread Safety:
        Only affects the current context. Restores the previous config even
        if an exception is raised.

    """
    previous = _strip_config.get()
    _strip_config.set(config)
    try:
        yield
    finally:
        _strip_config.set(previous)


__all__ = [
    "StripConfig",
    "get_strip_config",
    "set_strip_config",
    "reset_strip_config",
    "strip_config_context",
]
