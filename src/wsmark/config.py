"""ContextVar-based parse configuration for wsmark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The reader consults it when turning raw file bytes into document text.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from wsmark.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(encoding="cp437")):
        doc = parse_file("LETTER.WS")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# WordStar reserves the first 128 bytes of a document for its file header.
DEFAULT_HEADER_SIZE = 128


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded; it's per-call state,
    not configuration.

    Attributes:
        header_size: Number of leading bytes skipped before parsing
        encoding: Codec used to decode the bytes after the header
        encoding_errors: Codec error handler ("replace" keeps undecodable
            bytes as U+FFFD, which is displayed text)

    """

    header_size: int = DEFAULT_HEADER_SIZE
    encoding: str = "utf-8"
    encoding_errors: str = "replace"

    def __post_init__(self) -> None:
        if self.header_size < 0:
            msg = f"header_size must be >= 0, got {self.header_size}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({"header_size": 0, "unknown": 1})
            >>> config.header_size
            0

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "wsmark_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(header_size=0)):
        ...     doc = parse_bytes(b".he Title")
        >>> # Automatically reset to previous config

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_HEADER_SIZE",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
