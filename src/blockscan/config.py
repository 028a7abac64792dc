"""ContextVar-based scan configuration for blockscan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A BlockProcessor reads the active config once, when it is created.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from blockscan.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(skip_whitespace_freeform=True)):
        blocks = parse_blocks(document)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        allow_non_finite_numbers: Accept NaN, Infinity and -Infinity in
            attribute JSON (not valid JSON, rejected by default)
        max_attribute_depth: Deepest array/object nesting accepted in
            attribute JSON before reporting an error
        skip_whitespace_freeform: Drop top-level whitespace-only freeform
            blocks from parse_blocks() output

    """

    allow_non_finite_numbers: bool = False
    max_attribute_depth: int = 512
    skip_whitespace_freeform: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "max_attribute_depth": 32,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_attribute_depth
            32

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(max_attribute_depth=4)):
        ...     processor = BlockProcessor(document)
        >>> # Previous config is active again

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
