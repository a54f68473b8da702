"""ContextVar-based lexer configuration for marklex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The constant character tables and the scheme table are shared and immutable;
only the tunable knobs (tab width, Unicode category lookup) live here.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from marklex.config import LexConfig, lex_config_context
    from marklex.normalize import detab

    with lex_config_context(LexConfig(tab_width=8)):
        detab("a\\tb")  # 'a       b'

    # Pin classification to an older Unicode database
    import unicodedata
    with lex_config_context(LexConfig(unicode_category=unicodedata.ucd_3_2_0.category)):
        ...

"""

import unicodedata
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from marklex.errors import ConfigError
from marklex.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TAB_WIDTH = 4


def check_tab_width(tab_width: object) -> int:
    """Validate a tab stop interval.

    Shared by LexConfig and the explicit tab_width argument of the
    normalizers, so a bad width fails the same way on either path.

    Raises:
        ConfigError: If tab_width is not an int, is a bool, or is below 1.

    """
    # bool is an int subclass; True would silently mean a width of 1
    if isinstance(tab_width, bool) or not isinstance(tab_width, int):
        raise ConfigError("tab_width", f"expected int, got {type(tab_width).__name__}")
    if tab_width < 1:
        raise ConfigError("tab_width", f"must be >= 1, got {tab_width}")
    return tab_width


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        tab_width: Tab stop interval used by detab and next_tab_stop
        unicode_category: General-category lookup, ``str -> "Zs" | "Po" | ...``.
            Defaults to the interpreter's unicodedata.category.

    """

    tab_width: int = DEFAULT_TAB_WIDTH
    unicode_category: Callable[[str], str] = unicodedata.category

    def __post_init__(self) -> None:
        check_tab_width(self.tab_width)
        if not callable(self.unicode_category):
            raise ConfigError("unicode_category", "must be callable")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "LexConfig":
        """Create LexConfig from dictionary.

        Useful when settings come from an external source such as a TOML or
        YAML file. Unknown keys are ignored and logged at DEBUG level.

        Args:
            config_dict: Mapping with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from dict.

        Raises:
            ConfigError: If a known key holds an unusable value.

        Example:
            >>> config = LexConfig.from_dict({"tab_width": 2, "unknown_key": 1})
            >>> config.tab_width
            2

        """
        valid_fields = {f.name for f in fields(cls)}
        unknown = sorted(k for k in config_dict if k not in valid_fields)
        if unknown:
            logger.debug("Ignoring unknown LexConfig keys: %s", ", ".join(unknown))
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    token = _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.reset(token)


__all__ = [
    "DEFAULT_TAB_WIDTH",
    "check_tab_width",
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
