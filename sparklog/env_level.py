"""Per-logger level filters configured from an environment-style string."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Level(Enum):
    """Log levels, from most severe to most verbose."""

    CRITICAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


_FILTER_KINDS = frozenset(
    {
        "off",
        "equal",
        "not_equal",
        "more_severe",
        "more_severe_equal",
        "more_verbose",
        "more_verbose_equal",
        "all",
    }
)
_LEVELLESS_FILTERS = frozenset({"off", "all"})


@dataclass(frozen=True)
class LevelFilter:
    """A condition on levels, such as "more severe than or equal to info"."""

    kind: str
    level: Optional[Level] = None

    def __post_init__(self) -> None:
        if self.kind not in _FILTER_KINDS:
            raise ValueError(f"unknown level filter kind: {self.kind!r}")
        needs_level = self.kind not in _LEVELLESS_FILTERS
        if needs_level and self.level is None:
            raise ValueError(f"level filter '{self.kind}' needs a level")
        if not needs_level and self.level is not None:
            raise ValueError(f"level filter '{self.kind}' takes no level")

    @classmethod
    def from_str_for_env(cls, text: str) -> Optional["LevelFilter"]:
        """Parse ``off``, ``all`` or a level name, ignoring case; None if invalid."""
        lowered = text.lower()
        if lowered == "off":
            return cls("off")
        if lowered == "all":
            return cls("all")
        level = Level.__members__.get(text.upper())
        if level is None:
            return None
        return cls("more_severe_equal", level)

    def test(self, level: Level) -> bool:
        """Whether ``level`` passes this filter."""
        if self.kind == "off":
            return False
        if self.kind == "all":
            return True
        assert self.level is not None
        mine, other = self.level.value, level.value
        return {
            "equal": other == mine,
            "not_equal": other != mine,
            "more_severe": other < mine,
            "more_severe_equal": other <= mine,
            "more_verbose": other > mine,
            "more_verbose_equal": other >= mine,
        }[self.kind]


_LOGGER_KINDS = frozenset({"default", "named", "unnamed", "all_except_default"})


@dataclass(frozen=True)
class EnvLevelLogger:
    """Which logger a level entry applies to."""

    kind: str
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind not in _LOGGER_KINDS:
            raise ValueError(f"unknown logger kind: {self.kind!r}")
        if (self.kind == "named") != (self.name is not None):
            raise ValueError("only a named logger carries a name")

    @classmethod
    def from_key(cls, logger_name: str) -> "EnvLevelLogger":
        """Interpret the key on the left of ``=``."""
        if not logger_name:
            return cls("unnamed")
        if logger_name == "*":
            return cls("all_except_default")
        return cls("named", logger_name)

    @classmethod
    def from_logger(cls, logger_name: Optional[str]) -> "EnvLevelLogger":
        """The entry key for a logger with the given (possibly missing) name."""
        if logger_name is None:
            return cls("unnamed")
        return cls("named", logger_name)


class EnvLevelError(Exception):
    """Failure to fetch or parse the environment level configuration."""

    def __init__(self, description: str, *, fetch: bool = False) -> None:
        self.description = description
        self.fetch = fetch
        prefix = (
            "fetch environment variable error"
            if fetch
            else "parse environment variable error"
        )
        super().__init__(f"{prefix}: {description}")


EnvLevel = dict[EnvLevelLogger, LevelFilter]

_lock = threading.Lock()
_env_level: Optional[EnvLevel] = None


def parse_env_level(var: str) -> EnvLevel:
    """Parse a comma-separated list of ``level`` or ``name=level`` entries."""
    env_level: EnvLevel = {}

    for kv_str in (part.strip() for part in var.split(",")):
        if not kv_str:
            continue

        parts = [piece.strip() for piece in kv_str.split("=")]
        if len(parts) == 1:
            level = LevelFilter.from_str_for_env(parts[0])
            if level is None:
                raise EnvLevelError(
                    f"cannot parse level for default logger: '{kv_str}'"
                )
            logger = EnvLevelLogger("default")
        elif len(parts) == 2:
            logger_name, level_text = parts
            level = LevelFilter.from_str_for_env(level_text)
            if level is None:
                raise EnvLevelError(
                    f"cannot parse level for logger '{logger_name}': '{kv_str}'"
                )
            logger = EnvLevelLogger.from_key(logger_name)
        else:
            raise EnvLevelError(f"invalid kv: '{kv_str}'")

        if logger in env_level:
            raise EnvLevelError(f"specified level multiple times: '{kv_str}'")
        env_level[logger] = level

    return env_level


def set_env_level(var: str) -> None:
    """Parse ``var`` and make it the process-wide level configuration."""
    global _env_level
    parsed = parse_env_level(var)
    with _lock:
        _env_level = parsed


def lookup_level(
    env_level: EnvLevel, is_default: bool, logger_name: Optional[str] = None
) -> Optional[LevelFilter]:
    """The configured level for a logger, or None if none applies."""
    if is_default:
        return env_level.get(EnvLevelLogger("default"))
    found = env_level.get(EnvLevelLogger.from_logger(logger_name))
    if found is None:
        found = env_level.get(EnvLevelLogger("all_except_default"))
    return found


def logger_level(
    is_default: bool, logger_name: Optional[str] = None
) -> Optional[LevelFilter]:
    """Look up a logger's level in the process-wide configuration."""
    with _lock:
        current = _env_level
    if current is None:
        return None
    return lookup_level(current, is_default, logger_name)