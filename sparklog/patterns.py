"""Built-in and custom pattern kinds used by pattern templates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class BuiltInFormatter(Enum):
    """Every built-in pattern, keyed by its placeholder name."""

    ABBR_WEEKDAY_NAME = "weekday_name"
    WEEKDAY_NAME = "weekday_name_full"
    ABBR_MONTH_NAME = "month_name"
    MONTH_NAME = "month_name_full"
    FULL_DATE_TIME = "datetime"
    SHORT_YEAR = "year_short"
    YEAR = "year"
    SHORT_DATE = "date_short"
    DATE = "date"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    HOUR_12 = "hour_12"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"
    AM_PM = "am_pm"
    TIME_12 = "time_12"
    SHORT_TIME = "time_short"
    TIME = "time"
    TZ_OFFSET = "tz_offset"
    UNIX_TIMESTAMP = "unix_timestamp"
    FULL = "full"
    LEVEL = "level"
    SHORT_LEVEL = "level_short"
    SOURCE = "source"
    SOURCE_FILENAME = "file_name"
    SOURCE_FILE = "file"
    SOURCE_LINE = "line"
    SOURCE_COLUMN = "column"
    SOURCE_MODULE_PATH = "module_path"
    LOGGER_NAME = "logger"
    PAYLOAD = "payload"
    PROCESS_ID = "pid"
    THREAD_ID = "tid"
    EOL = "eol"

    def placeholder(self) -> str:
        """The name used to reference this pattern in a template."""
        return self.value

    def struct_name(self) -> str:
        """The CamelCase name of the pattern implementation."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @classmethod
    def from_placeholder(cls, placeholder: str) -> "BuiltInFormatter":
        """Look up a built-in pattern by placeholder, raising ValueError if unknown."""
        try:
            return cls(placeholder)
        except ValueError:
            raise ValueError(f"no built-in pattern named '{placeholder}'") from None


@dataclass(frozen=True)
class BuiltInPattern:
    """A reference to a built-in pattern."""

    formatter: BuiltInFormatter

    def placeholder(self) -> str:
        return self.formatter.placeholder()

    def erased(self) -> "BuiltInPattern":
        """Built-in patterns carry no factory, so erasing returns an equal value."""
        return BuiltInPattern(self.formatter)


@dataclass(frozen=True)
class CustomPattern:
    """A user-registered pattern with the factory that creates it."""

    placeholder: str
    factory: Any = None

    def placeholder_name(self) -> str:
        return self.placeholder

    def erased(self) -> "CustomPattern":
        """A copy without the factory, suitable for comparisons and messages."""
        return CustomPattern(self.placeholder)


PatternKind = Union[BuiltInPattern, CustomPattern]