"""Errors raised by loggers, sinks and formatters."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from sparklog.pattern_errors import PatternError


class LogError(Exception):
    """Base class for logging errors."""


class _WrappedError(LogError):
    _prefix = ""

    def __init__(self, error: BaseException) -> None:
        super().__init__(f"{self._prefix}: {error}")
        self.error = error
        self.__cause__ = error


class FormatRecordError(_WrappedError):
    """A formatter failed to format a record."""

    _prefix = "format record error"


class WriteRecordError(_WrappedError):
    """A sink failed to write a record."""

    _prefix = "write record error"


class FlushBufferError(_WrappedError):
    """A sink failed to flush its buffer."""

    _prefix = "flush buffer error"


class CreateDirectoryError(_WrappedError):
    """A sink failed to create a directory."""

    _prefix = "create directory error"


class OpenFileError(_WrappedError):
    """A sink failed to open a file."""

    _prefix = "open file error"


class QueryFileMetadataError(_WrappedError):
    """A sink failed to query file metadata."""

    _prefix = "query file metadata error"


class RenameFileError(_WrappedError):
    """A sink failed to rename a file."""

    _prefix = "rename file error"


class RemoveFileError(_WrappedError):
    """A sink failed to remove a file."""

    _prefix = "remove file error"


class ParseLevelError(LogError, ValueError):
    """A string did not name any log level."""

    def __init__(self, text: str) -> None:
        super().__init__(
            "attempted to convert a string that doesn't match an existing log level: "
            f"{text}"
        )
        self.text = text


class SetLoggerNameError(ValueError):
    """A logger name contains disallowed characters."""

    def __init__(self, name: str) -> None:
        super().__init__(f"name '{name}' contains disallowed characters")
        self.name = name


class InvalidArgumentError(LogError, ValueError):
    """An invalid argument was passed, e.g. ``logger name`` or ``rotation policy``."""

    def __init__(self, argument: str, detail: Any) -> None:
        super().__init__(f"invalid argument '{argument}': {detail}")
        self.argument = argument
        self.detail = detail
        if isinstance(detail, BaseException):
            self.__cause__ = detail


_SEND_REASONS = {
    "full": "the channel is full",
    "disconnected": "the channel is disconnected",
}


class SendToChannelError(LogError):
    """Sending to an async channel failed; ``dropped`` holds what was lost."""

    def __init__(self, reason: str, dropped: Any = None) -> None:
        if reason not in _SEND_REASONS:
            raise ValueError(f"unknown channel error reason: {reason!r}")
        super().__init__(f"failed to send message to channel: {_SEND_REASONS[reason]}")
        self.reason = reason
        self.dropped = dropped


class BuildPatternError(LogError):
    """A pattern could not be built at runtime."""

    def __init__(self, error: PatternError) -> None:
        super().__init__(f"failed to build pattern at runtime: {error}")
        self.error = error
        self.__cause__ = error


class MultipleErrors(LogError):
    """Several errors that occurred together."""

    def __init__(self, errors: list[LogError]) -> None:
        self.errors = list(errors)
        super().__init__(repr(self.errors))


ErrorHandler = Callable[[LogError], None]


def push_err(previous: Optional[LogError], new: LogError) -> LogError:
    """Combine an optional earlier error with a new one."""
    if previous is None:
        return new
    if isinstance(previous, MultipleErrors):
        return MultipleErrors([*previous.errors, new])
    return MultipleErrors([previous, new])


def push_result(previous: Optional[LogError], new: Optional[LogError]) -> Optional[LogError]:
    """Like push_err, but a missing new error leaves the previous one unchanged."""
    if new is None:
        return previous
    return push_err(previous, new)