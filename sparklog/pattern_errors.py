"""Errors raised while registering patterns and building templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from sparklog.patterns import BuiltInPattern, CustomPattern, PatternKind


def _impossible(debug: str) -> RuntimeError:
    return RuntimeError(
        "this should not happen, please report a bug\n\ndebug: " + debug
    )


def _placeholder_of(kind: PatternKind) -> str:
    if isinstance(kind, BuiltInPattern):
        return kind.placeholder()
    return kind.placeholder_name()


class PatternError(Exception):
    """Base class for pattern errors."""


@dataclass(eq=True)
class ConflictNameError(PatternError):
    """A custom pattern name clashes with an existing pattern."""

    existing: PatternKind
    incoming: PatternKind

    def __str__(self) -> str:
        if not isinstance(self.incoming, CustomPattern):
            raise _impossible(repr(self))
        name = _placeholder_of(self.existing)
        if isinstance(self.existing, BuiltInPattern):
            return f"'{name}' is already a built-in pattern, please try another name"
        return f"the constructor of custom pattern '{name}' is specified more than once"


class TemplateError(PatternError):
    """A template references patterns in an invalid way."""

    def _describe(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return f"template ill-format: {self._describe()}"


@dataclass(eq=True)
class WrongPatternKindReference(TemplateError):
    is_builtin_as_custom: bool
    placeholder: str

    def _describe(self) -> str:
        p = self.placeholder
        if self.is_builtin_as_custom:
            return (
                f"'{p}' is a built-in pattern, it cannot be used as a custom pattern. "
                f"try to replace it with `{{{p}}}`"
            )
        return (
            f"'{p}' is a custom pattern, it cannot be used as a built-in pattern. "
            f"try to replace it with `{{${p}}}`"
        )


@dataclass(eq=True)
class UnknownPatternReference(TemplateError):
    is_custom: bool
    placeholder: str

    def _describe(self) -> str:
        if self.is_custom:
            return f"the constructor of custom pattern '{self.placeholder}' is not specified"
        return f"no built-in pattern named '{self.placeholder}'"


@dataclass(eq=True)
class MultipleStyleRange(TemplateError):
    def _describe(self) -> str:
        return "multiple style ranges are not currently supported"


@dataclass(eq=True)
class TemplateParseError(PatternError):
    """The template string could not be parsed."""

    input: str
    kind: str = "TakeUntil"

    def __str__(self) -> str:
        return f"failed to parse template string: error {self.kind} at: {self.input}"


@dataclass(eq=True)
class MultiplePatternErrors(PatternError):
    """Several errors collected together."""

    errors: list = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"{len(self.errors)} errors detected:"]
        lines.extend(f" - {err}" for err in self.errors)
        return "\n".join(lines) + "\n"


def push_err(previous: Optional[PatternError], new: PatternError) -> PatternError:
    """Combine an optional earlier error with a new one."""
    if previous is None:
        return new
    if isinstance(previous, MultiplePatternErrors):
        return MultiplePatternErrors([*previous.errors, new])
    return MultiplePatternErrors([previous, new])


def push_result(
    previous: Optional[PatternError], new: Optional[PatternError]
) -> Optional[PatternError]:
    """Like push_err, but a missing new error leaves the previous one unchanged."""
    if new is None:
        return previous
    return push_err(previous, new)