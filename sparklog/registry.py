"""Lookup table from placeholder names to built-in and custom patterns."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from sparklog.pattern_errors import (
    ConflictNameError,
    PatternError,
    UnknownPatternReference,
    WrongPatternKindReference,
    push_err,
)
from sparklog.patterns import BuiltInFormatter, BuiltInPattern, CustomPattern, PatternKind


def _impossible(debug: str) -> RuntimeError:
    return RuntimeError(
        "this should not happen, please report a bug\n\ndebug: " + debug
    )


class PatternRegistry:
    """Maps placeholder names to the pattern kinds they refer to."""

    def __init__(self) -> None:
        self._formatters: dict[str, PatternKind] = {}

    @classmethod
    def with_builtin(cls) -> "PatternRegistry":
        """A registry holding every built-in pattern."""
        registry = cls()
        for formatter in BuiltInFormatter:
            registry.register_builtin(formatter)
        return registry

    def register_custom(self, placeholder: str, factory: Any) -> None:
        """Register a custom pattern, raising ConflictNameError if the name is taken."""
        incoming = CustomPattern(placeholder, factory)
        existing = self._formatters.get(placeholder)
        if existing is not None:
            raise ConflictNameError(existing=existing.erased(), incoming=incoming.erased())
        self._formatters[placeholder] = incoming

    def register_builtin(self, formatter: BuiltInFormatter) -> None:
        """Register a built-in pattern; registering one twice is a bug."""
        placeholder = formatter.placeholder()
        if placeholder in self._formatters:
            raise _impossible(f"formatter={formatter!r}")
        self._formatters[placeholder] = BuiltInPattern(formatter)

    def find(self, find_custom: bool, placeholder: str) -> PatternKind:
        """Find the pattern named ``placeholder`` of the requested kind."""
        found = self._formatters.get(placeholder)
        if found is None:
            raise UnknownPatternReference(is_custom=find_custom, placeholder=placeholder)
        is_custom = isinstance(found, CustomPattern)
        if is_custom == find_custom:
            return found
        raise WrongPatternKindReference(
            is_builtin_as_custom=not is_custom, placeholder=placeholder
        )

    def __contains__(self, placeholder: object) -> bool:
        return placeholder in self._formatters

    def __len__(self) -> int:
        return len(self._formatters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._formatters)

    def __repr__(self) -> str:
        return f"PatternRegistry({self._formatters!r})"


def check_custom_pattern_names(names: Iterable[str]) -> None:
    """Raise if any name clashes with a built-in pattern or appears more than once."""
    seen: dict[str, int] = {}
    result: Optional[PatternError] = None

    for name in names:
        try:
            existing = BuiltInFormatter(name)
        except ValueError:
            existing = None
        if existing is not None:
            result = push_err(
                result,
                ConflictNameError(existing=BuiltInPattern(existing), incoming=CustomPattern(name)),
            )

        count = seen.get(name, 0) + 1
        seen[name] = count
        if count == 2:
            conflict = CustomPattern(name)
            result = push_err(result, ConflictNameError(existing=conflict, incoming=conflict))

    if result is not None:
        raise result