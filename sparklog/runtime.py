"""Building pattern registries from user-supplied custom patterns at runtime."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Union

from sparklog.registry import PatternRegistry, check_custom_pattern_names

_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

CustomPatterns = Union[Mapping[str, Callable[[], Any]], Iterable[tuple[str, Callable[[], Any]]]]


def validate_pattern_name(name: str) -> str:
    """Return ``name`` if it is a valid custom pattern name, else raise ValueError."""
    if not isinstance(name, str) or not _NAME_RE.fullmatch(name) or name == "_":
        raise ValueError(f"invalid custom pattern name: {name!r}")
    return name


def build_registry(custom_patterns: CustomPatterns = ()) -> PatternRegistry:
    """Create a registry with all built-ins plus the given ``(name, factory)`` pairs.

    Raises ValueError for malformed names and a pattern error for names that
    clash with built-in patterns or with each other.
    """
    if isinstance(custom_patterns, Mapping):
        pairs = list(custom_patterns.items())
    else:
        pairs = list(custom_patterns)

    for name, factory in pairs:
        validate_pattern_name(name)
        if not callable(factory):
            raise TypeError(f"factory of custom pattern '{name}' is not callable")

    check_custom_pattern_names(name for name, _ in pairs)

    registry = PatternRegistry.with_builtin()
    for name, factory in pairs:
        registry.register_custom(name, factory)
    return registry