import pytest

from sparklog.pattern_errors import (
    ConflictNameError,
    MultiplePatternErrors,
    UnknownPatternReference,
    WrongPatternKindReference,
)
from sparklog.patterns import BuiltInFormatter, BuiltInPattern, CustomPattern
from sparklog.registry import PatternRegistry, check_custom_pattern_names


def _dup(name):
    return ConflictNameError(existing=CustomPattern(name), incoming=CustomPattern(name))


DATE_CONFLICT = ConflictNameError(
    existing=BuiltInPattern(BuiltInFormatter.DATE), incoming=CustomPattern("date")
)


def test_check_ok():
    assert check_custom_pattern_names(["a", "b"]) is None


@pytest.mark.parametrize(
    "names, expected",
    [
        (["a", "a"], _dup("a")),
        (["a", "b", "a"], _dup("a")),
        (["date"], DATE_CONFLICT),
        (["date", "a", "a"], MultiplePatternErrors([DATE_CONFLICT, _dup("a")])),
        (["date", "a", "a", "a"], MultiplePatternErrors([DATE_CONFLICT, _dup("a")])),
        (
            ["b", "date", "a", "b", "a", "a"],
            MultiplePatternErrors([DATE_CONFLICT, _dup("b"), _dup("a")]),
        ),
    ],
)
def test_check_conflicts(names, expected):
    with pytest.raises(type(expected)) as info:
        check_custom_pattern_names(names)
    assert info.value == expected


def test_with_builtin_contains_all():
    registry = PatternRegistry.with_builtin()
    assert len(registry) == len(BuiltInFormatter)
    assert "datetime" in registry


def test_register_builtin_twice_is_bug():
    registry = PatternRegistry.with_builtin()
    with pytest.raises(RuntimeError):
        registry.register_builtin(BuiltInFormatter.LEVEL)


def test_register_and_find_custom():
    registry = PatternRegistry.with_builtin()
    factory = lambda: "x"  # noqa: E731
    registry.register_custom("mine", factory)
    found = registry.find(True, "mine")
    assert found.placeholder_name() == "mine"
    assert found.factory is factory


def test_register_custom_conflicts_with_builtin():
    registry = PatternRegistry.with_builtin()
    with pytest.raises(ConflictNameError) as info:
        registry.register_custom("level", lambda: None)
    assert info.value.existing == BuiltInPattern(BuiltInFormatter.LEVEL)
    assert str(info.value) == "'level' is already a built-in pattern, please try another name"


def test_register_custom_twice():
    registry = PatternRegistry()
    registry.register_custom("a", lambda: None)
    with pytest.raises(ConflictNameError) as info:
        registry.register_custom("a", lambda: None)
    assert info.value == _dup("a")


def test_find_builtin():
    registry = PatternRegistry.with_builtin()
    assert registry.find(False, "payload") == BuiltInPattern(BuiltInFormatter.PAYLOAD)


def test_find_builtin_as_custom():
    registry = PatternRegistry.with_builtin()
    with pytest.raises(WrongPatternKindReference) as info:
        registry.find(True, "logger")
    assert info.value == WrongPatternKindReference(is_builtin_as_custom=True, placeholder="logger")


def test_find_custom_as_builtin():
    registry = PatternRegistry.with_builtin()
    registry.register_custom("c", lambda: None)
    with pytest.raises(WrongPatternKindReference) as info:
        registry.find(False, "c")
    assert info.value.is_builtin_as_custom is False


@pytest.mark.parametrize("is_custom", [True, False])
def test_find_unknown(is_custom):
    registry = PatternRegistry.with_builtin()
    with pytest.raises(UnknownPatternReference) as info:
        registry.find(is_custom, "nonexistent")
    assert info.value == UnknownPatternReference(is_custom=is_custom, placeholder="nonexistent")