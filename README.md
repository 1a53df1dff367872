# sparklog

Building blocks for pattern-based log formatting and per-logger level
configuration.

## What is in the package

- `sparklog.patterns`: the `BuiltInFormatter` enum names every built-in
  placeholder, such as `datetime`, `level`, `logger`, `payload` and `eol`.
  `BuiltInFormatter.from_placeholder` looks one up by name and raises
  `ValueError` for unknown names. `BuiltInPattern` and `CustomPattern` are the
  two kinds of pattern a registry holds. `CustomPattern.erased()` returns a
  copy without its factory.
- `sparklog.registry`: `PatternRegistry` maps placeholder names to patterns.
  `PatternRegistry.with_builtin()` fills it with every built-in.
  `register_custom(name, factory)` adds a custom pattern and raises
  `ConflictNameError` if the name is taken. `find(find_custom, name)` returns
  the pattern. It raises `UnknownPatternReference` when the name is unknown.
  It raises `WrongPatternKindReference` when the name refers to a pattern of
  the other kind. `check_custom_pattern_names(names)` raises if a name clashes
  with a built-in or appears more than once. When there are several problems
  it raises them together as `MultiplePatternErrors`.
- `sparklog.runtime`: `validate_pattern_name(name)` accepts identifier-like
  names (letters, digits and underscores, not starting with a digit, not a
  lone `_`) and raises `ValueError` otherwise. `build_registry(custom_patterns)`
  takes a mapping or an iterable of `(name, factory)` pairs. It checks the
  names and that the factories are callable, then returns a registry with the
  built-ins plus the custom patterns.
- `sparklog.brackets`: `take_until_unbalanced(opening, closing, text)` splits
  text at the first closing bracket that has no opening partner and returns
  `(rest, taken)`. `delimited_unbalanced(opening, closing, text)` parses
  `opening ... closing` with nesting allowed. Both raise
  `UnbalancedBracketsError`.
- `sparklog.env_level`: `parse_env_level` parses strings such as
  `"info,=warn,*=error,database=trace"` into a dict from `EnvLevelLogger` to
  `LevelFilter`. In that string:
  - a bare level applies to the default logger;
  - `=level` applies to unnamed loggers;
  - `*=level` applies to every logger except the default one;
  - `name=level` applies to the logger with that name.

  Levels are matched without regard to case. `set_env_level` installs a
  parsed configuration for the whole process, and `logger_level` queries it.
  `lookup_level` queries a configuration that you pass in. Malformed input
  raises `EnvLevelError`.
- `sparklog.pattern_errors` and `sparklog.errors`: the exception hierarchies
  (`PatternError`, `LogError` and their subclasses). Each module has
  `push_err` and `push_result`, which combine errors into
  `MultiplePatternErrors` or `MultipleErrors`.

## Installation

```
pip install sparklog
```

## Examples

```python
from sparklog.registry import PatternRegistry

registry = PatternRegistry.with_builtin()
registry.register_custom("request_id", lambda: "req-1")

registry.find(False, "level")        # BuiltInPattern(BuiltInFormatter.LEVEL)
registry.find(True, "request_id")    # the CustomPattern just registered
registry.find(True, "level")         # raises WrongPatternKindReference
```

```python
from sparklog.registry import check_custom_pattern_names

check_custom_pattern_names(["a", "b"])          # fine
check_custom_pattern_names(["date", "a", "a"])  # raises MultiplePatternErrors
```

```python
from sparklog.env_level import Level, LevelFilter, lookup_level, parse_env_level

levels = parse_env_level("off,=info,*=error")
lookup_level(levels, True)           # LevelFilter("off")
lookup_level(levels, False, None)    # LevelFilter("more_severe_equal", Level.INFO)
lookup_level(levels, False, "db")    # LevelFilter("more_severe_equal", Level.ERROR)

LevelFilter.from_str_for_env("warn").test(Level.ERROR)  # True
```

## What the package does not do

The package has no loggers, sinks or formatters, so it writes no log records
anywhere. It does not parse template strings such as `"{level} {payload}"` or
render placeholders into text. The registry only resolves names to pattern
kinds. `set_env_level` takes a string and does not read any environment
variable itself.

## Running the tests

```
pip install -e ".[test]"
pytest
```