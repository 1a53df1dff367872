"""Pattern placeholder registries, bracket scanning, environment-style log levels and errors."""

__version__ = "0.1.0"

__all__ = [
    "brackets",
    "env_level",
    "errors",
    "pattern_errors",
    "patterns",
    "registry",
    "runtime",
]