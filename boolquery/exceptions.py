"""Exception hierarchy for boolquery."""

from pathlib import Path


class BoolQueryError(Exception):
    """Base exception for all boolquery errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all boolquery errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(BoolQueryError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Query Errors
class QueryTypeError(BoolQueryError, TypeError):
    """Query input is not a string."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Query must be a string, got {type(value).__name__}")
