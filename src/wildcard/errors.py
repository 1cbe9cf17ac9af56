"""Error hierarchy for the wildcard package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "WildcardError",
    "InvalidArgumentError",
    "ConfigNotFoundError",
    "ConfigError",
    "FilterRuleError",
    "ErrorCodes",
]


class WildcardError(Exception):
    """Base error for all wildcard package errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidArgumentError(WildcardError):
    """Raised when a pattern is built from a missing or non-string value."""

    def __init__(self, message: str = "Invalid argument", **kwargs: Any) -> None:
        super().__init__(code="INVALID_ARGUMENT", message=message, **kwargs)


class ConfigNotFoundError(WildcardError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The path that could not be found."""
        return self.details["config_path"]


class ConfigError(WildcardError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class FilterRuleError(WildcardError):
    """Raised when a filter rule is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="FILTER_RULE_ERROR", message=message, **kwargs)


class ErrorCodes:
    """All error codes as constants.

    Example:
        if error.code == ErrorCodes.INVALID_ARGUMENT:
            handle_bad_pattern()
    """

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    FILTER_RULE_ERROR = "FILTER_RULE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
