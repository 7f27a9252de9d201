"""Custom exceptions for weekplan."""


class WeekplanError(Exception):
    """Base exception for all weekplan errors."""

    pass


class ValidationError(WeekplanError):
    """Raised when validation fails."""

    pass


class CircularDependencyError(ValidationError):
    """Raised when a circular dependency is detected."""

    pass


class ParseError(WeekplanError):
    """Raised when YAML parsing fails."""

    pass
