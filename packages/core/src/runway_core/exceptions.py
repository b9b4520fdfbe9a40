"""Custom exceptions for the Runway cash flow projector.

This module provides a hierarchy of exception classes for consistent error
handling across the projection pipeline. All exceptions inherit from
RunwayError, making it easy to catch all application-specific errors.

Every error in Runway is fatal for the current run: the command line driver
catches RunwayError, reports it and exits before printing any report line.

Example:
    try:
        events = load_cash_events(path)
    except EventParseError as e:
        logger.error("bad_row", row=e.row, field=e.field)
        raise
    except RunwayError as e:
        # Handle any Runway-related error
        logger.error(f"Projection failed: {e}")
"""

from typing import Any, Optional


class RunwayError(Exception):
    """Base exception for all Runway errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        recoverable: Whether the error is potentially recoverable.

    Example:
        >>> raise RunwayError("Something went wrong", details={"code": 500})
        RunwayError: Something went wrong
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize RunwayError.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context about the error.
            recoverable: Whether the error can be fixed by correcting the input
                and running again. Defaults to False.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class ConfigurationError(RunwayError):
    """Error raised when configuration is invalid or missing.

    Raised for settings that fail validation, such as a tax rate outside
    0.0-1.0 or a negative projection horizon.

    Attributes:
        config_key: The configuration key that is problematic.
        expected: Description of the expected value or format.
        actual: The actual value found (if any).

    Example:
        >>> raise ConfigurationError(
        ...     "Tax rate out of range",
        ...     config_key="tax_rate",
        ...     expected="Decimal between 0 and 1",
        ...     actual="1.5",
        ... )
        ConfigurationError: Tax rate out of range
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Human-readable error description.
            config_key: The name of the configuration key that is problematic.
            expected: Description of what value was expected.
            actual: The actual value found.
            details: Optional dictionary with additional context.
            recoverable: Whether the error can be fixed at runtime.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.config_key = config_key
        self.expected = expected
        self.actual = actual

        if config_key:
            self.details["config_key"] = config_key
        if expected:
            self.details["expected"] = expected
        if actual is not None:
            self.details["actual"] = actual


class InputFileError(ConfigurationError):
    """Error raised when the cash events file cannot be opened or read.

    Attributes:
        path: The path that failed to open.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            config_key="cash_events_file_path",
            actual=path,
            details=details,
        )
        self.path = path


class EventParseError(RunwayError):
    """Error raised when a cash event row fails to parse.

    This covers unrecognized frequency or type tokens as well as malformed
    numeric and boolean cells. Parsers raise it without a row number; the
    loader fills in ``row`` before re-raising.

    Attributes:
        row: 1-based data row number in the input file (header excluded).
        field: The column that failed to parse.
        value: The raw text that was rejected.

    Example:
        >>> raise EventParseError(
        ...     "Invalid frequency: 'fortnightly'",
        ...     row=3,
        ...     field="frequency",
        ...     value="fortnightly",
        ... )
        EventParseError: Invalid frequency: 'fortnightly'
    """

    def __init__(
        self,
        message: str,
        *,
        row: Optional[int] = None,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """Initialize EventParseError.

        Args:
            message: Human-readable error description.
            row: 1-based data row number, if known.
            field: The name of the column that failed to parse.
            value: The rejected raw value.
            details: Optional dictionary with additional context.
            recoverable: Whether the error can be fixed by correcting the
                input file. Defaults to True.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.row = row
        self.field = field
        self.value = value

        if row is not None:
            self.details["row"] = row
        if field:
            self.details["field"] = field
        if value is not None:
            self.details["value"] = value


class InvalidFrequencyError(EventParseError, ValueError):
    """Raised when a frequency token is not recognized."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid frequency: {value!r}", field="frequency", value=value
        )


class InvalidEventTypeError(EventParseError, ValueError):
    """Raised when an event type token is not recognized."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid type: {value!r}", field="type_", value=value)


class CalendarError(RunwayError):
    """Error raised when date arithmetic lands on a non-existent date.

    Adding whole months keeps the day-of-month; when that day does not exist
    in the target month (e.g. January 31 plus one month) the projection is
    aborted instead of clamping.

    Attributes:
        start: The date months were added to.
        months: The number of months added.
    """

    def __init__(
        self,
        message: str,
        *,
        start: Optional[Any] = None,
        months: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details, recoverable=False)
        self.start = start
        self.months = months

        if start is not None:
            self.details["start"] = str(start)
        if months is not None:
            self.details["months"] = months


__all__ = [
    "RunwayError",
    "ConfigurationError",
    "InputFileError",
    "EventParseError",
    "InvalidFrequencyError",
    "InvalidEventTypeError",
    "CalendarError",
]
