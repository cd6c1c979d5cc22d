"""Typed exceptions for date string parsing, formatting and name lookup."""


class DateStringError(ValueError):
    """Base class for date string related errors."""


class UnparseableDateError(DateStringError):
    """Raised when no separator trial yields a calendar-valid interpretation."""

    def __init__(self, text: str) -> None:
        super().__init__(f'Unable to parse date string: "{text}"')
        self.text = text


class InvalidFormatError(DateStringError):
    """Raised when a format string is malformed or has the wrong components."""

    def __init__(self, message: str, *, format: str) -> None:
        super().__init__(message)
        self.format = format


class DateOutOfRangeError(DateStringError):
    """Raised when a temporal value falls outside the representable calendar."""


class UnsupportedLocaleError(ValueError):
    """Raised when no calendar name service is registered for a locale."""
