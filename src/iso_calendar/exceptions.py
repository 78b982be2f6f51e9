class DateTimeError(Exception):
    """Base class for custom errors in the iso-calendar package."""


class FieldRangeError(DateTimeError, ValueError):
    """Raised when a field value lies outside the legal range of that field."""


class InvalidDateError(DateTimeError, ValueError):
    """Raised when a day-of-month is not valid for the year and month it is combined with."""


class UnsupportedFieldError(DateTimeError):
    """Raised when a field is not supported by the temporal object it is requested from."""


class UnsupportedUnitError(DateTimeError):
    """Raised when a unit is not supported by the temporal object it is applied to."""


class ArithmeticOverflowError(DateTimeError, ArithmeticError):
    """Raised when a calculation exceeds the representable range."""


class OffsetError(DateTimeError, ValueError):
    """Raised when zone offset components are out of range or have inconsistent signs."""


class DateTimeParseError(DateTimeError, ValueError):
    """Raised when text cannot be parsed into a temporal object."""

    def __init__(self, msg: str | None = None, parsed_text: str = "", error_index: int = 0):
        if not msg:
            msg = f"Text '{parsed_text}' could not be parsed at index {error_index}"
        self.parsed_text = parsed_text
        self.error_index = error_index
        super().__init__(msg)
