"""
Iso-Calendar Parsing Module.

This module provides the pieces shared by the ISO text parsers. Each text format is described as a sequence of
regular expression parts, so that text which does not conform can be reported with the index where it stops
conforming rather than just the index of the first character.

Only ASCII digits are accepted, and the whole text must match: a trailing newline is an error.
"""

import re
from collections.abc import Sequence

from iso_calendar.exceptions import DateTimeParseError, FieldRangeError
from iso_calendar.fields import ChronoField

YEAR = r"(?P<year>[+-]?[0-9]{4,9})"
MONTH = r"(?P<month>[0-9]{2})"
DAY = r"(?P<day>[0-9]{2})"
HOUR = r"(?P<hour>[0-9]{2})"
MINUTE = r"(?P<minute>[0-9]{2})"
SECOND_AND_FRACTION = r"(?::(?P<second>[0-9]{2})(?:\.(?P<fraction>[0-9]{1,9}))?)?"
OFFSET = r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2}(?::[0-9]{2})?)"

DATE_PARTS = (YEAR, "-", MONTH, "-", DAY)
TIME_PARTS = (HOUR, ":", MINUTE, SECOND_AND_FRACTION)
DATE_TIME_PARTS = DATE_PARTS + ("[Tt]",) + TIME_PARTS


class TextPattern:
    """A text format made of consecutive regular expression parts.

    Example usage:

        pattern = TextPattern("a LocalDate", DATE_PARTS)
        pattern.match("2024-02-29").group("day")  # "29"
        pattern.error_index("2024-2-29")          # 5
    """

    __slots__ = ("_description", "_parts", "_regex")

    def __init__(self, description: str, parts: Sequence[str]):
        self._description = description
        self._parts = tuple(parts)
        self._regex = re.compile("".join(self._parts), re.ASCII)

    def match(self, text: str) -> re.Match:
        """Match the whole of the text against the pattern.

        Args:
            text: The text to parse.

        Returns:
            The match object.

        Raises:
            DateTimeParseError: If the text does not conform, carrying the index where it stops conforming.
        """
        matcher = self._regex.fullmatch(text)
        if matcher is None:
            error_index = self.error_index(text)
            raise DateTimeParseError(
                f"Text '{text}' could not be parsed as {self._description} at index {error_index}", text, error_index
            )
        return matcher

    def error_index(self, text: str) -> int:
        """Return the index where the text stops conforming to the pattern.

        The parts are matched as successively longer prefixes; the index is the end of the longest prefix matched.
        """
        index = 0
        for count in range(1, len(self._parts) + 1):
            matcher = re.compile("".join(self._parts[:count]), re.ASCII).match(text)
            if matcher is None:
                break
            index = matcher.end()
        return index


def parse_year(text: str, matcher: re.Match) -> int:
    """Parse the year group of a match.

    More than four digits require an explicit sign, and a ``+`` sign requires more than four digits.

    Args:
        text: The full text being parsed, for the error message.
        matcher: A match defining the group ``year``.

    Returns:
        The proleptic year.

    Raises:
        DateTimeParseError: If the sign rules are broken.
    """
    year = matcher.group("year")
    digits = year.lstrip("+-")
    if (year[0] == "+" and len(digits) <= 4) or (year[0] not in "+-" and len(digits) > 4):
        error_index = matcher.start("year")
        raise DateTimeParseError(f"Text '{text}' could not be parsed at index {error_index}", text, error_index)
    return int(year)


def parse_field(text: str, matcher: re.Match, group: str, field: ChronoField) -> int:
    """Parse a group of a match as the value of a field.

    An optional group that did not take part in the match is zero.

    Args:
        text: The full text being parsed, for the error message.
        matcher: The match.
        group: The name of the group holding the digits.
        field: The field the value must be valid for.

    Returns:
        The field value.

    Raises:
        DateTimeParseError: If the value is outside the range of the field, carrying the index of the group.
    """
    digits = matcher.group(group)
    if digits is None:
        return 0
    try:
        return field.check_valid_value(int(digits))
    except FieldRangeError as err:
        raise DateTimeParseError(f"Text '{text}' could not be parsed: {err}", text, matcher.start(group)) from err
