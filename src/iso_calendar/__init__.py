from typing import TYPE_CHECKING, Any

import autosemver

if TYPE_CHECKING:
    # These imports are only for static type checkers (e.g., Pyright, IDEs).
    # At runtime, they are not executed, so the modules won't be imported unless needed.
    from iso_calendar.enums import ChronoUnit, DayOfWeek, IsoEra, Month
    from iso_calendar.fields import ChronoField, ValueRange
    from iso_calendar.instant import Instant
    from iso_calendar.local_date import LocalDate
    from iso_calendar.local_date import LocalDate as CalendarDate
    from iso_calendar.local_date_time import LocalDateTime
    from iso_calendar.local_time import LocalTime
    from iso_calendar.offset_date_time import OffsetDateTime
    from iso_calendar.period import Period
    from iso_calendar.year import Year
    from iso_calendar.zone_offset import ZoneOffset

try:
    __version__ = autosemver.packaging.get_current_version(project_name="iso_calendar")
except Exception:
    __version__ = "0.0.0"


# Declare the public API of the package. This tells `from iso_calendar import *` what to include.
__all__ = [  # noqa
    "CalendarDate",
    "ChronoField",
    "ChronoUnit",
    "DayOfWeek",
    "Instant",
    "IsoEra",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "Month",
    "OffsetDateTime",
    "Period",
    "ValueRange",
    "Year",
    "ZoneOffset",
]

# Public name -> (module, attribute)
_LAZY_EXPORTS = {
    "CalendarDate": ("iso_calendar.local_date", "LocalDate"),
    "ChronoField": ("iso_calendar.fields", "ChronoField"),
    "ChronoUnit": ("iso_calendar.enums", "ChronoUnit"),
    "DayOfWeek": ("iso_calendar.enums", "DayOfWeek"),
    "Instant": ("iso_calendar.instant", "Instant"),
    "IsoEra": ("iso_calendar.enums", "IsoEra"),
    "LocalDate": ("iso_calendar.local_date", "LocalDate"),
    "LocalDateTime": ("iso_calendar.local_date_time", "LocalDateTime"),
    "LocalTime": ("iso_calendar.local_time", "LocalTime"),
    "Month": ("iso_calendar.enums", "Month"),
    "OffsetDateTime": ("iso_calendar.offset_date_time", "OffsetDateTime"),
    "Period": ("iso_calendar.period", "Period"),
    "ValueRange": ("iso_calendar.fields", "ValueRange"),
    "Year": ("iso_calendar.year", "Year"),
    "ZoneOffset": ("iso_calendar.zone_offset", "ZoneOffset"),
}


def __getattr__(name: str) -> Any:
    # NOTE: We use __getattr__ for lazy imports instead of top-level imports because setuptools may evaluate
    #   this module during build (e.g., to use the value of iso_calendar.__version__), before submodules like
    #   `iso_calendar.local_date` exist. This avoids import-time errors when building from source using
    #   pyproject.toml and ensures compatibility with dynamic versioning tools like autosemver.
    #
    #   This 'lazy loading' also avoids importing the date-time types (and the zone offset cache they populate)
    #   until they are first used.
    if name in _LAZY_EXPORTS:
        import importlib  # noqa: PLC0415

        module_name, attribute = _LAZY_EXPORTS[name]
        return getattr(importlib.import_module(module_name), attribute)

    raise AttributeError(f"module {__name__} has no attribute {name}")
