"""pyjde - Convert JD Edwards packed date/time integers to and from datetime."""

from __future__ import annotations

try:
    from pyjde._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from datetime import date, datetime

from pyjde._converter import (
    JdeDateTimeConverter,
    date_to_jde,
    jde_to_date,
    jde_to_time,
    time_to_jde,
)
from pyjde._errors import InvalidArgumentsError, InvalidDateTimeError, JdeConversionError
from pyjde.types import Clock, JdeDateTime

__all__ = [
    "to_calendar",
    "to_jde",
    "jde_to_date",
    "jde_to_time",
    "date_to_jde",
    "time_to_jde",
    "Clock",
    "JdeDateTime",
    "JdeDateTimeConverter",
    "JdeConversionError",
    "InvalidArgumentsError",
    "InvalidDateTimeError",
]

_converter = JdeDateTimeConverter()


def to_calendar(jde_date: int, jde_time: int, include_seconds: bool = True) -> datetime:
    """Convert a JDE date and time to a naive ``datetime``.

    Args:
        jde_date: JDE date, ``(year - 1900) * 1000 + day_of_year``.
        jde_time: JDE time, ``HHMMSS`` (or ``HHMM`` without seconds).
        include_seconds: Whether ``jde_time`` carries seconds. Defaults to True.

    Returns:
        The decoded ``datetime`` with microsecond zero.

    Raises:
        InvalidDateTimeError: If the decoded fields are not a valid date-time.
        InvalidArgumentsError: If an argument is not an int.
    """
    return _converter.to_calendar(jde_date, jde_time, include_seconds)


def to_jde(date_time: date | None = None, include_seconds: bool = True) -> JdeDateTime:
    """Convert a ``datetime`` to a JDE date and time.

    Args:
        date_time: Value to convert. Defaults to the current local time.
        include_seconds: Whether to encode seconds. Defaults to True.

    Returns:
        ``JdeDateTime(date, time)``, which unpacks as a pair.

    Raises:
        InvalidArgumentsError: If ``date_time`` is not a date or datetime.
    """
    return _converter.to_jde(date_time, include_seconds)
