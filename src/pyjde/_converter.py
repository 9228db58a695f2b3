"""Core JdeDateTimeConverter - packed JDE integers to and from ``datetime``."""

from __future__ import annotations

import calendar
import logging
from datetime import MAXYEAR, MINYEAR, date, datetime, time, timedelta
from typing import Any

from pyjde._constants import (
    JDE_BASE_YEAR,
    JDE_HOUR_FACTOR,
    JDE_MINUTE_FACTOR,
    JDE_YEAR_FACTOR,
    TIME_FORMAT_WITH_SECONDS,
    TIME_FORMAT_WITHOUT_SECONDS,
)
from pyjde._errors import (
    ERR_MSG_INVALID_ARGUMENTS,
    ERR_MSG_INVALID_DAY_OF_YEAR,
    ERR_MSG_INVALID_JDE_DATE,
    ERR_MSG_INVALID_JDE_TIME,
    ERR_MSG_INVALID_TIME_FIELDS,
    ERR_MSG_INVALID_YEAR,
    InvalidArgumentsError,
    InvalidDateTimeError,
)
from pyjde.types import Clock, JdeDateTime

logger = logging.getLogger(__name__)


def _invalid(
    user_message: str,
    internal_details: str,
    wrapped: Exception | None = None,
) -> InvalidDateTimeError:
    logger.debug("rejecting conversion: %s", internal_details)
    return InvalidDateTimeError(user_message, internal_details, wrapped)


def _require_int(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentsError(
            ERR_MSG_INVALID_ARGUMENTS,
            f"{name} must be an int, got {type(value).__name__}",
        )


def split_jde_date(jde_date: int) -> tuple[int, int]:
    """Split a JDE date into ``(year, day_of_year)``.

    The year offset is unbounded, so ``124001`` is day 1 of 2024.
    """
    _require_int(jde_date, "jde_date")
    if jde_date < 0:
        raise _invalid(ERR_MSG_INVALID_JDE_DATE, f"negative JDE date {jde_date}")
    offset, day_of_year = divmod(jde_date, JDE_YEAR_FACTOR)
    return JDE_BASE_YEAR + offset, day_of_year


def split_jde_time(jde_time: int, include_seconds: bool = True) -> tuple[int, int, int]:
    """Split a JDE time into ``(hours, minutes, seconds)``.

    With seconds the value is read as ``HHMMSS``; without seconds as ``HHMM``
    and seconds are zero. Fields are not range checked here.
    """
    _require_int(jde_time, "jde_time")
    if jde_time < 0:
        raise _invalid(ERR_MSG_INVALID_JDE_TIME, f"negative JDE time {jde_time}")
    if include_seconds:
        hours = jde_time // JDE_HOUR_FACTOR
        remainder = jde_time - hours * JDE_HOUR_FACTOR
        minutes, seconds = divmod(remainder, JDE_MINUTE_FACTOR)
    else:
        hours, minutes = divmod(jde_time, JDE_MINUTE_FACTOR)
        seconds = 0
    return hours, minutes, seconds


def jde_to_date(jde_date: int) -> date:
    """Convert a JDE date to a ``date``.

    Raises:
        InvalidDateTimeError: If the year or day of year is out of range.
    """
    year, day_of_year = split_jde_date(jde_date)
    if not MINYEAR <= year <= MAXYEAR:
        raise _invalid(ERR_MSG_INVALID_YEAR, f"year {year} from JDE date {jde_date}")
    days_in_year = 366 if calendar.isleap(year) else 365
    if not 1 <= day_of_year <= days_in_year:
        raise _invalid(
            ERR_MSG_INVALID_DAY_OF_YEAR,
            f"day {day_of_year} of {year} from JDE date {jde_date} "
            f"(expected 1..{days_in_year})",
        )
    return date(year, 1, 1) + timedelta(days=day_of_year - 1)


def jde_to_time(jde_time: int, include_seconds: bool = True) -> time:
    """Convert a JDE time to a ``time`` with zero microseconds.

    Raises:
        InvalidDateTimeError: If hour, minute or second is out of range.
    """
    hours, minutes, seconds = split_jde_time(jde_time, include_seconds)
    try:
        return time(hours, minutes, seconds)
    except ValueError as e:
        raise _invalid(
            ERR_MSG_INVALID_TIME_FIELDS,
            f"{hours:02d}:{minutes:02d}:{seconds:02d} from JDE time {jde_time}",
            e,
        ) from e


def date_to_jde(value: date) -> int:
    """Convert a ``date`` (or the date part of a ``datetime``) to a JDE date."""
    if not isinstance(value, date):
        raise InvalidArgumentsError(
            ERR_MSG_INVALID_ARGUMENTS,
            f"expected date, got {type(value).__name__}",
        )
    day_of_year = value.timetuple().tm_yday
    return (value.year - JDE_BASE_YEAR) * JDE_YEAR_FACTOR + day_of_year


def time_to_jde(value: time, include_seconds: bool = True) -> int:
    """Convert a ``time`` to a JDE time, dropping sub-second precision.

    Each field is zero padded to two digits and the concatenation is read
    back as an integer, so ``01:02:03`` becomes ``10203``.
    """
    if not isinstance(value, time):
        raise InvalidArgumentsError(
            ERR_MSG_INVALID_ARGUMENTS,
            f"expected time, got {type(value).__name__}",
        )
    fmt = TIME_FORMAT_WITH_SECONDS if include_seconds else TIME_FORMAT_WITHOUT_SECONDS
    return int(fmt.format(hour=value.hour, minute=value.minute, second=value.second))


class JdeDateTimeConverter:
    """Converts between JDE date/time integers and naive ``datetime`` values.

    Args:
        clock: Time source used by ``to_jde`` when no value is given.
            Defaults to the local wall clock (``datetime.now``).
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or datetime.now

    def now(self) -> datetime:
        return self._clock()

    def to_calendar(
        self,
        jde_date: int,
        jde_time: int,
        include_seconds: bool = True,
    ) -> datetime:
        """Convert a JDE date and time to a naive ``datetime``.

        Args:
            jde_date: JDE date, ``(year - 1900) * 1000 + day_of_year``.
            jde_time: JDE time, ``HHMMSS`` or ``HHMM`` digits.
            include_seconds: Whether ``jde_time`` carries seconds.

        Returns:
            The ``datetime`` with microsecond zero.

        Raises:
            InvalidDateTimeError: If the decoded fields are out of range.
            InvalidArgumentsError: If an argument is not an int.
        """
        result = datetime.combine(
            jde_to_date(jde_date),
            jde_to_time(jde_time, include_seconds),
        )
        logger.debug(
            "decoded JDE %d/%d (seconds=%s) as %s",
            jde_date, jde_time, include_seconds, result.isoformat(),
        )
        return result

    def to_jde(
        self,
        date_time: date | None = None,
        include_seconds: bool = True,
    ) -> JdeDateTime:
        """Convert a ``datetime`` to a JDE date and time.

        Args:
            date_time: Value to convert. ``None`` uses the converter's clock.
                A plain ``date`` encodes as midnight. Timezone info is ignored;
                the wall-clock fields are encoded as they are.
            include_seconds: Whether to encode seconds in the JDE time.

        Returns:
            ``JdeDateTime(date, time)``.

        Raises:
            InvalidArgumentsError: If ``date_time`` is not a date or datetime.
        """
        if date_time is None:
            date_time = self.now()

        if isinstance(date_time, datetime):
            time_of_day = date_time.time()
        elif isinstance(date_time, date):
            time_of_day = time()
        else:
            raise InvalidArgumentsError(
                ERR_MSG_INVALID_ARGUMENTS,
                f"expected datetime, got {type(date_time).__name__}",
            )

        result = JdeDateTime(
            date_to_jde(date_time),
            time_to_jde(time_of_day, include_seconds),
        )
        logger.debug(
            "encoded %s (seconds=%s) as JDE %d/%d",
            date_time.isoformat(), include_seconds, result.date, result.time,
        )
        return result
