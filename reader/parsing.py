"""Parsers for the DAYS and TIME columns of the schedule table."""

import re
from datetime import date, datetime, time, timedelta

from .errors import InvalidDayCode, InvalidTimeFormat
from .models import Duration, MeetingPattern, TimeRange


# Python weekday numbers: 0 = Monday ... 6 = Sunday
DAY_CODES = {
    "U": 6,
    "Su": 6,
    "M": 0,
    "T": 1,
    "W": 2,
    "R": 3,
    "Th": 3,
    "F": 4,
    "S": 5,
    "Sa": 5,
}

TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")

# Both ends of a range are placed on this date before differencing
REFERENCE_DATE = date(2000, 1, 1)


def parse_days(text: str) -> tuple[int, ...]:
    """Parse a comma delimited day string such as 'M,W,F'.

    Args:
        text: Day codes separated by commas.

    Returns:
        Weekday numbers in the order they were listed, without repeats.

    Raises:
        InvalidDayCode: If any token is not a known day code.
    """
    weekdays: list[int] = []
    for token in text.split(","):
        code = token.strip()
        if code not in DAY_CODES:
            raise InvalidDayCode(f"Invalid day code: '{code}' in '{text}'")
        weekday = DAY_CODES[code]
        if weekday not in weekdays:
            weekdays.append(weekday)
    return tuple(weekdays)


def _parse_time(token: str, text: str) -> time:
    match = TIME_PATTERN.fullmatch(token)
    if not match:
        raise InvalidTimeFormat(f"Invalid time: '{token}' in '{text}'. Expected HH:MM.")
    hour, minute = map(int, match.groups())
    if hour > 23 or minute > 59:
        raise InvalidTimeFormat(f"Time out of range: '{token}' in '{text}'")
    return time(hour, minute)


def parse_time_range(text: str) -> TimeRange:
    """Parse a time range such as '12:00 - 14:00'.

    Raises:
        InvalidTimeFormat: If there is no separator or either side is not HH:MM.
    """
    start, sep, end = text.partition("-")
    if not sep:
        raise InvalidTimeFormat(f"Invalid time range: '{text}'. Expected HH:MM - HH:MM.")
    return TimeRange(start=_parse_time(start.strip(), text), end=_parse_time(end.strip(), text))


def duration(time_range: TimeRange) -> Duration:
    """Return the length of a time range.

    An end before the start is taken to fall on the next day, so
    '21:00 - 05:00' lasts eight hours.
    """
    start = datetime.combine(REFERENCE_DATE, time_range.start)
    end = datetime.combine(REFERENCE_DATE, time_range.end)
    if end < start:
        end += timedelta(days=1)
    return Duration.from_timedelta(end - start)


def parse_pattern(index: int, days: str, times: str) -> MeetingPattern:
    """Parse one DAYS/TIME column pair into a meeting pattern."""
    return MeetingPattern(
        index=index,
        days=days,
        times=times,
        weekdays=parse_days(days),
        time_range=parse_time_range(times),
    )
