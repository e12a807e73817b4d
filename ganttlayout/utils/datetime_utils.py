"""Date and time utilities."""

import re
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Union

DateLike = Union[datetime, date, str]

# Seconds followed by a fraction of any length.
_FRACTION_RE = re.compile(r"(\d{2}:\d{2}:\d{2})[.,](\d+)")


def parse_timestamp(value: Optional[DateLike], field_name: str = "timestamp") -> Optional[datetime]:
    """Coerce a datetime, date or ISO-8601 string into a naive wall-clock datetime.

    Aware values keep their own wall-clock reading; the offset is dropped since
    the timeline only works in whole days. Fractional seconds of any length are
    padded or truncated to microseconds.
    """
    if value is None:
        return None
    
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            text = _FRACTION_RE.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", text, count=1)
            parsed = datetime.fromisoformat(text.replace('Z', '+00:00'))
        except ValueError as e:
            raise ValueError(f"Invalid ISO-8601 {field_name}: {value!r}") from e
        return parsed.replace(tzinfo=None)
    
    raise TypeError(f"{field_name} must be a datetime, date or ISO string, got {type(value).__name__}")


def start_of_day(value: Union[datetime, date]) -> datetime:
    """Truncate to 00:00:00 of the same day."""
    if isinstance(value, datetime):
        value = value.replace(tzinfo=None).date()
    return datetime.combine(value, time.min)


def end_of_day(value: Union[datetime, date]) -> datetime:
    """Extend to the last instant of the same day."""
    if isinstance(value, datetime):
        value = value.replace(tzinfo=None).date()
    return datetime.combine(value, time.max)


def week_start(value: Union[datetime, date]) -> datetime:
    """Monday 00:00 of the ISO week containing value."""
    day = start_of_day(value)
    return day - timedelta(days=day.weekday())


def days_between(start: datetime, end: datetime) -> List[datetime]:
    """Every day from start to end inclusive, each at 00:00."""
    days = []
    current = start_of_day(start)
    last = start_of_day(end)
    
    while current <= last:
        days.append(current)
        current += timedelta(days=1)
    
    return days


def is_same_day(a: Union[datetime, date], b: Union[datetime, date]) -> bool:
    """Check if two timestamps fall on the same calendar day."""
    return start_of_day(a) == start_of_day(b)
