from datetime import date, datetime
from dateutil.parser import parse


def to_calendar_day(value):
    """
    Reduce a date, datetime or date string to its calendar day.
    Time-of-day and timezone are ignored.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse(value).date()
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"Invalid date: {value}") from exc
    raise TypeError(f"Cannot read a calendar day from {type(value).__name__}")
