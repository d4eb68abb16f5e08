from flask import current_app
from clinic.models.holiday import HOLIDAY_TYPES
from clinic.utils.dates import to_calendar_day


def validate_holiday_type(value):
    """
    Coerce a stored holiday type into the known set.

    Rows written through the API are validated on the way in, so an
    unknown value here can only come from legacy data; it is read as
    "manual" and logged.
    """
    if value in HOLIDAY_TYPES:
        return value
    current_app.logger.warning(
        'Invalid holiday type "%s" received, defaulting to "manual"', value
    )
    return "manual"


def normalize_holiday(holiday):
    return {
        "id": holiday.id,
        "date": to_calendar_day(holiday.date).isoformat(),
        "name": holiday.name,
        "type": validate_holiday_type(holiday.type),
        "doctor": holiday.doctor,
        "description": holiday.description,
    }


def normalize_manual_holiday(holiday):
    return {
        "date": to_calendar_day(holiday.date),
        "reason": holiday.name,
        "doctor": holiday.doctor,
    }
