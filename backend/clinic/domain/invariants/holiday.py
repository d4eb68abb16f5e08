from clinic.models.holiday import HOLIDAY_TYPES
from clinic.utils.dates import to_calendar_day
from .exceptions import InvariantViolation, ValidationError

def assert_holiday(data):
    if not data.get("date") or not data.get("name"):
        raise ValidationError("Holiday date and name are required")

    assert_holiday_type(data.get("type", "manual"))

def assert_holiday_type(holiday_type):
    if holiday_type not in HOLIDAY_TYPES:
        raise InvariantViolation(
            f"Invalid holiday type '{holiday_type}'. Allowed: {', '.join(HOLIDAY_TYPES)}"
        )

def clean_holiday(values, *, partial=False):
    """
    Check holiday values before a write and reduce the date to a calendar day.
    With partial=True only the fields present are checked.
    """
    values = dict(values)
    if partial:
        for required in ("date", "name"):
            if required in values and not values[required]:
                raise ValidationError("Holiday date and name are required")
        if "type" in values:
            assert_holiday_type(values["type"])
    else:
        assert_holiday(values)

    if "date" in values:
        try:
            values["date"] = to_calendar_day(values["date"])
        except (TypeError, ValueError) as exc:
            raise ValidationError(str(exc)) from exc
    return values
