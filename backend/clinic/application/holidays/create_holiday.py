from typing import Any, Dict
from clinic.extensions import db
from clinic.models.holiday import Holiday
from clinic.domain.invariants.holiday import clean_holiday
from clinic.utils.transaction import transactional


def create_holiday(*, data: Dict[str, Any]) -> Holiday:
    """
    Add a holiday to the calendar.

    Unknown holiday types are rejected here rather than coerced on read.
    """
    values = clean_holiday(data)

    holiday = Holiday()
    holiday.date = values["date"]
    holiday.name = values["name"]
    holiday.type = values.get("type", "manual")
    holiday.doctor = values.get("doctor") or None
    holiday.description = values.get("description")

    with transactional():
        db.session.add(holiday)

    return holiday
