# clinic/resources/holidays.py
from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy import or_

from clinic.domain.invariants.holiday import clean_holiday
from clinic.models.holiday import Holiday
from clinic.normalizers.holiday import normalize_holiday, normalize_manual_holiday
from clinic.utils.dates import to_calendar_day
from .remote import Query, RemoteResource

ALL_DOCTORS = "all"


def _applies_to_doctor(query, params):
    return query.filter(
        or_(
            Holiday.doctor.is_(None),
            Holiday.doctor == ALL_DOCTORS,
            Holiday.doctor == params.get("doctor"),
        )
    )


class HolidaysResource(RemoteResource):
    """Every holiday in the calendar, dates as ISO strings."""

    def __init__(self) -> None:
        super().__init__(
            "holidays",
            {
                "holidays": Query(
                    Holiday,
                    many=True,
                    order_by="date",
                    mapper=normalize_holiday,
                    validate=clean_holiday,
                )
            },
        )


class ManualHolidaysResource(RemoteResource):
    """
    Admin-entered holidays that apply to one doctor.

    A holiday with no doctor, or doctor "all", applies to every doctor.
    """

    def __init__(self, doctor: str) -> None:
        super().__init__(
            "manual-holidays",
            {
                "holidays": Query(
                    Holiday,
                    many=True,
                    static_filters={"type": "manual"},
                    where=_applies_to_doctor,
                    order_by="date",
                    mapper=normalize_manual_holiday,
                    validate=clean_holiday,
                )
            },
            doctor=doctor,
        )

    def holiday_for_date(self, value: Any) -> Optional[Dict[str, Any]]:
        day = to_calendar_day(value)
        doctor = self.params.get("doctor")
        for holiday in self.data or []:
            if holiday["date"] != day:
                continue
            if holiday["doctor"] in (None, ALL_DOCTORS, doctor):
                return holiday
        return None

    def to_json(self) -> Dict[str, Any]:
        payload = super().to_json()
        if payload["data"] is not None:
            payload["data"] = [
                {**holiday, "date": holiday["date"].isoformat()}
                for holiday in payload["data"]
            ]
        return payload
