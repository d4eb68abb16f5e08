"""Tests for the holiday resources."""
from __future__ import annotations

from datetime import date, datetime

from clinic.extensions import db
from clinic.models import Holiday
from clinic.resources.holidays import HolidaysResource, ManualHolidaysResource


def _holiday(day, name, *, type="manual", doctor=None):
    holiday = Holiday(date=day, name=name, type=type, doctor=doctor)
    db.session.add(holiday)
    db.session.commit()
    return holiday


def test_holidays_are_ordered_with_iso_dates(app):
    _holiday(date(2025, 8, 15), "Independence Day", type="national")
    _holiday(date(2025, 1, 26), "Republic Day", type="national")

    resource = HolidaysResource().fetch()

    assert [h["date"] for h in resource.data] == ["2025-01-26", "2025-08-15"]
    assert resource.data[0]["type"] == "national"


def test_legacy_holiday_type_read_as_manual(app, caplog):
    _holiday(date(2025, 3, 14), "Clinic offsite", type="retreat")

    resource = HolidaysResource().fetch()

    assert resource.data[0]["type"] == "manual"
    assert "Invalid holiday type" in caplog.text


def test_manual_holidays_filtered_by_doctor(app):
    _holiday(date(2025, 5, 1), "Everyone off")
    _holiday(date(2025, 5, 2), "All doctors", doctor="all")
    _holiday(date(2025, 5, 3), "Eye surgeon leave", doctor="eye")
    _holiday(date(2025, 5, 4), "Gyne leave", doctor="gynecology")
    _holiday(date(2025, 5, 5), "Diwali", type="national")

    resource = ManualHolidaysResource("gynecology").fetch()

    assert [h["reason"] for h in resource.data] == [
        "Everyone off",
        "All doctors",
        "Gyne leave",
    ]


def test_holiday_for_date_ignores_time_of_day(app):
    _holiday(date(2025, 10, 20), "Clinic closed", doctor="all")
    resource = ManualHolidaysResource("eye").fetch()

    match = resource.holiday_for_date(datetime(2025, 10, 20, 17, 45))

    assert match["reason"] == "Clinic closed"
    assert match["date"] == date(2025, 10, 20)


def test_holiday_for_date_accepts_strings(app):
    _holiday(date(2025, 10, 20), "Clinic closed")
    resource = ManualHolidaysResource("gynecology").fetch()

    assert resource.holiday_for_date("2025-10-20T09:00:00")["reason"] == "Clinic closed"
    assert resource.holiday_for_date("2025-10-21") is None


def test_holiday_for_date_skips_other_doctors(app):
    _holiday(date(2025, 10, 20), "Eye surgeon leave", doctor="eye")
    resource = ManualHolidaysResource("gynecology").fetch()

    assert resource.holiday_for_date(date(2025, 10, 20)) is None


def test_manual_holidays_json_uses_iso_dates(app):
    _holiday(date(2025, 12, 25), "Christmas break")

    payload = ManualHolidaysResource("eye").fetch().to_json()

    assert payload["data"] == [
        {"date": "2025-12-25", "reason": "Christmas break", "doctor": None}
    ]
    assert payload["error"] is None
