from datetime import date
from typing import Any, Dict, List, Optional

import requests
from flask import current_app

from clinic.extensions import db
from clinic.models.holiday import Holiday
from clinic.domain.invariants.exceptions import ClinicError
from clinic.utils.dates import to_calendar_day
from clinic.utils.transaction import transactional

# Observances returned for India that the clinic does not close for.
NON_INDIAN_HOLIDAYS = (
    "Hanukkah",
    "Valentine's Day",
    "Lunar New Year",
    "March Equinox",
    "June Solstice",
    "September Equinox",
    "December Solstice",
)


class HolidayImportError(ClinicError):
    """The holiday provider could not be reached or answered badly."""


def fetch_remote_holidays(year: int, timeout: int = 15) -> List[Dict[str, Any]]:
    config = current_app.config
    try:
        r = requests.get(
            config["CALENDARIFIC_API_URL"],
            params={
                "api_key": config["CALENDARIFIC_API_KEY"],
                "country": config["HOLIDAY_COUNTRY"],
                "year": year,
            },
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise HolidayImportError(f"API call failed: {exc}") from exc

    if not r.ok:
        raise HolidayImportError(f"API call failed with status: {r.status_code}")

    try:
        payload = r.json()
    except ValueError as exc:
        raise HolidayImportError("Invalid response format from Calendarific API") from exc

    response = payload.get("response") if isinstance(payload, dict) else None
    holidays = (response or {}).get("holidays")
    if not isinstance(holidays, list):
        raise HolidayImportError("Invalid response format from Calendarific API")
    return holidays


def _is_indian(holiday: Dict[str, Any]) -> bool:
    name = holiday.get("name", "").lower()
    return not any(skip.lower() in name for skip in NON_INDIAN_HOLIDAYS)


def import_national_holidays(*, year: Optional[int] = None) -> Dict[str, Any]:
    """
    Pull the national holidays for a year and store the ones not yet known.

    Existing rows are matched on (date, name); imported rows apply to every
    doctor.
    """
    year = year or date.today().year
    remote = [h for h in fetch_remote_holidays(year) if _is_indian(h)]

    current_app.logger.info(
        "Received %s Indian holidays from Calendarific for %s", len(remote), year
    )

    existing = {
        (to_calendar_day(h.date), h.name)
        for h in Holiday.query.filter_by(type="national").all()
    }

    to_insert = []
    for item in remote:
        day = to_calendar_day(item["date"]["iso"][:10])
        if (day, item["name"]) in existing:
            continue
        existing.add((day, item["name"]))

        holiday = Holiday()
        holiday.date = day
        holiday.name = item["name"]
        holiday.description = item.get("description") or None
        holiday.type = "national"
        holiday.doctor = None
        to_insert.append(holiday)

    if not to_insert:
        return {
            "success": True,
            "count": 0,
            "message": f"No new Indian holidays to import for {year}",
        }

    with transactional():
        db.session.add_all(to_insert)

    return {
        "success": True,
        "count": len(to_insert),
        "message": f"Successfully imported {len(to_insert)} Indian holidays for {year}",
    }
