from flask import request, jsonify
from clinic.application.holidays import create_holiday
from clinic.domain.invariants.exceptions import ValidationError
from clinic.normalizers.holiday import normalize_holiday
from clinic.resources.holidays import HolidaysResource, ManualHolidaysResource
from clinic.utils.decorators import admin_required
from . import v1_bp, json_body


@v1_bp.route("/holidays", methods=["GET"])
def list_holidays():
    resource = HolidaysResource().fetch()
    status = 500 if resource.error else 200
    return jsonify(resource.to_json()), status


@v1_bp.route("/holidays", methods=["POST"])
@admin_required
def add_holiday():
    data = json_body()
    holiday = create_holiday(data=data)

    return jsonify({
        "holiday": normalize_holiday(holiday),
        "message": "Holiday created successfully"
    }), 201


@v1_bp.route("/holidays/manual/<string:doctor>", methods=["GET"])
def manual_holidays(doctor):
    resource = ManualHolidaysResource(doctor).fetch()
    if resource.error:
        return jsonify(resource.to_json()), 500

    day = request.args.get("date")
    if not day:
        return jsonify(resource.to_json()), 200

    try:
        holiday = resource.holiday_for_date(day)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid date: {day}") from exc

    if holiday is not None:
        holiday = {**holiday, "date": holiday["date"].isoformat()}
    return jsonify({"date": day, "holiday": holiday}), 200
