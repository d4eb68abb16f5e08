# clinic/api/v1/content.py
from flask import request, jsonify
from clinic.domain.invariants.exceptions import InvariantViolation, ValidationError, UploadError
from clinic.resources import build_resource
from clinic.utils.decorators import admin_required
from . import v1_bp, json_body

# Body keys that address the write instead of being written
RESERVED_KEYS = {"target", "row_id"}


def _resource_from_request(name):
    params = request.args.to_dict()
    return build_resource(name, **params)


def _write_status(resource):
    if isinstance(resource.error, (InvariantViolation, ValidationError, UploadError)):
        return 400
    return 500


def _parse_update_body():
    """
    JSON: {"patch": {...}, "target": ..., "row_id": ...}
    multipart: form fields are the patch, the image is in "file"
    """
    if request.files or request.form:
        form = request.form.to_dict()
        options = {key: form.pop(key) for key in RESERVED_KEYS if key in form}
        return form, request.files.get("file"), options

    data = json_body()
    patch = data.get("patch")
    if patch is None:
        patch = {k: v for k, v in data.items() if k not in RESERVED_KEYS}
    if not isinstance(patch, dict):
        raise ValidationError("patch must be an object")
    options = {key: data[key] for key in RESERVED_KEYS if data.get(key)}
    return patch, None, options


@v1_bp.route("/content/<string:name>", methods=["GET"])
def get_content(name):
    resource = _resource_from_request(name).fetch()
    status = 500 if resource.error else 200
    return jsonify(resource.to_json()), status


@v1_bp.route("/content/<string:name>", methods=["PUT"])
@admin_required
def update_content(name):
    resource = _resource_from_request(name).fetch()
    patch, image, options = _parse_update_body()

    if not resource.update(patch, image, **options):
        return jsonify({"success": False, **resource.to_json()}), _write_status(resource)

    return jsonify({"success": True, **resource.to_json()}), 200


@v1_bp.route("/content/<string:name>", methods=["POST"])
@admin_required
def insert_content(name):
    resource = _resource_from_request(name)
    data = json_body()

    values = data.get("values", {})
    if not isinstance(values, dict):
        raise ValidationError("values must be an object")

    if not resource.insert(values, target=data.get("target")):
        return jsonify({"success": False, **resource.to_json()}), _write_status(resource)

    return jsonify({"success": True, **resource.to_json()}), 201
