from flask import Blueprint, request
from clinic.domain.invariants.exceptions import ValidationError

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)


def json_body():
    """The request's JSON object, {} when absent."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import content
from . import holidays
from . import blocks
