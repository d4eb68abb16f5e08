from flask import Blueprint

# Stateless endpoints called directly by the site's browser code
functions_bp = Blueprint("functions", __name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


@functions_bp.after_request
def add_cors_headers(response):
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


from . import emails
from . import holidays
