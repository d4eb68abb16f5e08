from flask import Flask, send_file, send_from_directory, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .api.functions import functions_bp
from .site import site_bp
from .middleware.session_middleware import session_middleware
from .errors import register_error_handlers
from .cli import clinic_cli
from .utils.media import bucket_root
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    session_middleware(app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    app.register_blueprint(functions_bp, url_prefix="/functions/v1")
    app.register_blueprint(site_bp)
    register_error_handlers(app)
    app.cli.add_command(clinic_cli)

    # -------------------------------------------------
    # Uploaded media (public content bucket)
    # -------------------------------------------------
    @app.route("/media/<string:bucket>/<path:object_path>", methods=["GET"], endpoint="media")
    def serve_media(bucket, object_path):
        if bucket != current_app.config["CONTENT_BUCKET"]:
            return {"error": "Unknown bucket"}, 404

        return send_from_directory(
            os.path.abspath(bucket_root()),
            object_path,
            max_age=current_app.config["MEDIA_CACHE_SECONDS"],
        )

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route("/openapi/clinic.yaml", methods=["GET"], endpoint="openapi_clinic")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "clinic_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("clinic_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/clinic.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Clinic Site API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
