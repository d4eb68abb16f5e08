import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", os.getenv("SECRET_KEY", "dev-secret"))
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Media storage (public content bucket)
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "uploads")
    CONTENT_BUCKET = os.getenv("CONTENT_BUCKET", "website-images")
    MEDIA_PUBLIC_URL = os.getenv("MEDIA_PUBLIC_URL", "/media")
    MEDIA_CACHE_SECONDS = int(os.getenv("MEDIA_CACHE_SECONDS", "3600"))

    # Admin session record
    AUTH_SESSION_KEY = os.getenv("AUTH_SESSION_KEY", "eyefem_auth")

    # Email delivery
    RESEND_API_KEY = os.getenv("RESEND_API_KEY", "")
    RESEND_API_URL = os.getenv("RESEND_API_URL", "https://api.resend.com/emails")
    EMAIL_FROM = os.getenv("EMAIL_FROM", "EyeFem <onboarding@resend.dev>")
    EMAIL_LOGO_URL = os.getenv("EMAIL_LOGO_URL", "/media/website-content/eyefem-logo.png")
    EMAIL_TIMEOUT = int(os.getenv("EMAIL_TIMEOUT", "15"))

    # Holiday import
    CALENDARIFIC_API_KEY = os.getenv("CALENDARIFIC_API_KEY", "")
    CALENDARIFIC_API_URL = os.getenv("CALENDARIFIC_API_URL", "https://calendarific.com/api/v2/holidays")
    HOLIDAY_COUNTRY = os.getenv("HOLIDAY_COUNTRY", "IN")

    # Third-party widgets
    ELFSIGHT_SCRIPT_URL = os.getenv("ELFSIGHT_SCRIPT_URL", "https://static.elfsight.com/platform/platform.js")
    ELFSIGHT_REVIEWS_APP_ID = os.getenv("ELFSIGHT_REVIEWS_APP_ID", "")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///clinic-dev.db")

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    RESEND_API_KEY = "re_test"
    CALENDARIFIC_API_KEY = "cal_test"

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
