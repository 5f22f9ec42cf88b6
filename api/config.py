"""
Environment-aware configuration.
Values come from the process environment (and .env via python-dotenv);
get_config() picks the class from APP_ENV.
"""
import os
from dotenv import load_dotenv

load_dotenv()  # Read .env if present


def _csv(name: str, default: str) -> list:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def _int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")  # Set a strong key in production
    DEBUG = False
    TESTING = False
    APP_ENV = os.getenv("APP_ENV", "dev")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # Comma-separated list of origins, or "*"
    CORS_ORIGINS = _csv("CORS_ORIGINS", "http://localhost:3000")

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///growth-valley.db")

    # Tokens
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_IN = os.getenv("JWT_EXPIRES_IN", "7d")
    JWT_REFRESH_EXPIRES_IN = os.getenv("JWT_REFRESH_EXPIRES_IN", "30d")

    # First admin (POST /api/admin/init, flask create-admin)
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@growthvalley.com")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "ChangeThisPassword123!")
    ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin")

    # Mail
    SMTP_HOST = os.getenv("SMTP_HOST", "smtp.gmail.com")
    SMTP_PORT = _int("SMTP_PORT", 587)
    SMTP_USER = os.getenv("SMTP_USER", "")
    SMTP_PASS = os.getenv("SMTP_PASS", "")
    SMTP_FROM = os.getenv("EMAIL_FROM", "Growth Valley <noreply@growthvalley.com>")
    ENQUIRY_NOTIFY_EMAIL = os.getenv("ENQUIRY_NOTIFY_EMAIL", "")

    # Password reset
    RESET_PASSWORD_URL = os.getenv("RESET_PASSWORD_URL", "http://localhost:3000/admin/reset-password")
    RESET_TOKEN_EXPIRES = _int("RESET_TOKEN_EXPIRES", 3600000)  # ms

    # Uploads
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
    MAX_FILE_SIZE = _int("MAX_FILE_SIZE", 10485760)
    ALLOWED_FILE_TYPES = _csv("ALLOWED_FILE_TYPES", "image/jpeg,image/png,image/gif,image/webp")
    MAX_CONTENT_LENGTH = MAX_FILE_SIZE + 1024 * 1024

    # Rate limiting (Flask-Limiter reads the RATELIMIT_* keys itself)
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_HEADERS_ENABLED = True
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "100 per 15 minutes")
    CONTACT_RATE_LIMIT = os.getenv("CONTACT_RATE_LIMIT", "5 per 15 minutes")
    LOGIN_RATE_LIMIT = os.getenv("LOGIN_RATE_LIMIT", "5 per 15 minutes")
    PASSWORD_RESET_RATE_LIMIT = os.getenv("PASSWORD_RESET_RATE_LIMIT", "3 per hour")
    UPLOAD_RATE_LIMIT = os.getenv("UPLOAD_RATE_LIMIT", "50 per hour")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    TESTING = True
    APP_ENV = "test"
    DATABASE_URL = "sqlite://"
    JWT_SECRET = "test-secret"
    RATELIMIT_ENABLED = False
    RATELIMIT_STORAGE_URI = "memory://"
    SMTP_USER = ""
    ENQUIRY_NOTIFY_EMAIL = ""
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    DEBUG = False


def get_config(name: str | None):
    """
    Select config class.
    - If name is provided, choose by name.
    - Else choose based on APP_ENV (dev/test/prod).
    """
    env = (name or os.getenv("APP_ENV", "dev")).lower()
    if env in ["prod", "production"]:
        return ProductionConfig
    if env in ["test", "testing"]:
        return TestingConfig
    return DevelopmentConfig
