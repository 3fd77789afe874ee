import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name, default):
    return bool(int(os.environ.get(name, default)))


class Config:
    # MongoDB
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/EmployeeDirectory")
    MONGO_TIMEOUT_MS = int(os.environ.get("MONGO_TIMEOUT_MS", "5000"))
    MONGO_FAIL_FAST = _flag("MONGO_FAIL_FAST", "0")

    # JWT
    JWT_SECRET = os.environ.get("JWT_SECRET")
    JWT_EXPIRES_SECONDS = int(os.environ.get("JWT_EXPIRES_SECONDS", "3600"))

    # Uploaded profile images
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "uploads")

    PROTECT_EMPLOYEE_ROUTES = _flag("PROTECT_EMPLOYEE_ROUTES", "1")

    PORT = int(os.environ.get("PORT", "3000"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG = _flag("DEBUG", "0")
    TESTING = False


class ProductionConfig(Config):
    DEBUG = False
    MONGO_FAIL_FAST = _flag("MONGO_FAIL_FAST", "1")


class TestConfig(Config):
    TESTING = True
    JWT_SECRET = "test-secret"
    JWT_EXPIRES_SECONDS = 3600
    PROTECT_EMPLOYEE_ROUTES = True
    LOG_LEVEL = "DEBUG"


def get_config():
    env = os.environ.get("APP_ENV", "development").lower()
    if env in {"prod", "production"}:
        return ProductionConfig
    if env in {"test", "testing"}:
        return TestConfig
    return Config
