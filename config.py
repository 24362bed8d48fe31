import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default=None):
    # Process environment wins over env.yaml; values are parsed as YAML scalars
    # so "8000" becomes an int and "[a, b]" a list.
    if key in os.environ:
        return yaml.safe_load(os.environ[key])
    return data.get(key, default)


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./booking.db")
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = int(_get("API_PORT", 5000))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CLIENT_URL = _get("CLIENT_URL", "http://localhost:5173")
    CORS_ORIGINS = _get("CORS_ORIGINS", [CLIENT_URL])
    CORS_ALLOW_CREDENTIALS = bool(_get("CORS_ALLOW_CREDENTIALS", True))
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(_get("ENABLE_LOGGING_MIDDLEWARE", 1))
    JWT_SECRET = _get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_IN = _get("JWT_EXPIRES_IN", "7d")
    BCRYPT_ROUNDS = int(_get("BCRYPT_ROUNDS", 12))
    RESET_TOKEN_TTL_MINUTES = int(_get("RESET_TOKEN_TTL_MINUTES", 60))
    EMAIL_HOST = _get("EMAIL_HOST", "smtp.gmail.com")
    EMAIL_PORT = int(_get("EMAIL_PORT", 465))
    EMAIL_USER = _get("EMAIL_USER", "")
    EMAIL_PASS = _get("EMAIL_PASS", "")
    EMAIL_FROM_NAME = _get("EMAIL_FROM_NAME", "Booking")
