import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./docshare.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", False)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    # Signs shared document links; falls back to the session secret
    LINK_SECRET = data.get("LINK_SECRET", JWT_SECRET)
    SESSION_TOKEN_EXPIRE_MINUTES = int(data.get("SESSION_TOKEN_EXPIRE_MINUTES", 60))
    DEFAULT_EXPIRY_DAYS = int(data.get("DEFAULT_EXPIRY_DAYS", 7))
    MAX_EXPIRY_DAYS = int(data.get("MAX_EXPIRY_DAYS", 3650))
    LINK_BASE_URL = data.get("LINK_BASE_URL", "http://localhost:5000")
    UPLOAD_DIR = data.get("UPLOAD_DIR", os.path.join(ROOT_PATH, "uploads", "documents"))
    MAX_UPLOAD_BYTES = int(data.get("MAX_UPLOAD_BYTES", 10 * 1024 * 1024))
