import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default="false"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _database_uri():
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    host = os.getenv("DB_HOST", "localhost")
    user = os.getenv("DB_USER", "root")
    password = os.getenv("DB_PASSWORD", "")
    name = os.getenv("DB_NAME", "asset_mgmt_tkt_sysm")
    return f"mysql+mysqlconnector://{user}:{password}@{host}/{name}"


class Config:
    PORT = int(os.getenv("PORT", 5050))

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")

    # Token signing
    JWT_SECRET = os.getenv("JWT_SECRET") or "your_secret_key"
    JWT_EXPIRY = os.getenv("JWT_EXPIRY") or "1h"

    # Outgoing mail (EMAIL_USER / EMAIL_PASS kept as aliases)
    MAIL_SERVER = os.getenv("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(os.getenv("MAIL_PORT", 587))
    MAIL_USERNAME = os.getenv("MAIL_USERNAME") or os.getenv("EMAIL_USER")
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD") or os.getenv("EMAIL_PASS")
    MAIL_SENDER_NAME = os.getenv("MAIL_SENDER_NAME", "Ticket System")

    # Non-admin list requests without a company are rejected unless enabled
    ALLOW_UNSCOPED_LISTS = _env_flag("ALLOW_UNSCOPED_LISTS")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    JWT_SECRET = "test-secret-key-with-enough-length-for-hs256"
    JWT_EXPIRY = "1h"
    MAIL_USERNAME = None
    MAIL_PASSWORD = None
    ALLOW_UNSCOPED_LISTS = False
    LOG_FILE = None
