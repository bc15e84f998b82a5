# filmreview/config.py
import os
from dotenv import find_dotenv, load_dotenv

# Load .env from the working tree; real environment variables win
load_dotenv(find_dotenv(usecwd=True))


def _env_bool(name, default="false"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "fallback_key")

    DATABASE_PATH = os.getenv("DATABASE_PATH", "./data.db")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))

    # session_token lifetime in seconds (absolute, not sliding)
    SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", str(24 * 60 * 60)))
    SESSION_TOKEN_SECURE = _env_bool("SESSION_TOKEN_SECURE")

    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # the threaded server hands pooled sqlite connections across threads
    SQLALCHEMY_ENGINE_OPTIONS = {"connect_args": {"check_same_thread": False}}


def database_uri(path):
    return f"sqlite:///{os.path.abspath(path)}"
