import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default=None):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


class Config:
    DB_FILE = os.getenv("DB_FILE", "db.json")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = _env_int("PORT", 3000)
    LOGS = _env_bool("LOGS", "false")
    ID_SPACE = _env_int("ID_SPACE", 1000)
    MAX_ID_ATTEMPTS = _env_int("MAX_ID_ATTEMPTS", 10_000)
    ID_SEED = _env_int("ID_SEED")
    LOCK_WRITES = _env_bool("LOCK_WRITES", "true")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")


class TestConfig(Config):
    TESTING = True
    LOGS = False
    ID_SEED = 1
