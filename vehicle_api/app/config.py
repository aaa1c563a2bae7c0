import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.environ.get("DATABASE_URL")
DB_USER = os.environ.get("DB_USER")
DB_PASSWORD = os.environ.get("DB_PASSWORD")
DB_HOST = os.environ.get("DB_HOST", "localhost")
DB_PORT = os.environ.get("DB_PORT", "5432")
DB_NAME = os.environ.get("DB_NAME")

DB_POOL_MIN_SIZE = int(os.environ.get("DB_POOL_MIN_SIZE", "1"))
DB_POOL_MAX_SIZE = int(os.environ.get("DB_POOL_MAX_SIZE", "10"))
DB_POOL_TIMEOUT = float(os.environ.get("DB_POOL_TIMEOUT", "5"))

VEHICLE_ZERO_POLICY = os.environ.get("VEHICLE_ZERO_POLICY", "zero_is_missing")

CORS_ALLOW_ORIGINS = os.environ.get("CORS_ALLOW_ORIGINS", "")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def database_url() -> str:
    if DATABASE_URL:
        return DATABASE_URL
    if not (DB_USER and DB_NAME):
        raise RuntimeError("DATABASE_URL or DB_USER/DB_NAME env vars must be set")
    parts = [
        f"host={DB_HOST}",
        f"port={DB_PORT}",
        f"dbname={DB_NAME}",
        f"user={DB_USER}",
    ]
    if DB_PASSWORD:
        parts.append(f"password={DB_PASSWORD}")
    return " ".join(parts)


def cors_origins(raw: Optional[str] = None) -> List[str]:
    value = CORS_ALLOW_ORIGINS if raw is None else raw
    return [origin.strip() for origin in value.split(",") if origin.strip()]
