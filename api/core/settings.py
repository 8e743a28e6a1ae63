"""
Process settings.

Everything configurable is read from the environment once, at startup, and
handed to `create_app()` as a frozen `Settings` value. Nothing else in the API
should read `os.environ` directly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from auth import security

DEFAULT_PUBLIC_PATH_PREFIXES = (
    "/health",
    "/v3/api-docs",
    "/swagger-ui",
    "/swagger-ui.html",
    "/api-docs",
    "/db-console",
)
DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)
DEV_PASSWORD = "dev-change-this-password"

logger = logging.getLogger(__name__)


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _normalize_prefix(raw: str) -> str:
    # "api", "/api/" and "/api" all mean "/api"; "/" means no prefix.
    stripped = raw.strip().strip("/")
    return f"/{stripped}" if stripped else ""


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    auth_password_hash: str
    auth_username: str = "admin"
    auth_role: str = "USER"
    auth_realm: str = "portfolio-api"
    database_url: str = ""
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    db_command_timeout: float = 30.0
    db_create_schema: bool = True
    api_prefix: str = "/api"
    public_path_prefixes: tuple[str, ...] = DEFAULT_PUBLIC_PATH_PREFIXES
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_level: str = "INFO"


def _password_hash_from_env() -> str:
    # A stored hash wins; a plain password is hashed once and then discarded.
    password_hash = os.environ.get("AUTH_PASSWORD_HASH", "").strip()
    if password_hash:
        return password_hash

    rounds = _env_int("AUTH_BCRYPT_ROUNDS", security.DEFAULT_BCRYPT_ROUNDS)
    password = os.environ.get("AUTH_PASSWORD", "")
    if not password:
        logger.warning("auth_password_unset using development password; set AUTH_PASSWORD_HASH in production")
        password = DEV_PASSWORD
    return security.hash_password(password, rounds=rounds)


def load_settings() -> Settings:
    return Settings(
        auth_password_hash=_password_hash_from_env(),
        auth_username=_env_str("AUTH_USERNAME", "admin"),
        auth_role=_env_str("AUTH_ROLE", "USER"),
        auth_realm=_env_str("AUTH_REALM", "portfolio-api"),
        database_url=os.environ.get("DATABASE_URL", "").strip(),
        db_pool_min_size=_env_int("DB_POOL_MIN_SIZE", 1),
        db_pool_max_size=_env_int("DB_POOL_MAX_SIZE", 5),
        db_command_timeout=_env_float("DB_COMMAND_TIMEOUT", 30.0),
        db_create_schema=_env_bool("DB_CREATE_SCHEMA", True),
        api_prefix=_normalize_prefix(_env_str("API_PREFIX", "/api")),
        public_path_prefixes=_env_list("PUBLIC_PATH_PREFIXES", DEFAULT_PUBLIC_PATH_PREFIXES),
        cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
    )
