from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


def read_env_file(path: str | Path = ".env") -> dict[str, str]:
    """Read KEY=value pairs from a .env file; returns {} when it is missing."""
    env_path = Path(path)
    if not env_path.exists():
        return {}

    values: dict[str, str] = {}
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip().strip('"').strip("'")
    return values


@dataclass(frozen=True)
class Settings:
    app_name: str = "api-scaffold"
    app_version: str = "0.1.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60
    db_url: str = ""
    expose_error_details: bool = True


def _flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes"}


def _integer(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc


def load_settings(
    environ: Mapping[str, str] | None = None,
    *,
    env_file: str | Path | None = ".env",
) -> Settings:
    """Build the settings once at startup.

    Values come from ``environ`` (``os.environ`` by default) layered over the
    local ``.env`` file; exported variables win over the file.
    """
    env: dict[str, str] = read_env_file(env_file) if env_file is not None else {}
    env.update(os.environ if environ is None else environ)

    return Settings(
        app_name=env.get("APP_NAME", "api-scaffold"),
        app_version=env.get("APP_VERSION", "0.1.0"),
        debug=_flag(env.get("APP_DEBUG", "false")),
        host=env.get("HOST", "0.0.0.0"),
        port=_integer(env, "PORT", 3000),
        jwt_secret=env.get("JWT_SECRET", ""),
        jwt_algorithm=env.get("JWT_ALGORITHM", "HS256"),
        jwt_expires_minutes=_integer(env, "JWT_EXPIRES_MINUTES", 60),
        db_url=env.get("DB_URL", ""),
        expose_error_details=_flag(env.get("EXPOSE_ERROR_DETAILS", "true")),
    )
