"""
Kernel configuration.

Settings come from the process environment; a .env file at the repo root is
loaded first when present (existing variables win). Values are validated once
in __post_init__ and the result is cached, so every caller shares one frozen
Settings instance. The DSN is masked in safe_dict().
"""

from __future__ import annotations

import functools
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional, cast

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./nexus.db"

_TRUTHY = frozenset({"1", "true", "t", "yes", "y", "on"})
_ASYNC_DSN = re.compile(r"^(postgresql\+asyncpg|sqlite\+aiosqlite)://")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ------------------------------------------------------------------------------
# Environment readers
# ------------------------------------------------------------------------------
def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Raw value; blank counts as unset."""
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_flag(key: str, default: bool = False) -> bool:
    value = _env(key)
    return default if value is None else value.lower() in _TRUTHY


def _env_int(key: str, default: int) -> int:
    value = _env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {value!r}")


def _one_of(value: str, choices: tuple[str, ...], key: str) -> str:
    if value not in choices:
        raise ValueError(f"{key} must be one of {choices}, got {value!r}")
    return value


# ------------------------------------------------------------------------------
# Settings
# ------------------------------------------------------------------------------
EnvName = Literal["local", "dev", "staging", "prod"]
LogFormat = Literal["json", "console"]


@dataclass(frozen=True)
class Settings:
    # Environment
    environment: EnvName = "local"
    debug: bool = False

    # Persistence (async drivers only: the transactional boundary runs on AsyncSession)
    database_url: str = DEFAULT_DATABASE_URL
    database_echo: bool = False
    database_pool_size: int = 5

    # Domain defaults
    default_currency: str = "BRL"

    # Logging
    log_level: str = "INFO"
    log_format: Optional[LogFormat] = None

    # Derived
    is_prod: bool = field(init=False)
    is_local: bool = field(init=False)

    def __post_init__(self) -> None:
        _one_of(self.environment, ("local", "dev", "staging", "prod"), "ENVIRONMENT")

        if not _ASYNC_DSN.match(self.database_url):
            raise ValueError("DATABASE_URL must use postgresql+asyncpg:// or sqlite+aiosqlite://")
        if self.database_pool_size <= 0:
            raise ValueError("DATABASE_POOL_SIZE must be > 0")

        currency = self.default_currency.strip().upper()
        if not re.fullmatch(r"[A-Z]{3}", currency):
            raise ValueError("DEFAULT_CURRENCY must be a 3-letter ISO 4217 code")
        object.__setattr__(self, "default_currency", currency)

        level = _one_of(self.log_level.strip().upper(), _LOG_LEVELS, "LOG_LEVEL")
        object.__setattr__(self, "log_level", level)
        if self.log_format is not None:
            _one_of(self.log_format, ("json", "console"), "LOG_FORMAT")

        object.__setattr__(self, "is_prod", self.environment == "prod")
        object.__setattr__(self, "is_local", self.environment in ("local", "dev"))

    @property
    def json_logs(self) -> bool:
        """Console output for local/dev unless LOG_FORMAT says otherwise."""
        if self.log_format is not None:
            return self.log_format == "json"
        return not self.is_local

    def safe_dict(self) -> dict:
        return {
            "environment": self.environment,
            "debug": self.debug,
            "database_url": "<masked>",
            "database_echo": self.database_echo,
            "database_pool_size": self.database_pool_size,
            "default_currency": self.default_currency,
            "log_level": self.log_level,
            "log_format": "json" if self.json_logs else "console",
        }


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    env_file = Path(__file__).resolve().parents[2] / ".env"
    if env_file.exists():
        load_dotenv(dotenv_path=env_file, override=False)

    return Settings(
        environment=cast(EnvName, _env("ENVIRONMENT", "local")),
        debug=_env_flag("DEBUG"),
        database_url=_env("DATABASE_URL", DEFAULT_DATABASE_URL),
        database_echo=_env_flag("DATABASE_ECHO"),
        database_pool_size=_env_int("DATABASE_POOL_SIZE", 5),
        default_currency=_env("DEFAULT_CURRENCY", "BRL"),
        log_level=_env("LOG_LEVEL", "INFO"),
        log_format=cast(Optional[LogFormat], _env("LOG_FORMAT")),
    )
