"""Runtime settings, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 5001


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    api_url: str = f"http://localhost:{DEFAULT_PORT}"
    timeout: float = 5.0

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            host=os.getenv("ESTOQUE_HOST") or cls.host,
            port=_env_int("ESTOQUE_PORT", cls.port),
            log_level=(os.getenv("ESTOQUE_LOG_LEVEL") or cls.log_level).upper(),
            api_url=(os.getenv("ESTOQUE_API_URL") or cls.api_url).rstrip("/"),
            timeout=_env_float("ESTOQUE_TIMEOUT", cls.timeout),
        )
