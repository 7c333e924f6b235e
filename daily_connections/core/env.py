# daily_connections/core/env.py
from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

KNOWN_KEYS = [
    "CONNECTIONS_MAX_MISTAKES",
    "CONNECTIONS_BASE_URL",
    "CONNECTIONS_TIMEOUT",
]

DEFAULT_MAX_MISTAKES = 4
DEFAULT_BASE_URL = "https://www.nytimes.com/svc/connections/v2"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    max_mistakes: int = DEFAULT_MAX_MISTAKES
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns a dict of which keys are present (masked).
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    found = {}
    for k in KNOWN_KEYS:
        v = os.getenv(k)
        if v:
            mask = v[:4] + "…" if len(v) > 4 else "…"
            found[k] = mask
    return found


def get_settings() -> Settings:
    """
    Build Settings from the environment. Call load_env() first to pick up .env.

    Raises:
        ValueError: If CONNECTIONS_MAX_MISTAKES is not a positive integer,
            or CONNECTIONS_TIMEOUT is not a positive number
    """
    raw_mistakes = os.getenv("CONNECTIONS_MAX_MISTAKES")
    max_mistakes = DEFAULT_MAX_MISTAKES
    if raw_mistakes:
        try:
            max_mistakes = int(raw_mistakes)
        except ValueError:
            raise ValueError(f"CONNECTIONS_MAX_MISTAKES must be an integer, got {raw_mistakes!r}")
        if max_mistakes < 1:
            raise ValueError(f"CONNECTIONS_MAX_MISTAKES must be positive, got {max_mistakes}")

    raw_timeout = os.getenv("CONNECTIONS_TIMEOUT")
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"CONNECTIONS_TIMEOUT must be a number, got {raw_timeout!r}")
        if timeout <= 0:
            raise ValueError(f"CONNECTIONS_TIMEOUT must be positive, got {timeout}")

    base_url = os.getenv("CONNECTIONS_BASE_URL") or DEFAULT_BASE_URL
    return Settings(max_mistakes=max_mistakes, base_url=base_url.rstrip("/"), timeout=timeout)
