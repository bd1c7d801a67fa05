"""Application settings.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI.
- The HTTP adapter, the demo drivers and the CLI read one typed contract,
  validated at the edge.
- A per-user .env lets the installed script be configured without editing
  the project.
"""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_BASE_URL = "https://jsonplaceholder.typicode.com"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "placeholder-demo"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "placeholder-demo"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "placeholder-demo"
    return Path.home() / ".config" / "placeholder-demo"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Create or update variables in the per-user .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# placeholder-demo user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Process-wide configuration.

    Frozen: the base URL and friends are read once at startup and never
    mutated afterwards.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLACEHOLDER_DEMO_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        # Project .env first, then the per-user one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default=API_BASE_URL,
        min_length=8,
        description="Base URL of the JSONPlaceholder-compatible REST service.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="placeholder-demo/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...).",
    )

    @property
    def base_url(self) -> str:
        return self.api_base_url.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Settings loaded once per process."""

    return AppSettings()
