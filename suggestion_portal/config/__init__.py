"""
Client configuration.

Values come from ``config/.env.local`` (loaded with python-dotenv) and the
process environment. The ``REACT_APP_*`` names of the web build are accepted
as fallbacks so one env file can serve both clients.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from ..infra.exceptions import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_ENV_FILE = PROJECT_ROOT / "config" / ".env.local"

DEFAULT_NOTIFICATION_SECONDS = 4.0
DEFAULT_REQUEST_TIMEOUT = 30.0


@dataclass(frozen=True)
class PortalSettings:
    api_base_url: str = ""
    google_client_id: str = ""
    notification_seconds: float = DEFAULT_NOTIFICATION_SECONDS
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def require_base_url(self) -> str:
        if not self.api_base_url:
            raise ConfigError("PORTAL_API_BASE_URL is not set", config_key="PORTAL_API_BASE_URL")
        return self.api_base_url


def _first(env: Mapping[str, str], *keys: str) -> str:
    for k in keys:
        v = (env.get(k) or "").strip()
        if v:
            return v
    return ""


def _positive_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = (env.get(key) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}", config_key=key)
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {raw!r}", config_key=key)
    return value


def settings_from_env(env: Mapping[str, str]) -> PortalSettings:
    """Build settings from a mapping (no file access)."""
    return PortalSettings(
        api_base_url=_first(env, "PORTAL_API_BASE_URL", "REACT_APP_API_BASE_URL").rstrip("/"),
        google_client_id=_first(env, "PORTAL_GOOGLE_CLIENT_ID", "REACT_APP_GOOGLE_CLIENT_ID"),
        notification_seconds=_positive_float(env, "PORTAL_NOTIFICATION_SECONDS", DEFAULT_NOTIFICATION_SECONDS),
        request_timeout=_positive_float(env, "PORTAL_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
        log_level=_first(env, "PORTAL_LOG_LEVEL").upper() or "INFO",
        log_file=_first(env, "PORTAL_LOG_FILE") or None,
    )


def load_settings(env_file: Optional[Path] = None) -> PortalSettings:
    """Load ``.env.local`` (without overriding real env vars) and read settings."""
    load_dotenv(env_file or DEFAULT_ENV_FILE)
    return settings_from_env(os.environ)


__all__ = [
    "PROJECT_ROOT",
    "DEFAULT_ENV_FILE",
    "PortalSettings",
    "load_settings",
    "settings_from_env",
]
