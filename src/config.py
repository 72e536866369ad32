"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the schedule page
TABS: List[TabConfig] = [
    TabConfig("schedule", "Schedule"),
    TabConfig("timeline", "Timeline"),
]

DEFAULT_API_URL = "https://sessionize.com/api/v2/lxonkgvd/view/All"
CACHE_TTL_SECONDS = 600

THEMES = ("light", "dark")
DEFAULT_THEME = "light"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class AppConfig:
    api_url: str
    request_timeout: Optional[float]
    default_theme: str
    log_level: str


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists locally
        pass
    return default


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        _logger.warning("Ignoring invalid SCHEDULE_REQUEST_TIMEOUT %r", raw)
        return None
    return timeout if timeout > 0 else None


def load_config() -> AppConfig:
    theme = (get_setting("DEFAULT_THEME", DEFAULT_THEME) or DEFAULT_THEME).lower()
    if theme not in THEMES:
        _logger.warning("Unknown DEFAULT_THEME %r, using %r", theme, DEFAULT_THEME)
        theme = DEFAULT_THEME

    return AppConfig(
        api_url=get_setting("SCHEDULE_API_URL", DEFAULT_API_URL) or DEFAULT_API_URL,
        request_timeout=_parse_timeout(get_setting("SCHEDULE_REQUEST_TIMEOUT")),
        default_theme=theme,
        log_level=(get_setting("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op once handlers exist, so Streamlit reruns are safe
    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format=LOG_FORMAT,
    )
