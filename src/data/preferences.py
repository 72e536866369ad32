"""
Persistence of the single user preference the page keeps across sessions:
the light/dark theme. The choice lives in a browser cookie, so every visitor
keeps their own setting and nothing is shared on the server.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from src.config import DEFAULT_THEME, THEMES

_logger = logging.getLogger(__name__)

THEME_COOKIE = "cs_theme"
COOKIE_MAX_AGE_SECONDS = 365 * 24 * 60 * 60


def theme_from_cookies(cookies: Optional[Mapping[str, str]], default: str = DEFAULT_THEME) -> str:
    """Return the theme saved in the browser, or ``default`` when absent or unknown."""
    raw = (cookies or {}).get(THEME_COOKIE)
    if not isinstance(raw, str):
        return default
    theme = raw.strip().lower()
    if theme not in THEMES:
        _logger.warning("Ignoring unknown theme cookie %r, using %r", raw, default)
        return default
    return theme


def theme_cookie_script(theme: str) -> str:
    """Script that stores the theme in a long-lived cookie for this browser."""
    if theme not in THEMES:
        raise ValueError(f"Unknown theme {theme!r}; expected one of {THEMES}")
    return (
        "<script>"
        f'document.cookie = "{THEME_COOKIE}={theme}; path=/; '
        f'max-age={COOKIE_MAX_AGE_SECONDS}; SameSite=Lax";'
        "</script>"
    )
