from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List

from .date_logic import DEFAULT_LEAP_DAY_RULE, DEFAULT_LOCALE, LEAP_DAY_RULES, SUPPORTED_LOCALES

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - DISPLAY_LOCALE: 'ru' (default) or 'en'; language of displayDate and ageLabel
    - LEAP_DAY_RULE: 'feb28' (default) or 'mar1'; where Feb 29 birthdays fall in non-leap years
    - LOG_LEVEL: logging level name, 'INFO' by default
    """

    cors_allow_origins: List[str]
    display_locale: str = DEFAULT_LOCALE
    leap_day_rule: str = DEFAULT_LEAP_DAY_RULE
    log_level: str = "INFO"


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        # Star will be handled in main via allow_origins=["*"]
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


def _parse_choice(value: str, allowed: Iterable[str], default: str) -> str:
    v = value.strip().lower()
    return v if v in allowed else default


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    origins = _parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*"))
    locale = _parse_choice(_get_env("DISPLAY_LOCALE", DEFAULT_LOCALE), SUPPORTED_LOCALES, DEFAULT_LOCALE)
    leap_rule = _parse_choice(_get_env("LEAP_DAY_RULE", DEFAULT_LEAP_DAY_RULE), LEAP_DAY_RULES, DEFAULT_LEAP_DAY_RULE)

    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "INFO"

    return Settings(
        cors_allow_origins=origins,
        display_locale=locale,
        leap_day_rule=leap_rule,
        log_level=log_level,
    )
