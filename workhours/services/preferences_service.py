"""Load and persist user preferences in the app settings table."""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from workhours.db.migrations import ensure_app_settings_table
from workhours.models.app_setting import AppSetting
from workhours.schemas.preferences import ColorScheme, Preferences

logger = logging.getLogger(__name__)

COLOR_SCHEME_KEY: str = "colorSchemeChoice"
NET_PERCENTAGE_KEY: str = "netPercentage"
HOUR_RATE_KEY: str = "hourRate"
PREFERENCE_KEYS: tuple[str, ...] = (COLOR_SCHEME_KEY, NET_PERCENTAGE_KEY, HOUR_RATE_KEY)


def load_preferences(engine: Engine) -> Preferences:
    """Read preferences from storage with fallback defaults."""
    try:
        ensure_app_settings_table(engine)
        with Session(engine) as db:
            rows: list[AppSetting] = db.query(AppSetting).filter(AppSetting.key.in_(PREFERENCE_KEYS)).all()
    except SQLAlchemyError:
        logger.exception("[PREFS] Could not read preferences; using defaults.")
        return Preferences()

    values: dict[str, str] = {row.key: row.value for row in rows}
    return Preferences(
        color_scheme=ColorScheme.from_value(values.get(COLOR_SCHEME_KEY)),
        net_percentage=values.get(NET_PERCENTAGE_KEY, ""),
        hour_rate=values.get(HOUR_RATE_KEY, ""),
    )


def save_preferences(engine: Engine, preferences: Preferences) -> None:
    """Overwrite all preference keys in one transaction."""
    ensure_app_settings_table(engine)
    with Session(engine) as db:
        for key, value in (
            (COLOR_SCHEME_KEY, preferences.color_scheme.value),
            (NET_PERCENTAGE_KEY, preferences.net_percentage),
            (HOUR_RATE_KEY, preferences.hour_rate),
        ):
            setting: AppSetting | None = db.get(AppSetting, key)
            if setting is None:
                db.add(AppSetting(key=key, value=value))
            else:
                setting.value = value
        db.commit()
    logger.info("[PREFS] Preferences saved (scheme=%s)", preferences.color_scheme.value)


def try_save_preferences(engine: Engine, preferences: Preferences) -> bool:
    """Persist preferences, logging storage failures instead of raising."""
    try:
        save_preferences(engine, preferences)
    except SQLAlchemyError:
        logger.exception("[PREFS] Failed to save preferences.")
        return False
    return True
