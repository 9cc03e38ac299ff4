"""Preference persistence tests."""

import logging
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.engine import Engine

from workhours.db.session import get_engine
from workhours.schemas.preferences import ColorScheme, Preferences
from workhours.services.preferences_service import load_preferences, save_preferences, try_save_preferences


def _build_test_engine(db_file: Path) -> Engine:
    return get_engine(f"sqlite:///{db_file}")


def test_load_preferences_defaults_on_empty_store(tmp_path: Path) -> None:
    """A new store should give default preferences."""
    preferences = load_preferences(_build_test_engine(tmp_path / "prefs_empty.sqlite"))

    assert preferences.color_scheme is ColorScheme.SYSTEM
    assert preferences.net_percentage == ""
    assert preferences.hour_rate == ""
    assert preferences.net_percentage_value == 0.0
    assert preferences.hour_rate_value == 0.0


def test_save_then_load_preferences(tmp_path: Path) -> None:
    """Saved preferences should be read back unchanged."""
    engine = _build_test_engine(tmp_path / "prefs_roundtrip.sqlite")

    save_preferences(engine, Preferences(color_scheme=ColorScheme.DARK, net_percentage="10", hour_rate="50"))
    preferences = load_preferences(engine)

    assert preferences.color_scheme is ColorScheme.DARK
    assert preferences.net_percentage_value == 10.0
    assert preferences.hour_rate_value == 50.0


def test_save_preferences_overwrites_in_place(tmp_path: Path) -> None:
    """Saving again should overwrite the three keys instead of adding rows."""
    engine = _build_test_engine(tmp_path / "prefs_overwrite.sqlite")

    save_preferences(engine, Preferences(hour_rate="40"))
    save_preferences(engine, Preferences(color_scheme=ColorScheme.LIGHT, hour_rate="45.5"))

    with engine.connect() as connection:
        count = connection.execute(text("SELECT COUNT(*) FROM app_settings")).scalar_one()
    assert count == 3
    assert load_preferences(engine).hour_rate == "45.5"
    assert load_preferences(engine).color_scheme is ColorScheme.LIGHT


def test_unknown_color_scheme_falls_back_to_system(tmp_path: Path) -> None:
    """An unknown stored scheme should fall back to system."""
    engine = _build_test_engine(tmp_path / "prefs_unknown.sqlite")
    save_preferences(engine, Preferences())
    with engine.begin() as connection:
        connection.execute(text("UPDATE app_settings SET value = 'sepia' WHERE key = 'colorSchemeChoice'"))

    assert load_preferences(engine).color_scheme is ColorScheme.SYSTEM


def test_unparsable_rates_read_as_zero() -> None:
    """Unparsable rate text should read as zero."""
    preferences = Preferences(net_percentage="ten", hour_rate="")

    assert preferences.net_percentage_value == 0.0
    assert preferences.hour_rate_value == 0.0


def test_color_scheme_preferred_appearance() -> None:
    """System should follow the host while light and dark are forced."""
    assert ColorScheme.SYSTEM.preferred() is None
    assert ColorScheme.LIGHT.preferred() == "light"
    assert ColorScheme.from_value("Dark") is ColorScheme.DARK
    assert ColorScheme.from_value(None) is ColorScheme.SYSTEM


def test_try_save_preferences_reports_storage_failure(tmp_path: Path, caplog) -> None:
    """Storage errors while saving preferences should be logged and reported as False."""
    caplog.set_level(logging.ERROR, logger="workhours.services.preferences_service")
    engine = _build_test_engine(tmp_path / "missing-dir" / "prefs.sqlite")

    assert try_save_preferences(engine, Preferences(hour_rate="40")) is False
    assert "[PREFS] Failed to save preferences." in caplog.text


def test_try_save_preferences_persists_on_success(tmp_path: Path) -> None:
    """A successful save should return True and be readable back."""
    engine = _build_test_engine(tmp_path / "prefs_try.sqlite")

    assert try_save_preferences(engine, Preferences(hour_rate="40")) is True
    assert load_preferences(engine).hour_rate == "40"
