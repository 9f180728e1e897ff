"""Tests for theme store."""

import json

import pytest
from ecoflight.services.theme_service import ThemeStore


@pytest.fixture
def store_path(tmp_path):
    """Path for a theme store file."""
    return tmp_path / "theme.json"


def test_default_is_light(store_path):
    """Test a missing file means light mode."""
    store = ThemeStore(str(store_path))
    assert store.dark_mode is False
    assert store.icon == "🌙"
    assert not store_path.exists()


def test_toggle_persists(store_path):
    """Test toggling writes the preference under the darkMode key."""
    store = ThemeStore(str(store_path))
    assert store.toggle() is True
    assert store.icon == "☀️"
    assert json.loads(store_path.read_text(encoding="utf-8")) == {"darkMode": True}
    
    assert store.toggle() is False
    assert json.loads(store_path.read_text(encoding="utf-8")) == {"darkMode": False}


def test_preference_survives_restart(store_path):
    """Test a new store reads the saved preference."""
    ThemeStore(str(store_path)).set_dark_mode(True)
    assert ThemeStore(str(store_path)).dark_mode is True


def test_reads_browser_string_value(store_path):
    """Test the string form written by browsers is understood."""
    store_path.write_text(json.dumps({"darkMode": "true"}), encoding="utf-8")
    assert ThemeStore(str(store_path)).dark_mode is True


def test_read_only_once(store_path):
    """Test the file is not re-read after startup."""
    store = ThemeStore(str(store_path))
    store_path.write_text(json.dumps({"darkMode": True}), encoding="utf-8")
    assert store.dark_mode is False


def test_other_keys_are_kept(store_path):
    """Test writes keep unrelated keys in the file."""
    store_path.write_text(json.dumps({"language": "en"}), encoding="utf-8")
    ThemeStore(str(store_path)).set_dark_mode(True)
    assert json.loads(store_path.read_text(encoding="utf-8")) == {"language": "en", "darkMode": True}


def test_corrupt_file_defaults_to_light(store_path):
    """Test an unreadable file falls back to light mode."""
    store_path.write_text("{not json", encoding="utf-8")
    assert ThemeStore(str(store_path)).dark_mode is False
