"""Persisted theme preference."""

import json
import logging
import threading
from pathlib import Path

from ..config import THEME_ICON_DARK, THEME_ICON_LIGHT, THEME_STORAGE_KEY

logger = logging.getLogger(__name__)


class ThemeStore:
    """Dark-mode flag persisted in a small JSON key-value file.
    
    The file is read once when the store is created; every change is written
    straight back.
    """
    
    def __init__(self, path: str = "theme.json", key: str = THEME_STORAGE_KEY):
        self.path = Path(path)
        self.key = key
        self._lock = threading.Lock()
        self._dark_mode = self._load()
    
    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read theme store {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}
    
    def _load(self) -> bool:
        value = self._read_all().get(self.key)
        # Stored as a string by browser clients
        dark_mode = value is True or value == "true"
        logger.info(f"Theme preference loaded: {'dark' if dark_mode else 'light'}")
        return dark_mode
    
    def _save(self) -> None:
        data = self._read_all()
        data[self.key] = self._dark_mode
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)
    
    @property
    def dark_mode(self) -> bool:
        return self._dark_mode
    
    @property
    def icon(self) -> str:
        """Icon for the toggle button: a sun in dark mode, a moon in light mode."""
        return THEME_ICON_DARK if self._dark_mode else THEME_ICON_LIGHT
    
    def set_dark_mode(self, enabled: bool) -> bool:
        with self._lock:
            self._dark_mode = bool(enabled)
            self._save()
        return self._dark_mode
    
    def toggle(self) -> bool:
        """Flip the preference, persist it and return the new value."""
        with self._lock:
            self._dark_mode = not self._dark_mode
            self._save()
        logger.debug(f"Theme toggled to {'dark' if self._dark_mode else 'light'}")
        return self._dark_mode
