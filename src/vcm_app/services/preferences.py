"""
Display-theme preference and the key-value stores behind it.

The theme flag is process-wide UI state: it is read once at startup through
`init_theme` and written back whenever the presentation layer changes it.
It never influences the valuation arithmetic.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional, Protocol

from ..core.config import Settings
from ..core.logging import get_logger
from ..models.common import ThemePreference


logger = get_logger(__name__)

DARK_MODE_KEY = "darkMode"


class PreferenceStoreError(RuntimeError):
    pass


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """String key-value pairs kept in a single JSON object on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()
        self._data: Dict[str, str] = self._read()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PreferenceStoreError(f"Failed to read preferences from {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PreferenceStoreError(f"Preferences file {self.path} must contain a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        data = {**self._data, key: value}
        self._write(data)
        self._data = data

    def _write(self, data: Dict[str, str]) -> None:
        # temp file + os.replace so readers never see a half-written file
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class ThemeService:
    def __init__(self, store: KeyValueStore, default_dark_mode: bool = False) -> None:
        self.store = store
        self.default_dark_mode = default_dark_mode
        self._dark_mode = default_dark_mode
        self._lock = threading.Lock()

    def load(self) -> ThemePreference:
        stored = self.store.get(DARK_MODE_KEY)
        with self._lock:
            self._dark_mode = self.default_dark_mode if stored is None else stored == "true"
        logger.info("Theme preference loaded: dark_mode=%s", self._dark_mode)
        return self.preference

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    @property
    def preference(self) -> ThemePreference:
        return ThemePreference(dark_mode=self._dark_mode)

    def _commit(self, dark_mode: bool) -> ThemePreference:
        # store first: a failed write leaves the current value untouched
        self.store.set(DARK_MODE_KEY, "true" if dark_mode else "false")
        self._dark_mode = dark_mode
        return ThemePreference(dark_mode=dark_mode)

    def set_dark_mode(self, dark_mode: bool) -> ThemePreference:
        with self._lock:
            return self._commit(dark_mode)

    def toggle(self) -> ThemePreference:
        with self._lock:
            return self._commit(not self._dark_mode)


def build_store(settings: Settings) -> KeyValueStore:
    if settings.PREFERENCES_FILE:
        return JsonFileStore(settings.PREFERENCES_FILE)
    return InMemoryStore()


def init_theme(settings: Settings) -> ThemeService:
    service = ThemeService(build_store(settings), default_dark_mode=settings.DEFAULT_DARK_MODE)
    service.load()
    return service
