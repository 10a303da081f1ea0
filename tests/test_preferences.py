from __future__ import annotations

import json
import threading

import pytest

from vcm_app.core.config import Settings
from vcm_app.services.preferences import (
    DARK_MODE_KEY,
    InMemoryStore,
    JsonFileStore,
    PreferenceStoreError,
    ThemeService,
    init_theme,
)


def test_missing_value_uses_default():
    service = ThemeService(InMemoryStore(), default_dark_mode=True)
    assert service.load().dark_mode is True


def test_only_true_string_means_dark():
    assert ThemeService(InMemoryStore({DARK_MODE_KEY: "true"})).load().dark_mode is True
    assert ThemeService(InMemoryStore({DARK_MODE_KEY: "yes"})).load().dark_mode is False


def test_set_and_toggle_write_through():
    store = InMemoryStore()
    service = ThemeService(store)
    service.load()

    assert service.set_dark_mode(True).dark_mode is True
    assert store.get(DARK_MODE_KEY) == "true"
    assert service.toggle().dark_mode is False
    assert store.get(DARK_MODE_KEY) == "false"


def test_json_store_persists_across_instances(tmp_path):
    path = tmp_path / "prefs" / "preferences.json"
    ThemeService(JsonFileStore(path)).set_dark_mode(True)

    assert json.loads(path.read_text(encoding="utf-8")) == {DARK_MODE_KEY: "true"}
    assert ThemeService(JsonFileStore(path)).load().dark_mode is True


def test_json_store_rejects_corrupt_file(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PreferenceStoreError):
        JsonFileStore(path)


def test_json_store_rejects_non_object(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(PreferenceStoreError, match="JSON object"):
        JsonFileStore(path)


def test_init_theme_reads_file_once(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text(json.dumps({DARK_MODE_KEY: "true"}), encoding="utf-8")

    service = init_theme(Settings(PREFERENCES_FILE=str(path)))
    path.write_text(json.dumps({DARK_MODE_KEY: "false"}), encoding="utf-8")

    assert isinstance(service.store, JsonFileStore)
    assert service.dark_mode is True


def test_init_theme_defaults_to_memory():
    service = init_theme(Settings(PREFERENCES_FILE="", DEFAULT_DARK_MODE=False))
    assert isinstance(service.store, InMemoryStore)
    assert service.dark_mode is False


def test_failed_write_keeps_previous_value(tmp_path):
    store = JsonFileStore(tmp_path / "preferences.json")
    service = ThemeService(store)
    service.load()
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store.path = blocker / "preferences.json"

    with pytest.raises(OSError):
        service.set_dark_mode(True)

    assert service.dark_mode is False
    assert store.get(DARK_MODE_KEY) is None


def test_json_store_leaves_no_temp_files(tmp_path):
    path = tmp_path / "preferences.json"
    store = JsonFileStore(path)
    store.set(DARK_MODE_KEY, "true")
    store.set(DARK_MODE_KEY, "false")

    assert [p.name for p in tmp_path.iterdir()] == ["preferences.json"]
    assert JsonFileStore(path).get(DARK_MODE_KEY) == "false"


def test_concurrent_toggles_are_not_lost():
    store = InMemoryStore()
    service = ThemeService(store)
    service.load()

    threads = [threading.Thread(target=service.toggle) for _ in range(50)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert service.dark_mode is False
    assert store.get(DARK_MODE_KEY) == "false"
