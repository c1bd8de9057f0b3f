from __future__ import annotations

import json
from pathlib import Path

from weighted_gen.app.services.settings_store import SettingsStore
from weighted_gen.core.settings import merge_settings


def test_settings_store_read_write(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    store = SettingsStore(path)
    loaded = store.load()
    assert path.exists()
    assert loaded["samples"] == 1_000_000
    assert loaded["seed"] is None

    loaded["samples"] = 5_000
    loaded["seed"] = "abc"
    loaded["tolerance_pct"] = 2.5
    store.save(loaded)

    reloaded = store.load()
    assert reloaded["samples"] == 5_000
    assert reloaded["seed"] == "abc"
    assert reloaded["tolerance_pct"] == 2.5


def test_malformed_settings_fall_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("not json", encoding="utf-8")
    assert SettingsStore(path).load()["log_level"] == "INFO"

    path.write_text('{"samples": 0}', encoding="utf-8")
    assert SettingsStore(path).load()["samples"] == 1_000_000


def test_merge_settings_ignores_unknown_keys() -> None:
    merged = merge_settings({"samples": 10, "colour": "blue"})
    assert merged["samples"] == 10
    assert "colour" not in merged


def test_invalid_key_keeps_other_valid_settings(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"samples": 0, "seed": "keep-me", "tolerance_pct": 2.5}), encoding="utf-8")

    loaded = SettingsStore(path).load()

    assert loaded["samples"] == 1_000_000
    assert loaded["seed"] == "keep-me"
    assert loaded["tolerance_pct"] == 2.5
    assert json.loads(path.read_text(encoding="utf-8"))["seed"] == "keep-me"
