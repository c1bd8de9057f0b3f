from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from weighted_gen.core.settings import SimulationSettings, default_settings


def _merge_defaults(data: dict[str, Any]) -> dict[str, Any]:
    merged = default_settings()
    for key, value in data.items():
        if key not in merged:
            continue
        try:
            SimulationSettings.model_validate({key: value})
        except ValidationError:
            continue
        merged[key] = value
    return SimulationSettings.model_validate(merged).as_dict()


class SettingsStore:
    def __init__(self, settings_path: Path) -> None:
        self.settings_path = settings_path

    def load(self) -> dict[str, Any]:
        if not self.settings_path.exists():
            settings = default_settings()
            self.save(settings)
            return settings
        try:
            payload = json.loads(self.settings_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        settings = _merge_defaults(payload)
        self.save(settings)
        return settings

    def save(self, settings: dict[str, Any]) -> None:
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        self.settings_path.write_text(json.dumps(settings, indent=2), encoding="utf-8")
