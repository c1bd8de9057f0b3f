from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class SimulationSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    samples: int = Field(default=1_000_000, ge=1)
    seed: int | str | None = None
    tolerance_pct: float = Field(default=1.0, gt=0.0, le=100.0)
    log_level: LogLevel = "INFO"

    def as_dict(self) -> dict[str, Any]:
        return json.loads(self.model_dump_json())


def merge_settings(payload: dict[str, Any] | None) -> dict[str, Any]:
    if not isinstance(payload, dict):
        payload = {}
    return SimulationSettings.model_validate(payload).as_dict()


def default_settings() -> dict[str, Any]:
    return SimulationSettings().as_dict()
