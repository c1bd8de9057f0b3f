from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .rng import UniformSource
from .sampler import WeightedSampler


class DistributionFileError(ValueError):
    def __init__(self, message: str, details: list[str] | None = None) -> None:
        self.details = details or []
        suffix = "\n".join(self.details)
        super().__init__(f"{message}\n{suffix}" if suffix else message)


class DistributionSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = "unnamed"
    values: list[int]
    weights: list[float]

    def build_sampler(self, source: UniformSource | None = None, seed: int | str | None = None) -> WeightedSampler:
        return WeightedSampler(self.values, self.weights, source=source, seed=seed)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise DistributionFileError(f"Missing distribution file: {path}") from exc
    except json.JSONDecodeError as exc:
        raise DistributionFileError(f"Invalid JSON in {path.name}: {exc.msg} at line {exc.lineno}") from exc


def load_distribution(path: Path) -> DistributionSpec:
    data = _load_json(path)
    try:
        return DistributionSpec.model_validate(data)
    except ValidationError as exc:
        errors = []
        for issue in exc.errors():
            issue_path = ".".join(str(part) for part in issue.get("loc", [])) or "(root)"
            errors.append(f"{path.name}:{issue_path}: {issue.get('msg', 'validation error')}")
        raise DistributionFileError(f"Schema validation failed for {path.name}.", errors) from exc
