"""Validation, normalization and inverse-CDF selection over a fixed set of candidates.

Everything here is pure: a :class:`Distribution` is an immutable value and :func:`pick`
maps it plus one uniform draw to a candidate. Randomness lives in the caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .errors import InvalidInputError, InvalidInputKind

MIN_INPUT_SIZE = 1
LOW_WEIGHT = 0.0
HIGH_WEIGHT = 1.0


@dataclass(frozen=True, slots=True)
class Distribution:
    values: tuple[int, ...]
    weights: tuple[float, ...]
    normalized: tuple[float, ...]
    total: float

    def __len__(self) -> int:
        return len(self.values)


def _coerce_weight(index: int, raw: object) -> float:
    try:
        return float(raw)  # type: ignore[arg-type]
    except OverflowError as exc:
        raise InvalidInputError(InvalidInputKind.OUT_OF_RANGE_WEIGHT, index=index) from exc
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(InvalidInputKind.NOT_A_NUMBER_WEIGHT, index=index) from exc


def _check_weight(index: int, weight: float) -> None:
    if math.isinf(weight):
        raise InvalidInputError(InvalidInputKind.INFINITE_WEIGHT, index=index)
    if math.isnan(weight):
        raise InvalidInputError(InvalidInputKind.NOT_A_NUMBER_WEIGHT, index=index)
    if weight < LOW_WEIGHT or weight > HIGH_WEIGHT:
        raise InvalidInputError(InvalidInputKind.OUT_OF_RANGE_WEIGHT, index=index)


def normalize(weights: Sequence[float], total: float) -> tuple[float, ...]:
    return tuple(weight / total for weight in weights)


def build_distribution(values: Sequence[int] | None, weights: Sequence[float] | None) -> Distribution:
    """Validate ``values``/``weights`` and derive the normalized distribution.

    Checks run in a fixed order and the first failure wins: missing input, empty input,
    length mismatch, then a single left-to-right scan over the weights (infinite, NaN,
    out of [0, 1]) that also accumulates the total, and finally the all-zero check.
    """
    if values is None or weights is None:
        raise InvalidInputError(InvalidInputKind.NULL_INPUT)

    values = tuple(values)
    raw_weights = tuple(weights)

    if len(values) < MIN_INPUT_SIZE or len(raw_weights) < MIN_INPUT_SIZE:
        raise InvalidInputError(InvalidInputKind.EMPTY_INPUT)
    if len(values) != len(raw_weights):
        raise InvalidInputError(
            InvalidInputKind.LENGTH_MISMATCH,
            f"Numbers and probabilities arrays are not the same size ({len(values)} != {len(raw_weights)})",
        )

    checked: list[float] = []
    total = 0.0
    for index, raw in enumerate(raw_weights):
        weight = _coerce_weight(index, raw)
        _check_weight(index, weight)
        checked.append(weight)
        total += weight
    weights = tuple(checked)

    if total == 0.0:
        raise InvalidInputError(InvalidInputKind.ALL_ZERO_WEIGHT)

    return Distribution(values=values, weights=weights, normalized=normalize(weights, total), total=total)


def select_index(normalized: Sequence[float], u: float) -> int:
    running = 0.0
    index = 0
    size = len(normalized)
    while running < u and index < size:
        running += normalized[index]
        index += 1

    if running < u:
        # Rounding left the cumulative sum just short of u; fall back to the last reachable candidate.
        for fallback in range(size - 1, -1, -1):
            if normalized[fallback] > 0.0:
                return fallback

    # u == 0 exits before the first step.
    return max(index - 1, 0)


def pick(distribution: Distribution, u: float) -> int:
    if not 0.0 <= u < 1.0:
        raise ValueError(f"Uniform draw must be in [0, 1), got {u}.")
    return distribution.values[select_index(distribution.normalized, u)]
