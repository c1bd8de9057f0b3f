from __future__ import annotations

import logging
from typing import Iterator, Protocol, Sequence

from .distribution import Distribution, build_distribution, pick, select_index
from .rng import UniformSource, resolve_source

logger = logging.getLogger(__name__)


class RandomGenerator(Protocol):
    def next(self) -> int:
        ...


class WeightedSampler:
    """Immutable weighted generator over integer candidates.

    Construction validates and normalizes once (see :func:`build_distribution`); each
    :meth:`next` call consumes one draw from the uniform source and walks the cumulative
    distribution in index order. The sampler does no locking, so a source shared between
    threads must be guarded by the caller.
    """

    __slots__ = ("_distribution", "_source")

    def __init__(
        self,
        values: Sequence[int] | None,
        weights: Sequence[float] | None,
        *,
        source: UniformSource | None = None,
        seed: int | str | None = None,
    ) -> None:
        self._distribution = build_distribution(values, weights)
        self._source = resolve_source(source, seed)
        logger.debug(
            "Built sampler over %d candidates (weight total %.6f).",
            len(self._distribution),
            self._distribution.total,
        )

    @property
    def distribution(self) -> Distribution:
        return self._distribution

    @property
    def values(self) -> tuple[int, ...]:
        return self._distribution.values

    @property
    def weights(self) -> tuple[float, ...]:
        return self._distribution.weights

    @property
    def normalized(self) -> tuple[float, ...]:
        return self._distribution.normalized

    def __len__(self) -> int:
        return len(self._distribution)

    def __repr__(self) -> str:
        return f"WeightedSampler(values={list(self.values)!r}, normalized={list(self.normalized)!r})"

    def next(self) -> int:
        u = self._source.random()
        return self._distribution.values[select_index(self._distribution.normalized, u)]

    def pick(self, u: float) -> int:
        return pick(self._distribution, u)

    def sample(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError(f"Sample count must be >= 0, got {count}.")
        return [self.next() for _ in range(count)]

    def stream(self) -> Iterator[int]:
        while True:
            yield self.next()

    def __iter__(self) -> Iterator[int]:
        return self.stream()
