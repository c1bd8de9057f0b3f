from __future__ import annotations

import hashlib
import random as _random
from dataclasses import dataclass
from typing import Protocol


class UniformSource(Protocol):
    def random(self) -> float:
        """Return a float in [0, 1)."""
        ...


def seed_to_uint32(seed: int | str) -> int:
    text = str(seed).encode("utf-8")
    digest = hashlib.sha256(text).hexdigest()
    value = int(digest[:8], 16)
    return value if value != 0 else 0x9E3779B9


@dataclass(slots=True)
class DeterministicRNG:
    seed: int | str
    state: int
    calls: int = 0

    @classmethod
    def from_seed(cls, seed: int | str) -> "DeterministicRNG":
        return cls(seed=seed, state=seed_to_uint32(seed), calls=0)

    def _next_uint32(self) -> int:
        value = self.state & 0xFFFFFFFF
        value ^= (value << 13) & 0xFFFFFFFF
        value ^= (value >> 17) & 0xFFFFFFFF
        value ^= (value << 5) & 0xFFFFFFFF
        value &= 0xFFFFFFFF
        self.state = value if value != 0 else 0x6D2B79F5
        self.calls += 1
        return self.state

    def random(self) -> float:
        return self._next_uint32() / 2**32


def resolve_source(source: UniformSource | None = None, seed: int | str | None = None) -> UniformSource:
    if source is not None and seed is not None:
        raise ValueError("Pass either a uniform source or a seed, not both.")
    if source is not None:
        return source
    if seed is not None:
        return DeterministicRNG.from_seed(seed)
    return _random.Random()
