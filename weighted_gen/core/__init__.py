"""Weighted discrete sampling core."""

from .distribution import Distribution, build_distribution, pick, select_index
from .errors import InvalidInputError, InvalidInputKind
from .loader import DistributionFileError, DistributionSpec, load_distribution
from .rng import DeterministicRNG, UniformSource, resolve_source
from .sampler import RandomGenerator, WeightedSampler

__all__ = [
    "DeterministicRNG",
    "Distribution",
    "DistributionFileError",
    "DistributionSpec",
    "InvalidInputError",
    "InvalidInputKind",
    "RandomGenerator",
    "UniformSource",
    "WeightedSampler",
    "build_distribution",
    "load_distribution",
    "pick",
    "resolve_source",
    "select_index",
]
