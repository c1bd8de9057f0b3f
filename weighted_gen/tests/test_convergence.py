from __future__ import annotations

from collections import Counter

import pytest

from weighted_gen.core.sampler import WeightedSampler

SAMPLES = 1_000_000
DEVIATION_PCT = 1.0


@pytest.mark.parametrize("seed", [None, 2024])
def test_frequencies_match_weights(seed):
    values = [-1, 0, 1, 2, 3]
    weights = [0.01, 0.3, 0.58, 0.1, 0.01]
    sampler = WeightedSampler(values, weights, seed=seed)

    counts = Counter(sampler.next() for _ in range(SAMPLES))

    for value, share in zip(values, sampler.normalized):
        observed_pct = counts[value] / SAMPLES * 100.0
        assert abs(observed_pct - share * 100.0) <= DEVIATION_PCT
