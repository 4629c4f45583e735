"""Tests for the random source protocol and the NumPy adapter."""

import random
from collections import Counter

import numpy as np
import pytest

from stochastic_universal_sampling import (
    NumpyRandomSource,
    RandomSource,
    as_random_source,
    choose_multiple,
    choose_multiple_weighted,
)


def test_stdlib_random_passes_through() -> None:
    rng = random.Random(0)
    assert as_random_source(rng) is rng
    assert isinstance(rng, RandomSource)


def test_numpy_generators_are_wrapped() -> None:
    for generator in (np.random.default_rng(0), np.random.RandomState(0)):
        source = as_random_source(generator)
        assert isinstance(source, NumpyRandomSource)
        assert source.generator is generator


def test_non_random_source_rejected() -> None:
    with pytest.raises(TypeError, match="not a random source"):
        as_random_source(object())
    with pytest.raises(TypeError):
        choose_multiple_weighted(42, 1, [1.0])


def test_numpy_random_is_a_unit_float() -> None:
    source = NumpyRandomSource(np.random.default_rng(1))
    for _ in range(100):
        u = source.random()
        assert isinstance(u, float)
        assert 0.0 <= u < 1.0


def test_numpy_shuffle_is_in_place() -> None:
    source = NumpyRandomSource(np.random.default_rng(2))
    values = list(range(50))
    source.shuffle(values)
    assert sorted(values) == list(range(50))
    assert values != list(range(50))


def test_numpy_sample_is_without_replacement() -> None:
    source = NumpyRandomSource(np.random.default_rng(3))
    chosen = source.sample(range(10), 10)
    assert sorted(chosen) == list(range(10))
    assert all(isinstance(i, int) for i in chosen)
    with pytest.raises(ValueError):
        source.sample(range(3), 4)


def test_numpy_generator_drives_weighted_sampling() -> None:
    rng = np.random.default_rng(4)
    result = choose_multiple_weighted(rng, 6, [1.0, 2.0, 3.0])
    assert sorted(result) == [0, 1, 1, 2, 2, 2]
    assert all(type(i) is int for i in result)


def test_numpy_generator_drives_unweighted_sampling() -> None:
    rng = np.random.RandomState(5)
    counts = Counter(choose_multiple(rng, 7, 3))
    assert sorted(counts.values()) == [2, 2, 3]


def test_numpy_seeding_is_reproducible() -> None:
    weights = [0.3, 0.0, 1.7, 2.2]
    a = choose_multiple_weighted(np.random.default_rng(8), 9, weights)
    b = choose_multiple_weighted(np.random.default_rng(8), 9, weights)
    assert a == b
