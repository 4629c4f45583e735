"""A list of weights that can be sampled from."""

import logging
import math
import random
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeVar

from stochastic_universal_sampling.diagnostics import (
    ChiSquaredResult,
    chi_squared_test,
)
from stochastic_universal_sampling.errors import (
    NegativeWeightError,
    NonFiniteWeightError,
)
from stochastic_universal_sampling.random_source import as_random_source
from stochastic_universal_sampling.sampling import choose_multiple_weighted

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _validate(index: int, weight: float) -> float:
    value = float(weight)
    if math.isnan(value) or math.isinf(value):
        raise NonFiniteWeightError(index, value)
    if value < 0.0:
        raise NegativeWeightError(index, value)
    return value


class UniversalSampler:
    """Weighted sampler over a mutable list of weights.

    Behaves like a list of floats: weights can be read, replaced and
    appended by index. Sampling uses stochastic universal sampling over the
    weights as they are at the time of the call, so a batch from
    :meth:`sample_many` contains every index within one of its expected
    count. A zero weight is allowed and is never sampled unless every weight
    is zero, in which case all indices are equally likely.

    Args:
        weights: Initial weights, each finite and non-negative.
        rng: Random source. Defaults to ``random.Random(seed)``.
        seed: Seed for the default random source. Ignored when ``rng`` is
            given.
    """

    def __init__(
        self,
        weights: Iterable[float] = (),
        *,
        rng: Any = None,
        seed: int | None = None,
    ) -> None:
        self._weights = [_validate(i, w) for i, w in enumerate(weights)]
        self._rng = as_random_source(random.Random(seed) if rng is None else rng)

    # -------------------------------------------------------------------------
    # List protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._weights)

    def __getitem__(self, index: int) -> float:
        return self._weights[self._normalize(index)]

    def __setitem__(self, index: int, weight: float) -> None:
        self.update(index, weight)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._weights))

    def __contains__(self, weight: object) -> bool:
        return weight in self._weights

    def __repr__(self) -> str:
        return f"UniversalSampler({self._weights!r})"

    def _normalize(self, index: int) -> int:
        n = len(self._weights)
        if not -n <= index < n:
            raise IndexError(f"index {index} out of range for {n} weights")
        return index % n

    # -------------------------------------------------------------------------
    # Weights
    # -------------------------------------------------------------------------

    def weight(self, index: int) -> float:
        return self[index]

    def update(self, index: int, weight: float) -> None:
        """Replace the weight at ``index``."""
        position = self._normalize(index)
        self._weights[position] = _validate(position, weight)
        logger.debug("Updated weight %d to %r", position, self._weights[position])

    def append(self, weight: float) -> None:
        self._weights.append(_validate(len(self._weights), weight))

    def extend(self, weights: Iterable[float]) -> None:
        start = len(self._weights)
        self._weights.extend(
            [_validate(start + i, w) for i, w in enumerate(weights)]
        )

    def total(self) -> float:
        return math.fsum(self._weights)

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def sample(self) -> int:
        """Return a single index chosen in proportion to its weight."""
        (index,) = choose_multiple_weighted(self._rng, 1, self._weights)
        return index

    def sample_many(self, amount: int) -> list[int]:
        """Return ``amount`` indices, with repetition, in random order."""
        return choose_multiple_weighted(self._rng, amount, self._weights)

    def choose(self, amount: int, population: Sequence[T]) -> list[T]:
        """Like :meth:`sample_many`, but return members of ``population``."""
        if len(population) != len(self._weights):
            raise ValueError(
                f"population has {len(population)} members "
                f"but there are {len(self._weights)} weights"
            )
        return [population[i] for i in self.sample_many(amount)]

    def test_distribution(self, num_samples: int) -> ChiSquaredResult:
        """Chi-squared test of single draws against the current weights."""
        return chi_squared_test(self._rng, self._weights, num_samples)


__all__ = ["UniversalSampler"]
