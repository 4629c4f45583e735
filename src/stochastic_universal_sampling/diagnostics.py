"""Statistical conformance checks for the samplers."""

import logging
import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from scipy import stats

from stochastic_universal_sampling.sampling import (
    choose_multiple_weighted,
    cumulative_weights,
    zero_weight_threshold,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChiSquaredResult:
    """Outcome of a chi-squared goodness-of-fit test."""

    chi_squared: float
    degrees_of_freedom: int
    p_value: float
    num_samples: int

    def passes(self, alpha: float = 0.05) -> bool:
        """Whether the null hypothesis survives at significance ``alpha``."""
        return self.p_value > alpha


def chi_squared_test(
    rng: Any,
    weights: Iterable[float],
    num_samples: int,
    *,
    batch_size: int = 1,
) -> ChiSquaredResult:
    """Sample ``num_samples`` indices and test them against the weights.

    Indices are drawn by repeated :func:`choose_multiple_weighted` calls of
    ``batch_size`` each. With the default batch size of one, every call is an
    independent draw and the counts follow a multinomial distribution. Larger
    batches exercise the comb itself, whose counts are far tighter than
    multinomial, so their p-values sit close to one.

    Items with zero expected count take no part in the statistic. If any of
    them is sampled anyway the result has an infinite statistic and a
    p-value of zero.
    """
    if num_samples <= 0:
        raise ValueError(f"num_samples must be positive, got {num_samples}")
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")

    values = [float(w) for w in weights]
    cumulative = cumulative_weights(values)
    total = cumulative[-1] if cumulative else 0.0
    if cumulative and total <= zero_weight_threshold(len(values)):
        values = [1.0] * len(values)
        total = float(len(values))

    counts: Counter[int] = Counter()
    drawn = 0
    while drawn < num_samples:
        batch = min(batch_size, num_samples - drawn)
        counts.update(choose_multiple_weighted(rng, batch, values))
        drawn += batch

    support = [i for i, w in enumerate(values) if w > 0.0]
    supported = set(support)
    if any(i not in supported for i in counts):
        logger.debug("Sampled an index with zero expected count: %s", counts)
        return ChiSquaredResult(math.inf, max(len(support) - 1, 0), 0.0, num_samples)
    if len(support) < 2:
        return ChiSquaredResult(0.0, 0, 1.0, num_samples)

    observed = [counts[i] for i in support]
    expected = [values[i] / total * num_samples for i in support]
    # chisquare insists both totals agree to within a tight tolerance.
    scale = num_samples / math.fsum(expected)
    expected = [e * scale for e in expected]
    statistic, p_value = stats.chisquare(observed, expected)
    return ChiSquaredResult(
        chi_squared=float(statistic),
        degrees_of_freedom=len(support) - 1,
        p_value=float(p_value),
        num_samples=num_samples,
    )


__all__ = ["ChiSquaredResult", "chi_squared_test"]
