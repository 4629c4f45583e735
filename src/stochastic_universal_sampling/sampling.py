"""Stochastic universal sampling.

Chooses ``amount`` indices at random, with repetition and in random order,
where the likelihood of each index is proportional to its weight. Instead of
``amount`` independent roulette-wheel spins, a single comb of ``amount``
evenly spaced pointers is laid over the cumulative weights and offset by one
random draw. Every index is then selected within one of its expected count,
and the whole selection is a single linear sweep over the weights.

If all of the weights are equal, even if they are all zero, every index has
the same chance of selection.
"""

import logging
import math
import sys
from collections.abc import Iterable
from itertools import accumulate
from typing import Any

from stochastic_universal_sampling.errors import (
    EmptyInputError,
    NegativeWeightError,
    NonFiniteTotalError,
)
from stochastic_universal_sampling.random_source import as_random_source

logger = logging.getLogger(__name__)


def zero_weight_threshold(n: int) -> float:
    """Largest total weight of ``n`` items that still counts as all zero.

    This absorbs accumulated round-off, while an exact zero total is always
    below it.
    """
    return sys.float_info.epsilon * n


def cumulative_weights(weights: Iterable[float]) -> list[float]:
    """Return the running sums of ``weights``.

    Raises:
        NegativeWeightError: if any weight is below zero.
    """
    values = [float(w) for w in weights]
    for index, weight in enumerate(values):
        if weight < 0.0:
            raise NegativeWeightError(index, weight)
    return list(accumulate(values))


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")


def choose_multiple(rng: Any, amount: int, items: int) -> list[int]:
    """Choose ``amount`` indices from ``range(items)`` uniformly at random,
    with repetition, in random order.

    Whenever at least ``items`` picks are still needed, a full round of every
    index is added without drawing anything; only the final partial round is
    a random sample without replacement. Each index therefore appears either
    ``amount // items`` times or once more.

    Raises:
        EmptyInputError: if ``amount > 0`` and ``items == 0``.
    """
    _check_amount(amount)
    if items < 0:
        raise ValueError(f"items must be non-negative, got {items}")
    if amount == 0:
        return []
    if items == 0:
        raise EmptyInputError(amount)

    rng = as_random_source(rng)
    results: list[int] = []
    while len(results) < amount:
        remaining = amount - len(results)
        if remaining >= items:
            results.extend(range(items))
        else:
            results.extend(rng.sample(range(items), remaining))
    rng.shuffle(results)
    return results


def choose_multiple_weighted(
    rng: Any, amount: int, weights: Iterable[float]
) -> list[int]:
    """Choose ``amount`` indices into ``weights`` with stochastic universal
    sampling.

    Args:
        rng: A :class:`random.Random`, NumPy generator, or any other
            :class:`~stochastic_universal_sampling.random_source.RandomSource`.
        amount: Number of indices to return. May exceed ``len(weights)``.
        weights: Non-negative, finite weights.

    Returns:
        A list of ``amount`` indices into ``weights``, shuffled.

    Raises:
        EmptyInputError: if ``amount > 0`` and ``weights`` is empty.
        NegativeWeightError: if any weight is negative.
        NonFiniteTotalError: if the weights sum to infinity or NaN.
    """
    _check_amount(amount)
    if amount == 0:
        return []

    values = [float(w) for w in weights]
    if not values:
        raise EmptyInputError(amount)
    cumulative = cumulative_weights(values)

    total = cumulative[-1]
    if total <= zero_weight_threshold(len(cumulative)):
        logger.debug(
            "Total weight %r of %d items is effectively zero; sampling uniformly",
            total,
            len(cumulative),
        )
        return choose_multiple(rng, amount, len(cumulative))
    if not math.isfinite(total):
        raise NonFiniteTotalError(total)

    rng = as_random_source(rng)
    # Round-off can push the top pointer past the total, so the cursor stops
    # at the last item that owns part of the range.
    last = max(i for i, w in enumerate(values) if w > 0.0)

    arm_spacing = total / amount
    arm_offset = rng.random() * arm_spacing

    samples: list[int] = []
    idx = 0
    for arm in range(amount):
        pointer = arm * arm_spacing + arm_offset
        while idx < last and cumulative[idx] <= pointer:
            idx += 1
        samples.append(idx)

    # Break up the runs of repeated indices the comb produces.
    rng.shuffle(samples)
    return samples


__all__ = [
    "choose_multiple",
    "choose_multiple_weighted",
    "cumulative_weights",
    "zero_weight_threshold",
]
