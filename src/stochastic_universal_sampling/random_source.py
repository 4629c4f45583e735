"""Random sources accepted by the samplers.

The samplers need three things from a generator: a uniform float in
``[0, 1)``, an in-place shuffle and a ``k``-without-replacement sample.
:class:`random.Random` already has exactly that shape, so it is used as-is.
NumPy generators are wrapped by :class:`NumpyRandomSource`.
"""

from collections.abc import MutableSequence, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """The subset of :class:`random.Random` used by the samplers."""

    def random(self) -> float: ...

    def shuffle(self, x: MutableSequence[Any]) -> None: ...

    def sample(self, population: Sequence[T], k: int) -> list[T]: ...


class NumpyRandomSource:
    """Adapts a ``numpy.random.Generator`` or ``RandomState`` to
    :class:`RandomSource`."""

    def __init__(self, generator: np.random.Generator | np.random.RandomState) -> None:
        self.generator = generator

    def random(self) -> float:
        return float(self.generator.random())

    def shuffle(self, x: MutableSequence[Any]) -> None:
        self.generator.shuffle(x)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        if k > len(population):
            raise ValueError("sample larger than population")
        chosen = self.generator.choice(len(population), size=k, replace=False)
        return [population[int(i)] for i in chosen]

    def __repr__(self) -> str:
        return f"NumpyRandomSource({self.generator!r})"


def as_random_source(rng: Any) -> RandomSource:
    """Return ``rng`` as something the samplers can draw from.

    Raises:
        TypeError: if ``rng`` is neither a NumPy generator nor provides
            ``random``, ``shuffle`` and ``sample``.
    """
    if isinstance(rng, (np.random.Generator, np.random.RandomState)):
        return NumpyRandomSource(rng)
    if isinstance(rng, RandomSource):
        return rng
    raise TypeError(
        f"{type(rng).__name__} is not a random source: "
        "expected random.Random, a NumPy generator, or an object with "
        "random(), shuffle() and sample()"
    )


__all__ = ["NumpyRandomSource", "RandomSource", "as_random_source"]
