"""Exceptions raised for invalid sampling input.

Every error here is a caller contract violation and is raised before any
random draw happens, so a failed call never advances the random source.
"""


class SamplingError(ValueError):
    """Base class for invalid sampling input."""


class EmptyInputError(SamplingError):
    """A positive amount was requested from an empty set of candidates."""

    def __init__(self, amount: int) -> None:
        super().__init__(
            f"no data: cannot choose {amount} item(s) from an empty set"
        )
        self.amount = amount


class NegativeWeightError(SamplingError):
    """A weight was below zero."""

    def __init__(self, index: int, weight: float) -> None:
        super().__init__(f"weight at index {index} is negative: {weight!r}")
        self.index = index
        self.weight = weight


class NonFiniteWeightError(SamplingError):
    """A weight was infinite or NaN."""

    def __init__(self, index: int, weight: float) -> None:
        super().__init__(f"weight at index {index} is not finite: {weight!r}")
        self.index = index
        self.weight = weight


class NonFiniteTotalError(SamplingError):
    """The weights summed to infinity or NaN."""

    def __init__(self, total: float) -> None:
        super().__init__(f"total weight is not finite: {total!r}")
        self.total = total
