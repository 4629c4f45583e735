"""Package initialization for stochastic-universal-sampling.

Low-variance weighted sampling with repetition: every index is chosen within
one of its expected count, in O(N + amount) time.
"""

from stochastic_universal_sampling.diagnostics import (
    ChiSquaredResult,
    chi_squared_test,
)
from stochastic_universal_sampling.errors import (
    EmptyInputError,
    NegativeWeightError,
    NonFiniteTotalError,
    NonFiniteWeightError,
    SamplingError,
)
from stochastic_universal_sampling.random_source import (
    NumpyRandomSource,
    RandomSource,
    as_random_source,
)
from stochastic_universal_sampling.sampler import UniversalSampler
from stochastic_universal_sampling.sampling import (
    choose_multiple,
    choose_multiple_weighted,
    cumulative_weights,
    zero_weight_threshold,
)

__version__ = "0.1.0"
__all__ = [
    "ChiSquaredResult",
    "EmptyInputError",
    "NegativeWeightError",
    "NonFiniteTotalError",
    "NonFiniteWeightError",
    "NumpyRandomSource",
    "RandomSource",
    "SamplingError",
    "UniversalSampler",
    "as_random_source",
    "chi_squared_test",
    "choose_multiple",
    "choose_multiple_weighted",
    "cumulative_weights",
    "zero_weight_threshold",
]
