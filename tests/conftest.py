"""Shared pytest configuration.

Hypothesis profiles are selected with the HYPOTHESIS_PROFILE environment
variable, e.g. ``HYPOTHESIS_PROFILE=ci pytest``.
"""

import os

from hypothesis import settings

settings.register_profile("ci", max_examples=500, deadline=None)
settings.register_profile("dev", max_examples=20)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
