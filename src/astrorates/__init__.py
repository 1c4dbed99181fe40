"""
Rate coefficients of the gas-phase and grain-surface processes of interstellar
chemical networks.
"""

from astrorates.core import (
    EnvironmentalConditions,
    RateCalculator,
    ReactionCategory,
    UnknownCategoryError,
    compute_rate,
)

__version__ = "0.1.0"
