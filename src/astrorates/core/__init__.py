from astrorates.core.reaction import (
    UnknownCategoryError,
    ReactionFamily,
    ReactionCategory,
    ReactionParameters,
    ArrheniusParameters,
    CosmicRayParameters,
    PhotoParameters,
    GrainParameters,
    NetworkReaction,
    parameters_for,
)
from astrorates.core.environment import EnvironmentalConditions
from astrorates.core.rates import RateCalculator, compute_rate
