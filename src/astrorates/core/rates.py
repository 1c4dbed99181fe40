# coding: utf-8
# Copyright (c) Pymatgen Development Team.
# Distributed under the terms of the MIT License.


"""
Rate coefficients of the processes of a gas-grain network.

All quantities are in CGS units: temperatures in K, lengths in cm, rate
coefficients in s^-1 or cm^3 s^-1 depending on the reaction category.
"""

import logging
from typing import Iterable, Optional

import numpy as np
from scipy.constants import pi

from monty.json import MSONable

from astrorates.core.environment import EnvironmentalConditions
from astrorates.core.reaction import (
    ArrheniusParameters,
    CosmicRayParameters,
    GrainParameters,
    NetworkReaction,
    PhotoParameters,
    ReactionCategory,
    ReactionFamily,
    ReactionParameters,
    UnknownCategoryError,
    parameters_for,
)
from astrorates.utils.constants import (
    CR_DESORPTION_TEMPERATURE,
    FRACTION_TIME_GRAIN_70K,
    GAS_DUST_NUMBER_RATIO,
    KB_CGS,
    MP_CGS,
    REFERENCE_TEMPERATURE,
    SITES_PER_GRAIN_SURFACE,
)

logger = logging.getLogger(__name__)

_PARAMETER_TYPES = {
    ReactionFamily.GRAIN_RECOMBINATION: ArrheniusParameters,
    ReactionFamily.COSMIC_RAY: CosmicRayParameters,
    ReactionFamily.ARRHENIUS: ArrheniusParameters,
    ReactionFamily.PHOTO: PhotoParameters,
    ReactionFamily.GRAIN_SURFACE: GrainParameters,
}


def thermal_velocity(tgas: float, mass: float) -> float:
    """
    Mean thermal velocity of a gas-phase species.

    v_th = sqrt(8 kB T / (pi m))

    Args:
        tgas (float): gas temperature (K)
        mass (float): species mass (amu)

    Returns:
        float: thermal velocity (cm s^-1)
    """
    if not mass > 0:
        raise ValueError("Species mass must be strictly positive, got {}".format(mass))
    return np.sqrt(8 * KB_CGS * tgas / (pi * mass * MP_CGS))


def vibrational_frequency(binding_energy: float, mass: float) -> float:
    """
    Characteristic vibration frequency of a species adsorbed on a grain, in the
    harmonic oscillator approximation.

    v0 = sqrt(2 Ns Eb kB / (pi^2 m))

    Args:
        binding_energy (float): binding energy (K)
        mass (float): species mass (amu)

    Returns:
        float: vibration frequency (s^-1)
    """
    if not mass > 0:
        raise ValueError("Species mass must be strictly positive, got {}".format(mass))
    return np.sqrt(
        2 * SITES_PER_GRAIN_SURFACE * binding_energy * KB_CGS / (pi * pi * mass * MP_CGS)
    )


class RateCalculator(MSONable):

    """
    Evaluates the rate coefficient of a reaction from its category, its fitted
    coefficients and the local physical conditions.

    The calculator holds no state: the same inputs always give the same rate, and a
    single instance may be shared between threads.
    """

    # One rate law per category; categories not listed here are not supported.
    laws = {
        ReactionCategory.GRAIN_RECOMBINATION: "grain_recombination",
        ReactionCategory.COSMIC_RAY_IONIZATION: "cosmic_ray_ionization",
        ReactionCategory.ION_MOLECULE: "arrhenius",
        ReactionCategory.NEGATIVE_ION_NEUTRAL: "arrhenius",
        ReactionCategory.RADIATIVE_ASSOCIATION: "arrhenius",
        ReactionCategory.ASSOCIATIVE_EJECTION: "arrhenius",
        ReactionCategory.NEUTRAL_NEUTRAL_IONIZATION: "arrhenius",
        ReactionCategory.NEUTRAL_NEUTRAL: "arrhenius",
        ReactionCategory.NEUTRAL_NEUTRAL_RADIATIVE_ASSOCIATION: "arrhenius",
        ReactionCategory.DISSOCIATIVE_RECOMBINATION: "arrhenius",
        ReactionCategory.RADIATIVE_RECOMBINATION: "arrhenius",
        ReactionCategory.ION_ION_RECOMBINATION: "arrhenius",
        ReactionCategory.ELECTRON_ATTACHMENT: "arrhenius",
        ReactionCategory.OTHER: "arrhenius",
        ReactionCategory.PHOTOPROCESS: "photoprocess",
        ReactionCategory.GRAIN_DEPLETION: "grain_depletion",
        ReactionCategory.THERMAL_DESORPTION: "thermal_desorption",
        ReactionCategory.COSMIC_RAY_DESORPTION: "cosmic_ray_desorption",
        ReactionCategory.PHOTODESORPTION: "photodesorption",
    }

    def rate(
        self,
        category,
        parameters: ReactionParameters,
        conditions: EnvironmentalConditions,
        reaction_no: Optional[int] = None,
    ) -> float:
        """
        Calculate the rate coefficient of a reaction.

        Args:
            category (ReactionCategory, or int): reaction type
            parameters (ReactionParameters): fitted coefficients; their type must
                match the family of the category
            conditions (EnvironmentalConditions): local physical conditions
            reaction_no (int, or None): reaction number, only used in error messages

        Returns:
            float: rate coefficient (s^-1 or cm^3 s^-1)

        Raises:
            UnknownCategoryError: if the category matches no rate law
            TypeError: if the parameters do not belong to the category's family
        """
        category = ReactionCategory.from_code(category, reaction_no)
        if category not in self.laws:
            raise UnknownCategoryError(category, reaction_no)

        expected = _PARAMETER_TYPES[category.family]
        if not isinstance(parameters, expected):
            raise TypeError(
                "Reaction type {} ({}) expects {}, got {}".format(
                    int(category),
                    category.description,
                    expected.__name__,
                    type(parameters).__name__,
                )
            )

        return getattr(self, self.laws[category])(parameters, conditions)

    def rates(
        self, reactions: Iterable[NetworkReaction], conditions: EnvironmentalConditions
    ) -> np.ndarray:
        """
        Calculate the rate coefficients of a list of reactions.

        Args:
            reactions (list): list of NetworkReaction objects
            conditions (EnvironmentalConditions): local physical conditions

        Returns:
            np.ndarray: rate coefficients, in the order of the reactions
        """
        return np.array(
            [
                self.rate(r.category, r.parameters, conditions, r.reaction_no)
                for r in reactions
            ],
            dtype=float,
        )

    def rates_from_raw(self, rows, conditions: EnvironmentalConditions, skip_unknown=False):
        """
        Calculate the rate coefficients of reactions given in the network file
        convention.

        Args:
            rows (list): (reaction_no, alpha, beta, gamma, reaction_type) tuples
            conditions (EnvironmentalConditions): local physical conditions
            skip_unknown (bool): if True (default False), reactions of an unknown type
                are given a null rate instead of raising UnknownCategoryError

        Returns:
            np.ndarray: rate coefficients, in the order of the rows
        """
        k = np.zeros(len(rows))
        for i, (reaction_no, alpha, beta, gamma, reaction_type) in enumerate(rows):
            try:
                category = ReactionCategory.from_code(reaction_type, reaction_no)
            except UnknownCategoryError as e:
                if not skip_unknown:
                    raise
                logger.warning("Skipping reaction: {}".format(e))
                continue
            k[i] = self.rate(
                category,
                parameters_for(category, alpha, beta, gamma),
                conditions,
                reaction_no,
            )
        return k

    def grain_recombination(self, parameters, conditions):
        """
        Electron-grain recombination and other gas-grain interactions, excluding
        depletion and desorption.
        """
        return (
            parameters.alpha
            * (conditions.tgas / REFERENCE_TEMPERATURE) ** parameters.beta
            * GAS_DUST_NUMBER_RATIO
        )

    def cosmic_ray_ionization(self, parameters, conditions):
        """
        Direct cosmic-ray ionization and cosmic-ray induced photoreactions.
        """
        return parameters.alpha * conditions.cosmic

    def arrhenius(self, parameters, conditions):
        """
        Modified Arrhenius law, shared by all two-body gas-phase reactions.

        k = alpha * (T/300)^beta * exp(-gamma/T)
        """
        return (
            parameters.alpha
            * (conditions.tgas / REFERENCE_TEMPERATURE) ** parameters.beta
            * np.exp(-parameters.gamma / conditions.tgas)
        )

    def photoprocess(self, parameters, conditions):
        """
        Photo-ionization and photo-dissociation, attenuated by the dust extinction.
        """
        return conditions.chi * parameters.alpha * np.exp(-parameters.gamma * conditions.av)

    def grain_depletion(self, parameters, conditions):
        """
        Depletion onto grains: geometric cross section times thermal velocity.
        """
        v_th = thermal_velocity(conditions.tgas, parameters.mass)
        return pi * conditions.grain_size ** 2 * parameters.alpha * v_th

    def thermal_desorption(self, parameters, conditions):
        """
        Thermal desorption. The rate is computed but not used; the process is
        disabled and always contributes a null rate.
        """
        self.nominal_thermal_desorption(parameters, conditions)
        logger.debug("Thermal desorption is disabled, returning a null rate")
        return 0.0

    def cosmic_ray_desorption(self, parameters, conditions):
        """
        Desorption by cosmic-ray heating of the grains. The rate is computed but not
        used; the process is disabled and always contributes a null rate.
        """
        self.nominal_cosmic_ray_desorption(parameters, conditions)
        logger.debug("Cosmic-ray desorption is disabled, returning a null rate")
        return 0.0

    def photodesorption(self, parameters, conditions):
        """
        Desorption by UV photons, attenuated by the dust extinction.
        """
        return (
            conditions.chi
            * np.exp(-2 * conditions.av)
            * parameters.alpha
            * pi
            * conditions.grain_size ** 2
        )

    def nominal_thermal_desorption(self, parameters, conditions):
        """
        Thermal desorption rate, k = v0 * exp(-Eb/Tdust), as it would be if the
        process were enabled.
        """
        v0 = vibrational_frequency(parameters.binding_energy, parameters.mass)
        return v0 * np.exp(-parameters.binding_energy / conditions.tdust)

    def nominal_cosmic_ray_desorption(self, parameters, conditions):
        """
        Cosmic-ray desorption rate, k = v0 * f(70K) * exp(-Eb/70K), as it would be
        if the process were enabled.
        """
        v0 = vibrational_frequency(parameters.binding_energy, parameters.mass)
        return (
            v0
            * FRACTION_TIME_GRAIN_70K
            * np.exp(-parameters.binding_energy / CR_DESORPTION_TEMPERATURE)
        )

    def __repr__(self):
        return "Rate Calculator for {} reaction types".format(len(self.laws))

    def __str__(self):
        return self.__repr__()


_calculator = RateCalculator()


def compute_rate(
    alpha,
    beta,
    gamma,
    category,
    av,
    tgas,
    tdust,
    chi,
    cosmic,
    grain_size,
    reaction_no=None,
):
    """
    Calculate the rate coefficient of a reaction from the raw coefficients of a
    network file.

    Args:
        alpha (float): first fitted coefficient
        beta (float): second fitted coefficient (a temperature exponent, or a
            species mass in amu for grain surface processes)
        gamma (float): third fitted coefficient (an activation energy, an extinction
            coefficient, or a binding energy in K, depending on the category)
        category (int): reaction type
        av (float): visual extinction (mag)
        tgas (float): gas temperature (K)
        tdust (float): dust temperature (K)
        chi (float): scaling factor of the UV radiation field
        cosmic (float): cosmic-ray ionization rate (s^-1)
        grain_size (float): grain radius (cm)
        reaction_no (int, or None): reaction number, only used in error messages

    Returns:
        float: rate coefficient (s^-1 or cm^3 s^-1)

    Raises:
        UnknownCategoryError: if the category matches no rate law
    """
    category = ReactionCategory.from_code(category, reaction_no)
    conditions = EnvironmentalConditions(
        av=av, tgas=tgas, tdust=tdust, chi=chi, cosmic=cosmic, grain_size=grain_size
    )
    return _calculator.rate(
        category, parameters_for(category, alpha, beta, gamma), conditions, reaction_no
    )
