# coding: utf-8
# Copyright (c) Pymatgen Development Team.
# Distributed under the terms of the MIT License.


"""
Reaction categories and reaction parameters of a gas-grain network.

The nomenclature of the categories follows the one of the Ohio State University
database for astrochemistry, extended with depletion onto and desorption from
grain surfaces.
"""

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from monty.json import MSONable

from astrorates.utils.species import species_mass


class UnknownCategoryError(ValueError):
    """
    Raised when a reaction type does not match any of the known rate laws.

    Args:
        category: the offending reaction type
        reaction_no (int, or None): number of the reaction in the network, if known
    """

    def __init__(self, category, reaction_no: Optional[int] = None):
        self.category = category
        self.reaction_no = reaction_no
        msg = "unknown reaction type {!r}".format(category)
        if reaction_no is not None:
            msg += " for reaction {}".format(reaction_no)
        super().__init__(msg)

    def __reduce__(self):
        return self.__class__, (self.category, self.reaction_no)


class ReactionFamily(Enum):
    """
    Groups of categories sharing the same set of fitted parameters
    """

    GRAIN_RECOMBINATION = "grain_recombination"
    COSMIC_RAY = "cosmic_ray"
    ARRHENIUS = "arrhenius"
    PHOTO = "photo"
    GRAIN_SURFACE = "grain_surface"


class ReactionCategory(IntEnum):
    """
    Reaction types, keyed by the integer code used in network files
    """

    GRAIN_RECOMBINATION = 0
    COSMIC_RAY_IONIZATION = 1
    ION_MOLECULE = 2
    NEGATIVE_ION_NEUTRAL = 3
    RADIATIVE_ASSOCIATION = 4
    ASSOCIATIVE_EJECTION = 5
    NEUTRAL_NEUTRAL_IONIZATION = 6
    NEUTRAL_NEUTRAL = 7
    NEUTRAL_NEUTRAL_RADIATIVE_ASSOCIATION = 8
    DISSOCIATIVE_RECOMBINATION = 9
    RADIATIVE_RECOMBINATION = 10
    ION_ION_RECOMBINATION = 11
    ELECTRON_ATTACHMENT = 12
    PHOTOPROCESS = 13
    OTHER = 14
    GRAIN_DEPLETION = 20
    THERMAL_DESORPTION = 21
    COSMIC_RAY_DESORPTION = 22
    PHOTODESORPTION = 23

    @classmethod
    def from_code(cls, code, reaction_no: Optional[int] = None) -> "ReactionCategory":
        """
        Look up a category from its integer code.

        Args:
            code: integer reaction type, as found in the network
            reaction_no (int, or None): reaction number, only used in the error message

        Returns:
            ReactionCategory

        Raises:
            UnknownCategoryError: if the code matches no category
        """
        if isinstance(code, cls):
            return code
        try:
            return cls(code)
        except (TypeError, ValueError):
            raise UnknownCategoryError(code, reaction_no) from None

    @property
    def family(self) -> ReactionFamily:
        " The parameter family of this category "
        return _FAMILIES.get(self, ReactionFamily.ARRHENIUS)

    @property
    def description(self) -> str:
        " Short human-readable name "
        return _DESCRIPTIONS[self]


_FAMILIES = {
    ReactionCategory.GRAIN_RECOMBINATION: ReactionFamily.GRAIN_RECOMBINATION,
    ReactionCategory.COSMIC_RAY_IONIZATION: ReactionFamily.COSMIC_RAY,
    ReactionCategory.PHOTOPROCESS: ReactionFamily.PHOTO,
    ReactionCategory.GRAIN_DEPLETION: ReactionFamily.GRAIN_SURFACE,
    ReactionCategory.THERMAL_DESORPTION: ReactionFamily.GRAIN_SURFACE,
    ReactionCategory.COSMIC_RAY_DESORPTION: ReactionFamily.GRAIN_SURFACE,
    ReactionCategory.PHOTODESORPTION: ReactionFamily.GRAIN_SURFACE,
}

_DESCRIPTIONS = {
    ReactionCategory.GRAIN_RECOMBINATION: "electron-grain recombination",
    ReactionCategory.COSMIC_RAY_IONIZATION: "cosmic-ray ionization",
    ReactionCategory.ION_MOLECULE: "ion-molecule, charge exchange",
    ReactionCategory.NEGATIVE_ION_NEUTRAL: "negative ion - neutral",
    ReactionCategory.RADIATIVE_ASSOCIATION: "radiative association",
    ReactionCategory.ASSOCIATIVE_EJECTION: "associative ejection",
    ReactionCategory.NEUTRAL_NEUTRAL_IONIZATION: "neutral + neutral -> ion + electron",
    ReactionCategory.NEUTRAL_NEUTRAL: "neutral-neutral",
    ReactionCategory.NEUTRAL_NEUTRAL_RADIATIVE_ASSOCIATION: "neutral-neutral radiative association",
    ReactionCategory.DISSOCIATIVE_RECOMBINATION: "dissociative recombination",
    ReactionCategory.RADIATIVE_RECOMBINATION: "radiative recombination",
    ReactionCategory.ION_ION_RECOMBINATION: "positive ion - negative ion recombination",
    ReactionCategory.ELECTRON_ATTACHMENT: "electron attachment",
    ReactionCategory.PHOTOPROCESS: "photo-ionization, photo-dissociation",
    ReactionCategory.OTHER: "other",
    ReactionCategory.GRAIN_DEPLETION: "depletion on grains",
    ReactionCategory.THERMAL_DESORPTION: "thermal desorption",
    ReactionCategory.COSMIC_RAY_DESORPTION: "cosmic-ray desorption",
    ReactionCategory.PHOTODESORPTION: "photo-desorption",
}


class ReactionParameters(MSONable, metaclass=ABCMeta):
    """
    An abstract class for the fitted coefficients of a reaction
    """

    @abstractmethod
    def as_triple(self) -> Tuple[float, float, float]:
        " The (alpha, beta, gamma) triple of the network file convention "


@dataclass(frozen=True)
class ArrheniusParameters(ReactionParameters):
    """
    Modified Arrhenius coefficients: k = alpha * (T/300)^beta * exp(-gamma/T)

    alpha: rate prefactor
    beta: temperature exponent
    gamma: activation energy (K)
    """

    alpha: float
    beta: float = 0.0
    gamma: float = 0.0

    def as_triple(self) -> Tuple[float, float, float]:
        return self.alpha, self.beta, self.gamma


@dataclass(frozen=True)
class CosmicRayParameters(ReactionParameters):
    """
    alpha: rate per unit cosmic-ray ionization rate
    """

    alpha: float

    def as_triple(self) -> Tuple[float, float, float]:
        return self.alpha, 0.0, 0.0


@dataclass(frozen=True)
class PhotoParameters(ReactionParameters):
    """
    alpha: unshielded rate in the standard interstellar radiation field (s^-1)
    gamma: extinction coefficient
    """

    alpha: float
    gamma: float = 0.0

    def as_triple(self) -> Tuple[float, float, float]:
        return self.alpha, 0.0, self.gamma


@dataclass(frozen=True)
class GrainParameters(ReactionParameters):
    """
    Coefficients of processes on grain surfaces. In network files the species mass
    is stored in the beta column and the binding energy in the gamma column.

    alpha: sticking coefficient or yield
    mass: mass of the adsorbed species (amu)
    binding_energy: binding energy of the species on the grain (K)
    """

    alpha: float
    mass: float
    binding_energy: float = 0.0

    @classmethod
    def from_species(cls, species: str, alpha: float, binding_energy: float = 0.0):
        """
        Build grain parameters for a species, deriving its mass from its name.

        Args:
            species (str): species name, e.g. "CO(ice)"
            alpha (float): sticking coefficient or yield
            binding_energy (float): binding energy (K)
        """
        return cls(alpha, species_mass(species), binding_energy)

    def as_triple(self) -> Tuple[float, float, float]:
        return self.alpha, self.mass, self.binding_energy


def parameters_for(category, alpha: float, beta: float, gamma: float) -> ReactionParameters:
    """
    Map the raw (alpha, beta, gamma) triple onto the parameters of a category's family.

    Args:
        category (ReactionCategory, or int): reaction type
        alpha (float): first fitted coefficient
        beta (float): second fitted coefficient
        gamma (float): third fitted coefficient

    Returns:
        ReactionParameters
    """
    family = ReactionCategory.from_code(category).family

    if family == ReactionFamily.COSMIC_RAY:
        return CosmicRayParameters(alpha)
    if family == ReactionFamily.PHOTO:
        return PhotoParameters(alpha, gamma)
    if family == ReactionFamily.GRAIN_SURFACE:
        return GrainParameters(alpha, beta, gamma)
    return ArrheniusParameters(alpha, beta, gamma)


@dataclass
class NetworkReaction(MSONable):
    """
    A reaction of the network, together with the coefficients of its rate law
    """

    reaction_no: int
    reactants: List[str]
    products: List[str]
    category: ReactionCategory
    parameters: ReactionParameters

    def __post_init__(self):
        self.category = ReactionCategory.from_code(self.category, self.reaction_no)

    @classmethod
    def from_raw(
        cls,
        reaction_no: int,
        reactants: List[str],
        products: List[str],
        alpha: float,
        beta: float,
        gamma: float,
        reaction_type: int,
    ) -> "NetworkReaction":
        """
        Build a reaction from a row of a network file.

        Raises:
            UnknownCategoryError: if reaction_type matches no category
        """
        category = ReactionCategory.from_code(reaction_type, reaction_no)
        return cls(
            reaction_no,
            list(reactants),
            list(products),
            category,
            parameters_for(category, alpha, beta, gamma),
        )

    def __str__(self):
        return "{}: {} -> {} ({})".format(
            self.reaction_no,
            " + ".join(self.reactants),
            " + ".join(self.products),
            self.category.description,
        )
