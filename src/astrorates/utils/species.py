# coding: utf-8
# Copyright (c) Pymatgen Development Team.
# Distributed under the terms of the MIT License.


"""
This module provides utilities for handling species names as they appear in
gas-grain networks, e.g. "HCO+", "e(-)" or "CO(ice)".
"""

import re

from pymatgen.core.composition import Composition
from scipy.constants import physical_constants

ICE_SUFFIX = "(ice)"
ELECTRON_NAMES = ("e(-)", "e-")

_CHARGE = re.compile(r"(\(\+\)|\(-\)|\++|-+)$")


def strip_species_name(name: str) -> str:
    """
    Remove the ice suffix and the charge from a species name.

    Args:
        name (str): species name, e.g. "H3+" or "CO(ice)"

    Returns:
        str: the bare chemical formula, e.g. "H3" or "CO"
    """
    bare = name.strip()
    if bare.endswith(ICE_SUFFIX):
        bare = bare[: -len(ICE_SUFFIX)]
    return _CHARGE.sub("", bare)


def species_mass(name: str) -> float:
    """
    Mass of a network species in atomic mass units.

    Args:
        name (str): species name

    Returns:
        float: mass in amu
    """
    if name.strip() in ELECTRON_NAMES:
        return physical_constants["electron mass in u"][0]

    formula = strip_species_name(name)
    if not formula:
        raise ValueError("Cannot derive a formula from species name {!r}".format(name))
    return float(Composition(formula).weight)
