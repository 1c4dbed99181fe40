# coding: utf-8
# Copyright (c) Pymatgen Development Team.
# Distributed under the terms of the MIT License.


"""
Physical constants used by the rate laws, in CGS units.

The fundamental constants are taken from scipy.constants (SI) and converted once,
at import time; the grain constants are the values conventionally adopted for
dense interstellar clouds.
"""

from scipy.constants import k, m_p, erg, gram

# Boltzmann constant (erg K^-1)
KB_CGS = k / erg

# Proton mass (g)
MP_CGS = m_p / gram

# Number of gas particles per dust grain
GAS_DUST_NUMBER_RATIO = 7.57e11

# Surface density of adsorption sites on a grain (cm^-2)
SITES_PER_GRAIN_SURFACE = 3.00e15

# Fraction of time a grain spends near 70 K after a cosmic-ray impact
FRACTION_TIME_GRAIN_70K = 3.16e-19

# Peak grain temperature reached after a cosmic-ray impact (K)
CR_DESORPTION_TEMPERATURE = 70.0

# Normalisation temperature of the modified Arrhenius law (K)
REFERENCE_TEMPERATURE = 300.0
