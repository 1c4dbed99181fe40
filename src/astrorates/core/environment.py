# coding: utf-8
# Copyright (c) Pymatgen Development Team.
# Distributed under the terms of the MIT License.


"""
Local physical conditions of a cell of the cloud, in CGS units.
"""

import logging
from dataclasses import dataclass

from monty.json import MSONable
from monty.serialization import dumpfn, loadfn

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvironmentalConditions(MSONable):
    """
    Physical conditions a rate coefficient is evaluated at. The defaults describe a
    typical dark cloud.

    Args:
        av (float): visual extinction (mag)
        tgas (float): gas temperature (K)
        tdust (float): dust temperature (K)
        chi (float): scaling factor of the UV radiation field
        cosmic (float): cosmic-ray ionization rate (s^-1)
        grain_size (float): grain radius (cm)

    Raises:
        ValueError: if a temperature is not strictly positive, or if any other
            quantity is negative
    """

    av: float = 20.0
    tgas: float = 10.0
    tdust: float = 10.0
    chi: float = 1.0
    cosmic: float = 1.3e-17
    grain_size: float = 1e-5

    def __post_init__(self):
        for name in ("tgas", "tdust"):
            if not getattr(self, name) > 0:
                raise ValueError(
                    "{} must be strictly positive, got {}".format(name, getattr(self, name))
                )
        for name in ("av", "chi", "cosmic", "grain_size"):
            if getattr(self, name) < 0:
                raise ValueError(
                    "{} must be non-negative, got {}".format(name, getattr(self, name))
                )

    @classmethod
    def from_file(cls, filename):
        """
        Read conditions from a JSON or YAML file.

        Args:
            filename (str, or Path): file holding a mapping of the condition names to
                their values. Missing names take their default value.

        Returns:
            EnvironmentalConditions
        """
        logger.info("Reading physical conditions from {}".format(filename))
        d = loadfn(filename)
        if isinstance(d, cls):
            return d
        return cls.from_dict(d)

    def to_file(self, filename):
        """
        Write conditions to a JSON or YAML file.

        Args:
            filename (str, or Path): output file; the format follows the extension
        """
        dumpfn(self.as_dict(), filename)
