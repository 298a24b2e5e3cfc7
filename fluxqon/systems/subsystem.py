# This code is part of Qiskit.
#
# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.
# pylint: disable=invalid-name

"""
Subsystem base class and optional capabilities.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

import numpy as np
from scipy.special import ellipe, ellipk

from ..exceptions import InvalidInputError
from . import subsystem_operators as ops


class Category(Enum):
    """Subsystem categories known to the interaction builder.

    The declaration order is the priority order in which categories are matched.
    """

    QUBIT = "Qubit"
    ION = "Ion"
    PHOTON = "Photon"


class Subsystem(ABC):
    """A Hilbert space with a name, a dimension and an energy spectrum.

    Subclasses set ``category`` to tell the interaction builder which coupling formulas apply.
    A subsystem with ``category = None`` is accepted but contributes no interaction terms.
    """

    category: Optional[Category] = None

    def __init__(self, name: str, dim: int):
        """Initialize with name and dimension.

        Args:
            name: Name of the subsystem.
            dim: Dimension of the subsystem.
        """
        if int(dim) != dim or dim < 1:
            raise InvalidInputError("Subsystem dimension must be a positive integer.")
        self._name = name
        self._dim = int(dim)

    @property
    def name(self) -> str:
        """Name of subsystem."""
        return self._name

    @property
    def dim(self) -> int:
        """Dimension of subsystem."""
        return self._dim

    @property
    @abstractmethod
    def energy(self) -> np.ndarray:
        """Energy levels in J, ordered by level index."""

    def number(self, level: Optional[int] = None) -> np.ndarray:
        """Number operator, or the projector onto ``level`` if one is given."""
        if level is None:
            return ops.number(self.dim)
        return ops.projector(self.dim, level)

    def transition(self, level_from: int, level_to: int) -> np.ndarray:
        """Transition operator from ``level_from`` to ``level_to``."""
        return ops.transition(self.dim, level_from, level_to)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name}, dim={self.dim})"

    def __eq__(self, other: "Subsystem") -> bool:
        if not isinstance(other, Subsystem):
            return False
        return self.name == other.name


class LadderSubsystem(Subsystem):
    """A subsystem with creation and annihilation operators."""

    @property
    def creation(self) -> np.ndarray:
        """Creation operator."""
        return ops.creation(self.dim)

    @property
    def annihilation(self) -> np.ndarray:
        """Annihilation operator."""
        return ops.annihilation(self.dim)


class SpatialExtent:
    """Capability of a subsystem occupying a cylindrical volume, coaxial with and starting at the
    plane of a current loop it couples to."""

    def __init__(self, radius: float, height: float):
        if radius <= 0 or height <= 0:
            raise InvalidInputError("Radius and height must be positive.")
        self._radius = float(radius)
        self._height = float(height)

    @property
    def radius(self) -> float:
        """Cylinder radius in m."""
        return self._radius

    @property
    def height(self) -> float:
        """Cylinder height in m."""
        return self._height


class CurrentLoop:
    """Capability of a subsystem carrying a circulating current around a circular loop."""

    def __init__(self, radius: float):
        if radius <= 0:
            raise InvalidInputError("Loop radius must be positive.")
        self._loop_radius = float(radius)

    @property
    def loop_radius(self) -> float:
        """Loop radius in m."""
        return self._loop_radius

    @property
    def area(self) -> float:
        """Effective loop area in m^2."""
        return np.pi * self._loop_radius**2

    def radial_field_factor(
        self, r: Union[float, np.ndarray], z: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        r"""Radial magnetic field of the loop per unit :math:`\mu_0 I`, in 1/m.

        Evaluated at radial distance ``r`` from the loop axis and height ``z`` above the loop
        plane, from the Biot-Savart law in terms of complete elliptic integrals. The field is
        zero on the axis and in the loop plane.
        """
        a = self._loop_radius
        r = np.asarray(r, dtype=float)
        z = np.asarray(z, dtype=float)
        with np.errstate(divide="ignore", invalid="ignore"):
            alpha2 = (a - r) ** 2 + z**2
            beta2 = (a + r) ** 2 + z**2
            m = 4 * a * r / beta2
            field = (
                z
                / (2 * np.pi * r * np.sqrt(beta2))
                * ((a**2 + r**2 + z**2) / alpha2 * ellipe(m) - ellipk(m))
            )
        field = np.where((r == 0) | (z == 0), 0.0, field)
        if field.ndim == 0:
            return float(field)
        return field
