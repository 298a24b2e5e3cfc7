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
Multi-level ions.
"""

from typing import Iterator, Tuple, Union

import numpy as np

from ..exceptions import InvalidInputError
from .subsystem import Category, SpatialExtent, Subsystem


class Ion(Subsystem):
    r"""A multi-level emitter whose levels are grouped into multiplets.

    The levels are ordered multiplet by multiplet. Each multiplet holds
    :math:`(2S + 1)(2I + 1)` hyperfine sublevels, with :math:`S` the electron spin and :math:`I`
    the nuclear spin, so the Hilbert dimension is the number of multiplets times the multiplet
    size.
    """

    category = Category.ION

    def __init__(
        self,
        name: str,
        energy: np.ndarray,
        multiplet_energy: np.ndarray,
        electron_spin: float = 0.5,
        nuclear_spin: float = 0.0,
        coupling_strength: Union[float, np.ndarray] = 0.0,
        line_strength: Union[float, np.ndarray] = 0.0,
    ):
        """Initialize.

        Args:
            name: Name of the ion.
            energy: Level energies in J.
            multiplet_energy: Energy offset of each multiplet in J.
            electron_spin: Effective electron spin.
            nuclear_spin: Nuclear spin.
            coupling_strength: Coupling strengths in rad/s to a qubit, one for every pair of
                sublevels within each multiplet, ordered as in :meth:`sublevel_pairs`.
            line_strength: Transition line strengths in rad/s to a photon mode, either a scalar
                applying to all transitions or a square matrix over the levels.
        """
        energy = np.asarray(energy, dtype=float).ravel()
        multiplet_energy = np.asarray(multiplet_energy, dtype=float).ravel()
        super().__init__(name, energy.size)

        multiplet_dim = (2 * electron_spin + 1) * (2 * nuclear_spin + 1)
        if int(multiplet_dim) != multiplet_dim:
            raise InvalidInputError("Spins must be non-negative half-integers.")
        if multiplet_energy.size * int(multiplet_dim) != self.dim:
            raise InvalidInputError(
                "The number of energy levels must equal the number of multiplets times the "
                "multiplet dimension."
            )

        self._energy = energy
        self._multiplet_energy = multiplet_energy
        self._electron_spin = electron_spin
        self._nuclear_spin = nuclear_spin
        self._multiplet_dim = int(multiplet_dim)
        self.coupling_strength = coupling_strength
        self.line_strength = line_strength

    @property
    def energy(self) -> np.ndarray:
        return self._energy

    @property
    def multiplet_energy(self) -> np.ndarray:
        """Energy offset of each multiplet in J."""
        return self._multiplet_energy

    @property
    def electron_spin(self) -> float:
        """Effective electron spin."""
        return self._electron_spin

    @property
    def nuclear_spin(self) -> float:
        """Nuclear spin."""
        return self._nuclear_spin

    @property
    def num_multiplets(self) -> int:
        """Number of multiplets."""
        return self._multiplet_energy.size

    @property
    def multiplet_dim(self) -> int:
        """Number of sublevels per multiplet."""
        return self._multiplet_dim

    @property
    def coupling_strength(self) -> np.ndarray:
        """Coupling strengths to a qubit in rad/s."""
        return self._coupling_strength

    @coupling_strength.setter
    def coupling_strength(self, value):
        self._coupling_strength = np.atleast_1d(np.asarray(value, dtype=float)).ravel()

    @property
    def line_strength(self) -> np.ndarray:
        """Line strengths to a photon mode in rad/s, as a scalar or a level-by-level matrix."""
        return self._line_strength

    @line_strength.setter
    def line_strength(self, value):
        self._line_strength = np.asarray(value, dtype=complex)

    def level_index(self, sublevel: int, multiplet: int) -> int:
        """Level index of ``sublevel`` in ``multiplet``, both 0-based."""
        if not 0 <= sublevel < self.multiplet_dim or not 0 <= multiplet < self.num_multiplets:
            raise InvalidInputError("Sublevel or multiplet index out of range.")
        return multiplet * self.multiplet_dim + sublevel

    def sublevel_pairs(self) -> Iterator[Tuple[int, int]]:
        """Iterate over the level pairs ``(lower, upper)`` within each multiplet, multiplet by
        multiplet, in the order used by :attr:`coupling_strength`."""
        for multiplet in range(self.num_multiplets):
            for sub_i in range(self.multiplet_dim):
                for sub_j in range(sub_i + 1, self.multiplet_dim):
                    yield self.level_index(sub_i, multiplet), self.level_index(sub_j, multiplet)


class CylindricalIon(Ion, SpatialExtent):
    """An ion ensemble filling a cylinder coaxial with a qubit loop."""

    def __init__(
        self,
        name: str,
        energy: np.ndarray,
        multiplet_energy: np.ndarray,
        radius: float,
        height: float,
        **kwargs,
    ):
        """Initialize.

        Args:
            name: Name of the ion.
            energy: Level energies in J.
            multiplet_energy: Energy offset of each multiplet in J.
            radius: Cylinder radius in m.
            height: Cylinder height in m.
            kwargs: Keyword arguments of :class:`Ion`.
        """
        Ion.__init__(self, name, energy, multiplet_energy, **kwargs)
        SpatialExtent.__init__(self, radius, height)
