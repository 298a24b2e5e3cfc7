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
Photon modes.
"""

import numpy as np

from ..constants import REDUCED_PLANCK
from .subsystem import Category, LadderSubsystem


class Photon(LadderSubsystem):
    """A single bosonic mode truncated to ``dim`` Fock states."""

    category = Category.PHOTON

    def __init__(
        self, name: str, dim: int, frequency: float, magnetic_amplitude: float = 0.0
    ):
        """Initialize.

        Args:
            name: Name of the mode.
            dim: Number of Fock states kept.
            frequency: Angular frequency in rad/s.
            magnetic_amplitude: Vacuum magnetic field amplitude in T at the coupled qubit.
        """
        super().__init__(name, dim)
        self.frequency = frequency
        self.magnetic_amplitude = magnetic_amplitude

    @property
    def transition_energy(self) -> float:
        """Photon energy in J."""
        return REDUCED_PLANCK * self.frequency

    @property
    def energy(self) -> np.ndarray:
        return self.transition_energy * np.arange(self.dim)
