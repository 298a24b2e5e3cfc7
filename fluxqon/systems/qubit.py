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
Two-level qubits.
"""

import numpy as np

from .subsystem import Category, CurrentLoop, LadderSubsystem


class Qubit(LadderSubsystem):
    r"""A two-level qubit with Hamiltonian :math:`-(\epsilon \sigma_z + \Delta \sigma_x) / 2`.

    The level splitting is :math:`\sqrt{\Delta^2 + \epsilon^2}`, with :math:`\Delta` the
    tunneling energy and :math:`\epsilon` the bias energy.
    """

    category = Category.QUBIT

    def __init__(self, name: str, tunneling_energy: float, bias_energy: float = 0.0):
        """Initialize.

        Args:
            name: Name of the qubit.
            tunneling_energy: Tunneling energy in J.
            bias_energy: Bias energy in J.
        """
        super().__init__(name, 2)
        self.tunneling_energy = tunneling_energy
        self.bias_energy = bias_energy

    @property
    def transition_energy(self) -> float:
        """Level splitting in J."""
        return float(np.hypot(self.tunneling_energy, self.bias_energy))

    @property
    def energy(self) -> np.ndarray:
        return np.array([-0.5, 0.5]) * self.transition_energy


class FluxQubit(Qubit, CurrentLoop):
    """A flux qubit whose persistent current circulates around a circular loop."""

    def __init__(
        self, name: str, tunneling_energy: float, radius: float, bias_energy: float = 0.0
    ):
        """Initialize.

        Args:
            name: Name of the qubit.
            tunneling_energy: Tunneling energy in J.
            radius: Loop radius in m.
            bias_energy: Bias energy in J.
        """
        Qubit.__init__(self, name, tunneling_energy, bias_energy)
        CurrentLoop.__init__(self, radius)
