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

"""Shared functionality and helpers for the unit tests."""

import unittest

import numpy as np

from fluxqon.constants import REDUCED_PLANCK
from fluxqon.systems import CylindricalIon, FluxQubit, Ion, Photon, Qubit, Subsystem


class FluxQonTestCase(unittest.TestCase):
    """Common test case with array comparisons."""

    def assertAllClose(self, A, B, rtol=1e-8, atol=1e-8):
        """Call np.allclose and assert true."""
        A = np.asarray(A)
        B = np.asarray(B)
        self.assertTrue(np.allclose(A, B, rtol=rtol, atol=atol), msg=f"\n{A}\n!=\n{B}")

    def assertHermitian(self, H, scale=1.0):
        """Assert that H / scale equals its conjugate transpose."""
        H = np.asarray(H) / scale
        self.assertAllClose(H, H.conj().transpose())


class Spectator(Subsystem):
    """A subsystem with no category."""

    @property
    def energy(self):
        return np.zeros(self.dim)


def energy_unit(frequency):
    """Energy in J of a quantum of the angular frequency."""
    return REDUCED_PLANCK * frequency


def simple_ion(name="Er", line_strength=1.0, coupling_strength=(1.0, 2.0)):
    """A 4-level ion with two spin-1/2 multiplets, energies in units of hbar * 1 rad/s."""
    return Ion(
        name,
        energy=energy_unit(np.array([0.0, 1.0, 10.0, 11.0])),
        multiplet_energy=energy_unit(np.array([0.0, 10.0])),
        electron_spin=0.5,
        nuclear_spin=0.0,
        coupling_strength=coupling_strength,
        line_strength=line_strength,
    )


def cylindrical_ion(name="Er", coupling_strength=(1.0, 2.0)):
    """The ion of :func:`simple_ion` filling a cylinder of radius 4 um and height 8 um."""
    return CylindricalIon(
        name,
        energy=energy_unit(np.array([0.0, 1.0, 10.0, 11.0])),
        multiplet_energy=energy_unit(np.array([0.0, 10.0])),
        radius=4e-6,
        height=8e-6,
        coupling_strength=coupling_strength,
    )


def simple_qubit(name="Q0", frequency=1.0):
    """A qubit without loop geometry."""
    return Qubit(name, tunneling_energy=energy_unit(frequency))


def flux_qubit(name="Q0", frequency=1.0, radius=5e-6):
    """A flux qubit with a loop of the given radius."""
    return FluxQubit(name, tunneling_energy=energy_unit(frequency), radius=radius)


def simple_photon(name="P0", dim=3, frequency=1.0, magnetic_amplitude=1e-9):
    """A truncated photon mode."""
    return Photon(name, dim=dim, frequency=frequency, magnetic_amplitude=magnetic_amplitude)
