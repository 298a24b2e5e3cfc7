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

"""
Physical constants and default parameters.
"""

from scipy import constants as _constants

REDUCED_PLANCK = _constants.hbar
"""Reduced Planck constant in J s."""

VACUUM_PERMEABILITY = _constants.mu_0
"""Vacuum permeability in H / m."""

FLUX_QUANTUM = _constants.physical_constants["mag. flux quantum"][0]
"""Magnetic flux quantum h / 2e in Wb."""

DISPERSION_TOLERANCE = 1000.0
"""Default upper bound on ``|dE1 - dE2| / min(dE1, dE2)`` for a coupling term between two
transitions to be kept."""
