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
========================================
Systems (:mod:`fluxqon.systems`)
========================================

.. currentmodule:: fluxqon.systems

Subsystems that can be combined into a composite system. Each :class:`Subsystem` represents a
finite-dimensional tensor factor with an energy spectrum and a set of local operators, and carries
a :class:`Category` telling :func:`fluxqon.construct.interaction` which coupling formulas apply.

.. code-block:: python

    qubit = FluxQubit("Q0", tunneling_energy=hbar * 2 * np.pi * 5e9, radius=1e-6)
    mode = Photon("P0", dim=5, frequency=2 * np.pi * 5e9, magnetic_amplitude=1e-9)

Geometric properties that only some formulas need are provided by the :class:`SpatialExtent`
and :class:`CurrentLoop` capabilities.

Subsystem classes
=================

.. autosummary::
   :toctree: ../stubs/

   Subsystem
   LadderSubsystem
   Category
   SpatialExtent
   CurrentLoop
   Ion
   CylindricalIon
   Qubit
   FluxQubit
   Photon
"""

from .subsystem import Category, Subsystem, LadderSubsystem, SpatialExtent, CurrentLoop
from .ion import Ion, CylindricalIon
from .qubit import Qubit, FluxQubit
from .photon import Photon
