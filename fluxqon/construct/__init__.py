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
==========================================
Construct (:mod:`fluxqon.construct`)
==========================================

.. currentmodule:: fluxqon.construct

Assembly of interaction Hamiltonians for composite systems built from :mod:`fluxqon.systems`
subsystems.

The main entry point is :func:`interaction`, which sums the coupling terms between pairs of
subsystems, embedded into the tensor product space of all subsystems:

.. code-block:: python

    H = interaction(ion, qubit, mode)
    H, d = interaction([4, 2, 5], 1, ion, 3, mode, "RWA", return_dims=True)

The coupling formula for a pair is chosen from :data:`COUPLING_TABLE` by the categories of the two
subsystems.

Functions
=========

.. autosummary::
   :toctree: ../stubs/

   interaction
   hilbert_dimension
   kron_embed
   classify
   resolve_pair
   is_resonant
"""

from .layout import hilbert_dimension, total_dimension, kron_embed
from .classify import classify, classify_subsystems
from .couplings import (
    COUPLING_TABLE,
    is_resonant,
    ion_qubit_terms,
    ion_photon_terms,
    qubit_photon_terms,
)
from .interaction import PairResolution, full_mesh, validate_markup, resolve_pair, interaction
