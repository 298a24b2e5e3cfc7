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
==========================
FluxQon (:mod:`fluxqon`)
==========================

.. currentmodule:: fluxqon

Interaction Hamiltonians of hybrid quantum systems made of multi-level ions, flux qubits and
photon modes.

A composite system is described by a list of :mod:`.systems` subsystems, each representing a
tensor factor of the full Hilbert space. :func:`.construct.interaction` embeds the local operators
of every pair of subsystems into the full space and sums the coupling terms selected by the
categories of the pair:

.. code-block:: python

    from fluxqon import interaction
    from fluxqon.systems import CylindricalIon, FluxQubit, Photon

    H = interaction(ion, qubit, mode, "RWA")

Pairs can be restricted with a pair markup, and the layout of the subspaces can be given
explicitly; see :func:`.construct.interaction`.
"""

from .exceptions import (
    FluxQonError,
    InvalidInputError,
    InvalidCaseError,
    UnexpectedCaseError,
    UnrecognizedInputWarning,
)
from . import constants
from .construct import interaction, hilbert_dimension, kron_embed

__version__ = "0.1.0"
