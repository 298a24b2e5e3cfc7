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

r"""
Coupling terms between pairs of subsystems.

Each term builder takes the subspace dimensions ``dims`` of the composite system, the positions
and subsystems of the pair, the approximation mode and the dispersion tolerance, and returns the
list of coupling terms embedded into the full space. Every term is either an operator plus its
Hermitian conjugate or a product of self-adjoint quadratures.
"""

import logging
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np
from scipy.integrate import dblquad

from ..constants import (
    DISPERSION_TOLERANCE,
    FLUX_QUANTUM,
    REDUCED_PLANCK,
    VACUUM_PERMEABILITY,
)
from ..exceptions import InvalidCaseError, UnexpectedCaseError
from ..systems import Category, CurrentLoop, Ion, Photon, Qubit, SpatialExtent
from .layout import kron_embed

logger = logging.getLogger(__name__)


def is_resonant(energy1: float, energy2: float, tolerance: float = DISPERSION_TOLERANCE) -> bool:
    """Whether two transition energies match within ``tolerance``.

    The mismatch is measured relative to the smaller energy,
    ``|energy1 - energy2| / min(energy1, energy2)``. A zero energy only matches zero.
    """
    mismatch = abs(energy1 - energy2)
    reference = min(energy1, energy2)
    if reference <= 0:
        return mismatch == 0
    return mismatch / reference <= tolerance


def ion_qubit_terms(
    dims: Sequence[int],
    n1: int,
    ion: Ion,
    n2: int,
    qubit: Qubit,
    rwa: bool = False,
    tolerance: float = DISPERSION_TOLERANCE,
) -> List[np.ndarray]:
    r"""Coupling terms between an ion and a qubit.

    The ion couples through the transitions between sublevels of the same multiplet, with one
    coupling strength per sublevel pair. Under the rotating wave approximation each pair
    contributes :math:`g (\sigma^+_{ij} a + \sigma^-_{ij} a^\dagger)`, with :math:`\sigma^+_{ij}`
    taking the lower-energy level of the pair to the higher one. Otherwise each pair
    contributes :math:`g (\sigma^+_{ij} + \sigma^-_{ij})(a + a^\dagger)`, and the dispersive
    term :math:`\sum_L k_L N_L (a + a^\dagger)` from the overlap of the qubit's field with the
    ion volume is added.

    Raises:
        InvalidCaseError: If the number of coupling strengths does not match the number of
            sublevel pairs.
        UnexpectedCaseError: If the dispersive term is needed but the ion has no
            :class:`.SpatialExtent` or the qubit has no :class:`.CurrentLoop`.
    """
    # pylint: disable=unused-argument
    g = REDUCED_PLANCK * ion.coupling_strength
    pairs = list(ion.sublevel_pairs())
    if g.size != len(pairs):
        raise InvalidCaseError(
            f"Incorrect number of elements in the coupling strength of {ion}: expected "
            f"{len(pairs)}, got {g.size}."
        )

    terms = []
    if rwa:
        energy = ion.energy
        for g_ij, (li, lj) in zip(g, pairs):
            lower, upper = (li, lj) if energy[li] <= energy[lj] else (lj, li)
            term = g_ij * kron_embed(
                dims, n1, ion.transition(lower, upper), n2, qubit.annihilation
            )
            terms.append(term + term.conj().transpose())
        return terms

    k = dispersive_strength(ion, qubit)
    quadrature = qubit.creation + qubit.annihilation
    for level in range(1, ion.dim):
        terms.append(k[level] * kron_embed(dims, n1, ion.number(level), n2, quadrature))
    for g_ij, (lower, upper) in zip(g, pairs):
        flip = ion.transition(lower, upper) + ion.transition(upper, lower)
        terms.append(g_ij * kron_embed(dims, n1, flip, n2, quadrature))
    return terms


def dispersive_strength(ion: Ion, qubit: Qubit) -> np.ndarray:
    r"""Dispersive coupling strength in J of each ion level to a qubit.

    The qubit's radial field, averaged in quadrature over the ion cylinder, gives
    :math:`k_L = \sqrt{\bar{G}} \mu_0 \Delta (E_L - E_0 - E_{M(L)}) / (4 \Phi_0)`, where
    :math:`E_{M(L)}` is the energy offset of the multiplet of level :math:`L`.
    """
    if not (isinstance(ion, SpatialExtent) and isinstance(qubit, CurrentLoop)):
        raise UnexpectedCaseError(
            "The XZ coupling strength between the qubit and the ions could not be determined."
        )
    overlap, _ = dblquad(
        lambda z, r: qubit.radial_field_factor(r, z) ** 2 * r,
        0,
        ion.radius,
        0,
        ion.height,
        epsabs=0,
        epsrel=1e-6,
    )
    k = np.sqrt(overlap / ion.height) / ion.radius
    k = k * VACUUM_PERMEABILITY * qubit.tunneling_energy / 4 / FLUX_QUANTUM
    offset = ion.energy[0] + np.repeat(ion.multiplet_energy, ion.multiplet_dim)
    return k * (ion.energy - offset)


def ion_photon_terms(
    dims: Sequence[int],
    n1: int,
    ion: Ion,
    n2: int,
    photon: Photon,
    rwa: bool = False,
    tolerance: float = DISPERSION_TOLERANCE,
) -> List[np.ndarray]:
    r"""Coupling terms between an ion and a photon mode.

    Each pair of levels whose energy gap matches the photon energy within ``tolerance`` contributes
    :math:`g_{ij} \sigma^-_{ij} a^\dagger + \mathrm{h.c.}` under the rotating wave approximation,
    with :math:`\sigma^-_{ij}` taking the upper level of the pair to the lower one, and
    :math:`|g_{ij}| (\sigma^+_{ij} + \sigma^-_{ij})(a + a^\dagger)` otherwise.

    Raises:
        InvalidCaseError: If the line strength is neither a scalar nor a square matrix over the ion
            levels.
    """
    g = REDUCED_PLANCK * ion.line_strength
    if g.size == 1:
        g = g.ravel()[0] * np.ones((ion.dim, ion.dim), dtype=complex)
    elif g.shape != (ion.dim, ion.dim):
        raise InvalidCaseError(
            f"The matrix dimension of the line strength of {ion} is expected to be equal to "
            "the number of its energy levels."
        )
    if not rwa:
        g = np.abs(g)

    energy = ion.energy
    photon_energy = photon.transition_energy
    creation = photon.creation
    quadrature = creation + photon.annihilation
    terms = []
    for li in range(ion.dim):
        for lj in range(li + 1, ion.dim):
            if not is_resonant(abs(energy[li] - energy[lj]), photon_energy, tolerance):
                logger.debug(
                    "Dropping transition %d <-> %d of %s: off resonance with %s.",
                    li,
                    lj,
                    ion,
                    photon,
                )
                continue
            if rwa:
                lower, upper = (li, lj) if energy[li] <= energy[lj] else (lj, li)
                term = g[li, lj] * kron_embed(
                    dims, n1, ion.transition(upper, lower), n2, creation
                )
                terms.append(term + term.conj().transpose())
            else:
                flip = ion.transition(li, lj) + ion.transition(lj, li)
                terms.append(g[li, lj] * kron_embed(dims, n1, flip, n2, quadrature))
    return terms


def qubit_photon_terms(
    dims: Sequence[int],
    n1: int,
    qubit: Qubit,
    n2: int,
    photon: Photon,
    rwa: bool = False,
    tolerance: float = DISPERSION_TOLERANCE,
) -> List[np.ndarray]:
    r"""Coupling terms between a qubit and a photon mode.

    The strength :math:`g = \pi A \Delta B / \Phi_0` follows from the flux the mode's magnetic
    field :math:`B` threads through the qubit loop of area :math:`A`. The term is
    :math:`|g| (a_q a^\dagger + a_q^\dagger a)` under the rotating wave approximation and
    :math:`|g| (a_q + a_q^\dagger)(a + a^\dagger)` otherwise. No term is returned if the qubit and
    the mode are off resonance.

    Raises:
        UnexpectedCaseError: If the qubit has no :class:`.CurrentLoop`.
    """
    if not is_resonant(qubit.transition_energy, photon.transition_energy, tolerance):
        logger.debug("Dropping coupling of %s to %s: off resonance.", qubit, photon)
        return []
    if not isinstance(qubit, CurrentLoop):
        raise UnexpectedCaseError(
            "The coupling strength between the qubit and the photon could not be determined."
        )

    g = abs(
        np.pi * qubit.area * qubit.tunneling_energy / FLUX_QUANTUM * photon.magnetic_amplitude
    )
    if rwa:
        term = g * kron_embed(dims, n1, qubit.annihilation, n2, photon.creation)
        return [term + term.conj().transpose()]
    return [
        g
        * kron_embed(
            dims,
            n1,
            qubit.annihilation + qubit.creation,
            n2,
            photon.annihilation + photon.creation,
        )
    ]


TermBuilder = Callable[..., List[np.ndarray]]

COUPLING_TABLE: Dict[Tuple[Category, Category], TermBuilder] = {
    (Category.ION, Category.QUBIT): ion_qubit_terms,
    (Category.ION, Category.PHOTON): ion_photon_terms,
    (Category.QUBIT, Category.PHOTON): qubit_photon_terms,
}
"""Term builders keyed by the ordered categories of the two subsystems they couple."""
