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
Subsystem-local operator matrices.
"""

import numpy as np

from ..exceptions import InvalidInputError


def annihilation(dim: int) -> np.ndarray:
    r"""Annihilation operator.

    Defined as the matrix with non-zero entries :math:`1, \sqrt{2}, ..., \sqrt{n - 1}` in the
    first off-diagonal, where :math:`n` is ``dim``.
    """
    return np.diag(np.sqrt(np.arange(1, dim, dtype=complex)), 1)


def creation(dim: int) -> np.ndarray:
    r"""Creation operator.

    Defined as the matrix with non-zero entries :math:`1, \sqrt{2}, ..., \sqrt{n - 1}` in the
    first lower off-diagonal, where :math:`n` is ``dim``.
    """
    return np.diag(np.sqrt(np.arange(1, dim, dtype=complex)), -1)


def number(dim: int) -> np.ndarray:
    """The number operator, the diagonal matrix with entries ``[0, ..., dim - 1]``."""
    return np.diag(np.arange(dim, dtype=complex))


def identity(dim: int) -> np.ndarray:
    """The identity operator."""
    return np.eye(dim, dtype=complex)


def transition(dim: int, level_from: int, level_to: int) -> np.ndarray:
    r"""The transition operator :math:`|j\rangle\langle i|` taking level ``i = level_from`` to
    level ``j = level_to``.

    Levels are 0-based. ``transition(dim, i, i)`` is the projector onto level ``i``.
    """
    for level in (level_from, level_to):
        if not 0 <= level < dim:
            raise InvalidInputError(f"Level {level} out of range for dimension {dim}.")
    op = np.zeros((dim, dim), dtype=complex)
    op[level_to, level_from] = 1.0
    return op


def projector(dim: int, level: int) -> np.ndarray:
    r"""The projector :math:`|i\rangle\langle i|` onto level ``i``."""
    return transition(dim, level, level)
