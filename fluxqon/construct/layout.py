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
Hilbert-space layout of a composite system and embedding of local operators.
"""

from functools import reduce
from typing import List, Optional, Sequence

import numpy as np

from ..exceptions import InvalidInputError
from ..systems import Subsystem
from ..systems.subsystem_operators import identity


def hilbert_dimension(*subsystems: Subsystem) -> List[int]:
    """Return the Hilbert dimension of each subsystem, in order."""
    if any(not isinstance(s, Subsystem) for s in subsystems):
        raise InvalidInputError("The input objects must be Subsystem instances.")
    return [s.dim for s in subsystems]


def total_dimension(dims: Sequence[int]) -> int:
    """Dimension of the tensor product space with subspace dimensions ``dims``."""
    return int(np.prod(dims, dtype=np.int64))


def kron_embed(
    dims: Sequence[int],
    n1: int,
    op1: np.ndarray,
    n2: Optional[int] = None,
    op2: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Embed one or two local operators into the tensor product space with subspace dimensions
    ``dims``, acting as the identity on all other factors.

    Positions are 1-based and follow the order of ``dims``, position 1 being the left-most
    Kronecker factor.

    Args:
        dims: Subspace dimensions.
        n1: Position of ``op1``.
        op1: Operator on subspace ``n1``.
        n2: Position of ``op2``.
        op2: Operator on subspace ``n2``.
    Returns:
        The operator on the full space as a square array of side ``prod(dims)``.
    Raises:
        InvalidInputError: If a position is out of range, the positions coincide, or an operator
            does not match the dimension of its subspace.
    """
    placed = {n1: op1}
    if n2 is not None:
        if n2 == n1:
            raise InvalidInputError("Cannot place two operators on the same subspace.")
        placed[n2] = op2

    for n, op in placed.items():
        if not 1 <= n <= len(dims):
            raise InvalidInputError(f"Subspace index {n} out of range 1..{len(dims)}.")
        op = np.asarray(op)
        if op.shape != (dims[n - 1], dims[n - 1]):
            raise InvalidInputError(
                f"Operator of shape {op.shape} does not match subspace {n} of dimension "
                f"{dims[n - 1]}."
            )

    factors = [
        np.asarray(placed[k], dtype=complex) if k in placed else identity(d)
        for k, d in enumerate(dims, start=1)
    ]
    return reduce(np.kron, factors)
