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
Interaction Hamiltonian of a composite system.
"""

import logging
from dataclasses import dataclass
from itertools import combinations
from numbers import Integral, Real
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..constants import DISPERSION_TOLERANCE
from ..exceptions import InvalidCaseError, InvalidInputError
from ..systems import Category, Subsystem
from .classify import classify_subsystems
from .couplings import COUPLING_TABLE, TermBuilder
from .layout import hilbert_dimension, total_dimension

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairResolution:
    """A pair of subsystems matched to a term builder.

    ``first`` and ``second`` are 0-based indices into the subsystem list, in the order the
    builder expects them.
    """

    builder: TermBuilder
    first: int
    second: int
    swapped: bool = False


def full_mesh(num: int) -> np.ndarray:
    """Markup of all pairs of ``num`` subsystems, as an ``(M, 2)`` array of 1-based indices."""
    return np.array(list(combinations(range(1, num + 1), 2)), dtype=int).reshape(-1, 2)


def validate_markup(pairs: Union[np.ndarray, Sequence[Sequence[int]]], num: int) -> np.ndarray:
    """Validate a pair markup for ``num`` subsystems.

    Args:
        pairs: Array-like of shape ``(M, 2)`` whose rows are pairs of 1-based subsystem indices.
        num: Number of subsystems.
    Returns:
        The markup as an integer array of shape ``(M, 2)``.
    Raises:
        InvalidInputError: If the markup is not an integer matrix with two columns, or an index is
            not between 1 and ``num``.
        InvalidCaseError: If a pair couples a subsystem to itself.
    """
    markup = np.asarray(pairs)
    if markup.size == 0:
        return np.empty((0, 2), dtype=int)
    if not np.issubdtype(markup.dtype, np.integer):
        raise InvalidInputError("The interaction markup matrix must contain integers.")
    if markup.ndim != 2 or markup.shape[1] != 2:
        raise InvalidInputError("Input to the interaction markup matrix must have two columns.")
    if np.any((markup < 1) | (markup > num)):
        raise InvalidInputError(
            "The elements in the interaction markup matrix must be an integer between 1 and the "
            "number of objects."
        )
    if np.any(markup[:, 0] == markup[:, 1]):
        raise InvalidCaseError("Self-interaction is not allowed.")
    return markup.astype(int)


def resolve_pair(
    categories: Sequence[Optional[Category]], i: int, j: int
) -> Optional[PairResolution]:
    """Find the term builder for the subsystems at 0-based indices ``i`` and ``j``.

    The pair is looked up in :data:`.COUPLING_TABLE` as given, then with the order swapped.
    Returns ``None`` if either subsystem is unrecognized or neither order is tabulated.
    """
    if categories[i] is None or categories[j] is None:
        return None
    for first, second in ((i, j), (j, i)):
        builder = COUPLING_TABLE.get((categories[first], categories[second]))
        if builder is not None:
            return PairResolution(builder, first, second, swapped=first != i)
    return None


def interaction(
    *args,
    pairs: Optional[Union[np.ndarray, Sequence[Sequence[int]]]] = None,
    rwa: bool = False,
    dispersion_tolerance: float = DISPERSION_TOLERANCE,
    return_dims: bool = False,
) -> Union[np.ndarray, int, Tuple[Union[np.ndarray, int], List[int]]]:
    """Construct the interaction Hamiltonian of a composite system.

    The positional arguments take one of the forms

    - ``interaction(obj1, obj2, ..., objN)``: the subspaces are laid out in the order of the
      subsystems, with dimensions given by their Hilbert dimensions.
    - ``interaction(d, n1, obj1, n2, obj2, ..., nN, objN)``: the subspace dimensions are given by
      the integer vector ``d`` and ``obj_i`` sits at the 1-based position ``n_i``.

    Either form can be followed by a pair markup, an integer matrix of shape ``(M, 2)`` whose rows
    are pairs of 1-based indices into the subsystem list, and then by the option ``"RWA"`` to use
    the rotating wave approximation. By default all pairs of subsystems interact.

    The coupling formula for each pair is chosen by the categories of the two subsystems. Pairs with
    no defined formula, or involving an unrecognized subsystem, contribute nothing.

    Args:
        args: Subsystems, optionally with layout, markup and option, as described above.
        pairs: Pair markup, as an alternative to passing it positionally.
        rwa: Use the rotating wave approximation.
        dispersion_tolerance: Largest relative mismatch between two transition energies for the
            term coupling them to be kept.
        return_dims: Also return the list of subspace dimensions.
    Returns:
        The Hamiltonian in J as a square array of side ``prod(d)``. An empty markup gives the zero
        matrix of that size. With fewer than two subsystems the Hamiltonian is ``0`` and ``d`` is
        the given layout, or ``[1]`` if none was given. If ``return_dims`` is ``True``, the tuple
        ``(H, d)``.
    Raises:
        InvalidInputError: If the arguments are malformed.
        InvalidCaseError: If a self-interaction is requested or a coupling parameter has the wrong
            size.
        UnexpectedCaseError: If a coupling strength cannot be determined for a pair.
    """
    dims, positions, subsystems, markup, rwa, explicit = _parse_arguments(args, pairs, rwa)

    if not isinstance(dispersion_tolerance, Real) or dispersion_tolerance < 0:
        raise InvalidInputError("The dispersion tolerance must be a non-negative real number.")

    if markup is not None:
        markup = validate_markup(markup, len(subsystems))

    if len(subsystems) < 2:
        if not explicit:
            dims = [1]
        return (0, dims) if return_dims else 0

    if markup is None:
        markup = full_mesh(len(subsystems))

    categories = classify_subsystems(subsystems)

    resolutions = []
    for i, j in markup - 1:
        resolution = resolve_pair(categories, int(i), int(j))
        if resolution is None:
            logger.debug(
                "No interaction defined between %s and %s.", subsystems[i], subsystems[j]
            )
            continue
        resolutions.append(resolution)

    dim = total_dimension(dims)
    hamiltonian = np.zeros((dim, dim), dtype=complex)
    for resolution in resolutions:
        first, second = resolution.first, resolution.second
        terms = resolution.builder(
            dims,
            positions[first],
            subsystems[first],
            positions[second],
            subsystems[second],
            rwa=rwa,
            tolerance=dispersion_tolerance,
        )
        for term in terms:
            hamiltonian += term

    if return_dims:
        return hamiltonian, dims
    return hamiltonian


def _parse_arguments(args, pairs, rwa):
    """Split the positional arguments of :func:`interaction` into the subspace dimensions, the
    1-based positions, the subsystems, the pair markup, the RWA flag and whether the layout was
    given explicitly."""
    args = list(args)

    if args and isinstance(args[-1], str):
        if args[-1].upper() != "RWA":
            raise InvalidInputError(f"Invalid option specifier '{args[-1]}'.")
        rwa = True
        args.pop()

    # a scalar in last place is a misplaced position, not a markup
    if len(args) > 1 and not isinstance(args[-1], Subsystem) and np.ndim(args[-1]) > 0:
        if pairs is not None:
            raise InvalidInputError("The pair markup was given both positionally and by keyword.")
        pairs = args.pop()

    explicit = bool(args) and not isinstance(args[0], Subsystem)
    if explicit:
        dims = _validate_dims(args[0])
        if len(args) % 2 != 1:
            raise InvalidInputError("Incorrect number of input arguments.")
        positions = args[1::2]
        subsystems = args[2::2]
        if any(
            isinstance(n, bool) or not isinstance(n, Integral) or n < 1 for n in positions
        ):
            raise InvalidInputError(
                "Input to the subspace indices must be a positive integer scalar."
            )
        positions = [int(n) for n in positions]
        if any(n > len(dims) for n in positions):
            raise InvalidInputError("Subspace index exceeds the number of subspaces.")
        if len(set(positions)) != len(positions):
            raise InvalidInputError("Each subsystem must occupy a distinct subspace.")
        for n, obj_dim in zip(positions, hilbert_dimension(*subsystems)):
            if dims[n - 1] != obj_dim:
                raise InvalidInputError(
                    f"Subspace {n} has dimension {dims[n - 1]} but its subsystem has "
                    f"dimension {obj_dim}."
                )
    else:
        subsystems = args
        dims = hilbert_dimension(*subsystems)
        positions = list(range(1, len(subsystems) + 1))

    return dims, positions, subsystems, pairs, bool(rwa), explicit


def _validate_dims(d) -> List[int]:
    """Validate the vector of subspace dimensions."""
    d = np.atleast_1d(np.asarray(d))
    if d.ndim != 1 or not np.issubdtype(d.dtype, np.integer) or np.any(d < 1):
        raise InvalidInputError(
            "Input to the subspace dimensions must be a positive integer vector."
        )
    return [int(x) for x in d]
