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
Exceptions raised while assembling interaction Hamiltonians.
"""

from qiskit import QiskitError


class FluxQonError(QiskitError):
    """Base class for errors raised by fluxqon."""


class InvalidInputError(FluxQonError):
    """An argument has the wrong type, shape or range."""


class InvalidCaseError(FluxQonError):
    """The arguments are well-formed but describe a case that is not allowed, e.g. a
    self-interaction or a parameter vector of the wrong length."""


class UnexpectedCaseError(FluxQonError):
    """A coupling formula needs a physical quantity the given subsystems cannot supply."""


class UnrecognizedInputWarning(UserWarning):
    """Some subsystems do not belong to any of the defined categories."""
