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
Classification of subsystems into coupling categories.
"""

import warnings
from typing import List, Optional, Sequence

from ..exceptions import InvalidInputError, UnrecognizedInputWarning
from ..systems import Category, Subsystem


def classify(obj: Subsystem) -> Optional[Category]:
    """Return the category of ``obj``, or ``None`` if it is not recognized.

    Categories are tried in the declaration order of :class:`.Category` and the first match wins.
    """
    if not isinstance(obj, Subsystem):
        raise InvalidInputError("The input objects must be Subsystem instances.")
    for category in Category:
        if obj.category is category:
            return category
    return None


def classify_subsystems(subsystems: Sequence[Subsystem]) -> List[Optional[Category]]:
    """Classify each subsystem, warning once if any of them is not recognized."""
    categories = [classify(obj) for obj in subsystems]
    if any(category is None for category in categories):
        warnings.warn(
            "Some of the input objects do not belong to the defined classes.",
            UnrecognizedInputWarning,
            stacklevel=3,
        )
    return categories
