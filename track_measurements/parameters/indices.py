"""
Index enumerations naming the components of the full parameter spaces.

Each enumeration is a measurement "flavor": its length fixes the full
dimension, and its members name the full-space positions a measurement may
observe.
"""

import enum
import math


class BoundIndices(enum.IntEnum):
    """Track parameters bound to a reference surface."""

    LOC0 = 0
    LOC1 = 1
    PHI = 2
    THETA = 3
    QOVERP = 4
    TIME = 5


class FreeIndices(enum.IntEnum):
    """Track parameters in free space."""

    POS0 = 0
    POS1 = 1
    POS2 = 2
    TIME = 3
    DIR0 = 4
    DIR1 = 5
    DIR2 = 6
    QOVERP = 7


def parameters_size(indices_type: type[enum.IntEnum]) -> int:
    return len(indices_type)


BOUND_SIZE = parameters_size(BoundIndices)
FREE_SIZE = parameters_size(FreeIndices)

# Padding for fixed-length bound subspace index arrays
BOUND_SUBSPACE_INDICES_INVALID = (BOUND_SIZE,) * BOUND_SIZE

# Components living on a circle and their period, per flavor
PERIODIC_PARAMETERS: dict[type[enum.IntEnum], dict[int, float]] = {
    BoundIndices: {BoundIndices.PHI: 2 * math.pi},
    FreeIndices: {},
}
