from track_measurements.parameters.indices import (
    BoundIndices as BoundIndices,
    FreeIndices as FreeIndices,
    BOUND_SIZE as BOUND_SIZE,
    FREE_SIZE as FREE_SIZE,
    BOUND_SUBSPACE_INDICES_INVALID as BOUND_SUBSPACE_INDICES_INVALID,
    PERIODIC_PARAMETERS as PERIODIC_PARAMETERS,
    parameters_size as parameters_size,
)

from track_measurements.parameters.subspace import (
    projector as projector,
    expander as expander,
    check_subspace_indices as check_subspace_indices,
)
