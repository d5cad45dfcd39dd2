import enum

from jaxtyping import ArrayLike, Real

from track_measurements.measurements.variable_size_measurement import (
    VariableSizeMeasurement,
    measurement_type_for,
)
from track_measurements.source_links import SourceLink


def make_variable_size_measurement(
    source_link: SourceLink,
    parameters: Real[ArrayLike, "k"],
    covariance: Real[ArrayLike, "k k"],
    index0: enum.IntEnum,
    *tail_indices: int,
) -> VariableSizeMeasurement:
    """
    Construct a measurement of the flavor given by the type of `index0`.

    Args:
    - source_link: Connects to the underlying detector readout
    - parameters: Measured parameter values
    - covariance: Measured parameter covariance
    - index0: Required parameter index, a measurement is at least 1d
    - tail_indices: Further indices, each a member of the type of `index0` or a plain integer

    The indices must be listed in the same order as the parameters and covariance.
    """
    indices_type = type(index0)
    measurement_type = measurement_type_for(indices_type)
    for index in tail_indices:
        if isinstance(index, enum.Enum) and not isinstance(index, indices_type):
            raise TypeError(
                f"Cannot mix {type(index).__name__} index {index!r} "
                f"into a {indices_type.__name__} measurement"
            )
    subspace_indices = (index0, *(indices_type(index) for index in tail_indices))
    return measurement_type(source_link, subspace_indices, parameters, covariance)
