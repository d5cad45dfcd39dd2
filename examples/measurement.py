"""
This file shows how to build and read measurements.
"""

import numpy as np

from track_measurements.measurements import make_variable_size_measurement
from track_measurements.parameters import BoundIndices
from track_measurements.source_links import IndexSourceLink

# A measurement observes a few components of a full parameter space
# Here a strip module measures loc1 and the module also records a time stamp
# The source link tells us which readout the measurement came from
source_link = IndexSourceLink(geometry_id=0x1200000000000, index=17)

measurement = make_variable_size_measurement(
    source_link,
    np.array([3.0, -2.0]),
    np.array([[1.0, 0.0], [0.0, 4.0]]),
    BoundIndices.LOC1,
    BoundIndices.TIME,
)

# The compact representation only has as many entries as were measured
print(f"{measurement.size=}")
print(f"{measurement.subspace_indices()=}")
print(f"{measurement.parameters()=}")

# When the dimension is known, ask for it and it gets checked
print(f"{measurement.covariance(2)=}")

# Both views point into the same storage, so writes show up everywhere
measurement.parameters()[0] = 3.5
print(f"{measurement.parameters(2)=}")

# To compare against a full-space state, scatter into the full space
print(f"{measurement.full_parameters()=}")
print(f"{measurement.full_covariance()=}")

print(f"{measurement.contains(BoundIndices.TIME)=}")
print(f"{measurement.index_of(BoundIndices.TIME)=}")
