"""
This file shows how to read out measurements from a simulated state and score predictions.
"""

import jax
import jax.numpy as jnp

from track_measurements.measurement_systems import SubspaceSensor
from track_measurements.measurements import chi2, measurement_lookup
from track_measurements.parameters import BoundIndices
from track_measurements.source_links import IndexSourceLink

# A pixel module measures both local coordinates
pixel = SubspaceSensor(
    subspace_indices=(BoundIndices.LOC0, BoundIndices.LOC1),
    covariance=jnp.diag(jnp.array([0.01**2, 0.05**2])),
)

true_state = jnp.array([1.0, -2.0, 0.3, 1.2, 0.5, 10.0])

# Read out a few hits on two surfaces, splitting keys as usual
key = jax.random.key(0)
measurements = []
for index, geometry_id in enumerate([100, 200, 100]):
    key, subkey = jax.random.split(key)
    measurements.append(pixel(true_state, IndexSourceLink(geometry_id, index), subkey))

# A filter on surface 100 looks up the measurements recorded there
lookup = measurement_lookup(measurements, key=lambda link: link.geometry_id)
predicted_state = true_state.at[0].add(0.005)
predicted_covariance = jnp.eye(6) * 1e-4

for position in lookup[100]:
    measurement = measurements[position]
    print(measurement.source_link, chi2(measurement, predicted_state, predicted_covariance))
