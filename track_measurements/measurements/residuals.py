"""
Compare a measurement against a predicted full-space state.

The measured values are compared in the measurement's own subspace: the
prediction is projected down rather than the measurement being padded up.
"""

import jax
import jax.numpy as jnp
import jax.scipy as jsp
import numpy as np
from beartype import beartype as typechecker
from jaxtyping import Array, ArrayLike, Float, jaxtyped

from track_measurements.measurements.variable_size_measurement import VariableSizeMeasurement
from track_measurements.parameters import PERIODIC_PARAMETERS


@jax.jit
@jaxtyped(typechecker=typechecker)
def wrap_residuals(
    difference: Float[Array, "k"],
    periods: Float[Array, "k"],
) -> Float[Array, "k"]:
    """
    Wrap into [-period / 2, period / 2) where the period is nonzero.
    """
    safe_periods = jnp.where(periods > 0, periods, 1.0)
    wrapped = jnp.mod(difference + safe_periods / 2, safe_periods) - safe_periods / 2
    return jnp.where(periods > 0, wrapped, difference)


def _periods(measurement: VariableSizeMeasurement) -> Float[Array, "k"]:
    periods = PERIODIC_PARAMETERS[measurement.indices_type]
    return jnp.array([periods.get(index, 0.0) for index in measurement.subspace_indices()])


def calculate_residuals(
    measurement: VariableSizeMeasurement,
    predicted_state: Float[ArrayLike, "full_size"],
) -> Float[Array, "k"]:
    # Subtract in float64, JAX defaults to float32
    projected = np.asarray(predicted_state, dtype=np.float64)[list(measurement.subspace_indices())]
    difference = measurement.parameters() - projected
    return wrap_residuals(jnp.asarray(difference), _periods(measurement))


def innovation_covariance(
    measurement: VariableSizeMeasurement,
    predicted_covariance: Float[ArrayLike, "full_size full_size"],
) -> Float[Array, "k k"]:
    # S = V + H P H^T
    measurement_jacobian = measurement.projector()
    innovation_cov = (
        measurement.covariance()
        + measurement_jacobian @ np.asarray(predicted_covariance, dtype=np.float64) @ measurement_jacobian.T
    )
    return jnp.asarray((innovation_cov + innovation_cov.T) / 2)  # Symmetrize


def chi2(
    measurement: VariableSizeMeasurement,
    predicted_state: Float[ArrayLike, "full_size"],
    predicted_covariance: Float[ArrayLike, "full_size full_size"],
) -> Float[Array, ""]:
    residuals = calculate_residuals(measurement, predicted_state)
    innovation_cov = innovation_covariance(measurement, predicted_covariance)
    return residuals @ jsp.linalg.solve(innovation_cov, residuals, assume_a="pos")


def log_likelihood(
    measurement: VariableSizeMeasurement,
    predicted_state: Float[ArrayLike, "full_size"],
    predicted_covariance: Float[ArrayLike, "full_size full_size"],
) -> Float[Array, ""]:
    """
    log N(r; 0, S) of the residual r under the innovation covariance S.
    """
    residuals = calculate_residuals(measurement, predicted_state)
    return jsp.stats.multivariate_normal.logpdf(
        residuals,
        mean=jnp.zeros(measurement.size),
        cov=innovation_covariance(measurement, predicted_covariance),
    )
