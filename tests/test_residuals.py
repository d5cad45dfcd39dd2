import jax.numpy as jnp
import jax.scipy as jsp
import numpy as np

from track_measurements.measurements import (
    calculate_residuals,
    chi2,
    innovation_covariance,
    log_likelihood,
    make_variable_size_measurement,
)
from track_measurements.parameters import BoundIndices, FreeIndices


def test_residuals_in_measured_subspace() -> None:
    measurement = make_variable_size_measurement(
        "readout", np.array([3.0, -2.0]), np.diag([1.0, 4.0]), BoundIndices.LOC1, BoundIndices.QOVERP
    )
    predicted_state = jnp.array([9.0, 2.5, 0.0, 1.0, -1.0, 7.0])

    residuals = calculate_residuals(measurement, predicted_state)

    np.testing.assert_allclose(residuals, [0.5, -1.0], rtol=1e-6)


def test_residual_matches_full_space_difference_on_measured_components() -> None:
    measurement = make_variable_size_measurement(
        "readout", np.array([1.0, 2.0]), np.eye(2), BoundIndices.LOC0, BoundIndices.TIME
    )
    predicted_state = np.array([0.5, 3.0, 0.1, 1.0, 0.2, 1.5])

    full_difference = measurement.full_parameters() - measurement.expander() @ measurement.projector() @ predicted_state

    np.testing.assert_allclose(
        calculate_residuals(measurement, predicted_state),
        full_difference[list(measurement.subspace_indices())],
        rtol=1e-6,
    )


def test_phi_residual_wraps_around() -> None:
    measurement = make_variable_size_measurement(
        "readout", np.array([np.pi - 0.1, 0.2]), np.eye(2), BoundIndices.PHI, BoundIndices.THETA
    )
    predicted_state = np.array([0.0, 0.0, -np.pi + 0.1, 0.1, 0.0, 0.0])

    residuals = calculate_residuals(measurement, predicted_state)

    np.testing.assert_allclose(residuals, [-0.2, 0.1], atol=1e-5)


def test_chi2_and_log_likelihood() -> None:
    measurement = make_variable_size_measurement(
        "readout", np.array([1.0, -1.0]), np.diag([1.0, 2.0]), BoundIndices.LOC0, BoundIndices.LOC1
    )
    predicted_state = np.zeros(6)
    predicted_covariance = np.diag([1.0, 2.0, 1.0, 1.0, 1.0, 1.0])

    innovation_cov = innovation_covariance(measurement, predicted_covariance)
    np.testing.assert_allclose(innovation_cov, np.diag([2.0, 4.0]), rtol=1e-6)

    # 1 / 2 + 1 / 4
    np.testing.assert_allclose(chi2(measurement, predicted_state, predicted_covariance), 0.75, rtol=1e-5)

    expected = jsp.stats.multivariate_normal.logpdf(
        jnp.array([1.0, -1.0]), mean=jnp.zeros(2), cov=jnp.diag(jnp.array([2.0, 4.0]))
    )
    np.testing.assert_allclose(
        log_likelihood(measurement, predicted_state, predicted_covariance), expected, rtol=1e-5
    )


def test_free_components_do_not_wrap() -> None:
    measurement = make_variable_size_measurement(
        "readout", np.array([4.0]), np.eye(1), FreeIndices.POS2
    )
    predicted_state = np.array([0.0, 0.0, -3.0, 0.0, 0.0, 0.0, 0.0, 0.0])

    np.testing.assert_allclose(calculate_residuals(measurement, predicted_state), [7.0], rtol=1e-6)


def test_residuals_keep_precision_for_large_values() -> None:
    measurement = make_variable_size_measurement(
        "readout", np.array([1e6 + 0.01]), np.eye(1), BoundIndices.TIME
    )
    predicted_state = np.array([0.0, 0.0, 0.0, 0.0, 0.0, 1e6])

    np.testing.assert_allclose(calculate_residuals(measurement, predicted_state), [0.01], rtol=1e-5)
    np.testing.assert_allclose(chi2(measurement, predicted_state, np.eye(6)), 0.01**2 / 2, rtol=1e-4)
