import enum
import logging

import equinox as eqx
import jax
import jax.numpy as jnp
import numpy as np
from beartype import beartype as typechecker
from jaxtyping import Array, Float, Key, jaxtyped

from track_measurements.measurement_systems import AbstractMeasurementSystem
from track_measurements.measurements import (
    VariableSizeMeasurement,
    calculate_residuals,
    make_variable_size_measurement,
)
from track_measurements.parameters import check_subspace_indices, parameters_size
from track_measurements.source_links import SourceLink

logger = logging.getLogger(__name__)


class SubspaceSensor(AbstractMeasurementSystem):
    """
    Reads a fixed subset of the full-space components, e.g. the two local
    coordinates of a pixel module or the single coordinate of a strip.
    """

    subspace_indices: tuple[enum.IntEnum, ...] = eqx.field(static=True, converter=tuple)
    covariance: Float[Array, "k k"] = eqx.field(converter=jnp.asarray)
    debug: bool = False

    def __check_init__(self):
        if not self.subspace_indices:
            raise ValueError("A sensor must read at least one component")
        size = len(self.subspace_indices)
        if self.covariance.shape != (size, size):
            raise ValueError(
                f"Covariance of shape {self.covariance.shape} "
                f"for {size} measured components"
            )
        if self.debug:
            check_subspace_indices(
                self.subspace_indices,
                parameters_size(type(self.subspace_indices[0])),
                size,
            )

    def __call__(
        self,
        state: Float[Array, "state_dim"],
        source_link: SourceLink,
        key: Key[Array, ""] | None = None,
    ) -> VariableSizeMeasurement:
        values = jnp.asarray(state)[jnp.array(self.subspace_indices)]
        if key is not None:
            values = jax.random.multivariate_normal(
                key, mean=values, cov=self.covariance
            )

        if self.debug:
            logger.debug("Read out %s for %r: %s", self.subspace_indices, source_link, values)

        return make_variable_size_measurement(
            source_link,
            np.asarray(values, dtype=float),
            np.asarray(self.covariance, dtype=float),
            *self.subspace_indices,
        )

    @jaxtyped(typechecker=typechecker)
    def log_likelihood(
        self,
        state: Float[Array, "state_dim"],
        measurement: VariableSizeMeasurement,
    ) -> Float[Array, ""]:
        """
        Returns the log likelihood of a full-space state given a measurement.
        """
        return jax.scipy.stats.multivariate_normal.logpdf(
            calculate_residuals(measurement, state),
            mean=jnp.zeros(measurement.size),
            cov=self.covariance,
        )
