import abc

import equinox as eqx
from jaxtyping import Array, Float, Key

from track_measurements.measurements import VariableSizeMeasurement
from track_measurements.source_links import SourceLink


class AbstractMeasurementSystem(eqx.Module):
    covariance: eqx.AbstractVar[Array]

    @abc.abstractmethod
    def __call__(
        self,
        state: Float[Array, "state_dim"],
        source_link: SourceLink,
        key: Key[Array, ""] | None = None,
    ) -> VariableSizeMeasurement:
        """
        Read out a measurement of a full-space state, potentially with noise.

        Args:
        - state: The full-space state of the system to measure
        - source_link: Identifies the readout the measurement comes from
        - key: The optional random key to generate noise
        """
        raise NotImplementedError
