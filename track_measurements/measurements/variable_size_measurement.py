"""
A measurement of a variable-size subspace of a full parameter space.

The measurement intentionally does not store a reference to the geometry
object (surface or volume) it was recorded on. That object is identified
through the source link, and every consumer (e.g. a Kalman filter stepping
through surfaces) already holds it before looking up the measurements on it.
Storing it would also force either a variant type or a base-class reference,
since the geometry object differs between parameter flavors.

Storage has fixed capacity: `full_size` parameter slots and `full_size**2`
covariance slots, of which only the leading `size` and `size x size` regions
are meaningful. All accessors hand out views into that storage.
"""

import enum
from collections.abc import Sequence
from typing import ClassVar, SupportsIndex

import equinox as eqx
import jax
import numpy as np
from beartype import beartype as typechecker
from jaxtyping import ArrayLike, Float, Real, jaxtyped

from track_measurements.parameters import (
    BOUND_SIZE,
    BOUND_SUBSPACE_INDICES_INVALID,
    FREE_SIZE,
    BoundIndices,
    FreeIndices,
    expander,
    projector,
)
from track_measurements.source_links import SourceLink


class VariableSizeMeasurement(eqx.Module):
    """
    Base class of all measurement flavors.

    A flavor sets `indices_type`, the index enumeration of its full parameter
    space, and `full_size`, the length of that enumeration.

    The subspace indices must be unique and listed in the same order as the
    parameters and covariance. This is not validated here, see
    `track_measurements.parameters.check_subspace_indices`.
    """

    indices_type: eqx.AbstractClassVar[type[enum.IntEnum]]
    full_size: eqx.AbstractClassVar[int]

    source_link: SourceLink = eqx.field(static=True)
    _subspace_indices: tuple[int, ...] = eqx.field(static=True)
    _params: Float[np.ndarray, "full_size"]
    _cov: Float[np.ndarray, "full_size_squared"]

    @jaxtyped(typechecker=typechecker)
    def __init__(
        self,
        source_link: SourceLink,
        subspace_indices: Sequence[SupportsIndex],
        parameters: Real[ArrayLike, "k"],
        covariance: Real[ArrayLike, "k k"],
    ):
        """
        Args:
        - source_link: Connects to the underlying detector readout
        - subspace_indices: Which full-space parameters are measured
        - parameters: Measured parameter values
        - covariance: Measured parameter covariance
        """
        if len(subspace_indices) != np.shape(parameters)[0]:
            raise TypeError(
                f"Got {len(subspace_indices)} subspace indices "
                f"for {np.shape(parameters)[0]} parameters"
            )
        size = len(subspace_indices)
        if not 1 <= size <= self.full_size:
            raise TypeError(
                f"Measurement size must be in [1, {self.full_size}], got {size}"
            )

        self.source_link = source_link
        self._subspace_indices = tuple(int(index) for index in subspace_indices)
        self._params = np.zeros(self.full_size)
        self._cov = np.zeros(self.full_size * self.full_size)

        self._params[:size] = np.asarray(parameters)
        self._cov[: size * size] = np.asarray(covariance).reshape(-1)

    @property
    def size(self) -> int:
        return len(self._subspace_indices)

    def __len__(self) -> int:
        return self.size

    def contains(self, index: int) -> bool:
        """
        Check if a specific full-space parameter is part of this measurement.
        """
        return int(index) in self._subspace_indices

    def index_of(self, index: int) -> int:
        """
        Local slot holding a full-space parameter. It must be contained.
        """
        assert self.contains(index), f"{index!r} is not measured by {self._subspace_indices}"
        return self._subspace_indices.index(int(index))

    def subspace_indices(self, dim: int | None = None) -> tuple[int, ...]:
        if dim is not None:
            assert dim == self.size, f"Requested dimension {dim} of a {self.size}d measurement"
        return self._subspace_indices

    def parameters(self, dim: int | None = None) -> Float[np.ndarray, "size"]:
        """
        Writable view of the measured values.

        Pass `dim` when the dimension is known up front, it must equal `size`.
        """
        if dim is not None:
            assert dim == self.size, f"Requested dimension {dim} of a {self.size}d measurement"
        return self._params[: self.size]

    def covariance(self, dim: int | None = None) -> Float[np.ndarray, "size size"]:
        """
        Writable view of the measured covariance, see `parameters`.
        """
        if dim is not None:
            assert dim == self.size, f"Requested dimension {dim} of a {self.size}d measurement"
        return self._cov[: self.size * self.size].reshape(self.size, self.size)

    def full_parameters(self) -> Float[np.ndarray, "full_size"]:
        """
        The measured values placed at their full-space positions, zero elsewhere.
        """
        result = np.zeros(self.full_size)
        result[list(self._subspace_indices)] = self.parameters()
        return result

    def full_covariance(self) -> Float[np.ndarray, "full_size full_size"]:
        """
        The measured covariance placed on the measured rows and columns, zero elsewhere.
        """
        indices = list(self._subspace_indices)
        result = np.zeros((self.full_size, self.full_size))
        result[np.ix_(indices, indices)] = self.covariance()
        return result

    def projector(self) -> Float[np.ndarray, "size full_size"]:
        return projector(self._subspace_indices, self.full_size)

    def expander(self) -> Float[np.ndarray, "full_size size"]:
        return expander(self._subspace_indices, self.full_size)

    def copy(self) -> "VariableSizeMeasurement":
        """
        An independent measurement with the same identity, shape and values.
        """
        return jax.tree_util.tree_map(np.copy, self)


class BoundVariableMeasurement(VariableSizeMeasurement):
    """
    Holds all possible measurements of bound track parameters.
    """

    indices_type: ClassVar[type[enum.IntEnum]] = BoundIndices
    full_size: ClassVar[int] = BOUND_SIZE

    def bound_subset_indices(self) -> tuple[int, ...]:
        """
        The subspace indices padded to the full bound size with an invalid marker.
        """
        return self._subspace_indices + BOUND_SUBSPACE_INDICES_INVALID[self.size :]


class FreeVariableMeasurement(VariableSizeMeasurement):
    """
    Holds all possible measurements of free track parameters.
    """

    indices_type: ClassVar[type[enum.IntEnum]] = FreeIndices
    full_size: ClassVar[int] = FREE_SIZE


# Variable measurement type that can contain all possible combinations
Measurement = BoundVariableMeasurement

_MEASUREMENT_TYPES: dict[type[enum.IntEnum], type[VariableSizeMeasurement]] = {
    BoundIndices: BoundVariableMeasurement,
    FreeIndices: FreeVariableMeasurement,
}


def measurement_type_for(indices_type: type[enum.IntEnum]) -> type[VariableSizeMeasurement]:
    try:
        return _MEASUREMENT_TYPES[indices_type]
    except KeyError:
        raise TypeError(f"No measurement flavor for index type {indices_type!r}") from None
