import numpy as np
import pytest

from track_measurements.parameters import (
    BOUND_SIZE,
    PERIODIC_PARAMETERS,
    BoundIndices,
    FreeIndices,
    check_subspace_indices,
    expander,
    parameters_size,
    projector,
)


def test_parameters_size() -> None:
    assert parameters_size(BoundIndices) == 6
    assert parameters_size(FreeIndices) == 8


def test_projector_selects_components() -> None:
    matrix = projector((BoundIndices.THETA, BoundIndices.LOC0), BOUND_SIZE)

    assert matrix.shape == (2, 6)
    np.testing.assert_array_equal(matrix @ np.arange(6.0), [3.0, 0.0])
    np.testing.assert_array_equal(expander((3, 0), BOUND_SIZE), matrix.T)


def test_only_phi_is_periodic() -> None:
    assert PERIODIC_PARAMETERS[BoundIndices] == {BoundIndices.PHI: 2 * np.pi}
    assert PERIODIC_PARAMETERS[FreeIndices] == {}


def test_check_subspace_indices_accepts_valid_lists() -> None:
    check_subspace_indices((BoundIndices.LOC0, BoundIndices.LOC1), BOUND_SIZE)
    check_subspace_indices((4, 0, 2), BOUND_SIZE, 3)
    check_subspace_indices(tuple(FreeIndices), parameters_size(FreeIndices))


@pytest.mark.parametrize(
    "indices, subspace_size",
    [
        ((), None),
        ((0, 0), None),
        ((0, 6), None),
        ((-1,), None),
        (tuple(range(7)), None),
        ((0, 1), 3),
    ],
)
def test_check_subspace_indices_rejects(indices, subspace_size) -> None:
    with pytest.raises(ValueError):
        check_subspace_indices(indices, BOUND_SIZE, subspace_size)
