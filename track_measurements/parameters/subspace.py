"""
Helpers relating a subspace (a list of full-space indices) to the full space.
"""

from collections.abc import Sequence

import numpy as np
from beartype import beartype as typechecker
from jaxtyping import Float, jaxtyped


@jaxtyped(typechecker=typechecker)
def projector(
    subspace_indices: Sequence[int],
    full_size: int,
) -> Float[np.ndarray, "k {full_size}"]:
    """
    The matrix H with H @ full_vector == full_vector[subspace_indices].
    """
    result = np.zeros((len(subspace_indices), full_size))
    result[np.arange(len(subspace_indices)), list(subspace_indices)] = 1.0
    return result


def expander(subspace_indices: Sequence[int], full_size: int) -> Float[np.ndarray, "full_size k"]:
    """
    Scatters a subspace vector into the full space, the transpose of `projector`.
    """
    return projector(subspace_indices, full_size).T


def check_subspace_indices(
    subspace_indices: Sequence[int],
    full_size: int,
    subspace_size: int | None = None,
) -> None:
    """
    Validate a subspace index list.

    Measurements trust their caller to pass unique, in-range indices matching
    the parameter and covariance layout. This check is opt-in for callers
    that want to verify that before building one.
    """
    count = len(subspace_indices)
    if not 1 <= count <= full_size:
        raise ValueError(f"Expected between 1 and {full_size} indices, got {count}")
    if subspace_size is not None and count != subspace_size:
        raise ValueError(f"Expected {subspace_size} indices, got {count}")
    for index in subspace_indices:
        if not 0 <= int(index) < full_size:
            raise ValueError(f"Index {int(index)} is outside [0, {full_size})")
    if len(set(int(index) for index in subspace_indices)) != count:
        raise ValueError(f"Duplicate subspace indices in {tuple(int(i) for i in subspace_indices)}")
