"""
Identity tokens connecting a measurement to the detector readout that produced it.

A measurement only needs its source link to be copyable, comparable and
usable as a lookup key. The geometry object behind it is resolved elsewhere,
so no geometry reference is stored here.
"""

from collections.abc import Hashable
from typing import TypeAlias

import equinox as eqx

SourceLink: TypeAlias = Hashable


class IndexSourceLink(eqx.Module):
    """
    Points to a hit by its position in an event-level hit container.

    The geometry identifier is the encoded surface identifier the hit sits on.
    """

    geometry_id: int
    index: int

    def __lt__(self, other: "IndexSourceLink") -> bool:
        return (self.geometry_id, self.index) < (other.geometry_id, other.index)
