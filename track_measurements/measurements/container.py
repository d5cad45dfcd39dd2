"""
Event-level collections of measurements.

In contrast to their source links, measurements are not orderable. A
container keeps them in insertion order and nothing may rely on that order.
"""

import logging
from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable
from typing import TypeAlias

from track_measurements.measurements.variable_size_measurement import (
    Measurement,
    VariableSizeMeasurement,
)
from track_measurements.source_links import SourceLink

logger = logging.getLogger(__name__)

MeasurementContainer: TypeAlias = list[Measurement]


def measurement_lookup(
    measurements: Iterable[VariableSizeMeasurement],
    key: Callable[[SourceLink], Hashable] | None = None,
) -> dict[Hashable, list[int]]:
    """
    Positions of the measurements in the container, grouped by source link.

    `key` maps a source link to the lookup key, e.g. its geometry identifier,
    so that measurements on an already resolved surface can be found.
    """
    lookup: defaultdict[Hashable, list[int]] = defaultdict(list)
    for position, measurement in enumerate(measurements):
        link = measurement.source_link
        lookup[link if key is None else key(link)].append(position)
    logger.debug("Grouped measurements under %d keys", len(lookup))
    return dict(lookup)
