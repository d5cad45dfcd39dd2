from track_measurements.measurement_systems.measurement_system_abc import (
    AbstractMeasurementSystem as AbstractMeasurementSystem,
)

from track_measurements.measurement_systems.subspace_sensor import (
    SubspaceSensor as SubspaceSensor,
)
