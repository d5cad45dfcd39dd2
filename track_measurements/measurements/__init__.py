from track_measurements.measurements.variable_size_measurement import (
    VariableSizeMeasurement as VariableSizeMeasurement,
    BoundVariableMeasurement as BoundVariableMeasurement,
    FreeVariableMeasurement as FreeVariableMeasurement,
    Measurement as Measurement,
    measurement_type_for as measurement_type_for,
)

from track_measurements.measurements.factory import (
    make_variable_size_measurement as make_variable_size_measurement,
)

from track_measurements.measurements.container import (
    MeasurementContainer as MeasurementContainer,
    measurement_lookup as measurement_lookup,
)

from track_measurements.measurements.residuals import (
    calculate_residuals as calculate_residuals,
    innovation_covariance as innovation_covariance,
    chi2 as chi2,
    log_likelihood as log_likelihood,
)
