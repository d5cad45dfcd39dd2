from track_measurements.source_links.source_link import (
    SourceLink as SourceLink,
    IndexSourceLink as IndexSourceLink,
)
