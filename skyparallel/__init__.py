from skyparallel.config import TessellationConfig, DEFAULT_CONFIG
from skyparallel.lon_utils import (
    interval_length,
    split_at_antipode,
    is_in_lon_range,
    polygon_contains
)
from skyparallel.Camera import CameraViewPort
from skyparallel.projections import (
    Projection,
    Orthographic,
    Gnomonic,
    PlateCarree,
    Aitoff,
    get_projection,
    proj
)
from skyparallel.DomainBoundary import locate_boundary, valid_sub_span
from skyparallel.Subdivider import subdivide, subdivide_multi
from skyparallel.Parallel import (
    Parallel,
    project,
    project_full_parallel,
    segments_to_array
)
from skyparallel.plotting import plot_segments, plot_segments_plotly

__all__ = [
    "TessellationConfig",
    "DEFAULT_CONFIG",
    "interval_length",
    "split_at_antipode",
    "is_in_lon_range",
    "polygon_contains",
    "CameraViewPort",
    "Projection",
    "Orthographic",
    "Gnomonic",
    "PlateCarree",
    "Aitoff",
    "get_projection",
    "proj",
    "locate_boundary",
    "valid_sub_span",
    "subdivide",
    "subdivide_multi",
    "Parallel",
    "project",
    "project_full_parallel",
    "segments_to_array",
    "plot_segments",
    "plot_segments_plotly",
]
