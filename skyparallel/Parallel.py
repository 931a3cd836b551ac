"""
Parallel module
===============

A *parallel* is a circle of constant latitude on the celestial sphere. Drawing
one on screen under a sky projection is harder than it looks: the projection
may be singular or undefined over part of the sphere (the far hemisphere of an
orthographic view, the horizon of a gnomonic one), longitude spans wrap around
2π, and a curve that bends sharply near a projection's limb needs many more
vertices than one crossing the middle of the view.

This module provides:

* :func:`project`, which turns a latitude and a longitude span into a list of
  device-space segments. Spans longer than half a turn are split at the
  antipode of their start; spans with an endpoint outside the projection's
  domain are clipped to the domain boundary by bisection; what remains is
  refined adaptively by :mod:`skyparallel.Subdivider`;
* :func:`project_full_parallel` for a whole circle of latitude;
* the high-level :class:`Parallel` class, which takes degrees, builds its
  segments once and exposes vertices and continuity checks.

All calls are pure: the same inputs always give the same segments, and
independent parallels can be tessellated concurrently.
"""

import logging
from typing import List, Optional, Tuple, Union

import numpy as np

from skyparallel.Camera import CameraViewPort
from skyparallel.config import DEFAULT_CONFIG, TessellationConfig
from skyparallel.DomainBoundary import valid_sub_span
from skyparallel.lon_utils import TWICE_PI, interval_length, split_at_antipode
from skyparallel.projections import Projection, get_projection, proj
from skyparallel.Subdivider import Segment, subdivide_multi

logger = logging.getLogger(__name__)


def project(
    lat: float,
    lon1: float,
    lon2: float,
    camera: CameraViewPort,
    projection: Projection,
    config: Optional[TessellationConfig] = None,
) -> List[Segment]:
    """
    Tessellate the parallel arc at lat going east from lon1 to lon2.

    Parameters
    ----------
    lat : float
        Latitude in radians, in [-π/2, π/2].
    lon1 : float
        Start longitude in radians, in [0, 2π).
    lon2 : float
        End longitude in radians, in [0, 2π). The arc runs through increasing
        longitude and wraps through 0 when lon2 < lon1.
    camera : CameraViewPort
        The current camera.
    projection : Projection
        The sky projection. At least one of the two endpoints is expected to be
        inside its domain; otherwise nothing is drawn for the span.
    config : TessellationConfig, optional
        Tunables, ``DEFAULT_CONFIG`` if None.

    Returns
    -------
    List[Segment]
        Ordered (start, end) pairs of (2,) device-space positions.
    """

    config = config or DEFAULT_CONFIG
    if not np.all(np.isfinite([lat, lon1, lon2])):
        raise ValueError("latitude and longitudes must be finite")
    if not -0.5 * np.pi <= lat <= 0.5 * np.pi:
        raise ValueError("latitude must lie in [-π/2, π/2]")

    segments: List[Segment] = []
    _project_span(segments, lat, lon1, lon2, camera, projection, config, 0)
    return segments


def _project_span(
    segments: List[Segment],
    lat: float,
    lon1: float,
    lon2: float,
    camera: CameraViewPort,
    projection: Projection,
    config: TessellationConfig,
    splits: int,
) -> None:
    lon_len = interval_length(lon1, lon2)
    if lon_len == 0.0:
        return

    if lon_len > np.pi + config.antipodal_slack:
        if splits < config.max_antipodal_splits:
            first_half, second_half = split_at_antipode(lon1, lon2)
            _project_span(segments, lat, *first_half, camera, projection, config, splits + 1)
            _project_span(segments, lat, *second_half, camera, projection, config, splits + 1)
            return

        logger.warning(
            "span [%.9f, %.9f] still longer than π after %d antipodal splits, clamping",
            lon1, lon2, splits
        )
        lon_len = np.pi

    lon2 = lon1 + lon_len
    # crossing the 0 meridian, keep the span contiguous below it
    if lon2 > TWICE_PI:
        lon1 -= TWICE_PI
        lon2 -= TWICE_PI

    v1 = proj(lon1, lat, projection, camera)
    v2 = proj(lon2, lat, projection, camera)

    if v1 is not None and v2 is not None:
        subdivide_multi(segments, lat, lon1, lon2, camera, projection, config)
    elif v2 is not None:
        lon_s, lon_e = valid_sub_span(lat, lon2, lon1, projection, camera, config)
        subdivide_multi(segments, lat, lon_s, lon_e, camera, projection, config)
    elif v1 is not None:
        lon_s, lon_e = valid_sub_span(lat, lon1, lon2, projection, camera, config)
        subdivide_multi(segments, lat, lon_s, lon_e, camera, projection, config)
    else:
        logger.debug("span [%.6f, %.6f] at lat=%.6f has no projectable endpoint",
                     lon1, lon2, lat)


def project_full_parallel(
    lat: float,
    camera: CameraViewPort,
    projection: Projection,
    config: Optional[TessellationConfig] = None,
) -> List[Segment]:
    """
    Tessellate the whole circle of latitude lat (radians) as two half turns.

    The circle is cut at the camera's center longitude, where the parallel
    comes closest to the view center, and at its antipode. Whenever part of
    the parallel is visible under an azimuthal projection, each half then has
    a projectable endpoint.
    """
    lon_c = float(np.radians(camera.center[0])) % TWICE_PI
    lon_a = (lon_c + np.pi) % TWICE_PI
    return (project(lat, lon_c, lon_a, camera, projection, config)
            + project(lat, lon_a, lon_c, camera, projection, config))


def segments_to_array(segments: List[Segment]) -> np.ndarray:
    """Stack segments into an (N, 2, 2) array."""
    if not segments:
        return np.empty((0, 2, 2))
    return np.array([[start, end] for start, end in segments], dtype=float)


class Parallel:
    """
    A tessellated circle of latitude, or an arc of one.

    Parameters
    ----------
    lat : float
        Latitude in degrees, in [-90, 90].
    lon_range : Tuple[float, float], optional
        (start, end) longitudes in degrees. The arc runs east from start to
        end; a range spanning 360 degrees or more draws the whole circle.
    camera : CameraViewPort, optional
        The camera, a default 180 degree view centered on (0, 0) if None.
    projection : str or Projection, optional
        A projection instance or its short name ("sin", "tan", "car", "ait").
    config : TessellationConfig, optional
        Tunables, ``DEFAULT_CONFIG`` if None.
    """

    def __init__(self,
                 lat: float,
                 lon_range: Tuple[float, float] = (0.0, 360.0),
                 camera: Optional[CameraViewPort] = None,
                 projection: Union[str, Projection] = "sin",
                 config: Optional[TessellationConfig] = None
    ):
        if not -90.0 <= lat <= 90.0:
            raise ValueError("latitude must lie in [-90, 90] degrees")
        self.lat = float(lat)
        self.lon_range = (float(lon_range[0]), float(lon_range[1]))
        self.camera = camera if camera is not None else CameraViewPort()
        if isinstance(projection, str):
            projection = get_projection(projection)
        self.projection = projection
        self.config = config or DEFAULT_CONFIG

        self.segments: List[Segment] = []

        # build once
        self.rebuild()

    @property
    def is_full_circle(self) -> bool:
        return self.lon_range[1] - self.lon_range[0] >= 360.0

    def rebuild(self) -> None:
        """Recompute the segments, e.g. after the camera moved."""
        lat = float(np.radians(self.lat))
        if self.is_full_circle:
            self.segments = project_full_parallel(lat, self.camera, self.projection, self.config)
        else:
            lon1 = float(np.radians(self.lon_range[0] % 360.0))
            lon2 = float(np.radians(self.lon_range[1] % 360.0))
            self.segments = project(lat, lon1, lon2, self.camera, self.projection, self.config)

    @property
    def is_empty(self) -> bool:
        return len(self.segments) == 0

    @property
    def vertices(self) -> np.ndarray:
        """
        Return the segment endpoints in drawing order.

        Returns
        -------
        np.ndarray
            A (2N, 2) array, start and end of each segment in turn.
        """

        return segments_to_array(self.segments).reshape(-1, 2)

    def to_array(self) -> np.ndarray:
        return segments_to_array(self.segments)

    def is_continuous(self, tol: float = 1e-9) -> bool:
        """
        Check that every segment starts where the previous one ended.

        Parameters
        ----------
        tol : float
            Maximum distance in device space between joined endpoints.

        Returns
        -------
        bool
            True if the segments form a single unbroken polyline.
        """

        arr = self.to_array()
        if len(arr) < 2:
            return True
        gaps = np.linalg.norm(arr[1:, 0] - arr[:-1, 1], axis=1)
        return bool(np.all(gaps <= tol))

    def __len__(self):
        return len(self.segments)

    def __repr__(self):
        return (f"<Parallel(lat={self.lat}, lon_range={self.lon_range}, "
                f"projection='{self.projection.name}', n_segments={len(self.segments)})>")
