"""
Adaptive subdivision of a parallel arc.

A span of longitude is cut into a few seed intervals, then each seed is
refined recursively: the two ends and the midpoint are projected and the
turn angle and length balance of the two halves decide whether to emit
segments or to split further.
"""

from typing import List, Optional, Tuple

import numpy as np

from skyparallel.Camera import CameraViewPort
from skyparallel.config import DEFAULT_CONFIG, TessellationConfig
from skyparallel.projections import Projection, proj
from skyparallel.sphere_utils import angle2, det

Segment = Tuple[np.ndarray, np.ndarray]


def subdivide_multi(
    segments: List[Segment],
    lat: float,
    lon_s: float,
    lon_e: float,
    camera: CameraViewPort,
    projection: Projection,
    config: Optional[TessellationConfig] = None,
) -> None:
    """
    Refine [lon_s, lon_e] from several equal seed intervals.

    Seeding avoids mistaking an arc that is globally curved but nearly
    straight between its two ends for a straight line.

    Parameters
    ----------
    segments : List[Segment]
        Output list, appended to in increasing longitude.
    lat : float
        Latitude of the parallel in radians.
    lon_s : float
        Start longitude in radians.
    lon_e : float
        End longitude in radians, lon_e >= lon_s.
    camera : CameraViewPort
        Camera passed through to the projection.
    projection : Projection
        The sky projection.
    config : TessellationConfig, optional
        Tunables, ``DEFAULT_CONFIG`` if None.
    """

    config = config or DEFAULT_CONFIG
    num_seeds = config.num_seed_intervals
    dlon = (lon_e - lon_s) / num_seeds
    for i in range(num_seeds):
        lon1 = lon_s + i * dlon
        lon2 = lon1 + dlon
        subdivide(segments, lat, lon1, lon2, camera, projection, 0, config)


def subdivide(
    segments: List[Segment],
    lat: float,
    lon1: float,
    lon2: float,
    camera: CameraViewPort,
    projection: Projection,
    depth: int = 0,
    config: Optional[TessellationConfig] = None,
) -> None:
    """
    Recursively tessellate [lon1, lon2] at latitude lat.

    Nothing is emitted past ``config.max_iteration`` levels or when one of
    the three sampled points falls outside the projection's domain.

    Parameters
    ----------
    segments : List[Segment]
        Output list of (start, end) device-space pairs.
    lat : float
        Latitude in radians.
    lon1 : float
        Start longitude in radians.
    lon2 : float
        End longitude in radians.
    camera : CameraViewPort
        Camera passed through to the projection.
    projection : Projection
        The sky projection.
    depth : int
        Current recursion depth.
    config : TessellationConfig, optional
        Tunables, ``DEFAULT_CONFIG`` if None.
    """

    config = config or DEFAULT_CONFIG
    if depth >= config.max_iteration:
        return

    lon0 = (lon1 + lon2) * 0.5
    p1 = proj(lon1, lat, projection, camera)
    pm = proj(lon0, lat, projection, camera)
    p2 = proj(lon2, lat, projection, camera)
    if p1 is None or pm is None or p2 is None:
        return

    ab = pm - p1
    bc = p2 - pm
    ab_l = float(np.dot(ab, ab))
    bc_l = float(np.dot(bc, bc))

    # degenerate halves, e.g. a parallel collapsed onto a pole
    if ab_l == 0.0 or bc_l == 0.0:
        if ab_l != bc_l:
            segments.append((p1, p2))
        return

    ab = ab / np.sqrt(ab_l)
    bc = bc / np.sqrt(bc_l)
    theta = angle2(ab, bc)

    if abs(theta) < config.max_angle_before_subdivision:
        if abs(det(ab, bc)) < config.colinearity_threshold:
            segments.append((p1, p2))
        else:
            segments.append((p1, pm))
            segments.append((pm, p2))
    elif min(ab_l, bc_l) / max(ab_l, bc_l) < config.length_ratio_threshold:
        # foreshortened: emit the half on the short side, drop the other
        if ab_l < bc_l:
            segments.append((p1, pm))
        else:
            segments.append((pm, p2))
    else:
        subdivide(segments, lat, lon1, lon0, camera, projection, depth + 1, config)
        subdivide(segments, lat, lon0, lon2, camera, projection, depth + 1, config)
