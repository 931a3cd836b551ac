import logging
from typing import Optional, Tuple

from skyparallel.Camera import CameraViewPort
from skyparallel.config import DEFAULT_CONFIG, TessellationConfig
from skyparallel.projections import Projection, proj

logger = logging.getLogger(__name__)


def locate_boundary(
    lat: float,
    valid_lon: float,
    invalid_lon: float,
    projection: Projection,
    camera: CameraViewPort,
    config: Optional[TessellationConfig] = None,
) -> Tuple[float, float]:
    """
    Bisect along a parallel for the edge of the projection's domain.

    Parameters
    ----------
    lat : float
        Latitude of the parallel in radians.
    valid_lon : float
        Longitude whose projection is defined.
    invalid_lon : float
        Longitude whose projection is undefined, less than π away from valid_lon
        and on the same side of any 2π shift.
    projection : Projection
        The sky projection.
    camera : CameraViewPort
        Its aperture sets the tolerance.
    config : TessellationConfig, optional
        Tunables, ``DEFAULT_CONFIG`` if None.

    Returns
    -------
    Tuple[float, float]
        The final (min, max) bracket of the last valid and last invalid
        longitudes. Its width is at most the tolerance and it contains the
        domain boundary.
    """

    config = config or DEFAULT_CONFIG
    d_alpha = camera.aperture_in_radians() * config.domain_tolerance_factor

    l_valid = valid_lon
    l_invalid = invalid_lon
    while abs(l_valid - l_invalid) > d_alpha:
        lm = (l_valid + l_invalid) * 0.5
        if proj(lm, lat, projection, camera) is not None:
            l_valid = lm
        else:
            l_invalid = lm

    logger.debug("domain boundary at lat=%.6f bracketed in [%.6f, %.6f]",
                 lat, min(l_valid, l_invalid), max(l_valid, l_invalid))

    if valid_lon > invalid_lon:
        return l_invalid, l_valid
    return l_valid, l_invalid


def valid_sub_span(
    lat: float,
    valid_lon: float,
    invalid_lon: float,
    projection: Projection,
    camera: CameraViewPort,
    config: Optional[TessellationConfig] = None,
) -> Tuple[float, float]:
    """
    Clip the span between valid_lon and invalid_lon to its projectable part.

    Both returned longitudes project to a defined position: one is the
    original valid endpoint, the other the last valid bisection bound.

    Returns
    -------
    Tuple[float, float]
        The clipped span in increasing longitude.
    """

    lo, hi = locate_boundary(lat, valid_lon, invalid_lon, projection, camera, config)
    if valid_lon > invalid_lon:
        # the valid side of the bracket is its upper bound
        return hi, valid_lon
    return valid_lon, lo
