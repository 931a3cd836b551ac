"""
Longitude interval helpers.

All longitudes are in radians. Inputs are conventionally in [0, 2π) but the
helpers tolerate values shifted by a full turn, which the arc projector uses to
keep spans crossing the 0 meridian contiguous.
"""

from typing import Sequence, Tuple

import numpy as np

TWICE_PI = 2.0 * np.pi


def interval_length(lon1: float, lon2: float) -> float:
    """
    Forward (increasing longitude) angular distance from lon1 to lon2.

    Parameters
    ----------
    lon1 : float
        Start longitude in [0, 2π).
    lon2 : float
        End longitude in [0, 2π).

    Returns
    -------
    float
        Length in [0, 2π), wrapping through 2π when lon2 < lon1.
    """
    if lon1 > lon2:
        return lon2 + TWICE_PI - lon1
    return lon2 - lon1


def split_at_antipode(lon1: float, lon2: float) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Split a span longer than π into two halves meeting at lon1 + π.

    The midpoint is kept in [0, 2π); when lon1 + π would reach 2π the start is
    shifted down by a full turn so that the first half stays increasing.

    Parameters
    ----------
    lon1 : float
        Start longitude in [0, 2π).
    lon2 : float
        End longitude in [0, 2π).

    Returns
    -------
    Tuple[Tuple[float, float], Tuple[float, float]]
        ``((lon1, mid), (mid, lon2))``.
    """
    if lon1 + np.pi >= TWICE_PI:
        lon1 -= TWICE_PI
    lon_mid = lon1 + np.pi
    return (lon1, lon_mid), (lon_mid, lon2)


def is_in_lon_range(lon0: float, lon1: float, lon2: float) -> bool:
    """
    Check whether lon0 lies in the directed longitude interval from lon1 to lon2.

    An edge whose signed extent is at most π is read as the half-open range
    between its ends (smaller end included). A larger extent means the edge
    crosses the 0 meridian, and the complement is used instead. A point sitting
    exactly on a vertex shared by a wrapping and a non-wrapping edge is thus
    counted by exactly one of them, which keeps even/odd crossing tests right.

    Parameters
    ----------
    lon0 : float
        Longitude to test.
    lon1 : float
        Edge start longitude.
    lon2 : float
        Edge end longitude.

    Returns
    -------
    bool
        True if lon0 is inside the interval.
    """
    dlon = lon2 - lon1
    if dlon < 0.0:
        return (dlon >= -np.pi) == (lon2 <= lon0 and lon0 < lon1)
    return (dlon <= np.pi) == (lon1 <= lon0 and lon0 < lon2)


def _forward_offset(lon0: float, lon1: float, dlon: float) -> float:
    # offset of lon0 from lon1, measured in the direction of the edge
    if dlon > 0.0:
        return (lon0 - lon1) % TWICE_PI
    return -((lon1 - lon0) % TWICE_PI)


def polygon_contains(lon0: float, lat0: float, vertices: Sequence[Sequence[float]]) -> bool:
    """
    Even/odd test of a point against a closed lon/lat ring.

    Edges are treated as straight in (lon, lat) and may cross the 0 meridian.
    Rings enclosing a pole are not supported.

    Parameters
    ----------
    lon0 : float
        Longitude of the tested point in radians, in [0, 2π).
    lat0 : float
        Latitude of the tested point in radians.
    vertices : Sequence[Sequence[float]]
        An (N, 2) sequence of (lon, lat) vertices in radians. The ring is closed
        implicitly.

    Returns
    -------
    bool
        True if the point lies inside the ring.
    """
    vertices = np.asarray(vertices, dtype=float)
    inside = False
    n = len(vertices)
    for i in range(n):
        lon_a, lat_a = vertices[i]
        lon_b, lat_b = vertices[(i + 1) % n]
        if not is_in_lon_range(lon0, lon_a, lon_b):
            continue

        # unwrapped signed extent of the edge
        dlon = lon_b - lon_a
        if dlon > np.pi:
            dlon -= TWICE_PI
        elif dlon < -np.pi:
            dlon += TWICE_PI

        t = _forward_offset(lon0, lon_a, dlon) / dlon
        lat_edge = lat_a + t * (lat_b - lat_a)
        if lat0 < lat_edge:
            inside = not inside
    return inside
