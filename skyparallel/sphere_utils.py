import numpy as np


def lonlat_to_unit_vector(lon: float, lat: float) -> np.ndarray:
    """Convert a single (lon, lat) pair in radians to a 3D unit vector."""
    cos_lat = np.cos(lat)
    return np.array([cos_lat * np.cos(lon), cos_lat * np.sin(lon), np.sin(lat)])


def det(u: np.ndarray, v: np.ndarray) -> float:
    """2D cross product of u and v."""
    return float(u[0] * v[1] - u[1] * v[0])


def angle2(u: np.ndarray, v: np.ndarray) -> float:
    """
    Signed angle in radians turning from u to v.

    Parameters
    ----------
    u : np.ndarray
        A (2,) vector.
    v : np.ndarray
        A (2,) vector.

    Returns
    -------
    float
        Angle in (-pi, pi], positive when v lies counter-clockwise of u.
    """
    return float(np.arctan2(det(u, v), np.dot(u, v)))
