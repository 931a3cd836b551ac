"""
Sky projections
===============

A projection maps a direction on the celestial sphere to a 2D position in
normalized device coordinates, or to ``None`` when the direction lies outside
the projection's domain (e.g. the far hemisphere of an orthographic view).

Every projection works in the camera's view frame, where the view center is
the +x axis. Subclasses only describe the view-to-clip mapping and the clip
extent covered by a given half aperture; :meth:`Projection.world_to_ndc`
chains rotation, projection and viewport scaling.

This module provides:

* the abstract :class:`Projection`;
* :class:`Orthographic` (SIN), :class:`Gnomonic` (TAN), :class:`PlateCarree`
  (CAR) and :class:`Aitoff` (AIT);
* :func:`proj`, the single call the tessellation core makes, and
  :func:`get_projection`, a lookup by short name.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from skyparallel.Camera import CameraViewPort
from skyparallel.sphere_utils import lonlat_to_unit_vector


class Projection(ABC):
    """Base class of all sky projections."""

    name: str = ""

    @abstractmethod
    def view_to_clip(self, view: np.ndarray) -> Optional[np.ndarray]:
        """
        Project a unit vector of the view frame to clip space.

        Parameters
        ----------
        view : np.ndarray
            A (3,) unit vector, +x being the view center.

        Returns
        -------
        np.ndarray or None
            A (2,) clip-space position, or None outside the domain.
        """

    @abstractmethod
    def clip_extent(self, half_aperture: float) -> float:
        """Clip-space half width covered by a half aperture in radians."""

    def world_to_ndc(self, lon: float, lat: float, camera: CameraViewPort) -> Optional[np.ndarray]:
        """
        Project a sphere coordinate to normalized device coordinates.

        Parameters
        ----------
        lon : float
            Longitude in radians, any real value.
        lat : float
            Latitude in radians.
        camera : CameraViewPort
            The camera giving the view orientation and aperture.

        Returns
        -------
        np.ndarray or None
            A (2,) position, or None if (lon, lat) is outside the domain.
        """

        view = camera.world_to_view(lonlat_to_unit_vector(lon, lat))
        clip = self.view_to_clip(view)
        if clip is None:
            return None
        return camera.clip_to_ndc(clip, self)

    def __repr__(self):
        return f"<{type(self).__name__}(name='{self.name}')>"


class Orthographic(Projection):
    """Orthographic (SIN) projection, undefined on the far hemisphere."""

    name = "sin"

    def view_to_clip(self, view):
        x, y, z = view
        if x < 0.0:
            return None
        return np.array([y, z])

    def clip_extent(self, half_aperture):
        return float(np.sin(min(half_aperture, 0.5 * np.pi)))


class Gnomonic(Projection):
    """Gnomonic (TAN) projection, defined strictly in front of the camera."""

    name = "tan"
    max_half_aperture = np.radians(85.0)

    def view_to_clip(self, view):
        x, y, z = view
        if x <= 1e-8:
            return None
        return np.array([y / x, z / x])

    def clip_extent(self, half_aperture):
        return float(np.tan(min(half_aperture, self.max_half_aperture)))


class PlateCarree(Projection):
    """Plate carrée (CAR) projection in view-frame longitude and latitude."""

    name = "car"

    def view_to_clip(self, view):
        x, y, z = view
        return np.array([np.arctan2(y, x), np.arcsin(np.clip(z, -1.0, 1.0))])

    def clip_extent(self, half_aperture):
        return float(min(half_aperture, np.pi))


class Aitoff(Projection):
    """Aitoff (AIT) all-sky projection."""

    name = "ait"

    def view_to_clip(self, view):
        x, y, z = view
        lon = np.arctan2(y, x)
        lat = np.arcsin(np.clip(z, -1.0, 1.0))

        alpha = np.arccos(np.clip(np.cos(lat) * np.cos(0.5 * lon), -1.0, 1.0))
        # np.sinc is the normalized sinc, sin(pi t) / (pi t)
        sinc_alpha = np.sinc(alpha / np.pi)
        return np.array([2.0 * np.cos(lat) * np.sin(0.5 * lon) / sinc_alpha,
                         np.sin(lat) / sinc_alpha])

    def clip_extent(self, half_aperture):
        return float(min(half_aperture, np.pi))


_PROJECTIONS = {
    cls.name: cls for cls in (Orthographic, Gnomonic, PlateCarree, Aitoff)
}


def get_projection(name: str) -> Projection:
    """
    Instantiate a projection from its short name.

    Parameters
    ----------
    name : str
        One of "sin", "tan", "car" or "ait" (case insensitive).

    Returns
    -------
    Projection
        A new projection instance.
    """

    key = name.lower()
    if key not in _PROJECTIONS:
        raise ValueError(
            f"unknown projection '{name}', expected one of {sorted(_PROJECTIONS)}"
        )
    return _PROJECTIONS[key]()


def proj(lon: float, lat: float, projection: Projection, camera: CameraViewPort) -> Optional[np.ndarray]:
    """Project (lon, lat) in radians, returning None outside the projection's domain."""
    return projection.world_to_ndc(lon, lat, camera)
