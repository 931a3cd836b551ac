import numpy as np
from typing import Tuple, TYPE_CHECKING
from scipy.spatial.transform import Rotation

if TYPE_CHECKING:
    from skyparallel.projections import Projection


class CameraViewPort:
    """
    A camera looking at the celestial sphere from its center.

    Parameters
    ----------
    center : Tuple[float, float], optional
        (longitude, latitude) of the view center in degrees.
    aperture : float, optional
        Angular field of view in degrees, in (0, 360].
    width : float, optional
        Viewport width in pixels.
    height : float, optional
        Viewport height in pixels.
    """

    def __init__(self,
                 center: Tuple[float, float] = (0.0, 0.0),
                 aperture: float = 180.0,
                 width: float = 1024.0,
                 height: float = 768.0
    ):
        if width <= 0 or height <= 0:
            raise ValueError("viewport width and height must be positive")
        self.width = float(width)
        self.height = float(height)

        self.set_aperture(aperture)
        self.set_center(*center)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def set_aperture(self, aperture: float) -> None:
        """
        Change the field of view.

        Parameters
        ----------
        aperture : float
            New aperture in degrees, in (0, 360].
        """

        aperture = float(aperture)
        if not 0.0 < aperture <= 360.0:
            raise ValueError("aperture must lie in (0, 360] degrees")
        self.aperture = aperture

    def set_center(self, lon: float, lat: float) -> None:
        """
        Point the camera at (lon, lat), both in degrees.

        The view frame maps the center to +x, increasing longitude to +y and
        the north pole side to +z.
        """

        if not -90.0 <= lat <= 90.0:
            raise ValueError("center latitude must lie in [-90, 90] degrees")
        self.center = (float(lon) % 360.0, float(lat))
        self._rotation = Rotation.from_euler("zy", [-lon, lat], degrees=True)

    def aperture_in_radians(self) -> float:
        return float(np.radians(self.aperture))

    def world_to_view(self, xyz: np.ndarray) -> np.ndarray:
        """
        Rotate world unit vectors into the view frame.

        Parameters
        ----------
        xyz : np.ndarray
            A (3,) or (N, 3) array of unit vectors.

        Returns
        -------
        np.ndarray
            The rotated vectors, same shape as the input.
        """

        return self._rotation.apply(xyz)

    def clip_to_ndc(self, clip: np.ndarray, projection: "Projection") -> np.ndarray:
        """
        Scale a clip-space position so that the aperture spans [-1, 1] horizontally.
        """

        extent = projection.clip_extent(0.5 * self.aperture_in_radians())
        ndc = np.asarray(clip, dtype=float) / extent
        ndc[1] *= self.aspect
        return ndc

    def __repr__(self):
        return (f"<CameraViewPort(center=({self.center[0]:.3f}, {self.center[1]:.3f}), "
                f"aperture={self.aperture:.3f})>")
