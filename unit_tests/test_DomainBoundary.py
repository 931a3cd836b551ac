import numpy as np
import pytest
from skyparallel.Camera import CameraViewPort
from skyparallel.config import TessellationConfig
from skyparallel.DomainBoundary import locate_boundary, valid_sub_span
from skyparallel.projections import Projection, Orthographic, proj


class StepProjection(Projection):
    """Maps (lon, lat) straight to the plane, defined on one side of a longitude."""

    def __init__(self, limit, defined_below=True):
        self.limit = limit
        self.defined_below = defined_below

    def view_to_clip(self, view):
        return view[1:]

    def clip_extent(self, half_aperture):
        return 1.0

    def world_to_ndc(self, lon, lat, camera):
        inside = lon < self.limit if self.defined_below else lon > self.limit
        return np.array([lon, lat]) if inside else None


def test_bracket_contains_boundary_within_tolerance():
    camera = CameraViewPort(aperture=60.0)
    projection = StepProjection(1.0)
    tol = camera.aperture_in_radians() * 0.02

    lo, hi = locate_boundary(0.0, 0.2, 1.5, projection, camera)
    assert hi - lo <= tol
    assert lo <= 1.0 <= hi
    assert proj(lo, 0.0, projection, camera) is not None
    assert proj(hi, 0.0, projection, camera) is None


def test_bracket_with_valid_side_above():
    camera = CameraViewPort(aperture=60.0)
    projection = StepProjection(1.0, defined_below=False)
    tol = camera.aperture_in_radians() * 0.02

    lo, hi = locate_boundary(0.0, 1.8, 0.5, projection, camera)
    assert lo < hi
    assert hi - lo <= tol
    assert lo <= 1.0 <= hi
    assert proj(hi, 0.0, projection, camera) is not None


def test_tolerance_follows_aperture():
    projection = StepProjection(1.0)
    wide = CameraViewPort(aperture=180.0)
    narrow = CameraViewPort(aperture=5.0)

    lo, hi = locate_boundary(0.0, 0.2, 1.5, projection, narrow)
    assert hi - lo <= narrow.aperture_in_radians() * 0.02

    lo_w, hi_w = locate_boundary(0.0, 0.2, 1.5, projection, wide)
    assert hi_w - lo_w <= wide.aperture_in_radians() * 0.02
    assert hi - lo <= hi_w - lo_w


def test_tolerance_factor_from_config():
    camera = CameraViewPort(aperture=60.0)
    config = TessellationConfig(domain_tolerance_factor=0.001)
    lo, hi = locate_boundary(0.0, 0.2, 1.5, StepProjection(1.0), camera, config)
    assert hi - lo <= camera.aperture_in_radians() * 0.001


def test_valid_sub_span_keeps_valid_endpoint():
    camera = CameraViewPort(aperture=60.0)
    tol = camera.aperture_in_radians() * 0.02

    lon_s, lon_e = valid_sub_span(0.0, 0.2, 1.5, StepProjection(1.0), camera)
    assert lon_s == 0.2
    assert 1.0 - tol <= lon_e < 1.0

    lon_s, lon_e = valid_sub_span(0.0, 1.8, 0.5, StepProjection(1.0, defined_below=False), camera)
    assert lon_e == 1.8
    assert 1.0 < lon_s <= 1.0 + tol


def test_orthographic_limb():
    camera = CameraViewPort(center=(0.0, 0.0), aperture=180.0)
    projection = Orthographic()
    lo, hi = locate_boundary(0.0, 0.0, 2.5, projection, camera)
    assert lo <= 0.5 * np.pi <= hi
    assert hi - lo <= np.pi * 0.02
