import numpy as np
import pytest
from skyparallel.Camera import CameraViewPort
from skyparallel.config import TessellationConfig
from skyparallel.projections import Projection, Aitoff, Orthographic
from skyparallel.Subdivider import subdivide, subdivide_multi


class FunctionProjection(Projection):
    """Projection given by a plain function of (lon, lat)."""

    def __init__(self, func):
        self.func = func

    def view_to_clip(self, view):
        return view[1:]

    def clip_extent(self, half_aperture):
        return 1.0

    def world_to_ndc(self, lon, lat, camera):
        p = self.func(lon, lat)
        return None if p is None else np.asarray(p, dtype=float)


LINEAR = FunctionProjection(lambda lon, lat: (lon, lat))
# V shape with its tip at lon = 0.5
V_SHAPE = FunctionProjection(lambda lon, lat: (lon, 2.0 * abs(lon - 0.5)))


def parabola(c):
    return FunctionProjection(lambda lon, lat: (lon, c * lon ** 2))


@pytest.fixture
def camera():
    return CameraViewPort(aperture=180.0)


def test_straight_span_collapses_to_one_segment(camera):
    segments = []
    subdivide(segments, 0.3, 0.0, 1.0, camera, LINEAR)
    assert len(segments) == 1
    p1, p2 = segments[0]
    assert np.allclose(p1, [0.0, 0.3])
    assert np.allclose(p2, [1.0, 0.3])


def test_slight_bend_keeps_midpoint(camera):
    segments = []
    subdivide(segments, 0.0, 0.0, 1.0, camera, parabola(0.1))
    assert len(segments) == 2
    assert np.allclose(segments[0][0], [0.0, 0.0])
    assert np.allclose(segments[0][1], [0.5, 0.025])
    assert np.allclose(segments[1][0], [0.5, 0.025])
    assert np.allclose(segments[1][1], [1.0, 0.1])


def test_negligible_bend_drops_midpoint(camera):
    segments = []
    subdivide(segments, 0.0, 0.0, 1.0, camera, parabola(0.001))
    assert len(segments) == 1


def test_sharp_bend_recurses(camera):
    segments = []
    subdivide(segments, 0.0, 0.0, 1.0, camera, V_SHAPE)
    assert len(segments) == 2
    assert np.allclose(segments[0][0], [0.0, 1.0])
    assert np.allclose(segments[0][1], [0.5, 0.0])
    assert np.allclose(segments[1][0], [0.5, 0.0])
    assert np.allclose(segments[1][1], [1.0, 1.0])


def test_disparate_lengths_emit_a_single_half(camera):
    projection = FunctionProjection(
        lambda lon, lat: (0.2 * min(lon, 0.5), 2.0 * max(lon - 0.5, 0.0))
    )
    segments = []
    subdivide(segments, 0.0, 0.0, 1.0, camera, projection)
    assert len(segments) == 1
    p1, p2 = segments[0]
    assert np.allclose(p1, [0.0, 0.0])
    assert np.allclose(p2, [0.1, 0.0])


def test_depth_limit_emits_nothing(camera):
    segments = []
    subdivide(segments, 0.0, 0.0, 1.0, camera, LINEAR, depth=4)
    assert segments == []

    # the V needs one level of recursion
    config = TessellationConfig(max_iteration=1)
    subdivide(segments, 0.0, 0.0, 1.0, camera, V_SHAPE, config=config)
    assert segments == []


def test_undefined_sample_drops_span(camera):
    hole = FunctionProjection(lambda lon, lat: None if 0.4 < lon < 0.6 else (lon, lat))
    segments = []
    subdivide(segments, 0.0, 0.0, 1.0, camera, hole)
    assert segments == []


def test_zero_length_projection_emits_nothing(camera):
    point = FunctionProjection(lambda lon, lat: (0.25, 0.25))
    segments = []
    subdivide(segments, 0.0, 0.0, 1.0, camera, point)
    assert segments == []


@pytest.mark.parametrize("func", [
    lambda lon, lat: (2.0 * max(lon - 0.5, 0.0), 0.0),
    lambda lon, lat: (2.0 * min(lon, 0.5), 0.0),
])
def test_one_zero_length_half_emits_whole_span(camera, func):
    segments = []
    subdivide(segments, 0.0, 0.0, 1.0, camera, FunctionProjection(func))
    assert len(segments) == 1
    p1, p2 = segments[0]
    assert np.allclose(p1, [0.0, 0.0])
    assert np.allclose(p2, [1.0, 0.0])


def test_parallel_on_pole_stays_on_pole(camera):
    segments = []
    subdivide_multi(segments, 0.5 * np.pi, 0.0, 1.0, camera, Orthographic())
    for p1, p2 in segments:
        assert np.allclose(p1, p2, atol=1e-12)


def test_subdivide_multi_seeds(camera):
    segments = []
    subdivide_multi(segments, 0.0, 0.0, 1.0, camera, LINEAR)
    assert len(segments) == 5
    starts = np.array([s[0][0] for s in segments])
    assert np.allclose(starts, [0.0, 0.2, 0.4, 0.6, 0.8])
    for (_, end), (start, _) in zip(segments[:-1], segments[1:]):
        assert np.allclose(end, start)

    segments = []
    subdivide_multi(segments, 0.0, 0.0, 1.0, camera, LINEAR,
                    config=TessellationConfig(num_seed_intervals=3))
    assert len(segments) == 3


def test_subdivide_multi_bounded_output():
    camera = CameraViewPort(aperture=360.0)
    for lat in np.radians([-80.0, -30.0, 0.0, 45.0, 85.0]):
        segments = []
        subdivide_multi(segments, lat, 0.1, 0.1 + np.pi, camera, Aitoff())
        assert 0 < len(segments) <= 5 * 2 ** 4
        for p1, p2 in segments:
            assert np.all(np.isfinite(p1)) and np.all(np.isfinite(p2))


def test_segments_appended_after_existing(camera):
    segments = [(np.zeros(2), np.ones(2))]
    subdivide(segments, 0.0, 0.0, 1.0, camera, LINEAR)
    assert len(segments) == 2
    assert np.allclose(segments[0][1], [1.0, 1.0])
