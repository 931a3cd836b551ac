import matplotlib
matplotlib.use("Agg")

import numpy as np
import plotly.graph_objects as go
import pytest
from skyparallel.Camera import CameraViewPort
from skyparallel.Parallel import Parallel
from skyparallel.plotting import plot_segments, plot_segments_plotly


def make_parallel():
    camera = CameraViewPort(aperture=180.0, width=512, height=512)
    return Parallel(30.0, camera=camera, projection="sin")


def test_plot_segments_draws_one_line_per_segment():
    parallel = make_parallel()
    ax = plot_segments(parallel, title="lat 30")
    assert len(ax.lines) == len(parallel)
    assert ax.get_title() == "lat 30"


def test_plot_segments_with_vertices_on_existing_axis():
    import matplotlib.pyplot as plt
    parallel = make_parallel()
    fig, ax = plt.subplots()
    returned = plot_segments(parallel.segments, ax=ax, show_vertices=True)
    assert returned is ax
    assert len(ax.lines) == 2 * len(parallel)
    plt.close(fig)


def test_plot_segments_plotly_single_trace():
    parallel = make_parallel()
    fig = plot_segments_plotly(parallel, name="lat 30")
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    assert len(fig.data[0].x) == 3 * len(parallel)
    assert np.isnan(fig.data[0].x[2])

    fig = plot_segments_plotly(parallel.segments, fig=fig)
    assert len(fig.data) == 2
