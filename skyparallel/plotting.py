import matplotlib.pyplot as plt
from skyparallel.Parallel import Parallel, segments_to_array
from skyparallel.Subdivider import Segment
from typing import Any, List, Optional, Union
from matplotlib.axes import Axes
import numpy as np
import plotly.graph_objects as go


def _as_segments(shape: Union[Parallel, List[Segment]]) -> List[Segment]:
    if isinstance(shape, Parallel):
        return shape.segments
    return shape


def plot_segments(
    segments: Union[Parallel, List[Segment]],
    ax: Optional[Axes] = None,
    line_color: str = "b",
    line_width: float = 1.0,
    show_vertices: bool = False,
    marker_size: float = 2.0,
    title: Optional[str] = None,
):
    """
    Plot tessellated parallel segments in normalized device coordinates with Matplotlib.

    Parameters
    ----------
    segments : Parallel or List[Segment]
        A tessellated parallel, or its list of (start, end) pairs.
    ax : matplotlib.axes.Axes, optional
        An axis to plot on. A new figure is created if None.
    line_color : str, optional
        Color of the segments, by default 'b'.
    line_width : float, optional
        Width of the segments, by default 1.0.
    show_vertices : bool, optional
        Also mark every segment endpoint.
    marker_size : float, optional
        Size of the endpoint markers.
    title : str, optional
        Axis title.

    Returns
    -------
    matplotlib.axes.Axes
        The axis used for plotting.
    """
    if ax is None:
        fig, ax = plt.subplots()
        ax.set_xlim(-1.0, 1.0)
        ax.set_ylim(-1.0, 1.0)
        ax.set_aspect("equal")
    if title is not None:
        ax.set_title(title)

    for p1, p2 in _as_segments(segments):
        ax.plot(
            [p1[0], p2[0]],
            [p1[1], p2[1]],
            linestyle="-",
            color=line_color,
            linewidth=line_width,
        )
        if show_vertices:
            ax.plot(
                [p1[0], p2[0]],
                [p1[1], p2[1]],
                linestyle="none",
                marker="o",
                color=line_color,
                markersize=marker_size,
            )
    return ax


def plot_segments_plotly(
    segments: Union[Parallel, List[Segment]],
    fig: Optional[go.Figure] = None,
    title: str = "Parallel",
    line_width: float = 1.5,
    line_color: Any = "blue",
    name: Optional[str] = None,
):
    """
    Plot tessellated parallel segments with Plotly.

    Segments are drawn as a single trace, separated by gaps so that
    disconnected pieces are not joined.

    Parameters
    ----------
    segments : Parallel or List[Segment]
        A tessellated parallel, or its list of (start, end) pairs.
    fig : plotly.graph_objects.Figure, optional
        A figure to add to. If None, a new figure is created.
    title : str, optional
        Title of a newly created figure.
    line_width : float, optional
        Width of the lines.
    line_color : Any, optional
        Color of the lines.
    name : str, optional
        Legend entry of the trace.

    Returns
    -------
    plotly.graph_objects.Figure
        The updated or newly created figure.
    """

    if fig is None:
        fig = go.Figure()
        fig.update_layout(
            title=title,
            xaxis=dict(range=[-1.0, 1.0], showgrid=False, zeroline=False),
            yaxis=dict(range=[-1.0, 1.0], showgrid=False, zeroline=False,
                       scaleanchor="x", scaleratio=1),
            margin=dict(l=0, r=0, b=0, t=30)
        )

    arr = segments_to_array(_as_segments(segments))
    # one NaN row after each segment breaks the line
    xs = np.column_stack([arr[:, 0, 0], arr[:, 1, 0], np.full(len(arr), np.nan)]).ravel()
    ys = np.column_stack([arr[:, 0, 1], arr[:, 1, 1], np.full(len(arr), np.nan)]).ravel()

    fig.add_trace(go.Scatter(
        x=xs, y=ys,
        mode="lines",
        line=dict(color=line_color, width=line_width),
        name=name,
        showlegend=name is not None
    ))
    return fig
