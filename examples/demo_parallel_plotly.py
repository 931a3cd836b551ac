import numpy as np
from skyparallel import CameraViewPort, Parallel, TessellationConfig, plot_segments_plotly

# All-sky Aitoff view, coarse and fine tessellation side by side
camera = CameraViewPort(center=(0.0, 0.0), aperture=360.0, width=1000, height=500)
fine = TessellationConfig.from_degrees(5.0, max_iteration=6)

fig = None
for lat in np.arange(-75.0, 90.0, 15.0):
    fig = plot_segments_plotly(Parallel(lat, camera=camera, projection="ait"), fig=fig,
                               title="Aitoff parallels", line_color="blue")
    fig = plot_segments_plotly(Parallel(lat, camera=camera, projection="ait", config=fine),
                               fig=fig, line_color="red", line_width=0.5)
fig.show()
