import numpy as np
import matplotlib.pyplot as plt
from skyparallel import CameraViewPort, Parallel, plot_segments

# Orthographic view: the far hemisphere is clipped at the limb
camera = CameraViewPort(center=(30.0, 20.0), aperture=180.0, width=800, height=800)

fig, ax = plt.subplots(figsize=(6, 6))
ax.set_xlim(-1.1, 1.1)
ax.set_ylim(-1.1, 1.1)
ax.set_aspect("equal")
for lat in np.arange(-80.0, 90.0, 20.0):
    parallel = Parallel(lat, camera=camera, projection="sin")
    plot_segments(parallel, ax=ax, show_vertices=True, title="Orthographic parallels")
plt.show()
