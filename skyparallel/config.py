"""
Tunable thresholds of the parallel tessellation.

The defaults reproduce the behaviour tuned for a typical display density.
Pass a custom :class:`TessellationConfig` to any of the tessellation entry
points to trade vertex count against smoothness.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class TessellationConfig:
    """
    Thresholds used by the arc projector, the boundary locator and the subdivider.

    Attributes
    ----------
    max_angle_before_subdivision : float
        Turn angle in radians below which three projected points are considered
        nearly collinear, 12 degrees by default.
    max_iteration : int
        Maximum recursion depth of the subdivider for one seed interval.
    length_ratio_threshold : float
        Squared-length ratio of the two halves below which a single half is
        emitted and the span is not refined further.
    colinearity_threshold : float
        Bound on the cross product of the unit directions under which the
        midpoint is dropped and a single segment is emitted.
    domain_tolerance_factor : float
        Fraction of the camera aperture used as the bisection tolerance of the
        domain boundary locator.
    num_seed_intervals : int
        Number of equal seed intervals an arc is cut into before refinement.
    antipodal_slack : float
        Slack added to pi when deciding whether a span must be split at its
        antipode.
    max_antipodal_splits : int
        Maximum nesting of antipodal splits for one call.
    """

    max_angle_before_subdivision: float = float(np.radians(12.0))
    max_iteration: int = 4
    length_ratio_threshold: float = 0.1
    colinearity_threshold: float = 1e-2
    domain_tolerance_factor: float = 0.02
    num_seed_intervals: int = 5
    antipodal_slack: float = 1e-6
    max_antipodal_splits: int = 2

    def __post_init__(self):
        if not 0.0 < self.max_angle_before_subdivision < np.pi:
            raise ValueError("max_angle_before_subdivision must lie in (0, pi)")
        if self.max_iteration < 1:
            raise ValueError("max_iteration must be ≥ 1")
        if not 0.0 < self.length_ratio_threshold < 1.0:
            raise ValueError("length_ratio_threshold must lie in (0, 1)")
        if self.colinearity_threshold <= 0.0:
            raise ValueError("colinearity_threshold must be positive")
        if not 0.0 < self.domain_tolerance_factor < 1.0:
            raise ValueError("domain_tolerance_factor must lie in (0, 1)")
        if self.num_seed_intervals < 1:
            raise ValueError("num_seed_intervals must be ≥ 1")
        if self.antipodal_slack < 0.0:
            raise ValueError("antipodal_slack must be non-negative")
        if self.max_antipodal_splits < 1:
            raise ValueError("max_antipodal_splits must be ≥ 1")

    @classmethod
    def from_degrees(cls, max_angle_before_subdivision: float = 12.0, **kwargs) -> "TessellationConfig":
        """Build a config giving the collinearity angle in degrees."""
        return cls(max_angle_before_subdivision=float(np.radians(max_angle_before_subdivision)), **kwargs)


DEFAULT_CONFIG = TessellationConfig()
