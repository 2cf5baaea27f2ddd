"""
Frame-rate independent orientation smoothing.

The smoothing rate is calibrated as the fraction of the remaining angle closed
per 1/60 s tick; blend_factor rescales it to the actual tick duration so the
effective half-life does not depend on the consumer's frame rate.
"""

import numpy as np
from scipy.spatial.transform import Rotation as R
from scipy.spatial.transform import Slerp

from .quat_utils import as_quat, quat_normalize

REFERENCE_TICK_HZ = 60.0


class SmootherState:
    """Last emitted orientation for one consumer target."""

    def __init__(self):
        self.current = None

    @property
    def seeded(self):
        return self.current is not None

    def reset(self):
        self.current = None


def blend_factor(dt, lerp_rate):
    """
    Per-tick blend factor: alpha = 1 - (1 - lerp_rate) ** (dt * 60).

    Args:
        dt: Elapsed time since the previous step in seconds (negative -> 0)
        lerp_rate: Fraction closed per 1/60 s tick, in [0, 1]

    Returns:
        alpha in [0, 1]
    """
    lerp_rate = min(1.0, max(0.0, float(lerp_rate)))
    if lerp_rate >= 1.0:
        return 1.0
    dt = max(0.0, float(dt))
    alpha = 1.0 - (1.0 - lerp_rate) ** (dt * REFERENCE_TICK_HZ)
    return min(1.0, max(0.0, alpha))


def quat_slerp(q0, q1, alpha):
    """
    Spherical interpolation along the shortest arc (x, y, z, w format).

    Endpoints are returned as exact copies of the inputs.
    """
    q0 = as_quat(q0)
    q1 = as_quat(q1)
    if alpha <= 0.0:
        return q0.copy()
    if alpha >= 1.0:
        return q1.copy()
    key_rots = R.from_quat(np.vstack([quat_normalize(q0), quat_normalize(q1)]))
    return Slerp([0.0, 1.0], key_rots)([alpha]).as_quat()[0]


def smooth_step(state, target, dt, lerp_rate):
    """
    Advance a SmootherState towards target and return the emitted orientation.

    The first call for a fresh state seeds it with target unchanged.

    Args:
        state: SmootherState to update in place
        target: Mapped target quaternion (x, y, z, w)
        dt: Seconds since the previous step
        lerp_rate: Smoothing rate in [0, 1]

    Returns:
        The new state.current (x, y, z, w)
    """
    target = as_quat(target)
    if state.current is None:
        state.current = target.copy()
        return state.current
    state.current = quat_slerp(state.current, target, blend_factor(dt, lerp_rate))
    return state.current
