"""
Orientation processing utilities.

This module provides:
    - quat_utils: Quaternion math utilities (x, y, z, w format)
    - orientation_mapper: Device-to-consumer axis presets and front/back flip
    - smoother: Frame-rate independent spherical smoothing
"""

from .quat_utils import quat_mul, quat_normalize, quat_angle
from .orientation_mapper import MappingPreset, map_orientation, apply_preset, FLIP_FRONT_BACK
from .smoother import SmootherState, smooth_step, blend_factor, quat_slerp

__all__ = [
    "quat_mul",
    "quat_normalize",
    "quat_angle",
    "MappingPreset",
    "map_orientation",
    "apply_preset",
    "FLIP_FRONT_BACK",
    "SmootherState",
    "smooth_step",
    "blend_factor",
    "quat_slerp",
]
