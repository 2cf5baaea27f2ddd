"""
Orientation mapping from device axes to the consumer's coordinate convention.

The presets are fixed component-level reflections/permutations of the raw
device quaternion (x, y, z, w). They are applied exactly as listed and are
never renormalized.
"""

from enum import Enum

import numpy as np

from .quat_utils import as_quat, quat_mul


class MappingPreset(str, Enum):
    """Axis mapping preset selected in the configuration."""

    A = "A"  # flip Z
    B = "B"  # swap Y/Z + flip
    C = "C"  # flip X

    @classmethod
    def parse(cls, value):
        """
        Parse a preset from "A", "a", "PresetA" or an existing MappingPreset.

        Raises:
            ValueError: If the value names no known preset
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip()
        if name.lower().startswith("preset"):
            name = name[len("preset"):]
        try:
            return cls(name.upper())
        except ValueError:
            raise ValueError(f"Unknown mapping preset: {value!r}. "
                             f"Supported: {[p.value for p in cls]}") from None


# (x, y, z, w) -> (x', y', z', w')
_PRESET_TRANSFORMS = {
    MappingPreset.A: lambda x, y, z, w: (x, y, -z, w),
    MappingPreset.B: lambda x, y, z, w: (x, -z, y, w),
    MappingPreset.C: lambda x, y, z, w: (-x, y, z, w),
}

# 180 deg about the vertical (Y) axis
FLIP_FRONT_BACK = np.array([0.0, 1.0, 0.0, 0.0])


def apply_preset(raw, preset):
    """
    Re-express a raw device quaternion using the given preset.

    Args:
        raw: Device quaternion (x, y, z, w)
        preset: MappingPreset (or anything MappingPreset.parse accepts)

    Returns:
        Mapped quaternion (x, y, z, w) as np.ndarray
    """
    x, y, z, w = as_quat(raw)
    transform = _PRESET_TRANSFORMS[MappingPreset.parse(preset)]
    return np.array(transform(x, y, z, w), dtype=np.float64)


def map_orientation(raw, preset, flip_front_back=True):
    """
    Map a raw device quaternion into the consumer's convention.

    The preset is applied first; if flip_front_back is set the result is
    left-multiplied by a fixed 180 deg yaw, rotating the whole frame rather
    than the object's local frame.

    Args:
        raw: Device quaternion (x, y, z, w)
        preset: MappingPreset
        flip_front_back: Compose with the front/back flip

    Returns:
        Mapped quaternion (x, y, z, w) as np.ndarray
    """
    mapped = apply_preset(raw, preset)
    if flip_front_back:
        mapped = quat_mul(FLIP_FRONT_BACK, mapped)
    return mapped
