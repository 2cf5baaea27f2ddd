"""
MotionSample - one decoded telemetry reading from a motion device.
"""

from dataclasses import dataclass
from typing import Tuple

PLAYER_SLOTS = (1, 2)


@dataclass(frozen=True)
class MotionSample:
    """
    Immutable telemetry sample.

    Attributes:
        timestamp: Sender-side clock in seconds (advisory only)
        device_id: Source hardware identifier (diagnostics only)
        player_slot: 1 or 2
        orientation: Raw device quaternion (x, y, z, w)
        angular_velocity: Gyro reading (gx, gy, gz)
        linear_acceleration: Accelerometer reading (ax, ay, az)
    """

    timestamp: float
    device_id: str
    player_slot: int
    orientation: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    angular_velocity: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    linear_acceleration: Tuple[float, float, float] = (0.0, 0.0, 0.0)
