"""
Racket Motion - real-time racket orientation from wireless motion devices.

This package receives orientation telemetry over UDP from up to two motion
devices (player slots 1 and 2) and hands the latest reading per slot to a
game or render loop, mapped into the consumer's axes and smoothed
independently of frame rate.

Main classes:
    - MotionReceiver: Receives JSON motion packets over UDP
    - SlotStore: Latest-sample mailboxes for slots 1 and 2
    - RacketTracker: Mapped and smoothed orientation per tick
    - StatsReporter: Once-per-second receiver diagnostics

Example usage:
    from racket_motion import MotionConfig, RacketTracker

    tracker = RacketTracker(MotionConfig(listen_port=9000, preset="A"))
    tracker.start()

    while game_running:
        for slot in (1, 2):
            if tracker.has_data(slot):
                q = tracker.current_orientation(slot, dt)  # (x, y, z, w)
                racket[slot].set_rotation(q)

    tracker.stop()
"""

from .config import ConfigError, MotionConfig, load_config
from .motion_receiver import (
    DecodeError,
    InvalidSlot,
    MalformedPayload,
    MissingDeviceId,
    MotionReceiver,
    MotionSample,
    ReceiverStats,
    SlotStore,
    decode_packet,
)
from .tracker import RacketTracker, StatsReporter
from .utils import MappingPreset, SmootherState, map_orientation, smooth_step

__version__ = "0.1.0"
__all__ = [
    "MotionConfig",
    "ConfigError",
    "load_config",
    "MotionSample",
    "DecodeError",
    "MalformedPayload",
    "MissingDeviceId",
    "InvalidSlot",
    "decode_packet",
    "SlotStore",
    "MotionReceiver",
    "ReceiverStats",
    "RacketTracker",
    "StatsReporter",
    "MappingPreset",
    "map_orientation",
    "SmootherState",
    "smooth_step",
]
