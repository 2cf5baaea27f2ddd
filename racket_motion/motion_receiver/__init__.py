"""
MotionReceiver - Real-time racket orientation receiver over UDP.

This package provides tools for receiving motion packets from up to two
wireless motion devices and keeping the latest sample per player slot.

Example usage:
    from racket_motion.motion_receiver import MotionReceiver

    # Initialize receiver
    receiver = MotionReceiver(port=9000)

    # Start receiving
    receiver.start()

    # Main loop
    while running:
        sample, has_data = receiver.store.get(1)
        if has_data:
            print(f"{sample.device_id}: q={sample.orientation}")

    # Cleanup
    receiver.stop()

Packet format (UTF-8 JSON, one datagram per sample):
    {
        "t": float,              # Sender timestamp (advisory)
        "deviceId": str,         # Source device, must be non-empty
        "playerSlot": int,       # 1 or 2
        "qx": float, "qy": float, "qz": float, "qw": float,   # Orientation
        "gx": float, "gy": float, "gz": float,               # Angular velocity
        "ax": float, "ay": float, "az": float,               # Linear acceleration
    }
"""

from .motion_sample import MotionSample, PLAYER_SLOTS
from .packet_decoder import (
    DecodeError,
    MalformedPayload,
    MissingDeviceId,
    InvalidSlot,
    decode_packet,
)
from .slot_store import SlotStore
from .motion_receiver import MotionReceiver, ReceiverStats

__all__ = [
    "MotionSample",
    "PLAYER_SLOTS",
    "DecodeError",
    "MalformedPayload",
    "MissingDeviceId",
    "InvalidSlot",
    "decode_packet",
    "SlotStore",
    "MotionReceiver",
    "ReceiverStats",
]
