"""
PacketDecoder - parse one UDP datagram into a MotionSample.

Each datagram is a UTF-8 JSON object:

    {"t": 12.5, "deviceId": "racket-01", "playerSlot": 1,
     "qx": 0.0, "qy": 0.0, "qz": 0.0, "qw": 1.0,
     "gx": 0.0, "gy": 0.0, "gz": 0.0,
     "ax": 0.0, "ay": 0.0, "az": 9.81}

Only deviceId and playerSlot are validated; missing numeric fields default
to zero.
"""

import json
import math
import numbers

from .motion_sample import MotionSample, PLAYER_SLOTS

ORIENTATION_FIELDS = ("qx", "qy", "qz", "qw")
ANGULAR_VELOCITY_FIELDS = ("gx", "gy", "gz")
LINEAR_ACCELERATION_FIELDS = ("ax", "ay", "az")


class DecodeError(ValueError):
    """
    Base class for datagrams that cannot be turned into a MotionSample.

    Attributes:
        device_id: deviceId seen in the payload, "" if none
        player_slot: playerSlot seen in the payload, None if none
        raw: Decoded payload text (or repr of the bytes) for diagnostics
    """

    def __init__(self, message, device_id="", player_slot=None, raw=""):
        super().__init__(message)
        self.device_id = device_id
        self.player_slot = player_slot
        self.raw = raw


class MalformedPayload(DecodeError):
    """Payload is not a UTF-8 JSON object or a numeric field is not a number."""


class MissingDeviceId(DecodeError):
    """deviceId is missing, empty or not a string."""


class InvalidSlot(DecodeError):
    """playerSlot is missing or not 1 or 2."""


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _read_number(record, key, raw):
    value = record.get(key)
    if value is None:
        return 0.0
    if not _is_number(value):
        raise MalformedPayload(f"Field {key!r} is not a number: {value!r}", raw=raw)
    try:
        return float(value)
    except (OverflowError, ValueError):
        raise MalformedPayload(f"Field {key!r} is out of range: {value!r:.40}", raw=raw) from None


def _read_vector(record, keys, raw):
    return tuple(_read_number(record, k, raw) for k in keys)


def decode_packet(data):
    """
    Decode a raw datagram payload.

    Args:
        data: Raw bytes received from the socket

    Returns:
        MotionSample

    Raises:
        MalformedPayload: Not UTF-8, not JSON, not an object, or bad numbers
        MissingDeviceId: deviceId missing or empty
        InvalidSlot: playerSlot missing or not in (1, 2)
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedPayload(f"Payload is not UTF-8: {e}", raw=repr(data[:64])) from None

    try:
        record = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise MalformedPayload(f"JSON parse failed: {e}", raw=text) from None

    if not isinstance(record, dict):
        raise MalformedPayload(f"Expected a JSON object, got {type(record).__name__}", raw=text)

    device_id = record.get("deviceId")
    slot = record.get("playerSlot")
    if not _is_number(slot):
        slot = None
    elif not isinstance(slot, numbers.Integral):
        # Keep the observed value for diagnostics; non-integers never validate
        slot = float(slot)

    if not isinstance(device_id, str) or not device_id:
        raise MissingDeviceId("Missing deviceId", device_id="", player_slot=slot, raw=text)

    if slot is None or isinstance(slot, float) or slot not in PLAYER_SLOTS:
        raise InvalidSlot(f"playerSlot={slot} (expected 1 or 2)",
                          device_id=device_id, player_slot=slot, raw=text)

    try:
        timestamp = _read_number(record, "t", text)
        orientation = _read_vector(record, ORIENTATION_FIELDS, text)
        angular_velocity = _read_vector(record, ANGULAR_VELOCITY_FIELDS, text)
        linear_acceleration = _read_vector(record, LINEAR_ACCELERATION_FIELDS, text)
    except DecodeError as e:
        e.device_id = device_id
        e.player_slot = slot
        raise

    if not all(math.isfinite(v) for v in orientation):
        raise MalformedPayload("Orientation contains non-finite values",
                               device_id=device_id, player_slot=slot, raw=text)

    return MotionSample(
        timestamp=timestamp,
        device_id=device_id,
        player_slot=int(slot),
        orientation=orientation,
        angular_velocity=angular_velocity,
        linear_acceleration=linear_acceleration,
    )
