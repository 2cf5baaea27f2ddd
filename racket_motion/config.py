"""
Configuration for the racket motion pipeline.

Options can be given with the camelCase names used by the device tooling
(listenPort, preset, flipFrontBack, rotationLerp, verboseLogs) or with their
snake_case equivalents.
"""

import json
import pathlib
from dataclasses import dataclass, fields, replace

from .utils.orientation_mapper import MappingPreset

_ALIASES = {
    "listenPort": "listen_port",
    "flipFrontBack": "flip_front_back",
    "rotationLerp": "rotation_lerp",
    "verboseLogs": "verbose_logs",
}


class ConfigError(ValueError):
    """Raised for unknown options or out-of-range values."""


def _parse_bool(key, value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("1", "true", "yes", "on"):
        return True
    if isinstance(value, str) and value.strip().lower() in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class MotionConfig:
    """
    Settings for receiving and smoothing racket orientation.

    Attributes:
        listen_port: UDP port to listen on
        preset: Axis mapping preset (A, B or C)
        flip_front_back: Compose a 180 deg yaw after the preset
        rotation_lerp: Fraction closed per 1/60 s tick, in [0, 1]
        verbose_logs: Log every rejected packet
    """

    listen_port: int = 9000
    preset: MappingPreset = MappingPreset.A
    flip_front_back: bool = True
    rotation_lerp: float = 0.35
    verbose_logs: bool = False

    def __post_init__(self):
        try:
            object.__setattr__(self, "preset", MappingPreset.parse(self.preset))
        except ValueError as e:
            raise ConfigError(str(e)) from None
        if isinstance(self.listen_port, bool) or not isinstance(self.listen_port, int):
            raise ConfigError(f"listen_port must be an integer, got {self.listen_port!r}")
        if not 0 <= self.listen_port <= 65535:
            raise ConfigError(f"listen_port out of range: {self.listen_port}")
        try:
            lerp = float(self.rotation_lerp)
        except (TypeError, ValueError):
            raise ConfigError(f"rotation_lerp must be a number, got {self.rotation_lerp!r}") from None
        if not 0.0 <= lerp <= 1.0:
            raise ConfigError(f"rotation_lerp must be within [0, 1], got {lerp}")
        object.__setattr__(self, "rotation_lerp", lerp)
        object.__setattr__(self, "flip_front_back", _parse_bool("flip_front_back", self.flip_front_back))
        object.__setattr__(self, "verbose_logs", _parse_bool("verbose_logs", self.verbose_logs))

    @classmethod
    def from_dict(cls, values):
        """
        Build a config from a mapping, accepting camelCase or snake_case keys.

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"Unknown configuration option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self):
        """Serialize using the camelCase option names."""
        return {
            "listenPort": self.listen_port,
            "preset": self.preset.value,
            "flipFrontBack": self.flip_front_back,
            "rotationLerp": self.rotation_lerp,
            "verboseLogs": self.verbose_logs,
        }

    def with_overrides(self, **overrides):
        """Return a copy with the given non-None fields replaced."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path):
    """
    Load a MotionConfig from a JSON file.

    Args:
        path: Path to a JSON object with configuration options

    Returns:
        MotionConfig
    """
    path = pathlib.Path(path)
    with open(path) as f:
        try:
            values = json.load(f)
        except ValueError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from None
    if not isinstance(values, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return MotionConfig.from_dict(values)
