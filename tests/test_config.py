import json

import pytest

from racket_motion import ConfigError, MappingPreset, MotionConfig, load_config


def test_defaults() -> None:
    config = MotionConfig()
    assert config.listen_port == 9000
    assert config.preset is MappingPreset.A
    assert config.flip_front_back is True
    assert config.rotation_lerp == pytest.approx(0.35)
    assert config.verbose_logs is False


def test_from_dict_accepts_camel_case() -> None:
    config = MotionConfig.from_dict(
        {
            "listenPort": 9100,
            "preset": "PresetB",
            "flipFrontBack": False,
            "rotationLerp": 0.5,
            "verboseLogs": True,
        }
    )
    assert config == MotionConfig(
        listen_port=9100, preset=MappingPreset.B, flip_front_back=False, rotation_lerp=0.5, verbose_logs=True
    )


def test_from_dict_accepts_snake_case() -> None:
    config = MotionConfig.from_dict({"listen_port": 9001, "preset": "c"})
    assert config.listen_port == 9001
    assert config.preset is MappingPreset.C


def test_round_trip_through_dict() -> None:
    config = MotionConfig(listen_port=9002, preset="B", rotation_lerp=0.2)
    assert MotionConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "values",
    [
        {"listenPort": 70000},
        {"listenPort": -1},
        {"listenPort": "9000"},
        {"rotationLerp": 1.5},
        {"rotationLerp": -0.1},
        {"rotationLerp": "fast"},
        {"preset": "D"},
        {"flipFrontBack": "maybe"},
        {"unknownOption": 1},
    ],
)
def test_invalid_values(values) -> None:
    with pytest.raises(ConfigError):
        MotionConfig.from_dict(values)


def test_string_booleans() -> None:
    config = MotionConfig.from_dict({"flipFrontBack": "false", "verboseLogs": "yes"})
    assert config.flip_front_back is False
    assert config.verbose_logs is True


def test_with_overrides_skips_none() -> None:
    config = MotionConfig().with_overrides(listen_port=None, preset="C", rotation_lerp=None)
    assert config.listen_port == 9000
    assert config.preset is MappingPreset.C


def test_load_config(tmp_path) -> None:
    path = tmp_path / "motion.json"
    path.write_text(json.dumps({"listenPort": 9500, "preset": "B", "rotationLerp": 0.8}))

    config = load_config(path)
    assert config.listen_port == 9500
    assert config.preset is MappingPreset.B
    assert config.rotation_lerp == pytest.approx(0.8)


def test_load_config_rejects_bad_json(tmp_path) -> None:
    path = tmp_path / "motion.json"
    path.write_text("{listenPort: 9000")
    with pytest.raises(ConfigError):
        load_config(path)

    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        load_config(path)
