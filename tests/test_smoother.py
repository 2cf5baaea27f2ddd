import math

import numpy as np
import pytest
from scipy.spatial.transform import Rotation as R

from racket_motion.utils import SmootherState, blend_factor, quat_angle, quat_slerp, smooth_step

START = R.from_euler("y", 0.0, degrees=True).as_quat()
TARGET = R.from_euler("y", 90.0, degrees=True).as_quat()


def test_first_step_returns_target_unchanged() -> None:
    state = SmootherState()
    out = smooth_step(state, TARGET, dt=0.5, lerp_rate=0.1)
    np.testing.assert_array_equal(out, TARGET)
    assert state.seeded


def test_first_step_copies_target() -> None:
    target = np.array(TARGET)
    state = SmootherState()
    smooth_step(state, target, dt=0.016, lerp_rate=0.35)
    target[0] = 5.0
    assert state.current[0] != 5.0


@pytest.mark.parametrize("dt", [0.0, 0.001, 1.0 / 60.0, 0.1, 2.0])
def test_lerp_one_snaps_to_target(dt) -> None:
    state = SmootherState()
    smooth_step(state, START, dt=0.016, lerp_rate=1.0)
    for target in (TARGET, START, R.from_euler("x", 45.0, degrees=True).as_quat()):
        out = smooth_step(state, target, dt=dt, lerp_rate=1.0)
        np.testing.assert_array_equal(out, target)


@pytest.mark.parametrize("dt", [0.0, 0.001, 1.0 / 60.0, 0.1, 2.0])
def test_lerp_zero_freezes(dt) -> None:
    state = SmootherState()
    smooth_step(state, START, dt=0.016, lerp_rate=0.0)
    for _ in range(5):
        out = smooth_step(state, TARGET, dt=dt, lerp_rate=0.0)
        np.testing.assert_array_equal(out, START)


def test_blend_factor_at_reference_rate_equals_lerp() -> None:
    assert blend_factor(1.0 / 60.0, 0.35) == pytest.approx(0.35)


def test_blend_factor_formula() -> None:
    dt, rate = 0.033, 0.2
    assert blend_factor(dt, rate) == pytest.approx(1.0 - (1.0 - rate) ** (dt * 60.0))


def test_blend_factor_edges() -> None:
    assert blend_factor(0.0, 0.5) == 0.0
    assert blend_factor(-1.0, 0.5) == 0.0
    assert blend_factor(0.0, 1.0) == 1.0
    assert blend_factor(10.0, 0.0) == 0.0
    assert 0.0 <= blend_factor(100.0, 0.9) <= 1.0


def test_two_half_ticks_equal_one_full_tick() -> None:
    rate = 0.35
    a = blend_factor(1.0 / 120.0, rate)
    # remaining fraction after two half ticks equals one full tick
    assert (1.0 - a) ** 2 == pytest.approx(1.0 - blend_factor(1.0 / 60.0, rate))


def test_smoothing_is_frame_rate_independent() -> None:
    """Same elapsed time at 30 Hz and 240 Hz closes the same angle."""
    rate = 0.35
    results = []
    for hz in (30, 60, 240):
        state = SmootherState()
        smooth_step(state, START, dt=1.0 / hz, lerp_rate=rate)
        for _ in range(hz // 6):  # 1/6 s of ticks
            smooth_step(state, TARGET, dt=1.0 / hz, lerp_rate=rate)
        results.append(quat_angle(state.current, TARGET))

    expected = math.radians(90.0) * (1.0 - rate) ** 10
    for remaining in results:
        assert remaining == pytest.approx(expected, rel=1e-6)


def test_step_moves_partially_towards_target() -> None:
    state = SmootherState()
    smooth_step(state, START, dt=0.016, lerp_rate=0.35)
    out = smooth_step(state, TARGET, dt=1.0 / 60.0, lerp_rate=0.35)
    assert quat_angle(out, START) == pytest.approx(math.radians(90.0) * 0.35, rel=1e-6)
    assert np.linalg.norm(out) == pytest.approx(1.0)


def test_slerp_takes_shortest_arc() -> None:
    q0 = R.from_euler("y", 10.0, degrees=True).as_quat()
    q1 = -R.from_euler("y", 30.0, degrees=True).as_quat()  # same rotation, flipped sign
    mid = quat_slerp(q0, q1, 0.5)
    assert quat_angle(mid, R.from_euler("y", 20.0, degrees=True).as_quat()) == pytest.approx(0.0, abs=1e-9)


def test_reset_reseeds() -> None:
    state = SmootherState()
    smooth_step(state, START, dt=0.016, lerp_rate=0.35)
    state.reset()
    out = smooth_step(state, TARGET, dt=0.016, lerp_rate=0.35)
    np.testing.assert_array_equal(out, TARGET)
