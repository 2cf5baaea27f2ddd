import random
import threading

import pytest

from racket_motion.motion_receiver import MotionSample, SlotStore


def _sample(slot: int, n: int) -> MotionSample:
    return MotionSample(
        timestamp=float(n),
        device_id=f"dev{slot}",
        player_slot=slot,
        orientation=(float(n), -float(n), float(n) * 2.0, 1.0),
    )


def test_empty_store() -> None:
    store = SlotStore()
    assert store.get(1) == (None, False)
    assert store.get(2) == (None, False)
    assert not store.has_data(1)


def test_put_then_get_returns_same_sample() -> None:
    store = SlotStore()
    sample = _sample(1, 5)
    store.put(1, sample)

    latest, has_data = store.get(1)
    assert latest is sample
    assert has_data
    assert store.get(2) == (None, False)


def test_last_writer_wins() -> None:
    store = SlotStore()
    store.put(2, _sample(2, 1))
    store.put(2, _sample(2, 2))
    assert store.get(2)[0] == _sample(2, 2)


def test_has_data_never_reverts() -> None:
    store = SlotStore()
    store.put(1, _sample(1, 1))
    for n in range(10):
        store.put(2, _sample(2, n))
        assert store.has_data(1)
    store.put(1, _sample(1, 2))
    assert store.has_data(1)


@pytest.mark.parametrize("slot", [0, 3, -1, "1"])
def test_invalid_slot_rejected(slot) -> None:
    store = SlotStore()
    with pytest.raises(ValueError):
        store.put(slot, _sample(1, 0))
    with pytest.raises(ValueError):
        store.get(slot)


def test_concurrent_writer_and_readers() -> None:
    store = SlotStore()
    n_puts = 5000
    n_readers = 8
    written = {1: set(), 2: set()}
    errors = []
    done = threading.Event()

    # Pre-build samples so readers can check identity against them
    samples = [_sample(1 + (i % 2), i) for i in range(n_puts)]
    for s in samples:
        written[s.player_slot].add(id(s))
    by_id = {id(s): s for s in samples}

    def writer() -> None:
        for s in samples:
            store.put(s.player_slot, s)
        done.set()

    def reader() -> None:
        rng = random.Random()
        while not done.is_set():
            slot = rng.choice((1, 2))
            latest, has_data = store.get(slot)
            if latest is None:
                if has_data:
                    errors.append("has_data without sample")
                continue
            if id(latest) not in written[slot] or by_id[id(latest)] != latest:
                errors.append(f"unexpected sample {latest!r}")
            if latest.player_slot != slot:
                errors.append(f"slot mismatch {latest!r}")
            n = int(latest.timestamp)
            if latest.orientation != (float(n), -float(n), float(n) * 2.0, 1.0):
                errors.append(f"torn sample {latest!r}")

    readers = [threading.Thread(target=reader) for _ in range(n_readers)]
    for t in readers:
        t.start()
    w = threading.Thread(target=writer)
    w.start()
    w.join(timeout=10.0)
    for t in readers:
        t.join(timeout=10.0)

    assert not w.is_alive()
    assert not any(t.is_alive() for t in readers)
    assert errors == []
    assert store.get(1)[0] is samples[-2]
    assert store.get(2)[0] is samples[-1]
