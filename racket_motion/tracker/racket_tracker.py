"""
RacketTracker - consumer-facing access to smoothed racket orientation.
"""

import logging

import numpy as np

from ..config import MotionConfig
from ..motion_receiver.motion_receiver import MotionReceiver
from ..motion_receiver.motion_sample import PLAYER_SLOTS
from ..motion_receiver.slot_store import SlotStore
from ..utils.orientation_mapper import map_orientation
from ..utils.smoother import SmootherState, smooth_step

logger = logging.getLogger(__name__)


class RacketTracker:
    """
    Per-tick orientation source for up to two rackets.

    Reads the latest sample for a slot, maps it into the consumer's axis
    convention and smooths it with a per-slot SmootherState. All math runs
    on the snapshot, outside the SlotStore lock.

    Example usage:
        tracker = RacketTracker(MotionConfig(preset="B"))
        tracker.start()

        while game_running:
            dt = clock.tick()
            for slot in (1, 2):
                if tracker.has_data(slot):
                    racket[slot].rotation = tracker.current_orientation(slot, dt)

        tracker.stop()
    """

    def __init__(self, config=None, store=None, receiver=None):
        """
        Initialize the tracker.

        Args:
            config: MotionConfig (defaults are used if omitted)
            store: SlotStore to read from; taken from receiver if omitted
            receiver: MotionReceiver; created from config if omitted
        """
        self.config = config if config is not None else MotionConfig()
        if receiver is None:
            receiver = MotionReceiver(
                port=self.config.listen_port,
                store=store,
                verbose=self.config.verbose_logs,
            )
        self.receiver = receiver
        self.store = store if store is not None else receiver.store
        self._smoothers = {}

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    def start(self):
        """Start receiving. Returns False if the receiver could not bind."""
        return self.receiver.start()

    def stop(self):
        self.receiver.stop()
        self._smoothers.clear()

    def has_data(self, slot):
        return self.store.has_data(slot)

    def latest_sample(self, slot):
        """Latest raw MotionSample for slot, or None."""
        sample, _ = self.store.get(slot)
        return sample

    def target_orientation(self, slot):
        """
        Mapped (unsmoothed) orientation of the latest sample.

        Raises:
            LookupError: If the slot has not received data yet
        """
        sample, has_data = self.store.get(slot)
        if not has_data:
            raise LookupError(f"No motion data received for slot {slot}")
        return map_orientation(sample.orientation, self.config.preset, self.config.flip_front_back)

    def current_orientation(self, slot, dt):
        """
        Advance the smoother for slot by dt seconds and return the orientation.

        Args:
            slot: Player slot (1 or 2)
            dt: Seconds since the previous tick

        Returns:
            Emitted orientation (x, y, z, w) as np.ndarray

        Raises:
            LookupError: If the slot has not received data yet
        """
        target = self.target_orientation(slot)
        state = self._smoothers.get(slot)
        if state is None:
            state = self._smoothers[slot] = SmootherState()
            logger.debug("[RacketTracker] Seeding orientation for slot %s", slot)
        return smooth_step(state, target, dt, self.config.rotation_lerp).copy()

    def swing_speed(self, slot):
        """
        Magnitude of the latest angular velocity for slot (0.0 without data).
        """
        sample, has_data = self.store.get(slot)
        if not has_data:
            return 0.0
        return float(np.linalg.norm(sample.angular_velocity))

    def reset_smoothing(self, slot=None):
        """Drop smoother state so the next tick snaps to the target."""
        if slot is None:
            self._smoothers.clear()
            return
        if slot not in PLAYER_SLOTS:
            raise ValueError(f"Invalid player slot: {slot!r}. Supported: {list(PLAYER_SLOTS)}")
        self._smoothers.pop(slot, None)
