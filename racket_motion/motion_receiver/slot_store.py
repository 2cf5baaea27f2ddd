"""
SlotStore - latest-value mailboxes for player slots 1 and 2.
"""

import threading

from .motion_sample import PLAYER_SLOTS


class SlotStore:
    """
    Holds the most recent MotionSample per player slot.

    One lock guards both slots. Critical sections only swap or read a
    reference; samples are immutable, so readers get a consistent snapshot
    without copying. has_data flips to True on the first put for a slot and
    never reverts.

    Example usage:
        store = SlotStore()
        store.put(1, sample)
        latest, has_data = store.get(1)
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._latest = {slot: None for slot in PLAYER_SLOTS}
        self._has_data = {slot: False for slot in PLAYER_SLOTS}

    @staticmethod
    def _check_slot(slot):
        if slot not in PLAYER_SLOTS:
            raise ValueError(f"Invalid player slot: {slot!r}. Supported: {list(PLAYER_SLOTS)}")

    def put(self, slot, sample):
        """Replace the latest sample for slot (last writer wins)."""
        self._check_slot(slot)
        with self._lock:
            self._latest[slot] = sample
            self._has_data[slot] = True

    def get(self, slot):
        """
        Snapshot the mailbox for slot.

        Returns:
            Tuple of (MotionSample or None, has_data)
        """
        self._check_slot(slot)
        with self._lock:
            return self._latest[slot], self._has_data[slot]

    def has_data(self, slot):
        self._check_slot(slot)
        with self._lock:
            return self._has_data[slot]
