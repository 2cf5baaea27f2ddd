"""
StatsReporter - once-per-interval receiver diagnostics.
"""

import logging
import time

logger = logging.getLogger(__name__)


class StatsReporter:
    """
    Pulls ReceiverStats from a MotionReceiver and logs a summary line.

    Call poll() from the consumer's tick; it only does work once per interval.
    A line is logged when packets arrived in the interval or verbose is set.
    """

    def __init__(self, receiver, interval=1.0, verbose=False):
        self.receiver = receiver
        self.interval = interval
        self.verbose = verbose
        self.last_report_time = None

    def poll(self, now=None):
        """
        Report if the interval elapsed.

        Args:
            now: Monotonic time in seconds (defaults to time.monotonic())

        Returns:
            ReceiverStats if a new interval was closed, None otherwise
        """
        if now is None:
            now = time.monotonic()
        if self.last_report_time is None:
            self.last_report_time = now
            return None
        if now - self.last_report_time < self.interval:
            return None

        stats = self.receiver.take_stats()
        if stats.packet_count > 0 or self.verbose:
            last_slot = stats.last_slot if stats.last_slot is not None else "-"
            logger.info("[MotionReceiver] ~%d pkt/s | rejected=%d | lastSender=%s | "
                        "lastSlot=%s | lastDevice=%s",
                        stats.packet_count, stats.rejected_count, stats.last_sender,
                        last_slot, stats.last_device)
        self.last_report_time = now
        return stats
