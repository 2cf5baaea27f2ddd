"""
Tracker - per-tick racket orientation for game or render loops.

Example usage:
    from racket_motion.tracker import RacketTracker, StatsReporter

    tracker = RacketTracker()
    reporter = StatsReporter(tracker.receiver)
    tracker.start()

    while running:
        reporter.poll()
        if tracker.has_data(1):
            q = tracker.current_orientation(1, dt)   # (x, y, z, w)
"""

from .racket_tracker import RacketTracker
from .stats_reporter import StatsReporter

__all__ = ["RacketTracker", "StatsReporter"]
