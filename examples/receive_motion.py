#!/usr/bin/env python3
"""
Example: Receive racket motion packets and print smoothed orientation.

This script demonstrates how to use RacketTracker to receive motion data from
up to two devices and read the mapped, smoothed orientation every tick.

Usage:
    python receive_motion.py --port 9000
    python receive_motion.py --port 9000 --preset B --no_flip --verbose
    python receive_motion.py --config motion.json --print_rate
"""

import argparse
import logging
import os
import sys
import time

# Allow running without installing the package (add project root to path)
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _root not in sys.path:
    sys.path.insert(0, _root)

from racket_motion import MotionConfig, RacketTracker, StatsReporter, load_config


def main():
    parser = argparse.ArgumentParser(description="Receive and print racket orientation")

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON configuration file (command line options override it)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="UDP port to listen for motion packets (default: 9000)",
    )

    parser.add_argument(
        "--preset",
        choices=["A", "B", "C"],
        default=None,
        help="Axis mapping preset (default: A)",
    )

    parser.add_argument(
        "--no_flip",
        action="store_true",
        default=False,
        help="Disable the 180 deg front/back flip",
    )

    parser.add_argument(
        "--lerp",
        type=float,
        default=None,
        help="Rotation smoothing per 1/60 s tick, 0..1 (default: 0.35)",
    )

    parser.add_argument(
        "--fps",
        type=float,
        default=60.0,
        help="Simulated consumer tick rate (default: 60)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Log every rejected packet",
    )

    parser.add_argument(
        "--print_rate",
        action="store_true",
        default=False,
        help="Print receive rate statistics once per second",
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    config = load_config(args.config) if args.config else MotionConfig()
    config = config.with_overrides(
        listen_port=args.port,
        preset=args.preset,
        rotation_lerp=args.lerp,
        flip_front_back=False if args.no_flip else None,
        verbose_logs=True if args.verbose else None,
    )

    print(f"[Main] Initializing RacketTracker on port {config.listen_port}...")
    tracker = RacketTracker(config)
    if not tracker.start():
        print(f"[Main] Could not listen on port {config.listen_port}")
        return 1
    reporter = StatsReporter(tracker.receiver, verbose=config.verbose_logs) if args.print_rate else None

    tick = 1.0 / args.fps
    last = time.monotonic()
    print("[Main] Press Ctrl+C to stop")

    try:
        while True:
            time.sleep(tick)
            now = time.monotonic()
            dt = now - last
            last = now

            if reporter is not None:
                reporter.poll(now)

            for slot in (1, 2):
                if not tracker.has_data(slot):
                    continue
                q = tracker.current_orientation(slot, dt)
                sample = tracker.latest_sample(slot)
                print(f"[P{slot}] {sample.device_id:12s} "
                      f"rot=({q[0]:6.3f}, {q[1]:6.3f}, {q[2]:6.3f}, {q[3]:6.3f}) "
                      f"swing={tracker.swing_speed(slot):6.2f} rad/s")

    except KeyboardInterrupt:
        print("\n[Main] Stopping...")
    finally:
        tracker.stop()
        print("[Main] Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
