#!/usr/bin/env python3
"""
Example: Send synthetic racket motion packets for testing a receiver.

The device spins about its vertical axis at a constant rate and reports in
the same JSON format as the motion devices.

Usage:
    python send_motion.py --slot 1 --device racket-01
    python send_motion.py --host 192.168.1.20 --port 9000 --slot 2 --rate 100
"""

import argparse
import json
import math
import socket
import time

import numpy as np
from scipy.spatial.transform import Rotation as R


def build_packet(t, device_id, slot, spin_rate):
    """Build one packet for a device spinning spin_rate rad/s about Y."""
    q = R.from_euler("y", spin_rate * t).as_quat()  # (x, y, z, w)
    gyro = np.array([0.0, spin_rate, 0.0])
    return {
        "t": t,
        "deviceId": device_id,
        "playerSlot": slot,
        "qx": float(q[0]), "qy": float(q[1]), "qz": float(q[2]), "qw": float(q[3]),
        "gx": float(gyro[0]), "gy": float(gyro[1]), "gz": float(gyro[2]),
        "ax": 0.0, "ay": 9.81, "az": 0.0,
    }


def main():
    parser = argparse.ArgumentParser(description="Send synthetic motion packets over UDP")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Receiver address")
    parser.add_argument("--port", type=int, default=9000, help="Receiver UDP port (default: 9000)")
    parser.add_argument("--slot", type=int, default=1, help="playerSlot to report")
    parser.add_argument("--device", type=str, default="racket-01", help="deviceId to report")
    parser.add_argument("--rate", type=float, default=60.0, help="Packets per second")
    parser.add_argument("--spin", type=float, default=math.pi / 2, help="Spin rate in rad/s")
    args = parser.parse_args()

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    period = 1.0 / args.rate
    t0 = time.monotonic()
    sent = 0
    print(f"[Sender] Sending slot {args.slot} as {args.device!r} to {args.host}:{args.port}")

    try:
        while True:
            t = time.monotonic() - t0
            payload = json.dumps(build_packet(t, args.device, args.slot, args.spin))
            sock.sendto(payload.encode("utf-8"), (args.host, args.port))
            sent += 1
            if sent % int(max(1, args.rate)) == 0:
                print(f"[Sender] {sent} packets sent")
            time.sleep(period)
    except KeyboardInterrupt:
        print("\n[Sender] Stopping...")
    finally:
        sock.close()


if __name__ == "__main__":
    main()
