import socket

import pytest

from motion_helpers import encode
from racket_motion.motion_receiver import MotionReceiver, SlotStore


@pytest.fixture
def receiver():
    rx = MotionReceiver(port=0, store=SlotStore(), host="127.0.0.1", recv_timeout=1.0)
    assert rx.start()
    try:
        yield rx
    finally:
        rx.stop()


@pytest.fixture
def send(receiver):
    sender = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def _send(payload) -> None:
        if isinstance(payload, dict):
            payload = encode(payload)
        sender.sendto(payload, ("127.0.0.1", receiver.bound_port))

    try:
        yield _send
    finally:
        sender.close()
