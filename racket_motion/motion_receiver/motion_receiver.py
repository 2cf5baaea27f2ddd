"""
MotionReceiver - Real-time racket orientation receiver over UDP.

This module provides the MotionReceiver class for receiving JSON motion
packets from up to two wireless motion devices. A background thread decodes
each datagram and stores the latest sample per player slot in a SlotStore.
"""

import logging
import select
import socket
import threading
import time
from dataclasses import dataclass
from typing import Optional

from .packet_decoder import DecodeError, InvalidSlot, MissingDeviceId, decode_packet
from .slot_store import SlotStore

logger = logging.getLogger(__name__)

MAX_DATAGRAM = 65535
RAW_LOG_LIMIT = 200


@dataclass(frozen=True)
class ReceiverStats:
    """Diagnostic counters for one reporting interval."""

    packet_count: int
    rejected_count: int
    receive_rate_hz: float
    last_sender: str
    last_slot: Optional[int]
    last_device: str


class MotionReceiver:
    """
    Owns the UDP socket and the ingestion thread; sole writer into a SlotStore.

    The data flow:
    1. UDP datagrams arrive containing one JSON motion packet each
    2. Each datagram is decoded and validated (deviceId, playerSlot)
    3. Valid samples overwrite the slot's mailbox in the SlotStore
    4. Invalid datagrams are dropped (logged when verbose)

    Bind failure disables the receiver; it never retries. Shutdown is
    cooperative: stop() sets a flag, wakes the loop and joins with a bounded
    timeout.

    Example usage:
        receiver = MotionReceiver(port=9000)
        receiver.start()

        while running:
            sample, has_data = receiver.store.get(1)
            if has_data:
                print(sample.orientation)

        receiver.stop()
    """

    def __init__(
        self,
        port: int = 9000,
        store: Optional[SlotStore] = None,
        verbose: bool = False,
        host: str = "0.0.0.0",
        recv_timeout: float = 1.0,
        join_timeout: float = 0.5,
    ):
        """
        Initialize the MotionReceiver.

        Args:
            port: UDP port to listen on (default: 9000, 0 picks a free port)
            store: SlotStore to write into (a new one is created if omitted)
            verbose: Log a warning for every rejected datagram
            host: Interface address to bind
            recv_timeout: Upper bound on each wait for data, in seconds
            join_timeout: Upper bound on waiting for the thread in stop()
        """
        self.port = port
        self.host = host
        self.store = store if store is not None else SlotStore()
        self.verbose = verbose
        self.recv_timeout = recv_timeout
        self.join_timeout = join_timeout
        self.disabled = False
        self.thread = None
        self.sock = None
        self._wake_r = None
        self._wake_w = None
        self._stop_event = threading.Event()

        # Diagnostics; guarded by their own lock, never the SlotStore lock
        self._stats_lock = threading.Lock()
        self.recv_count = 0
        self.rejected_count = 0
        self.last_sender = ""
        self.last_slot = None
        self.last_device = ""
        self._rate_count = 0
        self.last_rate_time = time.time()
        self.recv_rate_hz = 0.0

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    @property
    def running(self):
        return self.thread is not None and self.thread.is_alive()

    @property
    def bound_port(self):
        """Port actually bound, or None when not listening."""
        sock = self.sock
        if sock is None:
            return None
        try:
            return sock.getsockname()[1]
        except OSError:
            return None

    def start(self):
        """
        Bind the UDP port and start the receive thread.

        Returns:
            True if listening, False if the receiver is disabled
        """
        if self.running:
            return True
        if self.disabled:
            return False

        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.bind((self.host, self.port))
        except OSError as e:
            sock.close()
            self.disabled = True
            logger.error("[MotionReceiver] FAILED to bind UDP port %s. "
                         "Is the port in use? Error: %s", self.port, e)
            return False
        sock.setblocking(False)

        self.sock = sock
        self._wake_r, self._wake_w = socket.socketpair()
        self._stop_event.clear()
        self.thread = threading.Thread(
            target=self._udp_server_loop,
            args=(sock, self._wake_r),
            name="MotionReceiver",
            daemon=True,
        )
        self.thread.start()
        logger.info("[MotionReceiver] Listening UDP on port %s", self.bound_port)
        return True

    def stop(self):
        """Stop the receive thread and close the socket. Safe to call repeatedly."""
        self._stop_event.set()
        if self._wake_w is not None:
            try:
                self._wake_w.send(b"\x00")
            except OSError:
                pass

        thread = self.thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self.join_timeout)
            if thread.is_alive():
                logger.warning("[MotionReceiver] Receive thread did not exit within %.2fs",
                               self.join_timeout)
        self.thread = None

        for s in (self.sock, self._wake_r, self._wake_w):
            if s is not None:
                try:
                    s.close()
                except OSError:
                    pass
        self.sock = None
        self._wake_r = None
        self._wake_w = None

        if thread is not None:
            logger.info("[MotionReceiver] Stopped")

    def get_receive_rate(self):
        """
        Get the current packet receive rate.

        Returns:
            Receive rate in Hz (packets per second)
        """
        with self._stats_lock:
            return self.recv_rate_hz

    def take_stats(self):
        """
        Snapshot the diagnostic counters and start a new interval.

        Returns:
            ReceiverStats for the interval since the previous call
        """
        with self._stats_lock:
            stats = ReceiverStats(
                packet_count=self.recv_count,
                rejected_count=self.rejected_count,
                receive_rate_hz=self.recv_rate_hz,
                last_sender=self.last_sender,
                last_slot=self.last_slot,
                last_device=self.last_device,
            )
            self.recv_count = 0
            self.rejected_count = 0
        return stats

    def _udp_server_loop(self, sock, wake):
        """Background thread that receives datagrams until stopped."""
        while not self._stop_event.is_set():
            try:
                ready, _, _ = select.select([sock, wake], [], [], self.recv_timeout)
            except (OSError, ValueError) as e:
                # Socket closed while waiting
                if self._stop_event.is_set() or sock.fileno() == -1:
                    break
                logger.warning("[MotionReceiver] UDP wait error: %s", e)
                continue

            if wake in ready or self._stop_event.is_set():
                break
            if not ready:
                continue

            try:
                data, addr = sock.recvfrom(MAX_DATAGRAM)
            except BlockingIOError:
                continue
            except OSError as e:
                if self._stop_event.is_set() or sock.fileno() == -1:
                    break
                logger.warning("[MotionReceiver] UDP error: %s", e)
                continue

            try:
                self._handle_datagram(data, addr)
            except Exception as e:
                logger.warning("[MotionReceiver] Dropped packet from %s: %s", addr, e)

    def _handle_datagram(self, data, addr):
        now = time.time()
        with self._stats_lock:
            self.last_sender = f"{addr[0]}:{addr[1]}"
            self.recv_count += 1
            self._rate_count += 1
            dt = now - self.last_rate_time
            if dt >= 1.0:
                self.recv_rate_hz = self._rate_count / dt
                self._rate_count = 0
                self.last_rate_time = now

        try:
            sample = decode_packet(data)
        except InvalidSlot as e:
            self._note_rejected(e)
            if self.verbose:
                logger.warning("[MotionReceiver] playerSlot=%s (expected 1 or 2). "
                               "Nothing will update. | device=%s", e.player_slot, e.device_id)
            return
        except MissingDeviceId as e:
            self._note_rejected(e)
            if self.verbose:
                logger.warning("[MotionReceiver] Missing deviceId | slot=%s | raw=%s",
                               e.player_slot, e.raw[:RAW_LOG_LIMIT])
            return
        except DecodeError as e:
            self._note_rejected(None)
            if self.verbose:
                logger.warning("[MotionReceiver] Packet parse failed: %s | raw=%s",
                               e, e.raw[:RAW_LOG_LIMIT])
            return

        with self._stats_lock:
            self.last_slot = sample.player_slot
            self.last_device = sample.device_id
        self.store.put(sample.player_slot, sample)

    def _note_rejected(self, error):
        with self._stats_lock:
            self.rejected_count += 1
            if error is not None:
                self.last_slot = error.player_slot
                self.last_device = error.device_id
