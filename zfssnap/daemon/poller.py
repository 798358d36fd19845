# -*- coding=utf-8 -*-
import enum
import logging
import threading

from zfssnap.zfs.exception import SnapshotError
from zfssnap.zfs.interface import Snapshotter

from .metrics import SnapshotCountGauge

logger = logging.getLogger(__name__)

__all__ = ["PollerState", "SnapshotCountPoller"]


class PollerState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class SnapshotCountPoller:
    def __init__(self, snapshotter: Snapshotter, gauge: SnapshotCountGauge, interval=30.0):
        self.snapshotter = snapshotter
        self.gauge = gauge
        self.interval = interval

        self.state = PollerState.IDLE
        self.stop_event = threading.Event()
        self.thread = None

    def start(self):
        if self.state != PollerState.IDLE:
            raise RuntimeError(f"Poller is {self.state.value}")

        self.state = PollerState.RUNNING
        self.thread = threading.Thread(daemon=True, name="snapshot_count_poller", target=self.run)
        self.thread.start()

    def run(self):
        self.state = PollerState.RUNNING
        logger.info("Polling snapshot count every %r seconds", self.interval)
        try:
            while not self.stop_event.is_set():
                self.measure()

                if self.stop_event.wait(self.interval):
                    break
        finally:
            self.state = PollerState.STOPPED
            logger.info("Snapshot count poller stopped")

    def measure(self):
        try:
            snapshots = self.snapshotter.list()
        except SnapshotError as e:
            logger.error("Failed to list snapshots: %s", e)
            return False
        except Exception:
            logger.error("Unhandled exception while listing snapshots", exc_info=True)
            return False

        logger.debug("Snapshot count: %d", len(snapshots))
        self.gauge.publish(len(snapshots))
        return True

    def stop(self, grace=None):
        self.stop_event.set()

        if self.thread is not None:
            self.thread.join(grace)
            if self.thread.is_alive():
                logger.warning("Snapshot count poller did not stop within %r seconds", grace)
        else:
            self.state = PollerState.STOPPED
