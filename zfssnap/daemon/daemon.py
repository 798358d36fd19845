# -*- coding=utf-8 -*-
import logging

from prometheus_client import REGISTRY

from zfssnap.definition.definition import Configuration
from zfssnap.version import __version__
from zfssnap.zfs.cli import ZfsCliSnapshotter

from .metrics import SnapshotCountGauge, SnapshotMetrics
from .poller import SnapshotCountPoller
from .server import MetricsServer

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_GRACE_PERIOD", "Daemon"]

DEFAULT_GRACE_PERIOD = 30.0


class Daemon:
    def __init__(self, configuration: Configuration, snapshotter=None, registry=REGISTRY,
                 service_name="zfssnap-daemon", service_version=__version__):
        self.configuration = configuration
        self.snapshotter = snapshotter or ZfsCliSnapshotter(configuration)

        self.gauge = SnapshotCountGauge()
        self.metrics = SnapshotMetrics(self.gauge, service_name, service_version)
        self.poller = SnapshotCountPoller(self.snapshotter, self.gauge, configuration.poll_interval)
        self.server = MetricsServer(configuration.metrics_addr, registry)

    def start(self):
        self.poller.start()
        try:
            self.server.start()
        except Exception:
            self.poller.stop(0)
            self.metrics.shutdown()
            raise

        logger.info("Daemon started")

    def stop(self, grace=DEFAULT_GRACE_PERIOD):
        logger.info("Stopping daemon")

        self.server.stop()
        self.poller.stop(grace)
        self.metrics.shutdown()

        logger.info("Daemon stopped")
