# -*- coding=utf-8 -*-
import logging
import threading

from opentelemetry.exporter.prometheus import PrometheusMetricReader
from opentelemetry.metrics import CallbackOptions, Observation
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.resources import Resource, SERVICE_NAME, SERVICE_VERSION

from zfssnap.version import __version__

logger = logging.getLogger(__name__)

__all__ = ["SOURCE", "SnapshotCountGauge", "SnapshotMetrics"]

SOURCE = "daemon"


class SnapshotCountGauge:
    """
    Last successfully measured snapshot count. Written by the poller, read on every scrape.
    """
    def __init__(self):
        self.lock = threading.Lock()
        self.value = None

    def publish(self, count: int):
        with self.lock:
            self.value = count

    def get(self):
        with self.lock:
            return self.value

    def observe(self, options: CallbackOptions):
        value = self.get()
        if value is not None:
            yield Observation(value, {"source": SOURCE})


class SnapshotMetrics:
    def __init__(self, gauge: SnapshotCountGauge, service_name="zfssnap-daemon", service_version=__version__):
        self.gauge = gauge

        resource = Resource.create({
            SERVICE_NAME: service_name,
            SERVICE_VERSION: service_version,
        })

        # Registers itself in `prometheus_client.REGISTRY`
        self.reader = PrometheusMetricReader()
        self.meter_provider = MeterProvider(resource=resource, metric_readers=[self.reader])

        meter = self.meter_provider.get_meter(service_name, service_version)
        meter.create_observable_gauge(
            "snapshot_count_current",
            callbacks=[self.gauge.observe],
            description="Current number of ZFS snapshots",
        )

    def shutdown(self):
        self.meter_provider.shutdown()
