# -*- coding=utf-8 -*-
from datetime import timedelta
import logging
import re

import isodate

from .schema import schema_validator

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_ZFS_PATH", "DEFAULT_TIMEOUT", "DEFAULT_OUTPUT", "DEFAULT_METRICS_ADDR", "DEFAULT_POLL_INTERVAL",
           "OUTPUT_TYPES", "DefinitionError", "Configuration", "parse_duration"]

DEFAULT_ZFS_PATH = "zfs"
DEFAULT_TIMEOUT = 30.0
DEFAULT_OUTPUT = "plain"
DEFAULT_METRICS_ADDR = ":9464"
DEFAULT_POLL_INTERVAL = 30.0

OUTPUT_TYPES = ("plain", "json")

GO_DURATION_UNITS = {"ms": 0.001, "s": 1, "m": 60, "h": 3600}


class DefinitionError(ValueError):
    pass


def parse_duration(value) -> float:
    """
    Parses duration into seconds. Accepts numbers of seconds, ISO 8601 durations (`PT30S`) and
    `30s`/`5m`/`1h30m` shorthand.
    """
    if isinstance(value, bool):
        raise DefinitionError(f"Invalid duration: {value!r}")

    if isinstance(value, (int, float)):
        return float(value)

    if isinstance(value, timedelta):
        return value.total_seconds()

    value = str(value).strip()

    if re.fullmatch(r"[0-9]+(\.[0-9]+)?", value):
        return float(value)

    if value.upper().startswith("P"):
        try:
            duration = isodate.parse_duration(value.upper())
        except isodate.ISO8601Error as e:
            raise DefinitionError(f"Invalid duration {value!r}: {e!s}") from None

        if not isinstance(duration, timedelta):
            raise DefinitionError(f"Invalid duration {value!r}: years and months are not supported")

        return duration.total_seconds()

    if re.fullmatch(r"([0-9]+(\.[0-9]+)?(ms|s|m|h))+", value):
        return sum(
            float(number) * GO_DURATION_UNITS[unit]
            for number, unit in re.findall(r"([0-9]+(?:\.[0-9]+)?)(ms|s|m|h)", value)
        )

    raise DefinitionError(f"Invalid duration: {value!r}")


class Configuration:
    def __init__(self, zfs_path=None, timeout=None, output=None, metrics_addr=None, poll_interval=None):
        self.zfs_path = (zfs_path or "").strip() or DEFAULT_ZFS_PATH

        self.timeout = DEFAULT_TIMEOUT
        if timeout is not None and timeout > 0:
            self.timeout = float(timeout)

        self.output = (output or "").strip().lower() or DEFAULT_OUTPUT
        if self.output not in OUTPUT_TYPES:
            raise DefinitionError(f"Invalid output type: {output!r}")

        self.metrics_addr = (metrics_addr or "").strip() or DEFAULT_METRICS_ADDR

        self.poll_interval = DEFAULT_POLL_INTERVAL
        if poll_interval is not None and poll_interval > 0:
            self.poll_interval = float(poll_interval)

    def __repr__(self):
        return (f"<Configuration zfs_path={self.zfs_path!r} timeout={self.timeout!r} output={self.output!r} "
                f"metrics_addr={self.metrics_addr!r} poll_interval={self.poll_interval!r}>")

    def __eq__(self, other):
        return isinstance(other, Configuration) and vars(self) == vars(other)

    def replace(self, **kwargs):
        """
        Returns new configuration where values from `kwargs` that are not `None` override current ones.
        """
        values = vars(self).copy()
        values.update({k: v for k, v in kwargs.items() if v is not None})
        return Configuration(**values)

    @classmethod
    def validate(cls, data):
        schema_validator.validate(data)

    @classmethod
    def from_data(cls, data, base=None):
        base = base or cls()
        data = data or {}

        cls.validate(data)

        return base.replace(
            zfs_path=data.get("zfs-path"),
            timeout=parse_duration(data["timeout"]) if "timeout" in data else None,
            output=data.get("output"),
            metrics_addr=data.get("metrics-addr"),
            poll_interval=parse_duration(data["poll-interval"]) if "poll-interval" in data else None,
        )

    @classmethod
    def from_environ(cls, environ, base=None):
        base = base or cls()

        timeout = None
        if environ.get("ZFSSNAP_TIMEOUT", "").strip():
            try:
                timeout = parse_duration(environ["ZFSSNAP_TIMEOUT"])
            except DefinitionError as e:
                logger.warning("Ignoring ZFSSNAP_TIMEOUT: %s", e)

        return base.replace(
            zfs_path=environ.get("ZFSSNAP_ZFS_PATH", "").strip() or None,
            timeout=timeout,
            output=environ.get("ZFSSNAP_LOG_TYPE", "").strip() or None,
        )
