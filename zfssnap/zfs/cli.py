# -*- coding=utf-8 -*-
import contextlib
import itertools
import logging
import os
import signal
import subprocess
import time

from zfssnap.definition.definition import Configuration
from zfssnap.snapshot.parse import SNAPSHOT_PROPERTIES, parse_snapshot_properties
from zfssnap.snapshot.snapshot import SnapshotRecord
from zfssnap.utils.logging import PrefixLoggerAdapter

from .exception import *
from .interface import Snapshotter
from .validate import validate_snapshot_name, validate_snapshot_target

logger = logging.getLogger(__name__)

__all__ = ["ZfsCliSnapshotter"]

# How often a running command checks its cancellation event
CANCEL_POLL_INTERVAL = 0.1


class ZfsCliSnapshotter(Snapshotter):
    _logger_counter = itertools.count(1)

    def __init__(self, configuration: Configuration = None):
        self.configuration = configuration or Configuration()

    def __repr__(self):
        return f"<ZfsCliSnapshotter({self.configuration.zfs_path!r})>"

    def list(self, cancel=None) -> [str]:
        args = [self.configuration.zfs_path, "list", "-H", "-t", "snapshot", "-o", "name"]

        with ZfsCliExceptionHandler("zfs list", args, self.configuration.timeout):
            output = self.exec(args, cancel)

        return [name.strip() for name in output.split("\n") if name.strip()]

    def get(self, name: str, cancel=None) -> SnapshotRecord:
        name = validate_snapshot_name(name)

        args = [self.configuration.zfs_path, "get", "-H", "-p", "-o", "property,value",
                ",".join(SNAPSHOT_PROPERTIES), name]

        with ZfsCliExceptionHandler(f"zfs get {name}", args, self.configuration.timeout):
            output = self.exec(args, cancel)

        if not output.strip():
            raise SnapshotNotFoundError(f"snapshot not found: {name}")

        return parse_snapshot_properties(output, name)

    def create(self, dataset: str, component: str, cancel=None):
        name = validate_snapshot_target(dataset, component)

        logger.info("Creating snapshot %r", name)

        args = [self.configuration.zfs_path, "snapshot", name]

        with ZfsCliExceptionHandler(f"zfs snapshot {name}", args, self.configuration.timeout):
            self.exec(args, cancel)

    def delete(self, name: str, cancel=None):
        name = validate_snapshot_name(name)

        logger.info("Destroying snapshot %r", name)

        args = [self.configuration.zfs_path, "destroy", name]

        with ZfsCliExceptionHandler(f"zfs destroy {name}", args, self.configuration.timeout):
            self.exec(args, cancel)

    def exec(self, args, cancel=None) -> str:
        """
        Runs command and returns its stdout.

        Raises `ExecException` on non-zero exit code, `TimeoutError` when configured timeout expires and
        `ExecCancelled` when `cancel` event is set while the command is running.
        """
        exec_logger = PrefixLoggerAdapter(logger, f"exec:{next(self._logger_counter)}")

        exec_logger.debug("Running %r", args)
        process = subprocess.Popen(args, stdout=subprocess.PIPE, stderr=subprocess.PIPE, stdin=subprocess.DEVNULL,
                                   encoding="utf8", errors="replace", start_new_session=True)

        deadline = time.monotonic() + self.configuration.timeout
        while True:
            remaining = deadline - time.monotonic()
            try:
                stdout, stderr = process.communicate(timeout=max(0, min(CANCEL_POLL_INTERVAL, remaining)))
                break
            except subprocess.TimeoutExpired:
                if cancel is not None and cancel.is_set():
                    exec_logger.debug("Cancelled")
                    self._kill(process)
                    raise ExecCancelled()

                if time.monotonic() >= deadline:
                    exec_logger.debug("Timeout")
                    self._kill(process)
                    raise TimeoutError()

        if process.returncode != 0:
            exec_logger.debug("Error %r: %r", process.returncode, stderr)
            raise ExecException(process.returncode, stdout, stderr)

        exec_logger.debug("Success: %r", stdout)
        return stdout

    def _kill(self, process):
        with contextlib.suppress(ProcessLookupError):
            os.killpg(process.pid, signal.SIGKILL)
        with contextlib.suppress(ProcessLookupError):
            process.kill()
        process.communicate()
