# -*- coding=utf-8 -*-
from collections import OrderedDict
from datetime import datetime
import logging
import threading

import pytz

from zfssnap.snapshot.name import split_snapshot_name
from zfssnap.snapshot.snapshot import SnapshotRecord

from .exception import SnapshotAlreadyExistsError, SnapshotNotFoundError, SnapshotTimeoutError
from .interface import Snapshotter
from .validate import validate_snapshot_name, validate_snapshot_target

logger = logging.getLogger(__name__)

__all__ = ["InMemorySnapshotter"]


class InMemorySnapshotter(Snapshotter):
    """
    Snapshotter keeping snapshots in a dict. Validates names exactly like `ZfsCliSnapshotter`.

    :param records: initial snapshots, either `SnapshotRecord` or full names
    :param errors: `{operation: exception}` to raise instead of performing `list`, `get`, `create` or `delete`
    """
    def __init__(self, records=None, errors=None):
        self.lock = threading.Lock()
        self.records = OrderedDict()
        self.errors = errors or {}
        self.calls = []

        for record in records or []:
            if not isinstance(record, SnapshotRecord):
                record = self._new_record(record)
            self.records[record.name] = record

    def __repr__(self):
        return f"<InMemorySnapshotter({len(self.records)} snapshots)>"

    def list(self, cancel=None) -> [str]:
        self._call("list", cancel)
        with self.lock:
            return list(self.records.keys())

    def get(self, name: str, cancel=None) -> SnapshotRecord:
        name = validate_snapshot_name(name)
        self._call("get", cancel, name)
        with self.lock:
            try:
                return self.records[name]
            except KeyError:
                raise SnapshotNotFoundError(f"snapshot not found: {name}") from None

    def create(self, dataset: str, component: str, cancel=None):
        name = validate_snapshot_target(dataset, component)
        self._call("create", cancel, name)
        with self.lock:
            if name in self.records:
                raise SnapshotAlreadyExistsError(f"cannot create snapshot '{name}': dataset already exists")

            self.records[name] = self._new_record(name)

    def delete(self, name: str, cancel=None):
        name = validate_snapshot_name(name)
        self._call("delete", cancel, name)
        with self.lock:
            try:
                self.records.pop(name)
            except KeyError:
                raise SnapshotNotFoundError(f"could not find any snapshots to destroy: {name}") from None

    def _call(self, operation, cancel, *args):
        self.calls.append((operation,) + args)

        if cancel is not None and cancel.is_set():
            raise SnapshotTimeoutError(f"{operation} {' '.join(args)}".strip(), None)

        error = self.errors.get(operation)
        if error is not None:
            raise error

    def _new_record(self, name):
        return SnapshotRecord(
            name=name,
            dataset=split_snapshot_name(name)[0],
            creation=datetime.now(pytz.utc).replace(microsecond=0),
            type="snapshot",
        )
