# -*- coding=utf-8 -*-
from collections import namedtuple
from datetime import datetime
import logging

from zfssnap.zfs.exception import (InvalidArgumentError, PartialBatchFailureError, SnapshotAlreadyExistsError,
                                   SnapshotError)
from zfssnap.zfs.interface import Snapshotter

logger = logging.getLogger(__name__)

__all__ = ["CreateResult", "compose_snapshot_name", "create_snapshots"]

TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


class CreateResult(namedtuple("CreateResult", ["created", "errors", "dry_run"])):
    def raise_for_errors(self):
        if self.errors:
            raise PartialBatchFailureError(self.created, self.errors)


def compose_snapshot_name(name: str, prefix: str=None, suffix: str=None, timestamp: bool=False,
                          now: datetime=None) -> str:
    if prefix:
        name = f"{prefix}-{name}"

    if suffix:
        name = f"{name}-{suffix}"

    if timestamp:
        name = f"{name}-{(now or datetime.now()).strftime(TIMESTAMP_FORMAT)}"

    return name


def create_snapshots(snapshotter: Snapshotter, datasets: [str], name: str, force: bool=False,
                     dry_run: bool=False, cancel=None) -> CreateResult:
    """
    Creates snapshot `name` on each of `datasets`.

    A failure on one dataset never stops processing of the remaining ones; it is recorded in
    `CreateResult.errors` instead. With `force`, an existing snapshot is destroyed and created again.
    With `dry_run`, nothing is created and every target is reported in `CreateResult.created`.
    """
    if not datasets:
        raise InvalidArgumentError("at least one dataset is required")

    created = []
    errors = []
    for dataset in datasets:
        full_name = f"{dataset}@{name}"

        if dry_run:
            logger.info("Would create snapshot %r", full_name)
            created.append(full_name)
            continue

        try:
            snapshotter.create(dataset, name, cancel)
        except SnapshotAlreadyExistsError as e:
            if not force:
                logger.warning("Snapshot %r already exists", full_name)
                errors.append(f"failed to create snapshot {full_name}: {e}")
                continue

            logger.info("Snapshot %r already exists, destroying it", full_name)
            try:
                snapshotter.delete(full_name, cancel)
            except SnapshotError as e:
                logger.warning("Failed to destroy existing snapshot %r: %s", full_name, e)
                errors.append(f"failed to destroy existing snapshot {full_name}: {e}")
                continue

            try:
                snapshotter.create(dataset, name, cancel)
            except SnapshotError as e:
                logger.warning("Failed to re-create snapshot %r: %s", full_name, e)
                errors.append(f"failed to create snapshot {full_name}: {e}")
                continue
        except SnapshotError as e:
            logger.warning("Failed to create snapshot %r: %s", full_name, e)
            errors.append(f"failed to create snapshot {full_name}: {e}")
            continue

        created.append(full_name)

    return CreateResult(created, errors, dry_run)
