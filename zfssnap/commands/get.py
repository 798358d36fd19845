# -*- coding=utf-8 -*-
import logging
import sys

from zfssnap.zfs.exception import InvalidArgumentError

from .utils import get_snapshotter, write_json, write_lines

logger = logging.getLogger(__name__)

__all__ = ["get_snapshots"]


def read_names(stream) -> [str]:
    return [line.strip() for line in stream if line.strip()]


def get_snapshots(args):
    names = args.names or read_names(sys.stdin)
    if not names:
        raise InvalidArgumentError("no snapshot names provided")

    snapshotter = get_snapshotter(args)

    records = []
    for name in names:
        records.append(snapshotter.get(name))

    if args.configuration.output == "json":
        if len(records) == 1:
            write_json(records[0].to_data())
        else:
            write_json([record.to_data() for record in records])
    else:
        write_lines([record.name for record in records])
