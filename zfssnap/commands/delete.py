# -*- coding=utf-8 -*-
import logging

from .utils import get_snapshotter, write_json, write_lines

logger = logging.getLogger(__name__)

__all__ = ["delete"]


def delete(args):
    snapshotter = get_snapshotter(args)

    deleted = []
    for name in args.names:
        snapshotter.delete(name)
        deleted.append(name)

    if args.configuration.output == "json":
        write_json(deleted)
    else:
        write_lines([f"Deleted: {name}" for name in deleted])
