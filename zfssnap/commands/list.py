# -*- coding=utf-8 -*-
import logging

from .utils import get_snapshotter, write_json, write_lines

logger = logging.getLogger(__name__)

__all__ = ["list_snapshots"]


def list_snapshots(args):
    names = get_snapshotter(args).list()

    if args.configuration.output == "json":
        write_json(names)
    else:
        write_lines(names)
