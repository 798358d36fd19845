# -*- coding=utf-8 -*-
import logging

from zfssnap.version import version_string

from .utils import write_json, write_lines

logger = logging.getLogger(__name__)

__all__ = ["version"]


def version(args):
    if args.configuration.output == "json":
        write_json({"version": version_string()})
    else:
        write_lines([version_string()])
