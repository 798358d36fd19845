# -*- coding=utf-8 -*-
import json
import logging
import os
import sys

import jsonschema.exceptions
import yaml

from zfssnap.definition.definition import Configuration
from zfssnap.zfs.cli import ZfsCliSnapshotter

logger = logging.getLogger(__name__)

__all__ = ["load_configuration", "get_snapshotter", "write_json", "write_lines"]


def load_configuration(args, environ=None) -> Configuration:
    """
    Defaults, then `--config` file, then environment, then command-line flags.
    """
    environ = os.environ if environ is None else environ

    configuration = Configuration()

    if getattr(args, "config", None) is not None:
        try:
            data = yaml.safe_load(args.config)
        except yaml.YAMLError as e:
            sys.stderr.write(f"Configuration syntax error: {e!s}\n")
            sys.exit(1)

        try:
            configuration = Configuration.from_data(data, configuration)
        except jsonschema.exceptions.ValidationError as e:
            sys.stderr.write(f"Configuration validation error: {e.message}\n")
            sys.exit(1)
        except ValueError as e:
            sys.stderr.write(f"{e!s}\n")
            sys.exit(1)

    try:
        return Configuration.from_environ(environ, configuration).replace(
            zfs_path=getattr(args, "zfs_path", None),
            timeout=getattr(args, "timeout", None),
            output=getattr(args, "output", None),
        )
    except ValueError as e:
        sys.stderr.write(f"{e!s}\n")
        sys.exit(1)


def get_snapshotter(args):
    return ZfsCliSnapshotter(args.configuration)


def write_json(data, stream=None):
    stream = stream or sys.stdout
    stream.write(json.dumps(data, separators=(",", ":"), ensure_ascii=False) + "\n")


def write_lines(lines, stream=None):
    stream = stream or sys.stdout
    for line in lines:
        stream.write(f"{line}\n")
