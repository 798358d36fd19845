# -*- coding=utf-8 -*-
import argparse
import logging
import sys

import coloredlogs

from .commands.create import create
from .commands.daemon import daemon
from .commands.delete import delete
from .commands.get import get_snapshots
from .commands.list import list_snapshots
from .commands.utils import load_configuration
from .commands.version import version
from .definition.definition import OUTPUT_TYPES, parse_duration
from .utils.logging import JsonFormatter, LongStringsFilter
from .zfs.exception import SnapshotError

logger = logging.getLogger(__name__)

LOGGING_FORMAT = "[%(asctime)s] %(levelname)-8s [%(threadName)s] [%(name)s] %(message)s"


class LoggingConfiguration:
    def __init__(self, value):
        self.default_level = logging.INFO
        self.loggers = []

        for v in value.split(","):
            if ":" in v:
                logger_name, level_name = v.split(":", 1)
                self.loggers.append((logger_name, self._parse_level(level_name)))
            else:
                self.default_level = self._parse_level(v)

    def _parse_level(self, level_name):
        try:
            return logging._nameToLevel[level_name.strip().upper()]
        except KeyError:
            raise argparse.ArgumentTypeError(f"Unknown logging level: {level_name!r}")


def duration(value):
    try:
        result = parse_duration(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

    if result <= 0:
        raise argparse.ArgumentTypeError(f"Duration must be positive: {value!r}")

    return result


def configure_logging(logging_configuration, json_logs):
    logging.basicConfig(level=logging_configuration.default_level, format=LOGGING_FORMAT)
    if json_logs:
        for handler in logging.getLogger().handlers:
            handler.setFormatter(JsonFormatter())
    elif sys.stderr.isatty():
        coloredlogs.install(level=logging_configuration.default_level, fmt=LOGGING_FORMAT)
    for name, level in logging_configuration.loggers:
        logging.getLogger(name).setLevel(level)
    for handler in logging.getLogger().handlers:
        handler.addFilter(LongStringsFilter())


def build_parser():
    parser = argparse.ArgumentParser(prog="zfssnap")

    parser.add_argument("-l", "--logging", type=LoggingConfiguration,
                        help='Per-logger logging level configuration. E.g.: "info", "warning" or "info,zfssnap.zfs:debug"')
    parser.add_argument("--config", type=argparse.FileType("r"), help="YAML configuration file")
    parser.add_argument("--zfs-path", help="Path to zfs binary (default: zfs)")
    parser.add_argument("--timeout", type=duration, help="Command timeout (default: 30s)")
    parser.add_argument("--output", "--log-type", dest="output", type=str.lower, choices=OUTPUT_TYPES,
                        help="Output format (default: plain)")

    subparsers = parser.add_subparsers()
    subparsers.required = True
    subparsers.dest = "command"

    list_parser = subparsers.add_parser("list", help="List ZFS snapshots")
    list_parser.set_defaults(func=list_snapshots)

    get_parser = subparsers.add_parser("get", help="Get details for ZFS snapshots",
                                       description="If no snapshot names are provided, reads them from stdin "
                                                   "(newline-separated)")
    get_parser.add_argument("names", nargs="*", metavar="snapshot")
    get_parser.set_defaults(func=get_snapshots)

    create_parser = subparsers.add_parser("create", help="Create ZFS snapshots",
                                          description="Create snapshot <snapshot-name> on each <dataset>")
    create_parser.add_argument("targets", nargs="+", metavar="dataset... snapshot-name")
    create_parser.add_argument("--dry-run", action="store_true",
                               help="Show what would be created without actually creating")
    create_parser.add_argument("-f", "--force", action="store_true",
                               help="Destroy and re-create snapshot if it already exists")
    create_parser.add_argument("--prefix", help="Add prefix to snapshot name")
    create_parser.add_argument("--suffix", help="Add suffix to snapshot name")
    create_parser.add_argument("--timestamp", action="store_true", help="Append timestamp to snapshot name")
    create_parser.set_defaults(func=create)

    delete_parser = subparsers.add_parser("delete", help="Destroy ZFS snapshots")
    delete_parser.add_argument("names", nargs="+", metavar="snapshot")
    delete_parser.set_defaults(func=delete)

    daemon_parser = subparsers.add_parser("daemon", help="Serve snapshot count metrics")
    daemon_parser.add_argument("-a", "--addr", help="Address to bind the metrics server (default: :9464)")
    daemon_parser.add_argument("--interval", type=duration, help="Snapshot count refresh interval (default: 30s)")
    daemon_parser.set_defaults(func=daemon)

    version_parser = subparsers.add_parser("version", help="Print version")
    version_parser.set_defaults(func=version)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    args.configuration = load_configuration(args)

    if args.logging is None:
        args.logging = LoggingConfiguration("info" if args.command == "daemon" else "warning")

    configure_logging(args.logging, args.command == "daemon" or args.configuration.output == "json")

    try:
        args.func(args)
    except SnapshotError as e:
        sys.stderr.write(f"{e!s}\n")
        sys.exit(1)
