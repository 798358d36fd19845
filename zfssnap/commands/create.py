# -*- coding=utf-8 -*-
import logging
import sys

from zfssnap.snapshot.create import compose_snapshot_name, create_snapshots

from .utils import get_snapshotter, write_json, write_lines

logger = logging.getLogger(__name__)

__all__ = ["create"]


def create(args):
    *datasets, name = args.targets
    if not datasets:
        sys.stderr.write("At least one dataset and a snapshot name are required\n")
        sys.exit(2)

    name = compose_snapshot_name(name, args.prefix, args.suffix, args.timestamp)

    result = create_snapshots(get_snapshotter(args), datasets, name, args.force, args.dry_run)

    if args.configuration.output == "json":
        write_json({
            "created": result.created,
            "errors": result.errors,
            "count": len(result.created),
            "dry_run": result.dry_run,
        })
    else:
        write_lines([f"{'Would create' if result.dry_run else 'Created'}: {name}" for name in result.created])
        write_lines([f"Error: {error}" for error in result.errors], sys.stderr)

    result.raise_for_errors()
