# -*- coding=utf-8 -*-
from datetime import datetime
import logging

import pytz

from .name import split_snapshot_name
from .snapshot import SnapshotRecord

logger = logging.getLogger(__name__)

__all__ = ["SNAPSHOT_PROPERTIES", "UINT64_MAX", "parse_snapshot_properties", "parse_uint", "parse_defer_destroy"]

SNAPSHOT_PROPERTIES = [
    "name", "creation", "used", "referenced", "clones", "defer_destroy",
    "logicalused", "logicalreferenced", "guid", "userrefs", "written", "type",
]

UINT64_MAX = 2 ** 64 - 1

UINT_PROPERTIES = {
    "used": "used",
    "referenced": "referenced",
    "logicalused": "logical_used",
    "logicalreferenced": "logical_referenced",
    "guid": "guid",
    "userrefs": "user_refs",
    "written": "written",
}


def parse_uint(value: str) -> int:
    value = value.strip()
    if value in ("", "-"):
        raise ValueError("empty value")

    # `int` would accept signs, underscores and non-ASCII digits
    if not all("0" <= c <= "9" for c in value):
        raise ValueError(f"invalid unsigned integer: {value!r}")

    result = int(value)
    if result > UINT64_MAX:
        raise ValueError(f"unsigned integer out of range: {value!r}")

    return result


def parse_defer_destroy(value: str) -> bool:
    return value in ("on", "yes", "1")


def parse_snapshot_properties(output: str, requested_name: str) -> SnapshotRecord:
    """
    Parses `zfs get -H -p -o property,value` output.

    Lines are expected as `<dataset@snapshot>\t<property>\t<value>\t<source>`. Malformed lines and
    unparseable numbers are skipped, leaving the corresponding field with its default value.

    :param output: stdout of `zfs get`
    :param requested_name: snapshot name used when `name` property is missing from the output
    :return: parsed snapshot record
    """
    fields = {}
    for line in output.split("\n"):
        line = line.strip()
        if not line:
            continue

        values = line.split("\t")
        if len(values) < 3:
            logger.debug("Skipping malformed line %r", line)
            continue

        property, value = values[1], values[2]
        if property == "name":
            fields["name"] = value
            fields["dataset"] = split_snapshot_name(value)[0]
        elif property == "creation":
            try:
                fields["creation"] = datetime.fromtimestamp(parse_uint(value), pytz.utc)
            except (ValueError, OverflowError, OSError) as e:
                logger.debug("Unable to parse creation %r: %r", value, e)
        elif property in UINT_PROPERTIES:
            try:
                fields[UINT_PROPERTIES[property]] = parse_uint(value)
            except ValueError as e:
                logger.debug("Unable to parse %s %r: %r", property, value, e)
        elif property == "clones":
            if value not in ("", "-"):
                fields["clones"] = value.split(",")
        elif property == "defer_destroy":
            fields["defer_destroy"] = parse_defer_destroy(value)
        elif property == "type":
            fields["type"] = value

    if not fields.get("name"):
        fields["name"] = requested_name
        fields["dataset"] = split_snapshot_name(requested_name)[0]

    return SnapshotRecord(**fields)
