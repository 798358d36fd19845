# -*- coding=utf-8 -*-
from collections import namedtuple, OrderedDict
import logging

logger = logging.getLogger(__name__)

__all__ = ["SnapshotRecord", "format_creation"]


class SnapshotRecord(namedtuple("SnapshotRecord", [
    "name", "dataset", "creation", "used", "referenced", "clones", "defer_destroy", "logical_used",
    "logical_referenced", "guid", "user_refs", "written", "type",
])):
    """
    Properties of a single ZFS snapshot as reported by `zfs get`. Byte counters are in bytes,
    `creation` is an offset-aware UTC datetime.
    """

    def __new__(cls, name, dataset, creation=None, used=0, referenced=0, clones=(), defer_destroy=False,
                logical_used=0, logical_referenced=0, guid=0, user_refs=0, written=0, type=""):
        return super().__new__(cls, name, dataset, creation, used, referenced, tuple(clones or ()), defer_destroy,
                               logical_used, logical_referenced, guid, user_refs, written, type)

    def __str__(self):
        return self.name

    def to_data(self):
        data = OrderedDict()
        data["name"] = self.name
        data["dataset"] = self.dataset
        data["creation"] = format_creation(self.creation)
        data["used"] = self.used
        data["referenced"] = self.referenced
        if self.clones:
            data["clones"] = list(self.clones)
        data["defer_destroy"] = self.defer_destroy
        data["logical_used"] = self.logical_used
        data["logical_referenced"] = self.logical_referenced
        data["guid"] = self.guid
        data["user_refs"] = self.user_refs
        data["written"] = self.written
        data["type"] = self.type
        return data


def format_creation(creation):
    if creation is None:
        return None

    return creation.strftime("%Y-%m-%dT%H:%M:%SZ")
