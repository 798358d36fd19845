# -*- coding=utf-8 -*-
import logging

logger = logging.getLogger(__name__)

__all__ = ["Snapshotter"]


class Snapshotter:
    """
    Everything `zfssnap` needs from the snapshot backend.

    Every method accepts optional `cancel` `threading.Event`. Setting it aborts the operation with
    `SnapshotTimeoutError`.
    """

    def list(self, cancel=None) -> [str]:
        raise NotImplementedError

    def get(self, name: str, cancel=None):
        raise NotImplementedError

    def create(self, dataset: str, component: str, cancel=None):
        raise NotImplementedError

    def delete(self, name: str, cancel=None):
        raise NotImplementedError
