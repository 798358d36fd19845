# -*- coding=utf-8 -*-
from unittest.mock import Mock

import pytest

from zfssnap.zfs.memory import InMemorySnapshotter


@pytest.fixture()
def configure_logging(monkeypatch):
    configure_logging = Mock()
    monkeypatch.setattr("zfssnap.main.configure_logging", configure_logging)
    return configure_logging


@pytest.fixture()
def snapshotter_cls(monkeypatch, configure_logging):
    for name in ("ZFSSNAP_ZFS_PATH", "ZFSSNAP_TIMEOUT", "ZFSSNAP_LOG_TYPE"):
        monkeypatch.delenv(name, raising=False)

    snapshotter_cls = Mock(return_value=InMemorySnapshotter(["pool/a@snap1", "pool/b@snap1"]))
    monkeypatch.setattr("zfssnap.commands.utils.ZfsCliSnapshotter", snapshotter_cls)
    return snapshotter_cls


@pytest.fixture()
def snapshotter(snapshotter_cls):
    return snapshotter_cls.return_value
