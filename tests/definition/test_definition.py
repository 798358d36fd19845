# -*- coding=utf-8 -*-
from datetime import timedelta
import logging

import jsonschema.exceptions
import pytest

from zfssnap.definition.definition import *


@pytest.mark.parametrize("value,result", [
    (5, 5.0),
    (2.5, 2.5),
    ("10", 10.0),
    ("1.5", 1.5),
    ("PT30S", 30.0),
    ("pt5m", 300.0),
    ("P1D", 86400.0),
    ("30s", 30.0),
    ("500ms", 0.5),
    ("5m", 300.0),
    ("1h30m", 5400.0),
    (timedelta(minutes=2), 120.0),
])
def test__parse_duration(value, result):
    assert parse_duration(value) == result


@pytest.mark.parametrize("value", ["", "abc", "5 minutes", "P1M", "PTXS", "-5s", True])
def test__parse_duration__invalid(value):
    with pytest.raises(DefinitionError):
        parse_duration(value)


def test__defaults():
    configuration = Configuration()

    assert configuration.zfs_path == "zfs"
    assert configuration.timeout == 30.0
    assert configuration.output == "plain"
    assert configuration.metrics_addr == ":9464"
    assert configuration.poll_interval == 30.0


@pytest.mark.parametrize("timeout", [0, -1, None])
def test__non_positive_timeout_falls_back_to_default(timeout):
    assert Configuration(timeout=timeout).timeout == 30.0
    assert Configuration(poll_interval=timeout).poll_interval == 30.0


def test__output_normalized():
    assert Configuration(output=" JSON ").output == "json"


def test__invalid_output():
    with pytest.raises(DefinitionError):
        Configuration(output="xml")


def test__replace():
    configuration = Configuration(zfs_path="/sbin/zfs", timeout=10)

    replaced = configuration.replace(zfs_path=None, timeout=5, output="json")

    assert replaced == Configuration(zfs_path="/sbin/zfs", timeout=5, output="json")
    assert configuration.timeout == 10.0


def test__from_data():
    configuration = Configuration.from_data({
        "zfs-path": "/usr/sbin/zfs",
        "timeout": "1m",
        "output": "json",
        "metrics-addr": "127.0.0.1:9100",
        "poll-interval": 15,
    })

    assert configuration == Configuration(zfs_path="/usr/sbin/zfs", timeout=60, output="json",
                                          metrics_addr="127.0.0.1:9100", poll_interval=15)


def test__from_data__empty():
    assert Configuration.from_data(None) == Configuration()


@pytest.mark.parametrize("data", [
    {"unknown": 1},
    {"output": "xml"},
    {"timeout": 0},
    {"timeout": ""},
    {"zfs-path": 1},
])
def test__from_data__invalid(data):
    with pytest.raises(jsonschema.exceptions.ValidationError):
        Configuration.from_data(data)


def test__from_data__invalid_duration():
    with pytest.raises(DefinitionError):
        Configuration.from_data({"timeout": "forever"})


def test__from_environ():
    base = Configuration(zfs_path="/sbin/zfs", metrics_addr=":9100")

    configuration = Configuration.from_environ({
        "ZFSSNAP_ZFS_PATH": "/usr/local/sbin/zfs",
        "ZFSSNAP_TIMEOUT": "PT1M",
        "ZFSSNAP_LOG_TYPE": "json",
    }, base)

    assert configuration == Configuration(zfs_path="/usr/local/sbin/zfs", timeout=60, output="json",
                                          metrics_addr=":9100")


def test__from_environ__empty_values_are_ignored():
    base = Configuration(zfs_path="/sbin/zfs", timeout=10)

    assert Configuration.from_environ({"ZFSSNAP_ZFS_PATH": " ", "ZFSSNAP_TIMEOUT": ""}, base) == base


def test__from_environ__invalid_timeout(caplog):
    with caplog.at_level(logging.WARNING):
        configuration = Configuration.from_environ({"ZFSSNAP_TIMEOUT": "soon"})

    assert configuration.timeout == 30.0
    assert "Ignoring ZFSSNAP_TIMEOUT" in caplog.text
