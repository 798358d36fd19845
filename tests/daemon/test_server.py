# -*- coding=utf-8 -*-
import socket
from unittest.mock import Mock
import urllib.error
import urllib.request

from prometheus_client import CollectorRegistry, Gauge
import pytest

from zfssnap.daemon.server import MetricsServer, parse_addr


@pytest.mark.parametrize("addr,result", [
    (":9464", ("", 9464)),
    ("127.0.0.1:8080", ("127.0.0.1", 8080)),
    ("[::1]:9464", ("::1", 9464)),
    ("localhost:0", ("localhost", 0)),
])
def test__parse_addr(addr, result):
    assert parse_addr(addr) == result


@pytest.mark.parametrize("addr", ["9464", "localhost:", ":http", ":70000"])
def test__parse_addr__invalid(addr):
    with pytest.raises(ValueError):
        parse_addr(addr)


@pytest.fixture()
def registry():
    registry = CollectorRegistry()
    Gauge("test_value", "Test value", registry=registry).set(3)
    return registry


@pytest.fixture()
def server(registry):
    server = MetricsServer("127.0.0.1:0", registry)
    server.start()
    try:
        yield server
    finally:
        server.stop()


def fetch(server, path):
    try:
        with urllib.request.urlopen(f"http://127.0.0.1:{server.port}{path}", timeout=5) as response:
            return response.status, response.headers["Content-Type"], response.read().decode("utf-8")
    except urllib.error.HTTPError as e:
        return e.code, e.headers["Content-Type"], e.read().decode("utf-8")


def test__metrics(server):
    status, content_type, body = fetch(server, "/metrics")

    assert status == 200
    assert content_type.startswith("text/plain")
    assert "test_value 3.0" in body


def test__healthz(server):
    assert fetch(server, "/healthz") == (200, "text/plain; charset=utf-8", "ok\n")


def test__not_found(server):
    assert fetch(server, "/")[0] == 404


def test__metrics_error():
    server = MetricsServer("127.0.0.1:0", Mock(collect=Mock(side_effect=RuntimeError("boom"))))
    server.start()
    try:
        assert fetch(server, "/metrics")[0] == 500
    finally:
        server.stop()


def test__address_in_use(registry):
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        s.listen()

        with pytest.raises(OSError):
            MetricsServer(f"127.0.0.1:{s.getsockname()[1]}", registry).start()


def test__stop_not_started():
    MetricsServer("127.0.0.1:0").stop()
