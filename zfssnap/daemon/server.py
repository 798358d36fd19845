# -*- coding=utf-8 -*-
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
import logging
import threading

from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

logger = logging.getLogger(__name__)

__all__ = ["MetricsServer", "parse_addr"]


def parse_addr(addr: str) -> (str, int):
    """
    Parses `host:port` or `:port` listen address.
    """
    host, sep, port = addr.strip().rpartition(":")
    if not sep:
        raise ValueError(f"Invalid listen address {addr!r}: port is required")

    try:
        port = int(port)
    except ValueError:
        raise ValueError(f"Invalid listen address {addr!r}: invalid port") from None

    if not 0 <= port <= 65535:
        raise ValueError(f"Invalid listen address {addr!r}: invalid port")

    return host.strip("[]"), port


class MetricsRequestHandler(BaseHTTPRequestHandler):
    registry = REGISTRY

    def do_GET(self):
        path = self.path.split("?", 1)[0]

        if path == "/metrics":
            try:
                body = generate_latest(self.registry)
            except Exception:
                logger.error("Unhandled exception while generating metrics", exc_info=True)
                self._respond(500, "text/plain; charset=utf-8", b"error generating metrics\n")
                return

            self._respond(200, CONTENT_TYPE_LATEST, body)
        elif path == "/healthz":
            self._respond(200, "text/plain; charset=utf-8", b"ok\n")
        else:
            self._respond(404, "text/plain; charset=utf-8", b"not found\n")

    def log_message(self, format, *args):
        logger.debug("%s - %s", self.address_string(), format % args)

    def _respond(self, status, content_type, body):
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


class MetricsServer:
    def __init__(self, addr: str, registry=REGISTRY):
        self.addr = addr
        self.registry = registry

        self.server = None
        self.thread = None

    def start(self):
        handler = type("MetricsRequestHandler", (MetricsRequestHandler,), {"registry": self.registry})

        self.server = ThreadingHTTPServer(parse_addr(self.addr), handler)
        self.server.daemon_threads = True

        self.thread = threading.Thread(daemon=True, name="metrics_server", target=self.server.serve_forever)
        self.thread.start()

        logger.info("HTTP server listening on %s:%d/metrics", *self.server.server_address[:2])

    @property
    def port(self):
        return self.server.server_address[1]

    def stop(self):
        if self.server is not None:
            self.server.shutdown()
            self.server.server_close()
            self.server = None
