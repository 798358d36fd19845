# -*- coding=utf-8 -*-
import logging
import signal
import sys
import threading

from zfssnap.daemon.daemon import DEFAULT_GRACE_PERIOD, Daemon

logger = logging.getLogger(__name__)

__all__ = ["daemon"]


def daemon(args):
    configuration = args.configuration.replace(metrics_addr=args.addr, poll_interval=args.interval)

    d = Daemon(configuration)
    try:
        d.start()
    except (OSError, ValueError) as e:
        sys.stderr.write(f"Unable to start daemon: {e!s}\n")
        sys.exit(1)

    stop_event = threading.Event()

    def handler(signum, frame):
        logger.info("Received signal %s, shutting down", signal.Signals(signum).name)
        stop_event.set()

    signal.signal(signal.SIGINT, handler)
    signal.signal(signal.SIGTERM, handler)

    while not stop_event.wait(1):
        pass

    d.stop(DEFAULT_GRACE_PERIOD)
