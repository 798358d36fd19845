# -*- coding=utf-8 -*-
from unittest.mock import Mock, patch

import pytest

from zfssnap.main import main


@pytest.fixture()
def daemon_cls(snapshotter):
    with patch("zfssnap.commands.daemon.Daemon") as daemon_cls:
        with patch("zfssnap.commands.daemon.signal.signal") as signal_:
            with patch("zfssnap.commands.daemon.threading.Event") as Event:
                event = Mock()
                event.wait.side_effect = [False, True]
                Event.return_value = event

                daemon_cls.signal = signal_
                yield daemon_cls


def test__daemon(daemon_cls, configure_logging):
    main(["--timeout", "10s", "daemon", "--addr", "127.0.0.1:9100", "--interval", "1m"])

    configuration = daemon_cls.call_args[0][0]
    assert configuration.metrics_addr == "127.0.0.1:9100"
    assert configuration.poll_interval == 60.0
    assert configuration.timeout == 10.0

    daemon_cls.return_value.start.assert_called_once_with()
    daemon_cls.return_value.stop.assert_called_once_with(30.0)
    assert daemon_cls.signal.call_count == 2

    logging_configuration, json_logs = configure_logging.call_args[0]
    assert json_logs is True


def test__daemon__defaults(daemon_cls):
    main(["daemon"])

    configuration = daemon_cls.call_args[0][0]
    assert configuration.metrics_addr == ":9464"
    assert configuration.poll_interval == 30.0


def test__daemon__start_failure(daemon_cls, capsys):
    daemon_cls.return_value.start.side_effect = OSError("[Errno 98] Address already in use")

    with pytest.raises(SystemExit) as e:
        main(["daemon"])

    assert e.value.code == 1
    assert capsys.readouterr().err == "Unable to start daemon: [Errno 98] Address already in use\n"
    daemon_cls.return_value.stop.assert_not_called()
