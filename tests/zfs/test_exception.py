# -*- coding=utf-8 -*-
import pytest

from zfssnap.zfs.exception import *

ARGS = ["zfs", "snapshot", "pool@snap"]


def handle(exception, timeout=30):
    with ZfsCliExceptionHandler("zfs snapshot pool@snap", ARGS, timeout):
        raise exception


@pytest.mark.parametrize("stderr,error", [
    ("cannot create snapshot 'pool@snap': dataset already exists\n", SnapshotAlreadyExistsError),
    ("cannot open 'pool@snap': dataset does not exist\n", SnapshotNotFoundError),
    ("could not find any snapshots to destroy; check snapshot names.\n", SnapshotNotFoundError),
    ("cannot create snapshot 'pool@snap': out of space\n", ExecutionFailedError),
])
def test__classify_stderr(stderr, error):
    with pytest.raises(error) as e:
        handle(ExecException(1, "", stderr))

    assert str(e.value).startswith("zfs snapshot pool@snap failed: ")
    assert not str(e.value).endswith("\n")


def test__execution_failed_without_stderr():
    with pytest.raises(ExecutionFailedError) as e:
        handle(ExecException(2, "", ""))

    assert e.value.command == ARGS
    assert e.value.returncode == 2
    assert str(e.value) == "zfs snapshot pool@snap failed: exit status 2"


def test__timeout():
    with pytest.raises(SnapshotTimeoutError) as e:
        handle(TimeoutError(), 1.5)

    assert e.value.timeout == 1.5
    assert str(e.value) == "zfs snapshot pool@snap timed out after 1.5 seconds"


def test__cancelled():
    with pytest.raises(SnapshotTimeoutError) as e:
        handle(ExecCancelled())

    assert e.value.timeout is None
    assert str(e.value) == "zfs snapshot pool@snap was cancelled"


def test__os_error():
    with pytest.raises(ExecutionFailedError) as e:
        handle(FileNotFoundError(2, "No such file or directory"))

    assert e.value.returncode is None
    assert "No such file or directory" in str(e.value)


def test__other_exceptions_pass_through():
    with pytest.raises(KeyError):
        handle(KeyError("name"))


def test__no_exception():
    with ZfsCliExceptionHandler("zfs list", ["zfs", "list"]):
        pass


def test__hierarchy():
    assert issubclass(InvalidArgumentError, ValueError)
    for error in [InvalidArgumentError, SnapshotNotFoundError, SnapshotAlreadyExistsError, ExecutionFailedError,
                  SnapshotTimeoutError, PartialBatchFailureError]:
        assert issubclass(error, SnapshotError)


def test__partial_batch_failure():
    e = PartialBatchFailureError(["pool/a@snap"], ["failed to create snapshot pool/b@snap: out of space"])

    assert str(e) == "failed to create 1 snapshot(s)"
    assert e.created == ["pool/a@snap"]
