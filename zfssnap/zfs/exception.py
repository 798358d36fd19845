# -*- coding=utf-8 -*-
import logging

logger = logging.getLogger(__name__)

__all__ = ["SnapshotError", "InvalidArgumentError", "SnapshotNotFoundError", "SnapshotAlreadyExistsError",
           "ExecutionFailedError", "SnapshotTimeoutError", "PartialBatchFailureError", "ExecCancelled", "ExecException",
           "ZfsCliExceptionHandler"]


class SnapshotError(Exception):
    pass


class InvalidArgumentError(SnapshotError, ValueError):
    pass


class SnapshotNotFoundError(SnapshotError):
    pass


class SnapshotAlreadyExistsError(SnapshotError):
    pass


class ExecutionFailedError(SnapshotError):
    def __init__(self, intent, command, returncode, stderr):
        self.intent = intent
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

        super().__init__(intent, command, returncode, stderr)

    def __str__(self):
        return f"{self.intent} failed: {self.stderr.strip() or f'exit status {self.returncode}'}"


class SnapshotTimeoutError(SnapshotError):
    def __init__(self, intent, timeout):
        self.intent = intent
        self.timeout = timeout

        super().__init__(intent, timeout)

    def __str__(self):
        if self.timeout is None:
            return f"{self.intent} was cancelled"

        return f"{self.intent} timed out after {self.timeout:g} seconds"


class PartialBatchFailureError(SnapshotError):
    def __init__(self, created, errors):
        self.created = created
        self.errors = errors

        super().__init__(created, errors)

    def __str__(self):
        return f"failed to create {len(self.errors)} snapshot(s)"


class ExecCancelled(TimeoutError):
    pass


class ExecException(Exception):
    """
    Raw non-zero exit of an external command, before it is classified by `ZfsCliExceptionHandler`.
    """
    def __init__(self, returncode, stdout, stderr):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

        super().__init__(returncode, stdout, stderr)

    def __str__(self):
        return self.stderr.strip() or f"Command failed with code {self.returncode}"


class ZfsCliExceptionHandler:
    """
    Converts errors of a single `zfs` invocation into `SnapshotError` subclasses.

    :param str intent: Human-readable description of what the command was supposed to do
    :param [str] args: Command arguments
    :param timeout: Deadline the command was running with
    """
    def __init__(self, intent, args, timeout=None):
        self.intent = intent
        self.args = args
        self.timeout = timeout

    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc_val, exc_tb):
        if isinstance(exc_val, ExecCancelled):
            raise SnapshotTimeoutError(self.intent, None) from None

        if isinstance(exc_val, TimeoutError):
            raise SnapshotTimeoutError(self.intent, self.timeout) from None

        if isinstance(exc_val, OSError):
            raise ExecutionFailedError(self.intent, self.args, None, str(exc_val)) from None

        if isinstance(exc_val, ExecException):
            stderr = exc_val.stderr.strip()

            if "dataset already exists" in stderr:
                raise SnapshotAlreadyExistsError(f"{self.intent} failed: {stderr}") from None

            if (
                "dataset does not exist" in stderr or
                "could not find any snapshots to destroy" in stderr
            ):
                raise SnapshotNotFoundError(f"{self.intent} failed: {stderr}") from None

            raise ExecutionFailedError(self.intent, self.args, exc_val.returncode, stderr) from None
