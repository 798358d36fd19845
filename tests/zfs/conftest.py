# -*- coding=utf-8 -*-
import os
import textwrap

import pytest

from zfssnap.definition.definition import Configuration
from zfssnap.zfs.cli import ZfsCliSnapshotter


class FakeZfs:
    def __init__(self, path, args_path):
        self.path = path
        self.args_path = args_path

    def write(self, body):
        with open(self.path, "w") as f:
            f.write(textwrap.dedent(f"""\
                #!/bin/sh
                printf '%s\\n' "$@" > {self.args_path}
            """) + textwrap.dedent(body))
        os.chmod(self.path, 0o755)

    @property
    def called(self):
        return os.path.exists(self.args_path)

    @property
    def args(self):
        with open(self.args_path) as f:
            return f.read().splitlines()

    def snapshotter(self, timeout=5):
        return ZfsCliSnapshotter(Configuration(zfs_path=self.path, timeout=timeout))


@pytest.fixture()
def fake_zfs(tmp_path):
    fake = FakeZfs(str(tmp_path / "zfs"), str(tmp_path / "args"))
    fake.write("")
    return fake
