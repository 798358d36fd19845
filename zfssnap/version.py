# -*- coding=utf-8 -*-
import logging

logger = logging.getLogger(__name__)

__all__ = ["__version__", "COMMIT_HASH", "BUILD_TIME", "version_string"]

__version__ = "0.1.0"

# Replaced by release tooling
COMMIT_HASH = "unknown"
BUILD_TIME = "unknown"


def version_string(semver=__version__, commit_hash=COMMIT_HASH, build_time=BUILD_TIME):
    return f"{semver} ({commit_hash}, {build_time})"
