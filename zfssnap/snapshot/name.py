# -*- coding=utf-8 -*-
import logging
import re

logger = logging.getLogger(__name__)

__all__ = ["MAX_NAME_LENGTH", "is_valid_dataset_component", "is_valid_dataset_name", "is_valid_snapshot_component",
           "is_valid_snapshot_name", "split_snapshot_name"]

MAX_NAME_LENGTH = 255

COMPONENT = "[A-Za-z][A-Za-z0-9_.:-]*"
DATASET = f"{COMPONENT}(/{COMPONENT})*"

component_re = re.compile(COMPONENT)
dataset_re = re.compile(DATASET)
snapshot_re = re.compile(f"{DATASET}@{COMPONENT}")


def _prevalidate(name: str):
    """
    Common checks for every kind of ZFS name. Returns stripped name or `None` if it can't be valid.
    """
    if name is None:
        return None

    name = name.strip()
    if not name:
        return None

    if len(name) > MAX_NAME_LENGTH:
        return None

    if "%" in name:
        return None

    return name


def is_valid_dataset_name(name: str) -> bool:
    name = _prevalidate(name)
    if name is None:
        return False

    if "//" in name or name.startswith("/") or name.endswith("/"):
        return False

    return dataset_re.fullmatch(name) is not None


is_valid_dataset_component = is_valid_dataset_name


def is_valid_snapshot_component(name: str) -> bool:
    name = _prevalidate(name)
    if name is None:
        return False

    if "@" in name or "/" in name:
        return False

    return component_re.fullmatch(name) is not None


def is_valid_snapshot_name(name: str) -> bool:
    name = _prevalidate(name)
    if name is None:
        return False

    if "//" in name or name.startswith("/") or name.endswith("/"):
        return False

    return snapshot_re.fullmatch(name) is not None


def split_snapshot_name(name: str) -> (str, str):
    dataset, _, component = name.partition("@")
    return dataset, component
