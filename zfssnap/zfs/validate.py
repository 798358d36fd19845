# -*- coding=utf-8 -*-
import logging

from zfssnap.snapshot.name import is_valid_dataset_name, is_valid_snapshot_component, is_valid_snapshot_name

from .exception import InvalidArgumentError

logger = logging.getLogger(__name__)

__all__ = ["validate_snapshot_name", "validate_snapshot_target"]


def validate_snapshot_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise InvalidArgumentError("snapshot name is required")

    if not is_valid_snapshot_name(name):
        raise InvalidArgumentError(f"invalid snapshot name format: {name} (expected dataset@snapshot)")

    return name


def validate_snapshot_target(dataset: str, component: str) -> str:
    """
    Validates dataset and snapshot component separately, then the composed name.

    :return: full `dataset@component` snapshot name
    """
    dataset = (dataset or "").strip()
    component = (component or "").strip()

    if not dataset:
        raise InvalidArgumentError("dataset name is required")
    if not component:
        raise InvalidArgumentError("snapshot name is required")

    if not is_valid_dataset_name(dataset):
        raise InvalidArgumentError(f"invalid dataset name format: {dataset}")

    if not is_valid_snapshot_component(component):
        raise InvalidArgumentError(
            f"invalid snapshot name format: {component} (must start with letter, contain only alphanumeric, "
            "underscore, hyphen, colon, period)"
        )

    name = f"{dataset}@{component}"
    if not is_valid_snapshot_name(name):
        raise InvalidArgumentError(f"invalid snapshot name format: {name}")

    return name
