# -*- coding=utf-8 -*-
import logging
import os

import jsonschema
import jsonschema.validators
import yaml

logger = logging.getLogger(__name__)

__all__ = ["schema_validator"]


def create_validator(filename):
    with open(os.path.join(os.path.dirname(__file__), filename)) as f:
        schema = yaml.safe_load(f)

    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


schema_validator = create_validator("schema.yaml")
