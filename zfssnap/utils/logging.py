# -*- coding=utf-8 -*-
from datetime import datetime
import json
import logging
import os

import pytz

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_MAX_STRING_LENGTH", "JsonFormatter", "LongStringsFilter", "PrefixLoggerAdapter", "shorten"]

DEFAULT_MAX_STRING_LENGTH = 256


def shorten(value, max_length):
    """
    Replaces the middle of every `str` or `bytes` longer than `max_length` with `....`, descending into
    dicts, lists and tuples.
    """
    if isinstance(value, dict):
        return {k: shorten(v, max_length) for k, v in value.items()}

    if isinstance(value, (list, tuple)):
        return type(value)(shorten(v, max_length) for v in value)

    if isinstance(value, str):
        placeholder = "...."
    elif isinstance(value, bytes):
        placeholder = b"...."
    else:
        return value

    if not max_length or len(value) <= max_length:
        return value

    keep = (max_length - len(placeholder)) // 2
    return value[:keep] + placeholder + value[len(value) - keep:]


class LongStringsFilter(logging.Filter):
    def __init__(self, name="", max_length=None):
        super().__init__(name)

        if max_length is None:
            max_length = int(os.environ.get("ZFSSNAP_LOGGING_MAX_STRING_LENGTH", DEFAULT_MAX_STRING_LENGTH))

        self.max_length = max_length

    def filter(self, record):
        if record.args:
            record.args = shorten(record.args, self.max_length)
        return True


class PrefixLoggerAdapter(logging.LoggerAdapter):
    def __init__(self, logger, prefix):
        super().__init__(logger, {})

        self.prefix = prefix

    def process(self, msg, kwargs):
        return f"[{self.prefix}] {msg}", kwargs


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line, for log collectors.
    """
    def format(self, record):
        data = {
            "ts": datetime.fromtimestamp(record.created, pytz.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "thread": record.threadName,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)

        return json.dumps(data)
