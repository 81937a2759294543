# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Filters and formatters shared by the file and TTY handlers.

Log records can be routed to a single handler with ``extra={"handler": "tty"}`` (or ``"file"``), and printed without
the usual prefix with ``extra={"simple": True}``.
"""

import logging

from typing import override


class HandlerFilter(logging.Filter):
    def __init__(self, handler_name: str) -> None:
        super().__init__()
        self.handler_name = handler_name

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "handler", None)
        return target is None or target == self.handler_name


class ConditionalFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "simple", False):
            return record.getMessage()
        return super().format(record)
