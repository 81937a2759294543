# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import logging

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggableProtocol(Protocol):
    """Objects exposing a ``log`` logger, which child loggers can be derived from."""

    @property
    def log(self) -> logging.Logger: ...
