# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

# Loggable Protocol
from .loggable_protocol import LoggableProtocol

# Logger / getLogger
from .logger import ROOT_LOGGER_NAME, Logger, getLogger


__all__ = [
    "ROOT_LOGGER_NAME",
    "LoggableProtocol",
    "Logger",
    "getLogger",
]
