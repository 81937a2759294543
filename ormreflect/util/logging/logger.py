# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import logging

from typing import Any, override

from .loggable_protocol import LoggableProtocol


#: Every logger created by this package lives below this name.
ROOT_LOGGER_NAME = "ormreflect"


class Logger(logging.Logger):
    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        if handler is None:
            return super().isEnabledFor(level)
        if handler == "tty":
            return self.isEnabledForTty(level)
        if handler == "file":
            return self.isEnabledForFile(level)
        msg = f"Unknown handler: {handler}. Expected 'tty' or 'file'."
        raise ValueError(msg)

    def _is_enabled_for_handler(self, handler: logging.Handler | None, level: int) -> bool:
        if handler is None or handler.level > level:
            return False
        return super().isEnabledFor(level)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        return self._is_enabled_for_handler(LoggingManager().ch, level)

    def isEnabledForFile(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        return self._is_enabled_for_handler(LoggingManager().fh, level)


logging.setLoggerClass(Logger)


def _logger_name(obj: object, name: str | None) -> str:
    if name is not None:
        return name
    if isinstance(obj, str):
        return obj
    if isinstance(obj, type):
        return obj.__name__
    return type(obj).__name__


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> Logger:  # noqa: N802 to match logging.getLogger
    """Return the logger for *obj*.

    Loggers are created below the ``ormreflect`` logger unless *parent* is a logger or a loggable object, in which
    case a child of the parent's logger is returned. Levels configured through the :class:`LoggingManager` are applied
    to the logger before it is returned.
    """
    name = _logger_name(obj, name)

    if isinstance(parent, logging.Logger):
        logger = parent.getChild(name)
    elif isinstance(parent, LoggableProtocol):
        logger = parent.log.getChild(name)
    elif name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(ROOT_LOGGER_NAME).getChild(name)

    if not isinstance(logger, Logger):
        msg = f"Expected a Logger instance, got: {type(logger)}"
        raise TypeError(msg)

    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger

