# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

from ..logging import LoggableProtocol, Logger, getLogger


class LoggableMixin:
    """Mixin that adds a logger to a class.

    Provides a ``.log`` property returning a logger named after the class, or a child of the logger of
    ``instance_parent`` when the instance has a loggable parent.
    """

    __log_name__: str | None = None

    @property
    def log(self) -> Logger:
        """Return the logger for the current object, creating it on first use."""
        log: Logger | None = self.__dict__.get("_LoggableMixin__log") if hasattr(self, "__dict__") else None
        if log is None:
            parent = getattr(self, "instance_parent", None)
            if not isinstance(parent, LoggableProtocol):
                parent = None
            log = getLogger(self, parent=parent, name=type(self).__log_name__)
            if hasattr(self, "__dict__"):
                self.__dict__["_LoggableMixin__log"] = log
        return log
