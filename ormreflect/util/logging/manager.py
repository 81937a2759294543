# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Process-wide logging configuration.

The :class:`LoggingManager` singleton installs a file handler and a TTY handler (plain or :mod:`rich`) on the root
logger, and applies per-logger levels from a :class:`~.config.LoggingConfig`. Loggers obtained through
:func:`~.logger.getLogger` before the manager is initialised are updated when it is.
"""

import logging
import pathlib
import sys

from typing import Any, ClassVar, Self
from typing import cast as typing_cast

from ..helpers import script_info
from .config import LoggingConfig
from .handlers import ConditionalFormatter, HandlerFilter
from .levels import LoggingLevel


class LoggingManager:
    _instance: ClassVar["LoggingManager | None"] = None

    initialized: bool
    config: LoggingConfig
    fh: logging.Handler | None
    ch: logging.Handler | None

    def __new__(cls) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls)
            instance._reset_state()
        return typing_cast("Self", instance)

    def _reset_state(self) -> None:
        self.initialized = False
        self.fh = None
        self.ch = None

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config
        self.log_file_path = pathlib.Path(config.dir) / config.file_name

        self._configure_root_logger()
        self._configure_file_handler()
        self._configure_tty_handler()
        self._configure_custom_logger_levels()

    def shutdown(self) -> None:
        """Remove the installed handlers and forget the configuration, so that :meth:`initialize` can run again."""
        for handler in (self.fh, self.ch):
            if handler is None:
                continue
            logging.root.removeHandler(handler)
            handler.close()
        self._reset_state()

    # MARK: Handlers
    def _configure_root_logger(self) -> None:
        logging.captureWarnings(capture=True)
        if self.config.levels.root.enabled:
            logging.root.setLevel(self.config.levels.root.value)

    def _configure_file_handler(self) -> None:
        if not self.config.levels.file.enabled:
            return

        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        self.fh = logging.FileHandler(self.log_file_path, mode="w", encoding="UTF-8")
        self.fh.setLevel(self.config.levels.file.value)
        self.fh.setFormatter(ConditionalFormatter("%(asctime)s [%(levelname)s:%(name)s] %(message)s"))
        self.fh.addFilter(HandlerFilter("file"))
        logging.root.addHandler(self.fh)

    def _configure_tty_handler(self) -> None:
        if not self.config.levels.tty.enabled:
            return

        if self.config.rich:
            from .rich_handler import CustomRichHandler

            self.ch = CustomRichHandler()
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(ConditionalFormatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(self.config.levels.tty.value)
        self.ch.addFilter(HandlerFilter("tty"))

        # pytest captures log records on its own
        if not script_info.is_unit_test():
            logging.root.addHandler(self.ch)

    # MARK: Levels
    def get_logging_level(self, name: str) -> LoggingLevel:
        """Return the level configured for the logger called *name*.

        The custom pattern with the longest match wins; loggers matching no pattern get the default level.
        """
        level = self.config.levels.default
        match_len = 0

        for pattern, custom_level in self.config.levels.custom.items():
            if (match := pattern.match(name)) is not None and len(match.group(0)) > match_len:
                level = custom_level
                match_len = len(match.group(0))

        return level

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Explicitly configured loggers are left alone
        if logger.level != logging.NOTSET:
            return

        level = self.get_logging_level(logger.name)
        if level == logging.NOTSET:
            return
        logger.setLevel(logging.CRITICAL + 1 if not level.enabled else level.value)

    def _configure_custom_logger_levels(self) -> None:
        for name, logger in list(logging.root.manager.loggerDict.items()):
            if isinstance(logger, logging.Logger):
                self.apply_logging_level(logger)
            else:
                self.apply_logging_level(logging.getLogger(name))
