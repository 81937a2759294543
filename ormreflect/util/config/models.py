# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import logging

from reprlib import Repr

from frozendict import frozendict
from pydantic import Field

from ...parsing.property_parser import PlaceholderOptions
from ..helpers.frozendict import FrozenDict
from ..logging import getLogger
from ..logging.config import LoggingConfig
from .base_model import BaseConfigModel


log = getLogger(__name__)


class ConfigLoggingOnly(BaseConfigModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")


class ConfigBase(ConfigLoggingOnly):
    placeholders: PlaceholderOptions = Field(default_factory=PlaceholderOptions, description="How '${key}' placeholders in configuration strings are expanded")

    variables: FrozenDict[str, str] = Field(
        default_factory=frozendict,
        description="Values substituted for '${key}' placeholders in every other configuration string",
    )

    def apply(self) -> None:
        """Push the configuration into the process-wide components it configures."""

    def debug(self) -> None:
        model_dump = None

        # TTY
        if log.isEnabledForTty(logging.DEBUG):
            if self.logging.rich:
                from rich import pretty

                pretty.pprint(self, indent_guides=True, expand_all=True)
            else:
                model_dump = self.model_dump()
                log.debug(Repr(indent=4).repr(model_dump), extra={"handler": "tty"})

        # File
        if log.isEnabledForFile(logging.DEBUG):
            if model_dump is None:
                model_dump = self.model_dump()
            log.debug("Configuration: %s", Repr(indent=4).repr(model_dump), extra={"handler": "file"})
