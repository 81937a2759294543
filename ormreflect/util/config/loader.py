# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Loading of YAML configuration files into configuration models.

Every string in the configuration, except those in the ``variables`` section itself, may contain ``${key}``
placeholders which are expanded from ``variables`` before the model is validated.
"""

import pathlib

from collections.abc import Mapping
from typing import Any

import yaml

from ...parsing.property_parser import PlaceholderOptions, PropertyParser
from ..helpers import script_info
from ..logging.manager import LoggingManager
from ..mixins import LoggableMixin
from .models import ConfigBase, ConfigLoggingOnly
from .yaml_loader import IncludeLoader


class ConfigFileLoader[C: ConfigBase](LoggableMixin):
    def __init__(self, config_class: type[C]) -> None:
        self.config_class = config_class
        self.config: C | None = None
        self.path: pathlib.Path | str = "-"

    def open(self, path: pathlib.Path | str) -> C:
        if self.config is not None:
            msg = "Configuration already loaded. Cannot load again."
            raise RuntimeError(msg)

        self.path = pathlib.Path(path)

        with self.path.open(encoding="UTF-8") as f:
            data = yaml.load(f, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader

        return self.load(data)

    def load(self, data: Mapping[str, Any] | str | None) -> C:
        if self.config is not None:
            msg = "Configuration already loaded. Cannot load again."
            raise RuntimeError(msg)

        if isinstance(data, str):
            data = yaml.load(data, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader

        if data is None:
            msg = "Configuration is empty"
            raise ValueError(msg)
        if not isinstance(data, Mapping):
            msg = f"Invalid configuration format. Expected a mapping, got {type(data).__name__}"
            raise TypeError(msg)

        self.data: dict[str, Any] = dict(data)

        # Use current state of data to initialize logging manager
        self._init_logging_manager()

        self._expand_placeholders()

        self.config = self.config_class.model_validate(self.data)

        self.log.info("Configuration loaded successfully")
        if not script_info.is_unit_test():
            self.config.debug()

        return self.config

    # MARK: Placeholders
    def _expand_placeholders(self) -> None:
        variables = self.data.get("variables") or {}
        if not isinstance(variables, Mapping):
            msg = f"Configuration 'variables' must be a mapping, got {type(variables).__name__}"
            raise TypeError(msg)
        variables = {str(key): str(value) for key, value in variables.items()}
        self.data["variables"] = variables

        options = PlaceholderOptions.model_validate(self.data.get("placeholders") or {})

        for key, value in self.data.items():
            if key != "variables":
                self.data[key] = self._expand(value, variables, options)

    def _expand(self, value: Any, variables: Mapping[str, str], options: PlaceholderOptions) -> Any:
        if isinstance(value, str):
            return PropertyParser.parse(value, variables, options)
        if isinstance(value, Mapping):
            return {key: self._expand(item, variables, options) for key, item in value.items()}
        if isinstance(value, list | tuple):
            return type(value)(self._expand(item, variables, options) for item in value)
        return value

    # MARK: Logging
    def _init_logging_manager(self) -> None:
        if script_info.is_unit_test():
            return

        # Convert logging config entry into LoggingConfig object
        config = ConfigLoggingOnly(logging=self.data.get("logging", {}))
        self.data["logging"] = config.logging

        manager = LoggingManager()
        if not manager.initialized:
            manager.initialize(config.logging)
