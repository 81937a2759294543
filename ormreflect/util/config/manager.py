# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import pathlib

from collections.abc import Mapping
from typing import Any

from ..helpers import script_info
from .loader import ConfigFileLoader
from .models import ConfigBase


class ConfigManager[C: ConfigBase]:
    """Holds the process-wide configuration, and forwards attribute access to it once loaded."""

    def __init__(self, config_class: type[C]) -> None:
        self.config_class = config_class
        self.config: C | None = None

    def open(self, path: pathlib.Path | str) -> C:
        loader = ConfigFileLoader(self.config_class)
        return self._set(loader.open(path))

    def load(self, config: str | Mapping[str, Any] | C) -> C:
        if isinstance(config, self.config_class):
            return self._set(config)
        if isinstance(config, (str, Mapping)):
            loader = ConfigFileLoader(self.config_class)
            return self._set(loader.load(config))

        msg = f"Expected {self.config_class.__name__}, str or mapping, got {type(config).__name__}"
        raise TypeError(msg)

    def initialize(self) -> C:
        """Load the default configuration, as if from an empty file."""
        return self.load({})

    def _set(self, config: C) -> C:
        self.config = config
        self.apply()
        return config

    def apply(self) -> None:
        if self.config is None:
            msg = "Configuration not initialized. Call 'initialize()' first."
            raise RuntimeError(msg)
        self.config.apply()

    def reset(self) -> None:
        if not script_info.is_unit_test():
            msg = "Cannot reset configuration outside of unit tests"
            raise RuntimeError(msg)
        self.config = None

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in ("config", "config_class"):
            raise AttributeError(name)
        if script_info.is_documentation_build():
            msg = f"Configuration not initialized. Cannot access '{name}'"
            raise AttributeError(msg)
        if self.config is None:
            msg = "Configuration not initialized. Call 'initialize()' first."
            raise RuntimeError(msg)
        return getattr(self.config, name)
