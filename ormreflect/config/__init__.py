# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

from ..util.config.manager import ConfigManager
from .main import Config, ReflectionConfig


# Export configuration wrapper
CFG = ConfigManager(Config)


__all__ = [
    "CFG",
    "Config",
    "ReflectionConfig",
]
