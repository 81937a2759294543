# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import typing

from pydantic import Field

from ..reflection.reflector_factory import DEFAULT_REFLECTOR_FACTORY
from ..util.config import BaseConfigModel
from ..util.config.models import ConfigBase


# MARK: Reflection
class ReflectionConfig(BaseConfigModel):
    class_cache_enabled: bool = Field(default=True, description="Whether reflectors are cached per class, or rebuilt on every request")


# MARK: Main Config
class Config(ConfigBase):
    reflection: ReflectionConfig = Field(default_factory=ReflectionConfig, description="Reflection layer configuration")

    @typing.override
    def apply(self) -> None:
        super().apply()
        DEFAULT_REFLECTOR_FACTORY.set_class_cache_enabled(self.reflection.class_cache_enabled)
