# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

# Only the model base class is exported here, as the models and loader depend on modules that themselves depend on it;
# import them from .models, .loader and .manager
from .base_model import BaseConfigModel


__all__ = [
    "BaseConfigModel",
]
