# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

from .base_wrapper import BaseWrapper
from .collection_wrapper import CollectionWrapper
from .map_wrapper import MapWrapper
from .object_wrapper import ObjectWrapper
from .record_wrapper import RecordWrapper
from .wrapper_factory import DEFAULT_OBJECT_WRAPPER_FACTORY, DefaultObjectWrapperFactory, ObjectWrapperFactory, WrapperFactoryRegistry


__all__ = [
    "DEFAULT_OBJECT_WRAPPER_FACTORY",
    "BaseWrapper",
    "CollectionWrapper",
    "DefaultObjectWrapperFactory",
    "MapWrapper",
    "ObjectWrapper",
    "ObjectWrapperFactory",
    "RecordWrapper",
    "WrapperFactoryRegistry",
]
