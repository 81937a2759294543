# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Extension point for custom value representations.

An :class:`ObjectWrapperFactory` may claim any value before the built-in mapping, collection and record wrappers are
considered.
"""

import typing

from abc import ABCMeta, abstractmethod

from ...exceptions import ReflectionError
from .object_wrapper import ObjectWrapper


if typing.TYPE_CHECKING:
    from ..meta_object import MetaObject


class ObjectWrapperFactory(metaclass=ABCMeta):
    @abstractmethod
    def has_wrapper_for(self, obj: typing.Any) -> bool:
        msg = "Subclasses must implement has_wrapper_for"
        raise NotImplementedError(msg)

    @abstractmethod
    def get_wrapper_for(self, meta_object: "MetaObject", obj: typing.Any) -> ObjectWrapper:
        msg = "Subclasses must implement get_wrapper_for"
        raise NotImplementedError(msg)


class DefaultObjectWrapperFactory(ObjectWrapperFactory):
    """Never claims a value."""

    @typing.override
    def has_wrapper_for(self, obj: typing.Any) -> bool:
        return False

    @typing.override
    def get_wrapper_for(self, meta_object: "MetaObject", obj: typing.Any) -> ObjectWrapper:
        msg = f"The {type(self).__name__} should never be called to provide an ObjectWrapper."
        raise ReflectionError(msg)


class WrapperFactoryRegistry(ObjectWrapperFactory):
    """An ordered list of wrapper factories, where the first one claiming a value wraps it."""

    def __init__(self, factories: typing.Iterable[ObjectWrapperFactory] = ()) -> None:
        self._factories: list[ObjectWrapperFactory] = list(factories)

    def register(self, factory: ObjectWrapperFactory) -> None:
        self._factories.append(factory)

    def unregister(self, factory: ObjectWrapperFactory) -> None:
        self._factories.remove(factory)

    @property
    def factories(self) -> tuple[ObjectWrapperFactory, ...]:
        return tuple(self._factories)

    def _find(self, obj: typing.Any) -> ObjectWrapperFactory | None:
        for factory in self._factories:
            if factory.has_wrapper_for(obj):
                return factory
        return None

    @typing.override
    def has_wrapper_for(self, obj: typing.Any) -> bool:
        return self._find(obj) is not None

    @typing.override
    def get_wrapper_for(self, meta_object: "MetaObject", obj: typing.Any) -> ObjectWrapper:
        if (factory := self._find(obj)) is None:
            msg = f"No registered wrapper factory claims {type(obj).__qualname__}"
            raise ReflectionError(msg)
        return factory.get_wrapper_for(meta_object, obj)


#: The factory used by every meta object created without an explicit wrapper factory.
DEFAULT_OBJECT_WRAPPER_FACTORY = DefaultObjectWrapperFactory()
