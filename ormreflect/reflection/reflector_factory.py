# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Process-wide cache of :class:`~.reflector.Reflector` instances.

Reflectors are built on the first request for a class and never evicted. Building one is a pure function of the class,
so concurrent callers may race to build the same reflector: the first one published wins and every caller gets that
same instance.

    >>> from ormreflect.reflection.reflector_factory import reflect
    >>> class Point:
    ...     x: int
    ...     y: int
    >>> reflect(Point) is reflect(Point)
    True

"""

import typing

from abc import ABCMeta, abstractmethod

from ..exceptions import AmbiguousAccessorError
from ..util.helpers import generics
from ..util.mixins import LoggableMixin
from .reflector import Reflector


class ReflectorFactory(metaclass=ABCMeta):
    @abstractmethod
    def is_class_cache_enabled(self) -> bool:
        msg = "Subclasses must implement is_class_cache_enabled"
        raise NotImplementedError(msg)

    @abstractmethod
    def set_class_cache_enabled(self, enabled: bool) -> None:  # noqa: FBT001 as this mirrors is_class_cache_enabled
        msg = "Subclasses must implement set_class_cache_enabled"
        raise NotImplementedError(msg)

    @abstractmethod
    def find_for_class(self, cls: typing.Any) -> Reflector:
        msg = "Subclasses must implement find_for_class"
        raise NotImplementedError(msg)


class DefaultReflectorFactory(ReflectorFactory, LoggableMixin):
    def __init__(self, *, class_cache_enabled: bool = True) -> None:
        self._class_cache_enabled = class_cache_enabled
        self._reflectors: dict[type, Reflector] = {}

    @typing.override
    def is_class_cache_enabled(self) -> bool:
        return self._class_cache_enabled

    @typing.override
    def set_class_cache_enabled(self, enabled: bool) -> None:  # noqa: FBT001 as this mirrors is_class_cache_enabled
        self._class_cache_enabled = enabled

    @typing.override
    def find_for_class(self, cls: typing.Any) -> Reflector:
        """Return the reflector for *cls*, building it on first use.

        Subscripted aliases such as ``list[int]`` share the reflector of their origin class.

        Raises:
            TypeError: If *cls* is neither a class nor a subscripted alias of a class.
            AmbiguousAccessorError: If the class declares competing accessors; nothing is cached in that case.

        """
        klass = self._normalize(cls)

        if not self._class_cache_enabled:
            return self._build(klass)

        if (reflector := self._reflectors.get(klass)) is not None:
            return reflector

        # Concurrent builders of the same class all return the first published reflector
        return self._reflectors.setdefault(klass, self._build(klass))

    @staticmethod
    def _normalize(cls: typing.Any) -> type:
        klass = generics.get_origin(cls, passthrough=True)
        if not isinstance(klass, type):
            msg = f"Can only reflect classes, got: {cls!r}"
            raise TypeError(msg)
        return klass

    def _build(self, klass: type) -> Reflector:
        self.log.debug("Building reflector for %s", klass.__qualname__)
        try:
            return Reflector(klass)
        except AmbiguousAccessorError as err:
            self.log.debug("Failed to build reflector for %s: %s", klass.__qualname__, err)
            raise

    def clear(self) -> None:
        """Forget every cached reflector."""
        self._reflectors = {}

    def __contains__(self, cls: object) -> bool:
        return cls in self._reflectors


#: The factory backing :func:`reflect` and every component created without an explicit factory.
DEFAULT_REFLECTOR_FACTORY = DefaultReflectorFactory()


def reflect(cls: typing.Any) -> Reflector:
    """Return the cached :class:`Reflector` for *cls* from the default factory."""
    return DEFAULT_REFLECTOR_FACTORY.find_for_class(cls)
