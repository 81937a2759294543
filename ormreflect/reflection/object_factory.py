# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Instantiation of property values.

When a property path is assigned through an intermediate value that does not exist yet, the intermediate value is
created by an :class:`ObjectFactory`. Abstract collection types are mapped to a concrete class first:

    >>> from collections.abc import Sequence
    >>> from ormreflect.reflection.object_factory import DefaultObjectFactory
    >>> DefaultObjectFactory().create(Sequence)
    []

"""

import collections.abc
import typing

from abc import ABCMeta, abstractmethod

from frozendict import frozendict

from ..exceptions import ReflectionError
from ..util.helpers import generics
from ..util.mixins import LoggableMixin
from .reflector_factory import DEFAULT_REFLECTOR_FACTORY, ReflectorFactory
from .type_descriptors import is_subclass


class ObjectFactory(metaclass=ABCMeta):
    @abstractmethod
    def create(
        self,
        type_: typing.Any,
        constructor_arg_types: typing.Sequence[type] | None = None,
        constructor_args: typing.Sequence[typing.Any] | None = None,
    ) -> typing.Any:
        """Create a new instance of *type_*, optionally passing *constructor_args* to its constructor."""
        msg = "Subclasses must implement create"
        raise NotImplementedError(msg)

    @abstractmethod
    def is_collection(self, type_: typing.Any) -> bool:
        msg = "Subclasses must implement is_collection"
        raise NotImplementedError(msg)


#: Concrete classes instantiated in place of abstract collection types.
ABSTRACT_COLLECTION_CLASSES: frozendict[type, type] = frozendict(
    {
        collections.abc.Iterable       : list,
        collections.abc.Collection     : list,
        collections.abc.Sequence       : list,
        collections.abc.MutableSequence: list,
        collections.abc.Mapping        : dict,
        collections.abc.MutableMapping : dict,
        collections.abc.Set            : set,
        collections.abc.MutableSet     : set,
    }
)  # fmt: skip


class DefaultObjectFactory(ObjectFactory, LoggableMixin):
    def __init__(self, reflector_factory: ReflectorFactory | None = None) -> None:
        self.reflector_factory = DEFAULT_REFLECTOR_FACTORY if reflector_factory is None else reflector_factory

    @typing.override
    def create(
        self,
        type_: typing.Any,
        constructor_arg_types: typing.Sequence[type] | None = None,
        constructor_args: typing.Sequence[typing.Any] | None = None,
    ) -> typing.Any:
        """Create a new instance of *type_*.

        Raises:
            NoDefaultConstructorError: If no constructor arguments are given and the class needs some.
            ReflectionError: If the constructor itself fails.

        """
        cls = self.resolve_interface(type_)
        return self.instantiate_class(cls, constructor_arg_types, constructor_args)

    def instantiate_class(
        self,
        cls: type,
        constructor_arg_types: typing.Sequence[type] | None = None,
        constructor_args: typing.Sequence[typing.Any] | None = None,
    ) -> typing.Any:
        try:
            if constructor_args is None:
                return self.reflector_factory.find_for_class(cls).get_default_constructor()()
            return cls(*constructor_args)
        except ReflectionError:
            raise
        except Exception as err:
            arg_types = ", ".join(getattr(arg_type, "__qualname__", str(arg_type)) for arg_type in constructor_arg_types or ())
            args = ", ".join(repr(arg) for arg in constructor_args or ())
            self.log.debug("Failed to instantiate %s(%s): %s", cls.__qualname__, args, err)
            msg = f"Error instantiating {cls.__qualname__} with invalid types ({arg_types}) or values ({args}). Cause: {err}"
            raise ReflectionError(msg) from err

    def resolve_interface(self, type_: typing.Any) -> type:
        """Return the concrete class instantiated for *type_*, mapping abstract collection types to concrete ones."""
        cls = generics.get_origin(type_, passthrough=True)
        if not isinstance(cls, type):
            msg = f"Cannot instantiate {type_!r}, as it is not a class"
            raise ReflectionError(msg)
        return ABSTRACT_COLLECTION_CLASSES.get(cls, cls)

    @typing.override
    def is_collection(self, type_: typing.Any) -> bool:
        cls = generics.get_origin(type_, passthrough=True)
        return isinstance(cls, type) and is_subclass(cls, collections.abc.Collection) and not is_subclass(cls, (str, bytes, bytearray, collections.abc.Mapping))


#: The factory used by every component created without an explicit object factory.
DEFAULT_OBJECT_FACTORY = DefaultObjectFactory()
