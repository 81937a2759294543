# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Capture of a type argument at runtime.

Subclassing :class:`TypeReference` with a concrete type argument makes that argument available on every instance:

    >>> from ormreflect.type import TypeReference
    >>> class NamesReference(TypeReference[list[str]]):
    ...     pass
    >>> NamesReference().raw_type
    <class 'list'>
    >>> class Unbound(TypeReference):
    ...     pass
    >>> Unbound()
    Traceback (most recent call last):
    ...
    ormreflect.exceptions.TypeException: 'Unbound' extends TypeReference but misses the type parameter. Remove the extension or add a type parameter to it.

"""

import typing

from ..exceptions import TypeException
from ..reflection.type_descriptors import ParameterizedType, TypeDescriptor, describe, is_subclass
from ..reflection.type_parameter_resolver import resolve_type
from ..util.helpers import generics


class TypeReference[T]:
    __slots__ = ("_raw_type",)

    def __init__(self) -> None:
        self._raw_type = self._superclass_type_parameter(type(self))

    @classmethod
    def _superclass_type_parameter(cls, klass: type) -> TypeDescriptor:
        cls._check_parameterized(klass, klass)

        (param,) = generics.get_parameters(TypeReference)
        resolved = resolve_type(param, klass, TypeReference)
        if isinstance(resolved, ParameterizedType):
            return resolved.raw
        return resolved

    @classmethod
    def _check_parameterized(cls, klass: type, current: type) -> None:
        # Climb through plain bases until one of them binds the type parameter
        for base in generics.get_generic_bases(current):
            origin = generics.get_origin(base, passthrough=True)
            if not isinstance(origin, type) or not is_subclass(origin, TypeReference):
                continue
            if base is not origin:
                return
            if origin is not TypeReference:
                cls._check_parameterized(klass, origin)
                return
            break

        msg = f"'{klass.__qualname__}' extends TypeReference but misses the type parameter. Remove the extension or add a type parameter to it."
        raise TypeException(msg)

    @property
    def raw_type(self) -> TypeDescriptor:
        return self._raw_type

    @typing.override
    def __str__(self) -> str:
        return describe(self._raw_type)

    @typing.override
    def __repr__(self) -> str:
        return f"<{type(self).__qualname__} {self}>"
