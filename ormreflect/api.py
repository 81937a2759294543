# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Module level entry points, backed by the process-wide default factories."""

import typing

from .parsing.property_parser import PlaceholderOptions, PropertyParser
from .reflection.meta_class import MetaClass
from .reflection.meta_object import MetaObject
from .reflection.reflector_factory import reflect
from .reflection.type_descriptors import TypeDescriptor
from .reflection.type_parameter_resolver import resolve_type


if typing.TYPE_CHECKING:
    from .reflection.object_factory import ObjectFactory
    from .reflection.reflector_factory import ReflectorFactory
    from .reflection.wrapper import ObjectWrapperFactory


def wrap(
    value: typing.Any,
    object_factory: "ObjectFactory | None" = None,
    wrapper_factory_registry: "ObjectWrapperFactory | None" = None,
    reflector_factory: "ReflectorFactory | None" = None,
) -> MetaObject:
    """Wrap *value* for property path access; ``None`` wraps to the shared null meta object."""
    return MetaObject.for_object(value, object_factory, wrapper_factory_registry, reflector_factory)


# MARK: Values
def get_value(root: typing.Any, path: str) -> typing.Any:
    return wrap(root).get_value(path)


def set_value(root: typing.Any, path: str, value: typing.Any) -> None:
    wrap(root).set_value(path, value)


# MARK: Static metadata
def resolve_getter_type(root_type: typing.Any, path: str) -> type:
    return MetaClass.for_class(root_type).get_getter_type(path)


def resolve_setter_type(root_type: typing.Any, path: str) -> type:
    return MetaClass.for_class(root_type).get_setter_type(path)


def has_getter(root_type: typing.Any, path: str) -> bool:
    return MetaClass.for_class(root_type).has_getter(path)


def has_setter(root_type: typing.Any, path: str) -> bool:
    return MetaClass.for_class(root_type).has_setter(path)


def canonicalize(root_type: typing.Any, path: str, *, use_camel_case_mapping: bool = False) -> str | None:
    """Rewrite *path* with the canonical spelling of each of its properties.

    See :meth:`MetaClass.find_property`.
    """
    return MetaClass.for_class(root_type).find_property(path, use_camel_case_mapping=use_camel_case_mapping)


def resolve_generic_type(declared: typing.Any, source: typing.Any, declaring: type) -> TypeDescriptor:
    return resolve_type(declared, source, declaring)


# MARK: Placeholders
def expand_placeholders(template: str | None, variables: typing.Mapping[str, str] | None, options: PlaceholderOptions | None = None) -> str:
    return PropertyParser.parse(template, variables, options)


__all__ = [
    "canonicalize",
    "expand_placeholders",
    "get_value",
    "has_getter",
    "has_setter",
    "reflect",
    "resolve_generic_type",
    "resolve_getter_type",
    "resolve_setter_type",
    "set_value",
    "wrap",
]
