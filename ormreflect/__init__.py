# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Reflective metadata and property path engine.

    >>> import ormreflect
    >>> data = {"customer": {"name": "Ada"}}
    >>> ormreflect.get_value(data, "customer.name")
    'Ada'
    >>> ormreflect.set_value(data, "customer.tags[0]", "vip")
    Traceback (most recent call last):
    ...
    ormreflect.exceptions.ReflectionError: Cannot set the value 'tags[0]' because the property 'tags' is None.
    >>> ormreflect.expand_placeholders("Hello ${name}!", {"name": "world"})
    'Hello world!'

"""

from .api import (
    canonicalize,
    expand_placeholders,
    get_value,
    has_getter,
    has_setter,
    reflect,
    resolve_generic_type,
    resolve_getter_type,
    resolve_setter_type,
    set_value,
    wrap,
)
from .exceptions import (
    AmbiguousAccessorError,
    NoDefaultConstructorError,
    NoSuchPropertyError,
    PropertyDirection,
    ReflectionError,
    TypeException,
    UnsupportedOperationError,
)


__all__ = [
    "AmbiguousAccessorError",
    "NoDefaultConstructorError",
    "NoSuchPropertyError",
    "PropertyDirection",
    "ReflectionError",
    "TypeException",
    "UnsupportedOperationError",
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
