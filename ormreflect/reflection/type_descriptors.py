# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Type descriptors understood by the type parameter resolver.

Python annotations come in many shapes (``list[int]``, ``typing.List[int]``, ``Optional[X]``, Pydantic generic
submodels, PEP 695 type aliases, ...). :func:`descriptor_of` folds all of them into a small, closed set of variants:

* a concrete class (a plain :class:`type`, with :class:`object` as the universal top type);
* a :class:`ParameterizedType`, i.e. a raw class with type arguments;
* a :class:`typing.TypeVar`;
* a :class:`WildcardType`, only ever nested inside a parameterized type (``typing.Any`` used as a type argument);
* an :class:`ArrayType` for a homogeneous array with a concrete component, spelled ``tuple[X, ...]`` in Python;
* a :class:`GenericArrayType` for a homogeneous array whose component still needs resolution.

    >>> from ormreflect.reflection.type_descriptors import descriptor_of, to_class
    >>> descriptor_of(list[int])
    ParameterizedType(raw=<class 'list'>, args=(<class 'int'>,), owner=None)
    >>> descriptor_of(int | None)
    <class 'int'>
    >>> descriptor_of(tuple[str, ...])
    ArrayType(component=<class 'str'>)
    >>> to_class(descriptor_of(dict[str, int]))
    <class 'dict'>

"""

import dataclasses
import typing

from ..util.helpers import generics, type_hints


type TypeDescriptor = type | ParameterizedType | typing.TypeVar | WildcardType | ArrayType | GenericArrayType


@dataclasses.dataclass(frozen=True, slots=True)
class ParameterizedType:
    """A raw class together with its (resolved or still variable) type arguments."""

    raw: type
    args: tuple[TypeDescriptor, ...]
    owner: TypeDescriptor | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class WildcardType:
    """A type argument expressed as bounds rather than a fixed type."""

    upper_bounds: tuple[TypeDescriptor, ...] = (object,)
    lower_bounds: tuple[TypeDescriptor, ...] = ()


@dataclasses.dataclass(frozen=True, slots=True)
class ArrayType:
    component: TypeDescriptor


@dataclasses.dataclass(frozen=True, slots=True)
class GenericArrayType:
    component: TypeDescriptor


#: Runtime class of every array descriptor.
ARRAY_CLASS: type = tuple

#: Special forms that wrap a single type without changing it.
_TRANSPARENT_FORMS: tuple[typing.Any, ...] = (typing.ClassVar, typing.Final, typing.Annotated, typing.Required, typing.NotRequired)


# MARK: Classification helpers
def is_concrete(descriptor: TypeDescriptor) -> bool:
    """Return ``True`` if *descriptor* denotes a runtime class (a plain class or a concrete array)."""
    return isinstance(descriptor, (type, ArrayType))


def is_array_hint(hint: typing.Any) -> bool:
    """Return ``True`` if *hint* is a homogeneous variadic tuple, ``tuple[X, ...]``."""
    if typing.get_origin(hint) is not tuple:
        return False
    args = typing.get_args(hint)
    return len(args) == 2 and args[1] is Ellipsis  # noqa: PLR2004 as tuple[X, ...] always has two arguments


def array_of(component: TypeDescriptor) -> ArrayType | GenericArrayType:
    return ArrayType(component) if is_concrete(component) else GenericArrayType(component)


# MARK: descriptor_of
def descriptor_of(hint: typing.Any, *, nested: bool = False) -> TypeDescriptor:
    """Normalise a Python type hint into a :data:`TypeDescriptor`.

    ``nested`` is ``True`` when *hint* appears as a type argument, where ``typing.Any`` reads as an unbounded wildcard
    instead of the top type. Hints that cannot be described (unevaluated forward references, unions of several
    members, literals, ...) degrade to :class:`object`.
    """
    if isinstance(hint, (ParameterizedType, WildcardType, ArrayType, GenericArrayType, typing.TypeVar)):
        return hint

    if hint is None or hint is type(None):
        return type(None)

    if hint is typing.Any:
        return WildcardType() if nested else object

    if isinstance(hint, (str, typing.ForwardRef)):
        return object

    if isinstance(hint, typing.TypeAliasType):
        return descriptor_of(hint.__value__, nested=nested)

    if isinstance(hint, typing.NewType):
        return descriptor_of(hint.__supertype__, nested=nested)

    if type_hints.is_union(hint):
        members = list(type_hints.iterate_union_members(hint))
        return descriptor_of(members[0], nested=nested) if len(members) == 1 else object

    origin = generics.get_origin_or_none(hint)

    if origin in _TRANSPARENT_FORMS:
        args = typing.get_args(hint)
        return descriptor_of(args[0], nested=nested) if args else object

    if is_array_hint(hint):
        component = typing.get_args(hint)[0]
        return array_of(object if component is typing.Any else descriptor_of(component, nested=True))

    if isinstance(origin, type):
        args = generics.get_arguments(hint)
        if not args:
            return origin
        return ParameterizedType(origin, tuple(descriptor_of(arg, nested=True) for arg in args))

    if isinstance(hint, type):
        return hint

    return object


# MARK: to_class
def to_class(descriptor: TypeDescriptor) -> type:
    """Reduce a descriptor to the runtime class a value of that type is an instance of.

    Type variables and wildcards reduce to :class:`object`.
    """
    if isinstance(descriptor, type):
        return descriptor
    if isinstance(descriptor, ParameterizedType):
        return descriptor.raw
    if isinstance(descriptor, (ArrayType, GenericArrayType)):
        return ARRAY_CLASS
    return object


def is_subclass(cls: type, parent: type | tuple[type, ...]) -> bool:
    """Check ``issubclass`` without letting exotic metaclasses raise."""
    try:
        return issubclass(cls, parent)
    except TypeError:
        return False


# MARK: Formatting
def describe(descriptor: TypeDescriptor) -> str:
    """Return a short human readable name for *descriptor*."""
    if isinstance(descriptor, type):
        return descriptor.__qualname__
    if isinstance(descriptor, typing.TypeVar):
        return descriptor.__name__
    if isinstance(descriptor, ParameterizedType):
        return f"{descriptor.raw.__qualname__}[{', '.join(describe(arg) for arg in descriptor.args)}]"
    if isinstance(descriptor, (ArrayType, GenericArrayType)):
        return f"tuple[{describe(descriptor.component)}, ...]"
    if isinstance(descriptor, WildcardType):
        return "?"
    return repr(descriptor)


__all__ = [
    "ARRAY_CLASS",
    "ArrayType",
    "GenericArrayType",
    "ParameterizedType",
    "TypeDescriptor",
    "WildcardType",
    "array_of",
    "descriptor_of",
    "describe",
    "is_array_hint",
    "is_concrete",
    "is_subclass",
    "to_class",
]
