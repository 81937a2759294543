# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Resolution of generic type variables against a concrete source class.

Python only keeps the type arguments of a generic class on the subscripted aliases a subclass was declared with
(``__orig_bases__``). Given the type of a member as written on its declaring class, these helpers walk the bases of a
source class up to the declaring class and bind every type variable to the argument found on the way.

    >>> from ormreflect.reflection.type_parameter_resolver import resolve_type
    >>> class Box[V]:
    ...     value: V
    >>> class StringBox(Box[str]):
    ...     pass
    >>> V, = Box.__type_params__
    >>> resolve_type(V, StringBox, Box)
    <class 'str'>
    >>> resolve_type(list[V], StringBox, Box)
    ParameterizedType(raw=<class 'list'>, args=(<class 'str'>,), owner=None)

A type variable that cannot be bound never raises; it resolves to :class:`object` instead.

    >>> class Unrelated:
    ...     pass
    >>> resolve_type(V, Unrelated, Box)
    <class 'object'>

"""

import inspect
import typing

from ..util.helpers import generics, type_hints
from .type_descriptors import (
    ArrayType,
    GenericArrayType,
    ParameterizedType,
    TypeDescriptor,
    WildcardType,
    array_of,
    descriptor_of,
    is_subclass,
    to_class,
)


type SourceType = type | ParameterizedType


# MARK: Public API
def resolve_type(declared: typing.Any, source: typing.Any, declaring: type) -> TypeDescriptor:
    """Resolve *declared*, the type of a member as written on *declaring*, as seen from *source*.

    Args:
        declared: A type hint or :data:`TypeDescriptor`, possibly containing type variables of *declaring*.
        source: The class (or subscripted alias of a class) resolution starts from.
        declaring: The class that declares the member.

    Raises:
        ValueError: If *source* is neither a class nor a subscripted alias of a class.

    """
    return _resolve_type(descriptor_of(declared), _normalize_source(source), declaring)


def resolve_field_type(declaring: type, name: str, source: typing.Any) -> TypeDescriptor:
    """Resolve the annotated type of the field *name* declared on *declaring*."""
    hint = type_hints.get_annotations(declaring).get(name, object)
    return resolve_type(hint, source, declaring)


def resolve_return_type(function: typing.Callable[..., typing.Any], source: typing.Any, declaring: type) -> TypeDescriptor:
    """Resolve the return type of *function*, a method declared on *declaring*.

    Unannotated functions return :class:`object`.
    """
    hint = type_hints.get_annotations(function, owner=declaring).get("return", object)
    return resolve_type(hint, source, declaring)


def resolve_param_types(function: typing.Callable[..., typing.Any], source: typing.Any, declaring: type) -> tuple[TypeDescriptor, ...]:
    """Resolve the types of the parameters of *function* following ``self``.

    Unannotated parameters resolve to :class:`object`.
    """
    annotations = type_hints.get_annotations(function, owner=declaring)
    parameters = list(inspect.signature(function).parameters.values())[1:]
    return tuple(resolve_type(annotations.get(param.name, object), source, declaring) for param in parameters)


# MARK: Dispatch
def _normalize_source(source: typing.Any) -> SourceType:
    if isinstance(source, ParameterizedType):
        return source

    # Subscripted aliases of a class (e.g. Box[int]), including parameterized pydantic models
    if isinstance(generics.get_origin_or_none(source), type):
        normalized = descriptor_of(source)
        if isinstance(normalized, (type, ParameterizedType)):
            return normalized

    if isinstance(source, type):
        return source

    msg = f"The source type must be a class or a parameterized class, but was: {source!r}"
    raise ValueError(msg)


def _resolve_type(declared: TypeDescriptor, source: SourceType, declaring: type) -> TypeDescriptor:
    if isinstance(declared, typing.TypeVar):
        return _resolve_type_var(declared, source, declaring)
    elif isinstance(declared, ParameterizedType):
        return _resolve_parameterized_type(declared, source, declaring)
    elif isinstance(declared, GenericArrayType):
        return _resolve_generic_array_type(declared, source, declaring)
    else:
        return declared


# MARK: Arrays
def _resolve_generic_array_type(array: GenericArrayType, source: SourceType, declaring: type) -> TypeDescriptor:
    component = array.component
    resolved: TypeDescriptor | None = None

    if isinstance(component, typing.TypeVar):
        resolved = _resolve_type_var(component, source, declaring)
    elif isinstance(component, GenericArrayType):
        resolved = _resolve_generic_array_type(component, source, declaring)
    elif isinstance(component, ParameterizedType):
        resolved = _resolve_parameterized_type(component, source, declaring)

    # A component that cannot be resolved degrades to an array of the top type
    if resolved is None:
        return ArrayType(object)

    return array_of(resolved)


# MARK: Parameterized types
def _resolve_parameterized_type(parameterized: ParameterizedType, source: SourceType, declaring: type) -> ParameterizedType:
    args: list[TypeDescriptor] = []
    for arg in parameterized.args:
        if isinstance(arg, typing.TypeVar):
            args.append(_resolve_type_var(arg, source, declaring))
        elif isinstance(arg, ParameterizedType):
            args.append(_resolve_parameterized_type(arg, source, declaring))
        elif isinstance(arg, WildcardType):
            args.append(_resolve_wildcard_type(arg, source, declaring))
        else:
            args.append(arg)
    return ParameterizedType(parameterized.raw, tuple(args))


def _resolve_wildcard_type(wildcard: WildcardType, source: SourceType, declaring: type) -> WildcardType:
    return WildcardType(
        upper_bounds=_resolve_wildcard_type_bounds(wildcard.upper_bounds, source, declaring),
        lower_bounds=_resolve_wildcard_type_bounds(wildcard.lower_bounds, source, declaring),
    )


def _resolve_wildcard_type_bounds(bounds: tuple[TypeDescriptor, ...], source: SourceType, declaring: type) -> tuple[TypeDescriptor, ...]:
    result: list[TypeDescriptor] = []
    for bound in bounds:
        if isinstance(bound, typing.TypeVar):
            result.append(_resolve_type_var(bound, source, declaring))
        elif isinstance(bound, ParameterizedType):
            result.append(_resolve_parameterized_type(bound, source, declaring))
        elif isinstance(bound, WildcardType):
            result.append(_resolve_wildcard_type(bound, source, declaring))
        else:
            result.append(bound)
    return tuple(result)


# MARK: Type variables
def declared_bound(var: typing.TypeVar) -> TypeDescriptor:
    """Return the first declared bound (or constraint) of *var*, or :class:`object` when it is unbounded."""
    if (bound := var.__bound__) is not None:
        return descriptor_of(bound)
    if constraints := var.__constraints__:
        return descriptor_of(constraints[0])
    return object


def _resolve_type_var(var: typing.TypeVar, source: SourceType, declaring: type) -> TypeDescriptor:
    cls = source if isinstance(source, type) else source.raw

    # Queried from the declaring class itself, nothing binds the variable
    if cls is declaring:
        return declared_bound(var)

    # The first base acts as the superclass, the remaining ones as interfaces
    for base in generics.get_generic_bases(cls):
        if (result := _scan_super_types(var, source, declaring, cls, base)) is not None:
            return result

    return object


def _scan_super_types(var: typing.TypeVar, source: SourceType, declaring: type, cls: type, base: typing.Any) -> TypeDescriptor | None:
    parent = descriptor_of(base)

    if isinstance(parent, ParameterizedType):
        parent_cls = parent.raw

        if parent_cls is declaring:
            for position, declared_var in enumerate(generics.get_parameters(declaring)):
                if declared_var is var and position < len(parent.args):
                    return _bind_to_source(parent.args[position], source, cls)
            return None

        # The arguments of an intermediate base may name type variables of cls, so bind them before walking on
        if is_subclass(parent_cls, declaring):
            bound = ParameterizedType(parent_cls, tuple(_bind_to_source(arg, source, cls) for arg in parent.args), parent.owner)
            return _resolve_type_var(var, bound, declaring)

    elif isinstance(parent, type) and is_subclass(parent, declaring):
        return _resolve_type_var(var, parent, declaring)

    return None


def _bind_to_source(descriptor: TypeDescriptor, source: SourceType, cls: type) -> TypeDescriptor:
    """Replace the type variables of *cls* found in *descriptor* with the arguments *source* binds them to.

    Variables the source leaves unbound degrade to :class:`object`.
    """
    if isinstance(descriptor, typing.TypeVar):
        for position, own_var in enumerate(generics.get_parameters(cls)):
            if own_var is descriptor:
                if isinstance(source, ParameterizedType) and position < len(source.args):
                    return source.args[position]
                break
        return object
    if isinstance(descriptor, ParameterizedType):
        return ParameterizedType(descriptor.raw, tuple(_bind_to_source(arg, source, cls) for arg in descriptor.args), descriptor.owner)
    if isinstance(descriptor, GenericArrayType):
        return array_of(_bind_to_source(descriptor.component, source, cls))
    if isinstance(descriptor, WildcardType):
        return WildcardType(
            upper_bounds=tuple(_bind_to_source(bound, source, cls) for bound in descriptor.upper_bounds),
            lower_bounds=tuple(_bind_to_source(bound, source, cls) for bound in descriptor.lower_bounds),
        )
    return descriptor


# MARK: Erasure
def erase(descriptor: TypeDescriptor) -> type:
    """Return the runtime class of *descriptor* before resolution.

    Type variables erase to the class of their first bound, or to :class:`object` when unbounded.
    """
    if isinstance(descriptor, typing.TypeVar):
        return to_class(declared_bound(descriptor))
    return to_class(descriptor)
