# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Utilities for generic type introspection.

This module wraps the Python typing machinery (and some Pydantic internals)
to make it easy to:

* inspect the type parameters declared on a generic class,
* examine which arguments a subscripted alias binds to those parameters, and
* list the parameterised bases a class was declared with.

Pydantic generic models are special-cased: subscripting one creates a real
subclass rather than a typing alias, and its generic state is only available
through ``__pydantic_generic_metadata__``.

These helpers raise :class:`GenericsError` when the caller provides inputs
that make introspection impossible.


Examples
--------
    >>> from ormreflect.util.helpers import generics
    >>> class Box[V]:
    ...     pass
    >>> class StringBox(Box[str]):
    ...     pass
    >>> [param.__name__ for param in generics.get_parameters(Box)]
    ['V']
    >>> base, = generics.get_generic_bases(StringBox)
    >>> generics.get_origin(base) is Box
    True
    >>> generics.get_arguments(base)
    (<class 'str'>,)
    >>> generics.get_parameters(StringBox)
    ()

"""

import types
import typing

from functools import lru_cache

import pydantic


# MARK: Definitions
# Maximum number of cached entries used by the memoization helpers below.
LRU_CACHE_MAXSIZE = 256

# Runtime alias for subscripted generic annotations.
type GenericAlias = types.GenericAlias | typing._GenericAlias  # noqa: SLF001 # pyright: ignore[reportAttributeAccessIssue] as typing._GenericAlias does exist, but is undocumented

# Bases that only mark a class as generic and never bind type arguments.
_MARKER_BASES: tuple[typing.Any, ...] = (typing.Generic, typing.Protocol)


class GenericsError(TypeError):
    """Signals incorrect generic usage.

    Raised when callers provide inputs that make generic introspection impossible, for example asking for the origin
    of a class that was never subscripted.
    """


# MARK: Pydantic helpers
def _pydantic_generic_metadata(cls: typing.Any) -> typing.Mapping[str, typing.Any] | None:
    if not isinstance(cls, type) or not issubclass(cls, pydantic.BaseModel):
        return None
    return cls.__pydantic_generic_metadata__


# MARK: get_origin
def get_origin_or_none(cls: typing.Any) -> typing.Any:
    """Return the typing origin for *cls* or ``None`` when it is not a subscripted generic."""
    if (metadata := _pydantic_generic_metadata(cls)) is not None:
        return metadata["origin"]
    return typing.get_origin(cls)


def get_origin(cls: typing.Any, *, passthrough: bool = False) -> typing.Any:
    """Return the typing origin for *cls* or ``cls`` itself when passthrough is ``True``.

    Raises:
        GenericsError: If *cls* has no origin and ``passthrough`` is ``False``.

    """
    if (origin := get_origin_or_none(cls)) is not None:
        return origin
    elif not passthrough:
        msg = f"{getattr(cls, '__name__', cls)} is not a subscripted generic"
        raise GenericsError(msg)
    else:
        return cls


# MARK: get_arguments
def get_arguments(cls: typing.Any) -> tuple[typing.Any, ...]:
    """Return the type arguments bound by the subscripted generic *cls*, or an empty tuple."""
    if (metadata := _pydantic_generic_metadata(cls)) is not None:
        return tuple(metadata["args"]) if metadata["origin"] is not None else ()
    return typing.get_args(cls)


# MARK: get_parameters
@lru_cache(maxsize=LRU_CACHE_MAXSIZE)
def get_parameters(cls: typing.Any) -> tuple[typing.TypeVar, ...]:
    """Return the type variables declared by the generic class *cls* (or by the origin of an alias).

    Non-generic classes, including concrete subclasses of generic classes, declare no parameters.
    """
    if not isinstance(cls, type):
        cls = get_origin(cls, passthrough=True)
        if not isinstance(cls, type):
            return ()

    if (metadata := _pydantic_generic_metadata(cls)) is not None:
        if metadata["origin"] is not None:
            return get_parameters(metadata["origin"])
        return tuple(metadata["parameters"])

    params = getattr(cls, "__parameters__", ())
    if not isinstance(params, tuple):
        return ()
    return tuple(param for param in params if isinstance(param, typing.TypeVar))


# MARK: get_bases
def get_original_bases(cls: type | GenericAlias) -> tuple[typing.Any, ...]:
    """Return the tuple of original bases for *cls*, resolving aliases.

    Raises:
        GenericsError: If *cls* is neither a class nor an alias of one.

    """
    if not isinstance(cls, type):
        _cls = get_origin_or_none(cls)
        if not isinstance(_cls, type):
            msg = f"{cls} is not a class"
            raise GenericsError(msg)
        cls = _cls

    return types.get_original_bases(cls)


def _is_marker_base(base: typing.Any) -> bool:
    return base in _MARKER_BASES or get_origin_or_none(base) in _MARKER_BASES


@lru_cache(maxsize=LRU_CACHE_MAXSIZE)
def get_generic_bases(cls: type | GenericAlias) -> tuple[typing.Any, ...]:
    """Return the original bases of *cls* in declaration order, without ``Generic[...]`` or ``Protocol[...]`` markers.

    The first entry plays the role of the generic superclass; the remaining entries are the generic super-interfaces.
    """
    return tuple(base for base in get_original_bases(cls) if not _is_marker_base(base))
