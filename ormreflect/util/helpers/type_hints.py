# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import inspect
import sys
import types
import typing

from frozendict import frozendict


# MARK: Raw annotations
def _get_raw_annotations(obj: typing.Any) -> typing.Mapping[str, typing.Any]:
    try:
        return inspect.get_annotations(obj)
    except NameError:
        # Deferred annotations that reference names which do not exist (yet)
        return inspect.get_annotations(obj, format=inspect.Format.STRING)  # pyright: ignore[reportAttributeAccessIssue]


# MARK: Namespaces
def _get_globals(obj: typing.Any) -> dict[str, typing.Any]:
    if isinstance(obj, type):
        module = sys.modules.get(obj.__module__)
        return dict(vars(module)) if module is not None else {}
    return getattr(obj, "__globals__", {})


def _get_locals(obj: typing.Any, owner: type | None) -> dict[str, typing.Any]:
    localns: dict[str, typing.Any] = {}
    if owner is not None:
        localns.update({param.__name__: param for param in getattr(owner, "__type_params__", ())})
        localns.update(vars(owner))
    localns.update({param.__name__: param for param in getattr(obj, "__type_params__", ())})
    if isinstance(obj, type):
        localns.update(vars(obj))
    return localns


# MARK: Evaluation
def evaluate_annotation(hint: typing.Any, globalns: dict[str, typing.Any], localns: dict[str, typing.Any]) -> typing.Any:
    """Evaluate a string annotation, returning a :class:`typing.ForwardRef` when it cannot be evaluated."""
    if isinstance(hint, typing.ForwardRef):
        hint = hint.__forward_arg__
    if not isinstance(hint, str):
        return hint

    try:
        return eval(hint, globalns, localns)  # noqa: S307 as this is exactly what inspect.get_annotations(eval_str=True) does
    except (NameError, SyntaxError, TypeError, AttributeError):
        return typing.ForwardRef(hint)


def get_annotations(obj: typing.Any, *, owner: type | None = None) -> typing.Mapping[str, typing.Any]:
    """Return the annotations declared directly on *obj*, a class or a function.

    String annotations are evaluated in the namespace of the defining module, with the type parameters of *obj*
    and of its *owner* class in scope. Annotations that fail to evaluate are returned as :class:`typing.ForwardRef`
    instances instead of raising.

    Inherited annotations are not included; walk the MRO to collect them.
    """
    if owner is None and isinstance(obj, type):
        owner = obj

    raw = _get_raw_annotations(obj)
    if not raw:
        return frozendict()

    globalns = _get_globals(obj)
    localns = _get_locals(obj, owner)
    return frozendict({name: evaluate_annotation(hint, globalns, localns) for name, hint in raw.items()})


# MARK: Union utilities
def is_union(hint: typing.Any) -> bool:
    origin = typing.get_origin(hint)
    return origin is typing.Union or origin is types.UnionType


def iterate_union_members(hint: typing.Any, *, include_none: bool = False) -> typing.Iterable[typing.Any]:
    """Yield the members of a union type hint, or the hint itself when it is not a union."""
    if not is_union(hint):
        yield hint
        return

    for member in typing.get_args(hint):
        if member is type(None) and not include_none:
            continue
        yield member
