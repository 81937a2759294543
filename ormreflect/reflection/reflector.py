# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Per-class accessor metadata.

A :class:`Reflector` walks a class and all of its ancestors once, and builds a conflict-resolved map of readable and
writable properties together with the :class:`~.invoker.Invoker` used to access each of them.

Three kinds of members are recognised:

* accessor methods named after the ``get_x``/``getX``, ``is_x``/``isX`` and ``set_x``/``setX`` conventions;
* :class:`property` objects (and :func:`functools.cached_property`, which is read-only);
* annotated fields and ``__slots__`` entries not already covered by an accessor.

    >>> from ormreflect.reflection.reflector import Reflector
    >>> class Account:
    ...     owner: str
    ...     def is_active(self) -> bool:
    ...         return True
    ...     def get_balance(self) -> int:
    ...         return 0
    ...     def set_balance(self, value: int) -> None:
    ...         pass
    >>> reflector = Reflector(Account)
    >>> sorted(reflector.getable_property_names)
    ['active', 'balance', 'owner']
    >>> sorted(reflector.setable_property_names)
    ['balance', 'owner']
    >>> reflector.get_getter_type("balance")
    <class 'int'>
    >>> reflector.find_property_name("BALANCE")
    'balance'

"""

import dataclasses
import functools
import inspect
import typing

import pydantic

from frozendict import frozendict

from ..exceptions import AmbiguousAccessorError, NoDefaultConstructorError, NoSuchPropertyError, PropertyDirection
from ..util.helpers import type_hints
from ..util.mixins import LoggableMixin
from . import property_namer
from .invoker import GetFieldInvoker, Invoker, MethodInvoker, SetFieldInvoker
from .type_descriptors import TypeDescriptor, descriptor_of, describe, is_subclass, to_class
from .type_parameter_resolver import erase, resolve_type


#: Classes whose members are never exposed as properties.
IGNORED_CLASSES: tuple[typing.Any, ...] = (object, typing.Generic, typing.Protocol)

_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _is_ignored_class(klass: type) -> bool:
    # Model plumbing lives on pydantic.BaseModel itself, never on user models
    return klass in IGNORED_CLASSES or klass is pydantic.BaseModel


@dataclasses.dataclass(frozen=True, slots=True)
class Accessor:
    """One accessor candidate, as declared on ``declaring``."""

    property_name: str
    attribute: str
    declaring: type
    function: typing.Callable[..., typing.Any]
    hint: typing.Any
    is_method: bool
    boolean_style: bool = False

    @property
    def erased(self) -> type:
        """The runtime class of the declared type, before any type variable is bound."""
        return erase(descriptor_of(self.hint))

    def signature(self, direction: PropertyDirection) -> tuple[typing.Any, ...]:
        return (self.attribute, self.is_method, direction, descriptor_of(self.hint))


# MARK: Signature helpers
def _positional_parameters(function: typing.Callable[..., typing.Any]) -> list[inspect.Parameter] | None:
    try:
        parameters = list(inspect.signature(function).parameters.values())
    except (ValueError, TypeError):
        return None
    if any(param.kind not in _POSITIONAL_KINDS for param in parameters):
        return None
    return parameters


def _return_hint(function: typing.Callable[..., typing.Any], owner: type) -> typing.Any:
    return type_hints.get_annotations(function, owner=owner).get("return", object)


def _param_hint(function: typing.Callable[..., typing.Any], param: inspect.Parameter, owner: type) -> typing.Any:
    return type_hints.get_annotations(function, owner=owner).get(param.name, object)


def _is_void(hint: typing.Any) -> bool:
    return hint is None or hint is type(None)


def _is_constant(hint: typing.Any) -> bool:
    origin = typing.get_origin(hint)
    if origin is typing.Annotated:
        return _is_constant(typing.get_args(hint)[0])
    return hint in (typing.ClassVar, typing.Final) or origin in (typing.ClassVar, typing.Final)


def _slot_names(klass: type) -> tuple[str, ...]:
    slots = vars(klass).get("__slots__", ())
    if isinstance(slots, str):
        return (slots,)
    return tuple(slots)


class Reflector(LoggableMixin):
    """The cached, conflict-resolved property map of one class.

    Instances are immutable once constructed. Use :func:`~.reflector_factory.reflect` (or a
    :class:`~.reflector_factory.ReflectorFactory`) rather than constructing them directly, so that they are cached.

    Raises:
        AmbiguousAccessorError: If two accessors compete for the same property with incomparable types.

    """

    def __init__(self, cls: type) -> None:
        self._type = cls
        self._default_constructor = self._find_default_constructor(cls)

        getters: dict[str, list[Accessor]] = {}
        setters: dict[str, list[Accessor]] = {}
        self._collect_accessors(cls, getters, setters)

        get_invokers: dict[str, Invoker] = {}
        get_types: dict[str, TypeDescriptor] = {}
        self._resolve_getter_conflicts(getters, get_invokers, get_types)

        set_invokers: dict[str, Invoker] = {}
        set_types: dict[str, TypeDescriptor] = {}
        self._resolve_setter_conflicts(setters, get_types, set_invokers, set_types)

        self._add_fields(cls, get_invokers, get_types, set_invokers, set_types)

        self._get_invokers = frozendict(get_invokers)
        self._set_invokers = frozendict(set_invokers)
        self._generic_get_types = frozendict(get_types)
        self._generic_set_types = frozendict(set_types)
        self._get_types = frozendict({name: to_class(descriptor) for name, descriptor in get_types.items()})
        self._set_types = frozendict({name: to_class(descriptor) for name, descriptor in set_types.items()})

        # Writable names are indexed last, so that they win over readable ones with the same upper case form
        case_insensitive: dict[str, str] = {}
        underscore_insensitive: dict[str, str] = {}
        for name in (*self._get_invokers, *self._set_invokers):
            case_insensitive[name.upper()] = name
            underscore_insensitive[name.replace("_", "").upper()] = name
        self._case_insensitive_names = frozendict(case_insensitive)
        self._underscore_insensitive_names = frozendict(underscore_insensitive)

    # MARK: Default constructor
    @staticmethod
    def _find_default_constructor(klass: type) -> typing.Callable[[], typing.Any] | None:
        if inspect.isabstract(klass) or getattr(klass, "_is_protocol", False):
            return None

        try:
            signature = inspect.signature(klass)
        except (ValueError, TypeError):
            # Builtins without introspectable signatures are assumed to be constructible without arguments
            return klass

        for param in signature.parameters.values():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            if param.default is inspect.Parameter.empty:
                return None
        return klass

    # MARK: Collection
    def _hint(self, hint: typing.Any, klass: type, attribute: str) -> typing.Any:
        if isinstance(hint, (str, typing.ForwardRef)):
            self.log.debug("Could not resolve the annotation %r of %s.%s, treating it as 'object'", hint, klass.__qualname__, attribute)
            return object
        return hint

    def _collect_accessors(self, cls: type, getters: dict[str, list[Accessor]], setters: dict[str, list[Accessor]]) -> None:
        seen: set[tuple[typing.Any, ...]] = set()

        def add(target: dict[str, list[Accessor]], accessor: Accessor, direction: PropertyDirection) -> None:
            if not property_namer.is_valid_property_name(accessor.property_name):
                return
            # The most derived declaration of a signature shadows the ones it overrides
            if (signature := accessor.signature(direction)) in seen:
                return
            seen.add(signature)
            target.setdefault(accessor.property_name, []).append(accessor)

        for klass in cls.__mro__:
            if _is_ignored_class(klass):
                continue

            for attribute, member in vars(klass).items():
                if property_namer.is_dunder(attribute):
                    continue

                if type(member) is property:
                    self._collect_property(klass, attribute, member, getters, setters, add)
                elif isinstance(member, functools.cached_property):
                    hint = self._hint(_return_hint(member.func, klass), klass, attribute)
                    add(getters, Accessor(attribute, attribute, klass, member.func, hint, is_method=False), PropertyDirection.GET)
                elif inspect.isfunction(member):
                    self._collect_method(klass, attribute, member, getters, setters, add)

    def _collect_property(
        self,
        klass: type,
        attribute: str,
        member: property,
        getters: dict[str, list[Accessor]],
        setters: dict[str, list[Accessor]],
        add: typing.Callable[[dict[str, list[Accessor]], Accessor, PropertyDirection], None],
    ) -> None:
        getter_hint: typing.Any = object
        if (fget := member.fget) is not None:
            getter_hint = self._hint(_return_hint(fget, klass), klass, attribute)
            add(getters, Accessor(attribute, attribute, klass, fget, getter_hint, is_method=False), PropertyDirection.GET)

        if (fset := member.fset) is not None:
            parameters = _positional_parameters(fset)
            if parameters is None or len(parameters) != 2:  # noqa: PLR2004 as setters take self and the value
                return
            setter_hint = _param_hint(fset, parameters[1], klass)
            if setter_hint is object and fget is not None:
                setter_hint = getter_hint
            setter_hint = self._hint(setter_hint, klass, attribute)
            add(setters, Accessor(attribute, attribute, klass, fset, setter_hint, is_method=False), PropertyDirection.SET)

    def _collect_method(
        self,
        klass: type,
        attribute: str,
        member: typing.Callable[..., typing.Any],
        getters: dict[str, list[Accessor]],
        setters: dict[str, list[Accessor]],
        add: typing.Callable[[dict[str, list[Accessor]], Accessor, PropertyDirection], None],
    ) -> None:
        if not property_namer.is_property(attribute):
            return
        if (parameters := _positional_parameters(member)) is None:
            return

        if len(parameters) == 1 and property_namer.is_getter(attribute):
            hint = _return_hint(member, klass)
            if _is_void(hint):
                return
            accessor = Accessor(
                property_namer.method_to_property(attribute),
                attribute,
                klass,
                member,
                self._hint(hint, klass, attribute),
                is_method=True,
                boolean_style=property_namer.is_boolean_getter(attribute),
            )
            add(getters, accessor, PropertyDirection.GET)

        elif len(parameters) == 2 and property_namer.is_setter(attribute):  # noqa: PLR2004 as setters take self and the value
            hint = self._hint(_param_hint(member, parameters[1], klass), klass, attribute)
            accessor = Accessor(property_namer.method_to_property(attribute), attribute, klass, member, hint, is_method=True)
            add(setters, accessor, PropertyDirection.SET)

    # MARK: Getters
    def _resolve_getter_conflicts(self, getters: dict[str, list[Accessor]], invokers: dict[str, Invoker], types: dict[str, TypeDescriptor]) -> None:
        for name, candidates in getters.items():
            winner: Accessor | None = None

            for candidate in candidates:
                if winner is None:
                    winner = candidate
                    continue

                winner_type = winner.erased
                candidate_type = candidate.erased

                if candidate_type is winner_type:
                    if candidate_type is not bool:
                        raise self._ambiguous(name, PropertyDirection.GET, winner, candidate)
                    if candidate.boolean_style:
                        winner = candidate
                elif is_subclass(winner_type, candidate_type):
                    # The winner is already the narrower type
                    pass
                elif is_subclass(candidate_type, winner_type):
                    winner = candidate
                else:
                    raise self._ambiguous(name, PropertyDirection.GET, winner, candidate)

            if winner is not None:
                self._add_getter(name, winner, invokers, types)

    def _add_getter(self, name: str, accessor: Accessor, invokers: dict[str, Invoker], types: dict[str, TypeDescriptor]) -> None:
        resolved = resolve_type(accessor.hint, self._type, accessor.declaring)
        types[name] = resolved
        if accessor.is_method:
            invokers[name] = MethodInvoker(name, to_class(resolved), accessor.attribute)
        else:
            invokers[name] = GetFieldInvoker(name, to_class(resolved), missing_as_none=False)

    # MARK: Setters
    def _resolve_setter_conflicts(
        self,
        setters: dict[str, list[Accessor]],
        get_types: dict[str, TypeDescriptor],
        invokers: dict[str, Invoker],
        types: dict[str, TypeDescriptor],
    ) -> None:
        for name, candidates in setters.items():
            getter_type = to_class(get_types[name]) if name in get_types else None
            match: Accessor | None = None
            error: AmbiguousAccessorError | None = None

            for candidate in candidates:
                # A setter accepting exactly what the getter returns always wins
                if getter_type is not None and candidate.erased is getter_type:
                    match = candidate
                    break
                if error is None:
                    try:
                        match = self._pick_better_setter(name, match, candidate)
                    except AmbiguousAccessorError as err:
                        match = None
                        error = err

            if match is None:
                if error is not None:
                    self.log.debug("Rejecting ambiguous setters for '%s' in %s", name, self._type.__qualname__)
                    raise error
                continue

            self._add_setter(name, match, invokers, types)

    def _pick_better_setter(self, name: str, current: Accessor | None, candidate: Accessor) -> Accessor:
        if current is None:
            return candidate

        current_type = current.erased
        candidate_type = candidate.erased
        if is_subclass(candidate_type, current_type):
            return candidate
        if is_subclass(current_type, candidate_type):
            return current
        raise self._ambiguous(name, PropertyDirection.SET, current, candidate)

    def _add_setter(self, name: str, accessor: Accessor, invokers: dict[str, Invoker], types: dict[str, TypeDescriptor]) -> None:
        resolved = resolve_type(accessor.hint, self._type, accessor.declaring)
        types[name] = resolved
        if accessor.is_method:
            invokers[name] = MethodInvoker(name, to_class(resolved), accessor.attribute)
        else:
            invokers[name] = SetFieldInvoker(name, to_class(resolved))

    def _ambiguous(self, name: str, direction: PropertyDirection, first: Accessor, second: Accessor) -> AmbiguousAccessorError:
        detail = (
            f"This breaks the property naming conventions and can cause unpredictable results. "
            f"'{first.declaring.__qualname__}.{first.attribute}' declares {describe(descriptor_of(first.hint))} while "
            f"'{second.declaring.__qualname__}.{second.attribute}' declares {describe(descriptor_of(second.hint))}."
        )
        return AmbiguousAccessorError(self._type, name, direction, detail)

    # MARK: Fields
    def _add_fields(
        self,
        cls: type,
        get_invokers: dict[str, Invoker],
        get_types: dict[str, TypeDescriptor],
        set_invokers: dict[str, Invoker],
        set_types: dict[str, TypeDescriptor],
    ) -> None:
        for klass in cls.__mro__:
            if _is_ignored_class(klass):
                continue

            namespace = vars(klass)
            fields: dict[str, typing.Any] = dict(type_hints.get_annotations(klass))
            for slot in _slot_names(klass):
                fields.setdefault(slot, object)

            for name, hint in fields.items():
                if not property_namer.is_valid_property_name(name) or isinstance(hint, dataclasses.InitVar):
                    continue

                # Annotations shadowed by an accessor in the same class are not fields
                member = namespace.get(name)
                if type(member) is property or isinstance(member, functools.cached_property) or inspect.isfunction(member):
                    continue

                hint = self._hint(hint, klass, name)
                resolved = resolve_type(hint, cls, klass)

                if name not in set_invokers and not _is_constant(hint):
                    set_invokers[name] = SetFieldInvoker(name, to_class(resolved))
                    set_types[name] = resolved

                if name not in get_invokers:
                    get_invokers[name] = GetFieldInvoker(name, to_class(resolved))
                    get_types[name] = resolved

    # MARK: Public API
    @property
    def type(self) -> type:
        return self._type

    def has_default_constructor(self) -> bool:
        return self._default_constructor is not None

    def get_default_constructor(self) -> typing.Callable[[], typing.Any]:
        """Return a callable creating a new instance without arguments.

        Raises:
            NoDefaultConstructorError: If the class cannot be instantiated without arguments.

        """
        if self._default_constructor is None:
            raise NoDefaultConstructorError(self._type)
        return self._default_constructor

    def get_get_invoker(self, name: str) -> Invoker:
        if (invoker := self._get_invokers.get(name)) is None:
            raise NoSuchPropertyError(self._type, name, PropertyDirection.GET)
        return invoker

    def get_set_invoker(self, name: str) -> Invoker:
        if (invoker := self._set_invokers.get(name)) is None:
            raise NoSuchPropertyError(self._type, name, PropertyDirection.SET)
        return invoker

    def get_getter_type(self, name: str) -> type:
        if (cls := self._get_types.get(name)) is None:
            raise NoSuchPropertyError(self._type, name, PropertyDirection.GET)
        return cls

    def get_setter_type(self, name: str) -> type:
        if (cls := self._set_types.get(name)) is None:
            raise NoSuchPropertyError(self._type, name, PropertyDirection.SET)
        return cls

    def get_generic_getter_type(self, name: str) -> TypeDescriptor:
        """Return the resolved type of the property *name*, keeping its type arguments."""
        if name not in self._generic_get_types:
            raise NoSuchPropertyError(self._type, name, PropertyDirection.GET)
        return self._generic_get_types[name]

    def get_generic_setter_type(self, name: str) -> TypeDescriptor:
        if name not in self._generic_set_types:
            raise NoSuchPropertyError(self._type, name, PropertyDirection.SET)
        return self._generic_set_types[name]

    @property
    def getable_property_names(self) -> tuple[str, ...]:
        return tuple(self._get_invokers)

    @property
    def setable_property_names(self) -> tuple[str, ...]:
        return tuple(self._set_invokers)

    def has_getter(self, name: str) -> bool:
        return name in self._get_invokers

    def has_setter(self, name: str) -> bool:
        return name in self._set_invokers

    def find_property_name(self, name: str, *, ignore_underscores: bool = False) -> str | None:
        """Return the canonical spelling of the property *name*, matched case-insensitively.

        With ``ignore_underscores``, underscores are ignored on both sides, so ``USER_NAME`` finds ``userName``.
        """
        if ignore_underscores:
            return self._underscore_insensitive_names.get(name.replace("_", "").upper())
        return self._case_insensitive_names.get(name.upper())

    @typing.override
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._type.__qualname__}>"
