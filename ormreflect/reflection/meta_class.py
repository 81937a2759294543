# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Static navigation of property paths over classes.

A :class:`MetaClass` answers questions about a property path, such as ``order.items[0].price``, using only the declared
types of each segment. No instance is needed.

    >>> import dataclasses
    >>> from ormreflect.reflection.meta_class import MetaClass
    >>> @dataclasses.dataclass
    ... class Item:
    ...     price: float = 0.0
    >>> @dataclasses.dataclass
    ... class Order:
    ...     items: list[Item] = dataclasses.field(default_factory=list)
    >>> meta = MetaClass.for_class(Order)
    >>> meta.get_getter_type("items[0].price")
    <class 'float'>
    >>> meta.find_property("ITEMS[0].PRICE")
    'items.price'
    >>> meta.has_setter("items.weight")
    False

"""

import typing

from collections.abc import Collection, Mapping

from .invoker import Invoker
from .property_tokenizer import PropertyTokenizer
from .reflector_factory import DEFAULT_REFLECTOR_FACTORY, ReflectorFactory
from .type_descriptors import ArrayType, GenericArrayType, ParameterizedType, TypeDescriptor, is_subclass, to_class


if typing.TYPE_CHECKING:
    from .reflector import Reflector


def _is_collection_class(cls: type) -> bool:
    return is_subclass(cls, Collection) and not is_subclass(cls, (str, bytes, bytearray, Mapping))


def element_class(descriptor: TypeDescriptor) -> type | None:
    """Return the element class of a single-argument collection or array descriptor, if it has one."""
    if isinstance(descriptor, ParameterizedType) and len(descriptor.args) == 1:
        arg = descriptor.args[0]
        if isinstance(arg, (type, ParameterizedType, ArrayType, GenericArrayType)):
            return to_class(arg)
    elif isinstance(descriptor, (ArrayType, GenericArrayType)):
        return to_class(descriptor.component)
    return None


class MetaClass:
    def __init__(self, cls: typing.Any, reflector_factory: ReflectorFactory) -> None:
        self.reflector_factory = reflector_factory
        self.reflector: "Reflector" = reflector_factory.find_for_class(cls)

    @classmethod
    def for_class(cls, type_: typing.Any, reflector_factory: ReflectorFactory | None = None) -> "MetaClass":
        return cls(type_, DEFAULT_REFLECTOR_FACTORY if reflector_factory is None else reflector_factory)

    @property
    def type(self) -> type:
        return self.reflector.type

    def meta_class_for_property(self, name: str) -> "MetaClass":
        return type(self).for_class(self.reflector.get_getter_type(name), self.reflector_factory)

    def _meta_class_for_element(self, name: str, *, element: bool) -> "MetaClass":
        return type(self).for_class(self._element_getter_type(name, element=element), self.reflector_factory)

    # MARK: Property names
    def find_property(self, name: str, *, use_camel_case_mapping: bool = False) -> str | None:
        """Return the canonical spelling of the path *name*, or ``None`` if its first segment is unknown.

        Indices are dropped and unknown trailing segments are cut off. With ``use_camel_case_mapping`` underscores
        are ignored, so ``USER_NAME`` finds a property called ``userName`` (or ``user_name``).
        """
        segments: list[str] = []
        self._build_property(name, segments, ignore_underscores=use_camel_case_mapping)
        return ".".join(segments) if segments else None

    def _build_property(self, name: str, segments: list[str], *, ignore_underscores: bool) -> None:
        prop = PropertyTokenizer(name)
        property_name = self.reflector.find_property_name(prop.name, ignore_underscores=ignore_underscores)
        if property_name is None:
            return

        segments.append(property_name)
        if prop.children is not None:
            # Canonical paths carry no indices, so a collection segment always continues into its element
            meta_prop = self._meta_class_for_element(property_name, element=True)
            meta_prop._build_property(prop.children, segments, ignore_underscores=ignore_underscores)

    def getter_names(self) -> tuple[str, ...]:
        return self.reflector.getable_property_names

    def setter_names(self) -> tuple[str, ...]:
        return self.reflector.setable_property_names

    # MARK: Types
    def get_setter_type(self, name: str) -> type:
        prop = PropertyTokenizer(name)
        if prop.children is not None:
            return self.meta_class_for_property(prop.name).get_setter_type(prop.children)
        return self.reflector.get_setter_type(prop.name)

    def get_getter_type(self, name: str) -> type:
        prop = PropertyTokenizer(name)
        if prop.children is not None:
            return self._meta_class_for_element(prop.name, element=prop.index is not None).get_getter_type(prop.children)
        return self._element_getter_type(prop.name, element=prop.index is not None)

    def _element_getter_type(self, name: str, *, element: bool) -> type:
        cls = self.reflector.get_getter_type(name)
        # With element set, a collection property stands for one of its elements
        if element and _is_collection_class(cls):
            element = element_class(self.reflector.get_generic_getter_type(name))
            if element is not None:
                return element
        return cls

    # MARK: Capabilities
    def has_setter(self, name: str) -> bool:
        prop = PropertyTokenizer(name)
        if prop.children is None:
            return self.reflector.has_setter(prop.name)
        if self.reflector.has_setter(prop.name):
            return self.meta_class_for_property(prop.name).has_setter(prop.children)
        return False

    def has_getter(self, name: str) -> bool:
        prop = PropertyTokenizer(name)
        if prop.children is None:
            return self.reflector.has_getter(prop.name)
        if self.reflector.has_getter(prop.name):
            return self._meta_class_for_element(prop.name, element=prop.index is not None).has_getter(prop.children)
        return False

    def get_get_invoker(self, name: str) -> Invoker:
        return self.reflector.get_get_invoker(name)

    def get_set_invoker(self, name: str) -> Invoker:
        return self.reflector.get_set_invoker(name)

    def has_default_constructor(self) -> bool:
        return self.reflector.has_default_constructor()

    @typing.override
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.type.__qualname__}>"
