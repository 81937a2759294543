# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Dynamic navigation of property paths over values.

A :class:`MetaObject` reads and writes property paths on a value, whatever its shape: mappings, collections and
plain objects can be mixed freely along a path.

    >>> from ormreflect.reflection.meta_object import MetaObject
    >>> class Customer:
    ...     name: str | None = None
    ...     address: dict | None = None
    >>> customer = Customer()
    >>> meta = MetaObject.for_object(customer)
    >>> meta.set_value("name", "Ada")
    >>> meta.set_value("address.city", "London")
    >>> customer.address
    {'city': 'London'}
    >>> meta.get_value("address.city")
    'London'
    >>> meta.get_value("address.zip.code") is None
    True

Intermediate values are created on demand when assigning, but never just to assign ``None``:

    >>> meta.set_value("address.zip.code", None)
    >>> "zip" in customer.address
    False

"""

import typing

from collections.abc import Collection, Mapping

from .object_factory import DEFAULT_OBJECT_FACTORY, ObjectFactory
from .property_tokenizer import PropertyTokenizer
from .reflector_factory import DEFAULT_REFLECTOR_FACTORY, ReflectorFactory
from .wrapper import DEFAULT_OBJECT_WRAPPER_FACTORY, CollectionWrapper, MapWrapper, ObjectWrapper, ObjectWrapperFactory, RecordWrapper


class NullObject:
    """Stands in for an absent value."""


class MetaObject:
    def __init__(
        self,
        obj: typing.Any,
        object_factory: ObjectFactory,
        object_wrapper_factory: ObjectWrapperFactory,
        reflector_factory: ReflectorFactory,
    ) -> None:
        self.original_object = obj
        self.object_factory = object_factory
        self.object_wrapper_factory = object_wrapper_factory
        self.reflector_factory = reflector_factory

        # The wrapper is chosen once, and never changes afterwards
        self.object_wrapper: ObjectWrapper
        if isinstance(obj, ObjectWrapper):
            self.object_wrapper = obj
        elif object_wrapper_factory.has_wrapper_for(obj):
            self.object_wrapper = object_wrapper_factory.get_wrapper_for(self, obj)
        elif isinstance(obj, Mapping):
            self.object_wrapper = MapWrapper(self, obj)
        elif isinstance(obj, Collection) and not isinstance(obj, (str, bytes, bytearray)):
            self.object_wrapper = CollectionWrapper(self, obj)
        else:
            self.object_wrapper = RecordWrapper(self, obj)

    @classmethod
    def for_object(
        cls,
        obj: typing.Any,
        object_factory: ObjectFactory | None = None,
        object_wrapper_factory: ObjectWrapperFactory | None = None,
        reflector_factory: ReflectorFactory | None = None,
    ) -> "MetaObject":
        """Wrap *obj*, or return :data:`NULL_META_OBJECT` when it is ``None``.

        Factories that are not given default to the process-wide ones.
        """
        if obj is None:
            return NULL_META_OBJECT
        return cls(
            obj,
            DEFAULT_OBJECT_FACTORY if object_factory is None else object_factory,
            DEFAULT_OBJECT_WRAPPER_FACTORY if object_wrapper_factory is None else object_wrapper_factory,
            DEFAULT_REFLECTOR_FACTORY if reflector_factory is None else reflector_factory,
        )

    def for_value(self, value: typing.Any) -> "MetaObject":
        """Wrap *value* with the same factories as this meta object."""
        return type(self).for_object(value, self.object_factory, self.object_wrapper_factory, self.reflector_factory)

    @property
    def is_null(self) -> bool:
        return self is NULL_META_OBJECT

    # MARK: Metadata
    def find_property(self, name: str, *, use_camel_case_mapping: bool = False) -> str | None:
        return self.object_wrapper.find_property(name, use_camel_case_mapping=use_camel_case_mapping)

    def getter_names(self) -> tuple[str, ...]:
        return self.object_wrapper.getter_names()

    def setter_names(self) -> tuple[str, ...]:
        return self.object_wrapper.setter_names()

    def get_setter_type(self, name: str) -> type:
        return self.object_wrapper.get_setter_type(name)

    def get_getter_type(self, name: str) -> type:
        return self.object_wrapper.get_getter_type(name)

    def has_setter(self, name: str) -> bool:
        return self.object_wrapper.has_setter(name)

    def has_getter(self, name: str) -> bool:
        return self.object_wrapper.has_getter(name)

    # MARK: Values
    def get_value(self, name: str) -> typing.Any:
        """Read the property path *name*; any absent intermediate value makes the whole path read as ``None``."""
        prop = PropertyTokenizer(name)
        if prop.children is None:
            return self.object_wrapper.get(prop)

        meta_value = self.meta_object_for_property(prop.indexed_name)
        if meta_value.is_null:
            return None
        return meta_value.get_value(prop.children)

    def set_value(self, name: str, value: typing.Any) -> None:
        """Write *value* to the property path *name*, creating absent intermediate values as needed.

        Raises:
            NoDefaultConstructorError: If an absent intermediate value cannot be created.

        """
        prop = PropertyTokenizer(name)
        if prop.children is None:
            self.object_wrapper.set(prop, value)
            return

        meta_value = self.meta_object_for_property(prop.indexed_name)
        if meta_value.is_null:
            # Assigning None never creates intermediate values
            if value is None:
                return
            meta_value = self.object_wrapper.instantiate_property_value(name, prop, self.object_factory)
        meta_value.set_value(prop.children, value)

    def meta_object_for_property(self, name: str) -> "MetaObject":
        return self.for_value(self.get_value(name))

    # MARK: Collections
    def is_collection(self) -> bool:
        return self.object_wrapper.is_collection()

    def add(self, element: typing.Any) -> None:
        self.object_wrapper.add(element)

    def add_all(self, elements: typing.Iterable[typing.Any]) -> None:
        self.object_wrapper.add_all(elements)

    @typing.override
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {type(self.object_wrapper).__name__}({self.original_object!r})>"


#: The meta object of every absent value.
NULL_META_OBJECT = MetaObject(NullObject(), DEFAULT_OBJECT_FACTORY, DEFAULT_OBJECT_WRAPPER_FACTORY, DEFAULT_REFLECTOR_FACTORY)
