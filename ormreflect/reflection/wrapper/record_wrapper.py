# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import typing

from ...exceptions import ReflectionError, UnsupportedOperationError
from ..meta_class import MetaClass
from ..property_tokenizer import PropertyTokenizer
from .base_wrapper import BaseWrapper


if typing.TYPE_CHECKING:
    from ..meta_object import MetaObject
    from ..object_factory import ObjectFactory


class RecordWrapper(BaseWrapper):
    """Wraps an arbitrary object, accessing its properties through the reflector of its class."""

    def __init__(self, meta_object: "MetaObject", obj: typing.Any) -> None:
        super().__init__(meta_object)
        self.object = obj
        self.meta_class = MetaClass.for_class(type(obj), meta_object.reflector_factory)

    @typing.override
    def get(self, prop: PropertyTokenizer) -> typing.Any:
        if prop.index is not None:
            return self.get_collection_value(prop, self.resolve_collection(prop, self.object))
        return self.meta_class.get_get_invoker(prop.name).invoke(self.object)

    @typing.override
    def set(self, prop: PropertyTokenizer, value: typing.Any) -> None:
        if prop.index is not None:
            self.set_collection_value(prop, self.resolve_collection(prop, self.object), value)
            return

        invoker = self.meta_class.get_set_invoker(prop.name)
        try:
            invoker.invoke(self.object, (value,))
        except ReflectionError:
            raise
        except Exception as err:
            msg = f"Could not set property '{prop.name}' of '{type(self.object).__qualname__}' with value '{value!r}'. Cause: {err}"
            raise ReflectionError(msg) from err

    @typing.override
    def find_property(self, name: str, *, use_camel_case_mapping: bool = False) -> str | None:
        return self.meta_class.find_property(name, use_camel_case_mapping=use_camel_case_mapping)

    @typing.override
    def getter_names(self) -> tuple[str, ...]:
        return self.meta_class.getter_names()

    @typing.override
    def setter_names(self) -> tuple[str, ...]:
        return self.meta_class.setter_names()

    # Static types are refined by the runtime value of intermediate segments, where there is one
    @typing.override
    def get_setter_type(self, name: str) -> type:
        prop = PropertyTokenizer(name)
        if prop.children is not None:
            meta_value = self.meta_object.meta_object_for_property(prop.indexed_name)
            if not meta_value.is_null:
                return meta_value.get_setter_type(prop.children)
        return self.meta_class.get_setter_type(name)

    @typing.override
    def get_getter_type(self, name: str) -> type:
        prop = PropertyTokenizer(name)
        if prop.children is not None:
            meta_value = self.meta_object.meta_object_for_property(prop.indexed_name)
            if not meta_value.is_null:
                return meta_value.get_getter_type(prop.children)
        return self.meta_class.get_getter_type(name)

    @typing.override
    def has_setter(self, name: str) -> bool:
        prop = PropertyTokenizer(name)
        if prop.children is None:
            return self.meta_class.has_setter(name)
        if not self.meta_class.has_setter(prop.indexed_name):
            return False

        meta_value = self.meta_object.meta_object_for_property(prop.indexed_name)
        if meta_value.is_null:
            return self.meta_class.has_setter(name)
        return meta_value.has_setter(prop.children)

    @typing.override
    def has_getter(self, name: str) -> bool:
        prop = PropertyTokenizer(name)
        if prop.children is None:
            return self.meta_class.has_getter(name)
        if not self.meta_class.has_getter(prop.indexed_name):
            return False

        meta_value = self.meta_object.meta_object_for_property(prop.indexed_name)
        if meta_value.is_null:
            return self.meta_class.has_getter(name)
        return meta_value.has_getter(prop.children)

    @typing.override
    def instantiate_property_value(self, name: str, prop: PropertyTokenizer, object_factory: "ObjectFactory") -> "MetaObject":
        cls = self.get_setter_type(prop.name)
        try:
            value = object_factory.create(cls)
        except ReflectionError:
            raise
        except Exception as err:
            msg = f"Cannot set value of property '{name}' because '{prop.name}' is None and cannot be instantiated as {cls.__qualname__}. Cause: {err}"
            raise ReflectionError(msg) from err

        self.set(prop, value)
        return self.meta_object.for_value(value)

    @typing.override
    def is_collection(self) -> bool:
        return False

    @typing.override
    def add(self, element: typing.Any) -> None:
        msg = f"Cannot add an element to {type(self.object).__qualname__}, as it is not a collection"
        raise UnsupportedOperationError(msg)

    @typing.override
    def add_all(self, elements: typing.Iterable[typing.Any]) -> None:
        msg = f"Cannot add elements to {type(self.object).__qualname__}, as it is not a collection"
        raise UnsupportedOperationError(msg)
