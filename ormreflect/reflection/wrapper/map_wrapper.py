# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import typing

from collections.abc import Mapping, MutableMapping

from ...exceptions import UnsupportedOperationError
from ..property_tokenizer import PropertyTokenizer
from .base_wrapper import BaseWrapper


if typing.TYPE_CHECKING:
    from ..meta_object import MetaObject
    from ..object_factory import ObjectFactory


class MapWrapper(BaseWrapper):
    """Wraps a mapping, whose keys are its properties.

    Any :class:`~collections.abc.Mapping` can be read; writing requires a :class:`~collections.abc.MutableMapping`.
    """

    def __init__(self, meta_object: "MetaObject", mapping: Mapping[typing.Any, typing.Any]) -> None:
        super().__init__(meta_object)
        self.map = mapping

    def _mutable_map(self) -> MutableMapping[typing.Any, typing.Any]:
        if not isinstance(self.map, MutableMapping):
            msg = f"Cannot modify {type(self.map).__qualname__}, as it is not a mutable mapping"
            raise UnsupportedOperationError(msg)
        return self.map

    @typing.override
    def get(self, prop: PropertyTokenizer) -> typing.Any:
        if prop.index is not None:
            return self.get_collection_value(prop, self.resolve_collection(prop, self.map))
        return self.map.get(prop.name)

    @typing.override
    def set(self, prop: PropertyTokenizer, value: typing.Any) -> None:
        if prop.index is not None:
            self.set_collection_value(prop, self.resolve_collection(prop, self.map), value)
        else:
            self._mutable_map()[prop.name] = value

    @typing.override
    def find_property(self, name: str, *, use_camel_case_mapping: bool = False) -> str | None:
        return name

    @typing.override
    def getter_names(self) -> tuple[str, ...]:
        return tuple(str(key) for key in self.map)

    @typing.override
    def setter_names(self) -> tuple[str, ...]:
        return tuple(str(key) for key in self.map)

    # Mappings carry no declared types, so types come from the values currently stored
    @typing.override
    def get_setter_type(self, name: str) -> type:
        prop = PropertyTokenizer(name)
        if prop.children is not None:
            meta_value = self.meta_object.meta_object_for_property(prop.indexed_name)
            if meta_value.is_null:
                return object
            return meta_value.get_setter_type(prop.children)

        value = self.map.get(name)
        return object if value is None else type(value)

    @typing.override
    def get_getter_type(self, name: str) -> type:
        prop = PropertyTokenizer(name)
        if prop.children is not None:
            meta_value = self.meta_object.meta_object_for_property(prop.indexed_name)
            if meta_value.is_null:
                return object
            return meta_value.get_getter_type(prop.children)

        value = self.map.get(name)
        return object if value is None else type(value)

    @typing.override
    def has_setter(self, name: str) -> bool:
        return True

    @typing.override
    def has_getter(self, name: str) -> bool:
        prop = PropertyTokenizer(name)
        if prop.children is None:
            return prop.name in self.map
        if prop.name not in self.map:
            return False

        meta_value = self.meta_object.meta_object_for_property(prop.indexed_name)
        if meta_value.is_null:
            return True
        return meta_value.has_getter(prop.children)

    @typing.override
    def instantiate_property_value(self, name: str, prop: PropertyTokenizer, object_factory: "ObjectFactory") -> "MetaObject":
        value: dict[str, typing.Any] = {}
        self.set(prop, value)
        return self.meta_object.for_value(value)

    @typing.override
    def is_collection(self) -> bool:
        return False

    @typing.override
    def add(self, element: typing.Any) -> None:
        msg = f"Cannot add an element to {type(self.map).__qualname__}, as it is a mapping"
        raise UnsupportedOperationError(msg)

    @typing.override
    def add_all(self, elements: typing.Iterable[typing.Any]) -> None:
        msg = f"Cannot add elements to {type(self.map).__qualname__}, as it is a mapping"
        raise UnsupportedOperationError(msg)
