# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import typing

from collections.abc import Collection, MutableSequence, MutableSet

from ...exceptions import UnsupportedOperationError
from ..property_tokenizer import PropertyTokenizer
from .base_wrapper import BaseWrapper


if typing.TYPE_CHECKING:
    from ..meta_object import MetaObject
    from ..object_factory import ObjectFactory


class CollectionWrapper(BaseWrapper):
    """Wraps a sequence or set.

    Collections have no named properties. Only bare index segments (``[2]``) are supported, and only on sequences.
    """

    def __init__(self, meta_object: "MetaObject", collection: Collection[typing.Any]) -> None:
        super().__init__(meta_object)
        self.collection = collection

    def _unsupported(self, operation: str) -> UnsupportedOperationError:
        msg = f"{type(self.collection).__qualname__} does not support {operation}, as it is a collection"
        return UnsupportedOperationError(msg)

    def _check_index_segment(self, prop: PropertyTokenizer, operation: str) -> None:
        if prop.name or prop.index is None:
            raise self._unsupported(f"{operation} of the named property '{prop.indexed_name}'")

    @typing.override
    def get(self, prop: PropertyTokenizer) -> typing.Any:
        self._check_index_segment(prop, "reading")
        return self.get_collection_value(prop, self.collection)

    @typing.override
    def set(self, prop: PropertyTokenizer, value: typing.Any) -> None:
        self._check_index_segment(prop, "writing")
        self.set_collection_value(prop, self.collection, value)

    @typing.override
    def find_property(self, name: str, *, use_camel_case_mapping: bool = False) -> str | None:
        raise self._unsupported("find_property")

    @typing.override
    def getter_names(self) -> tuple[str, ...]:
        raise self._unsupported("getter_names")

    @typing.override
    def setter_names(self) -> tuple[str, ...]:
        raise self._unsupported("setter_names")

    @typing.override
    def get_setter_type(self, name: str) -> type:
        raise self._unsupported("get_setter_type")

    @typing.override
    def get_getter_type(self, name: str) -> type:
        raise self._unsupported("get_getter_type")

    @typing.override
    def has_setter(self, name: str) -> bool:
        raise self._unsupported("has_setter")

    @typing.override
    def has_getter(self, name: str) -> bool:
        raise self._unsupported("has_getter")

    @typing.override
    def instantiate_property_value(self, name: str, prop: PropertyTokenizer, object_factory: "ObjectFactory") -> "MetaObject":
        raise self._unsupported("instantiate_property_value")

    @typing.override
    def is_collection(self) -> bool:
        return True

    @typing.override
    def add(self, element: typing.Any) -> None:
        if isinstance(self.collection, MutableSequence):
            self.collection.append(element)
        elif isinstance(self.collection, MutableSet):
            self.collection.add(element)
        else:
            raise self._unsupported("add")

    @typing.override
    def add_all(self, elements: typing.Iterable[typing.Any]) -> None:
        if isinstance(self.collection, MutableSequence):
            self.collection.extend(elements)
        elif isinstance(self.collection, MutableSet):
            self.collection |= set(elements)
        else:
            raise self._unsupported("add_all")
