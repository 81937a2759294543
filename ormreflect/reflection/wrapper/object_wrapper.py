# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import typing

from abc import ABCMeta, abstractmethod


if typing.TYPE_CHECKING:
    from ..meta_object import MetaObject
    from ..object_factory import ObjectFactory
    from ..property_tokenizer import PropertyTokenizer


class ObjectWrapper(metaclass=ABCMeta):
    """Uniform single-segment access to one value, whatever its shape.

    Property paths are navigated by :class:`~..meta_object.MetaObject`; a wrapper only ever handles the first segment
    of a path, plus its static metadata.
    """

    @abstractmethod
    def get(self, prop: "PropertyTokenizer") -> typing.Any:
        msg = "Subclasses must implement get"
        raise NotImplementedError(msg)

    @abstractmethod
    def set(self, prop: "PropertyTokenizer", value: typing.Any) -> None:
        msg = "Subclasses must implement set"
        raise NotImplementedError(msg)

    @abstractmethod
    def find_property(self, name: str, *, use_camel_case_mapping: bool = False) -> str | None:
        msg = "Subclasses must implement find_property"
        raise NotImplementedError(msg)

    @abstractmethod
    def getter_names(self) -> tuple[str, ...]:
        msg = "Subclasses must implement getter_names"
        raise NotImplementedError(msg)

    @abstractmethod
    def setter_names(self) -> tuple[str, ...]:
        msg = "Subclasses must implement setter_names"
        raise NotImplementedError(msg)

    @abstractmethod
    def get_setter_type(self, name: str) -> type:
        msg = "Subclasses must implement get_setter_type"
        raise NotImplementedError(msg)

    @abstractmethod
    def get_getter_type(self, name: str) -> type:
        msg = "Subclasses must implement get_getter_type"
        raise NotImplementedError(msg)

    @abstractmethod
    def has_setter(self, name: str) -> bool:
        msg = "Subclasses must implement has_setter"
        raise NotImplementedError(msg)

    @abstractmethod
    def has_getter(self, name: str) -> bool:
        msg = "Subclasses must implement has_getter"
        raise NotImplementedError(msg)

    @abstractmethod
    def instantiate_property_value(self, name: str, prop: "PropertyTokenizer", object_factory: "ObjectFactory") -> "MetaObject":
        """Create, assign and return (wrapped) a new value for the missing intermediate segment *prop* of path *name*."""
        msg = "Subclasses must implement instantiate_property_value"
        raise NotImplementedError(msg)

    @abstractmethod
    def is_collection(self) -> bool:
        msg = "Subclasses must implement is_collection"
        raise NotImplementedError(msg)

    @abstractmethod
    def add(self, element: typing.Any) -> None:
        msg = "Subclasses must implement add"
        raise NotImplementedError(msg)

    @abstractmethod
    def add_all(self, elements: typing.Iterable[typing.Any]) -> None:
        msg = "Subclasses must implement add_all"
        raise NotImplementedError(msg)
