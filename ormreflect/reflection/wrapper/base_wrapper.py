# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import typing

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence

from ...exceptions import ReflectionError
from .object_wrapper import ObjectWrapper


if typing.TYPE_CHECKING:
    from ..meta_object import MetaObject
    from ..property_tokenizer import PropertyTokenizer


def _is_sequence(value: typing.Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class BaseWrapper(ObjectWrapper):
    """Shared handling of indexed segments such as ``items[2]`` or ``attributes[key]``."""

    def __init__(self, meta_object: "MetaObject") -> None:
        self.meta_object = meta_object

    def resolve_collection(self, prop: "PropertyTokenizer", obj: typing.Any) -> typing.Any:
        """Return the collection an indexed segment refers to; a bare ``[index]`` segment indexes *obj* itself."""
        if not prop.name:
            return obj
        return self.meta_object.get_value(prop.name)

    @staticmethod
    def _position(prop: "PropertyTokenizer") -> int:
        try:
            return int(prop.index or "")
        except ValueError as err:
            msg = f"Cannot use '{prop.index}' in '{prop.indexed_name}' as a sequence index, as it is not an integer."
            raise ReflectionError(msg) from err

    def get_collection_value(self, prop: "PropertyTokenizer", collection: typing.Any) -> typing.Any:
        if collection is None:
            msg = f"Cannot get the value '{prop.indexed_name}' because the property '{prop.name}' is None."
            raise ReflectionError(msg)

        if isinstance(collection, Mapping):
            return collection.get(prop.index)
        if _is_sequence(collection):
            return collection[self._position(prop)]

        msg = f"Cannot get the value '{prop.indexed_name}' because the property '{prop.name}' of {type(collection).__qualname__} is not a Mapping or Sequence."
        raise ReflectionError(msg)

    def set_collection_value(self, prop: "PropertyTokenizer", collection: typing.Any, value: typing.Any) -> None:
        if collection is None:
            msg = f"Cannot set the value '{prop.indexed_name}' because the property '{prop.name}' is None."
            raise ReflectionError(msg)

        if isinstance(collection, MutableMapping):
            collection[prop.index] = value
        elif isinstance(collection, MutableSequence):
            collection[self._position(prop)] = value
        else:
            msg = f"Cannot set the value '{prop.indexed_name}' because the property '{prop.name}' of {type(collection).__qualname__} is not a mutable Mapping or Sequence."
            raise ReflectionError(msg)
