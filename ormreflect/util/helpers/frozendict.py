# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Pydantic support for :class:`frozendict.frozendict`.

Annotate a model field with :data:`FrozenDict` to validate it as a regular ``dict`` and store it frozen.
"""

import typing

from frozendict import frozendict
from pydantic_core import core_schema


if typing.TYPE_CHECKING:
    import pydantic


class PydanticFrozenDictAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: typing.Any, handler: "pydantic.GetCoreSchemaHandler") -> core_schema.CoreSchema:
        args = typing.get_args(source_type)
        dict_schema = handler.generate_schema(dict[args] if args else dict)  # pyright: ignore[reportInvalidTypeArguments]
        return core_schema.no_info_after_validator_function(
            frozendict,
            dict_schema,
            serialization=core_schema.plain_serializer_function_ser_schema(dict),
        )


_K = typing.TypeVar("_K")
_V = typing.TypeVar("_V")
FrozenDict = typing.Annotated[frozendict[_K, _V], PydanticFrozenDictAnnotation]
