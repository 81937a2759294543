# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import typing

import pytest

from ormreflect.reflection.type_descriptors import (
    ArrayType,
    GenericArrayType,
    ParameterizedType,
    WildcardType,
    array_of,
    describe,
    descriptor_of,
    is_array_hint,
    is_concrete,
    to_class,
)


type IntList = list[int]
UserId = typing.NewType("UserId", int)


class Box[V]:
    pass


V = Box.__type_params__[0]


@pytest.mark.reflection
@pytest.mark.type_resolver
class TestDescriptorOf:
    @pytest.mark.parametrize(
        ("hint", "expected"),
        [
            (int, int),
            (typing.Any, object),
            (None, type(None)),
            ("Forward", object),
            (int | None, int),
            (typing.Optional[str], str),  # noqa: UP045
            (int | str, object),
            (typing.Literal["a"], object),
            (typing.ClassVar[int], int),
            (typing.Annotated[str, "meta"], str),
            (UserId, int),
            (IntList, ParameterizedType(list, (int,))),
            (typing.List[int], ParameterizedType(list, (int,))),  # noqa: UP006
            (dict[str, list[int]], ParameterizedType(dict, (str, ParameterizedType(list, (int,))))),
            (list[typing.Any], ParameterizedType(list, (WildcardType(),))),
            (list, list),
            (tuple[int, ...], ArrayType(int)),
            (tuple[typing.Any, ...], ArrayType(object)),
            (tuple[V, ...], GenericArrayType(V)),
            (tuple[int, str], ParameterizedType(tuple, (int, str))),
            (Box[int], ParameterizedType(Box, (int,))),
        ],
    )
    def test_descriptor_of(self, hint, expected):
        assert descriptor_of(hint) == expected

    def test_type_variables_pass_through(self):
        assert descriptor_of(V) is V

    def test_nested_any_is_a_wildcard(self):
        assert descriptor_of(typing.Any, nested=True) == WildcardType()


@pytest.mark.reflection
@pytest.mark.type_resolver
class TestDescriptorHelpers:
    def test_to_class(self):
        assert to_class(int) is int
        assert to_class(ParameterizedType(list, (int,))) is list
        assert to_class(ArrayType(int)) is tuple
        assert to_class(GenericArrayType(V)) is tuple
        assert to_class(V) is object
        assert to_class(WildcardType()) is object

    def test_array_of(self):
        assert array_of(int) == ArrayType(int)
        assert array_of(ArrayType(int)) == ArrayType(ArrayType(int))
        assert array_of(V) == GenericArrayType(V)
        assert array_of(ParameterizedType(list, (int,))) == GenericArrayType(ParameterizedType(list, (int,)))

    def test_predicates(self):
        assert is_concrete(int)
        assert is_concrete(ArrayType(int))
        assert not is_concrete(ParameterizedType(list, (int,)))
        assert is_array_hint(tuple[int, ...])
        assert not is_array_hint(tuple[int, int])
        assert not is_array_hint(list[int])

    def test_describe(self):
        assert describe(int) == "int"
        assert describe(ParameterizedType(dict, (str, V))) == "dict[str, V]"
        assert describe(ArrayType(int)) == "tuple[int, ...]"
        assert describe(WildcardType()) == "?"
