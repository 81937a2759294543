# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import pytest

from ormreflect.exceptions import ReflectionError, TypeException
from ormreflect.reflection.type_descriptors import ArrayType
from ormreflect.type import TypeReference


class IntReference(TypeReference[int]):
    pass


class DictReference(TypeReference[dict[str, int]]):
    pass


class ArrayReference(TypeReference[tuple[str, ...]]):
    pass


class Indirect(IntReference):
    pass


class Unbound(TypeReference):
    pass


class IndirectUnbound(Unbound):
    pass


class Forwarding[U](TypeReference[U]):
    pass


class Forwarded(Forwarding[bytes]):
    pass


@pytest.mark.reflection
@pytest.mark.type_resolver
class TestTypeReference:
    def test_plain_class(self):
        assert IntReference().raw_type is int

    def test_parameterized_reduces_to_raw(self):
        assert DictReference().raw_type is dict

    def test_array(self):
        assert ArrayReference().raw_type == ArrayType(str)

    def test_inherited(self):
        assert Indirect().raw_type is int

    def test_through_generic_subclass(self):
        assert Forwarded().raw_type is bytes

    def test_missing_type_parameter(self):
        with pytest.raises(TypeException, match="'Unbound' extends TypeReference but misses the type parameter"):
            Unbound()

    def test_missing_type_parameter_indirect(self):
        with pytest.raises(TypeException, match="'IndirectUnbound' extends TypeReference but misses the type parameter"):
            IndirectUnbound()

    def test_is_reflection_error(self):
        with pytest.raises(ReflectionError):
            Unbound()

    def test_str_and_repr(self):
        reference = IntReference()
        assert str(reference) == "int"
        assert repr(reference) == "<IntReference int>"
