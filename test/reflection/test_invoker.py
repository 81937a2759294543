# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import typing

import pytest

from ormreflect.reflection.invoker import GetFieldInvoker, MethodInvoker, SetFieldInvoker


class Counter:
    count: int

    def __init__(self) -> None:
        self.total = 0

    def get_total(self) -> int:
        return self.total

    def set_total(self, value: int) -> None:
        self.total = value

    @property
    def broken(self) -> int:
        msg = "broken"
        raise AttributeError(msg)


class LoudCounter(Counter):
    @typing.override
    def get_total(self) -> int:
        return self.total * 10


@pytest.mark.reflection
class TestInvokers:
    def test_method_invoker(self):
        counter = Counter()
        setter = MethodInvoker("total", int, "set_total")
        getter = MethodInvoker("total", int, "get_total")
        setter.invoke(counter, (5,))
        assert getter.invoke(counter) == 5  # noqa: PLR2004
        assert getter.type is int

    def test_method_invoker_honours_overrides(self):
        counter = LoudCounter()
        counter.total = 2
        assert MethodInvoker("total", int, "get_total").invoke(counter) == 20  # noqa: PLR2004

    def test_field_invokers(self):
        counter = Counter()
        assert GetFieldInvoker("count", int).invoke(counter) is None
        SetFieldInvoker("count", int).invoke(counter, (3,))
        assert GetFieldInvoker("count", int).invoke(counter) == 3  # noqa: PLR2004

    def test_descriptor_errors_propagate(self):
        with pytest.raises(AttributeError, match="broken"):
            GetFieldInvoker("broken", int, missing_as_none=False).invoke(Counter())

    def test_repr(self):
        assert repr(GetFieldInvoker("count", int)) == "<GetFieldInvoker count: int>"
