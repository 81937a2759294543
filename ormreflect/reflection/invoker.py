# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Invocation strategies for reading and writing a single property."""

import typing

from abc import ABCMeta, abstractmethod


class Invoker(metaclass=ABCMeta):
    """Reads or writes one property of a target object.

    ``type`` is the runtime class of the value read (for getters) or accepted (for setters).
    """

    def __init__(self, name: str, value_type: type) -> None:
        self.name = name
        self._type = value_type

    @property
    def type(self) -> type:
        return self._type

    @abstractmethod
    def invoke(self, target: typing.Any, args: typing.Sequence[typing.Any] = ()) -> typing.Any:
        msg = "Subclasses must implement invoke"
        raise NotImplementedError(msg)

    @typing.override
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}: {self._type.__qualname__}>"


class MethodInvoker(Invoker):
    """Calls an accessor method by name.

    The method is looked up on the target at call time, so overrides in subclasses of the reflected class are honoured.
    """

    def __init__(self, name: str, value_type: type, method_name: str) -> None:
        super().__init__(name, value_type)
        self.method_name = method_name

    @typing.override
    def invoke(self, target: typing.Any, args: typing.Sequence[typing.Any] = ()) -> typing.Any:
        return getattr(target, self.method_name)(*args)


class GetFieldInvoker(Invoker):
    """Reads an attribute directly.

    Plain fields that were declared but never assigned read as ``None``; descriptors (such as properties) propagate
    their own :class:`AttributeError`.
    """

    def __init__(self, name: str, value_type: type, *, missing_as_none: bool = True) -> None:
        super().__init__(name, value_type)
        self.missing_as_none = missing_as_none

    @typing.override
    def invoke(self, target: typing.Any, args: typing.Sequence[typing.Any] = ()) -> typing.Any:
        if not self.missing_as_none:
            return getattr(target, self.name)
        return getattr(target, self.name, None)


class SetFieldInvoker(Invoker):
    @typing.override
    def invoke(self, target: typing.Any, args: typing.Sequence[typing.Any] = ()) -> typing.Any:
        setattr(target, self.name, args[0])
