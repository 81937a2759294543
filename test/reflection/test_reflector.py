# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import abc
import dataclasses
import functools
import typing

import pytest

from ormreflect.exceptions import AmbiguousAccessorError, NoDefaultConstructorError, NoSuchPropertyError
from ormreflect.reflection.invoker import GetFieldInvoker, MethodInvoker, SetFieldInvoker
from ormreflect.reflection.reflector import Reflector
from ormreflect.reflection.type_descriptors import ParameterizedType


# MARK: Fixtures
class Person:
    name: str
    age: int = 0
    species: typing.ClassVar[str] = "human"
    kingdom: typing.Final[str] = "animalia"

    def __init__(self) -> None:
        self._active = False
        self._nickname = ""

    def is_active(self) -> bool:
        return self._active

    def get_active(self) -> bool:
        return self._active

    def set_active(self, value: bool) -> None:
        self._active = value

    def getNickname(self) -> str:
        return self._nickname

    def setNickname(self, value: str) -> None:
        self._nickname = value

    def get_void(self) -> None:
        pass

    def get_with_args(self, first: int) -> int:
        return first

    def set_too_many(self, first: int, second: int) -> None:
        pass

    def compute(self) -> int:
        return 42


class WithProperties:
    def __init__(self) -> None:
        self._title = "untitled"

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value) -> None:  # noqa: ANN001 as the getter type applies
        self._title = value

    @property
    def read_only(self) -> int:
        return 1

    @functools.cached_property
    def expensive(self) -> float:
        return 1.5


class Ambiguous:
    def get_value(self) -> int:
        return 0

    def getValue(self) -> str:
        return ""


class AmbiguousSetters:
    def set_value(self, value: int) -> None:
        pass

    def setValue(self, value: str) -> None:
        pass


class SettersWithGetter:
    def get_value(self) -> str:
        return ""

    def set_value(self, value: int) -> None:
        pass

    def setValue(self, value: str) -> None:
        pass


class NarrowingParent:
    def get_value(self) -> object:
        return None


class NarrowingChild(NarrowingParent):
    @typing.override
    def get_value(self) -> int:
        return 1


class Shadowing(NarrowingChild):
    @typing.override
    def get_value(self) -> int:
        return 2


class Slotted:
    __slots__ = ("x", "y")


@dataclasses.dataclass
class WithInitVar:
    real: int = 0
    seed: dataclasses.InitVar[int] = 0


class RequiresArgs:
    def __init__(self, value: int) -> None:
        self.value = value


class AbstractThing(abc.ABC):
    @abc.abstractmethod
    def get_value(self) -> int: ...


class Camel:
    userName: str = ""
    user_id: int = 0


class GenericHolder[T]:
    items: list[T]

    def get_first(self) -> T:
        return self.items[0]


class IntHolder(GenericHolder[int]):
    pass


class ForwardingHolder[U](GenericHolder[U]):
    pass


class RelayHolder[W](ForwardingHolder[W]):
    pass


class StrHolder(RelayHolder[str]):
    pass


@pytest.mark.reflection
@pytest.mark.reflector
class TestAccessorDiscovery:
    def test_properties_from_methods_and_fields(self):
        reflector = Reflector(Person)
        assert set(reflector.getable_property_names) == {"name", "age", "species", "kingdom", "active", "nickname"}
        assert set(reflector.setable_property_names) == {"name", "age", "active", "nickname"}

    def test_boolean_getter_prefers_is(self):
        invoker = Reflector(Person).get_get_invoker("active")
        assert isinstance(invoker, MethodInvoker)
        assert invoker.method_name == "is_active"
        assert invoker.type is bool

    def test_camel_case_accessors(self):
        person = Person()
        reflector = Reflector(Person)
        reflector.get_set_invoker("nickname").invoke(person, ["Bob"])
        assert reflector.get_get_invoker("nickname").invoke(person) == "Bob"

    def test_rejected_accessors(self):
        reflector = Reflector(Person)
        for name in ("void", "with_args", "too_many", "compute"):
            assert not reflector.has_getter(name)
            assert not reflector.has_setter(name)

    def test_field_invokers(self):
        person = Person()
        reflector = Reflector(Person)
        assert isinstance(reflector.get_get_invoker("name"), GetFieldInvoker)
        assert isinstance(reflector.get_set_invoker("name"), SetFieldInvoker)
        assert reflector.get_get_invoker("name").invoke(person) is None
        reflector.get_set_invoker("name").invoke(person, ["Alice"])
        assert person.name == "Alice"

    def test_properties(self):
        reflector = Reflector(WithProperties)
        assert reflector.has_getter("title")
        assert reflector.has_setter("title")
        assert reflector.get_setter_type("title") is str
        assert reflector.has_getter("read_only")
        assert not reflector.has_setter("read_only")
        assert reflector.get_getter_type("expensive") is float
        assert not reflector.has_setter("expensive")

    def test_slots(self):
        reflector = Reflector(Slotted)
        assert set(reflector.getable_property_names) == {"x", "y"}
        assert set(reflector.setable_property_names) == {"x", "y"}
        assert reflector.get_getter_type("x") is object

    def test_init_var_is_skipped(self):
        reflector = Reflector(WithInitVar)
        assert reflector.has_getter("real")
        assert not reflector.has_getter("seed")


@pytest.mark.reflection
@pytest.mark.reflector
class TestConflictResolution:
    def test_ambiguous_getters(self):
        with pytest.raises(AmbiguousAccessorError, match="Illegal overloaded getter method with ambiguous type for property 'value'") as excinfo:
            Reflector(Ambiguous)
        assert excinfo.value.type is Ambiguous
        assert excinfo.value.property_name == "value"

    def test_ambiguous_setters(self):
        with pytest.raises(AmbiguousAccessorError, match="Illegal overloaded setter method with ambiguous type for property 'value'"):
            Reflector(AmbiguousSetters)

    def test_setter_matching_getter_wins(self):
        reflector = Reflector(SettersWithGetter)
        assert reflector.get_setter_type("value") is str
        invoker = reflector.get_set_invoker("value")
        assert isinstance(invoker, MethodInvoker)
        assert invoker.method_name == "setValue"

    def test_narrower_override_wins(self):
        reflector = Reflector(NarrowingChild)
        assert reflector.get_getter_type("value") is int

    def test_override_shadows_parent(self):
        shadowing = Shadowing()
        reflector = Reflector(Shadowing)
        assert reflector.get_get_invoker("value").invoke(shadowing) == 2  # noqa: PLR2004


@pytest.mark.reflection
@pytest.mark.reflector
class TestDefaultConstructor:
    def test_no_arguments(self):
        reflector = Reflector(Person)
        assert reflector.has_default_constructor()
        assert isinstance(reflector.get_default_constructor()(), Person)

    def test_required_arguments(self):
        reflector = Reflector(RequiresArgs)
        assert not reflector.has_default_constructor()
        with pytest.raises(NoDefaultConstructorError, match="There is no default constructor for 'RequiresArgs'"):
            reflector.get_default_constructor()

    def test_abstract(self):
        assert not Reflector(AbstractThing).has_default_constructor()

    def test_builtin(self):
        reflector = Reflector(dict)
        assert reflector.has_default_constructor()
        assert reflector.get_default_constructor()() == {}


@pytest.mark.reflection
@pytest.mark.reflector
class TestLookup:
    def test_case_insensitive(self):
        reflector = Reflector(Camel)
        assert reflector.find_property_name("USERNAME") == "userName"
        assert reflector.find_property_name("user_id") == "user_id"
        assert reflector.find_property_name("missing") is None

    def test_ignore_underscores(self):
        reflector = Reflector(Camel)
        assert reflector.find_property_name("USER_NAME") is None
        assert reflector.find_property_name("USER_NAME", ignore_underscores=True) == "userName"
        assert reflector.find_property_name("USERID", ignore_underscores=True) == "user_id"

    def test_no_such_property(self):
        reflector = Reflector(Person)
        with pytest.raises(NoSuchPropertyError, match="There is no getter for property named 'missing' in 'Person'"):
            reflector.get_get_invoker("missing")
        with pytest.raises(NoSuchPropertyError, match="There is no setter for property named 'species' in 'Person'"):
            reflector.get_setter_type("species")

    def test_no_such_property_is_attribute_error(self):
        with pytest.raises(AttributeError):
            Reflector(Person).get_getter_type("missing")


@pytest.mark.reflection
@pytest.mark.reflector
class TestGenericTypes:
    def test_bound_in_subclass(self):
        reflector = Reflector(IntHolder)
        assert reflector.get_getter_type("first") is int
        assert reflector.get_getter_type("items") is list
        assert reflector.get_generic_getter_type("items") == ParameterizedType(list, (int,))
        assert reflector.get_generic_setter_type("items") == ParameterizedType(list, (int,))

    def test_bound_several_levels_up(self):
        reflector = Reflector(StrHolder)
        assert reflector.get_getter_type("first") is str
        assert reflector.get_generic_getter_type("items") == ParameterizedType(list, (str,))

    def test_unbound_in_declaring_class(self):
        reflector = Reflector(GenericHolder)
        assert reflector.get_getter_type("first") is object
