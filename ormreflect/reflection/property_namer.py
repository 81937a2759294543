# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Accessor naming conventions.

Both snake case and camel case accessors are recognised:

    >>> from ormreflect.reflection import property_namer
    >>> property_namer.method_to_property("get_first_name")
    'first_name'
    >>> property_namer.method_to_property("getFirstName")
    'firstName'
    >>> property_namer.method_to_property("isActive")
    'active'
    >>> property_namer.method_to_property("getURL")
    'URL'
    >>> property_namer.is_property("settings")
    False

"""

import re

from ..exceptions import ReflectionError


# MARK: Naming conventions
GETTER_PREFIXES: tuple[str, ...] = ("get", "is")
SETTER_PREFIXES: tuple[str, ...] = ("set",)
BOOLEAN_GETTER_PREFIX = "is"

_ACCESSOR_RE = re.compile(r"^(?P<prefix>get|set|is)(?:_(?P<snake>[^_].*)|(?P<camel>[A-Z].*))$")

#: Names that are never exposed as properties.
RESERVED_NAMES: frozenset[str] = frozenset({"class", "__dict__", "__weakref__", "__slots__"})


def _match(name: str) -> re.Match[str] | None:
    return _ACCESSOR_RE.match(name)


def _decapitalize(name: str) -> str:
    # Names starting with an acronym keep their case, e.g. URL
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[0].lower() + name[1:]


def method_to_property(name: str) -> str:
    """Return the property name an accessor method named *name* refers to.

    Raises:
        ReflectionError: If *name* does not follow the getter or setter naming conventions.

    """
    if (match := _match(name)) is None:
        msg = f"Error parsing property name '{name}'. Didn't start with 'is', 'get' or 'set'."
        raise ReflectionError(msg)

    if (snake := match.group("snake")) is not None:
        return snake
    return _decapitalize(match.group("camel"))


def is_property(name: str) -> bool:
    return _match(name) is not None


def is_getter(name: str) -> bool:
    return (match := _match(name)) is not None and match.group("prefix") in GETTER_PREFIXES


def is_boolean_getter(name: str) -> bool:
    return (match := _match(name)) is not None and match.group("prefix") == BOOLEAN_GETTER_PREFIX


def is_setter(name: str) -> bool:
    return (match := _match(name)) is not None and match.group("prefix") in SETTER_PREFIXES


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")  # noqa: PLR2004 as a dunder needs more than its underscores


def is_valid_property_name(name: str) -> bool:
    """Return ``False`` for names that must never be exposed as properties."""
    return bool(name) and not name.startswith("$") and not is_dunder(name) and name not in RESERVED_NAMES
