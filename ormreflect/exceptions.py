# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Exception hierarchy raised by the reflection layer.

Every error raised on purpose by :mod:`ormreflect` derives from :class:`ReflectionError`, so callers can catch the
whole family with a single ``except`` clause. Unresolvable generic type variables are deliberately *not* part of this
hierarchy: they degrade to :class:`object` instead of raising.
"""

from enum import StrEnum


class PropertyDirection(StrEnum):
    GET = "getter"
    SET = "setter"


class ReflectionError(Exception):
    """Base class for all reflection errors."""


class AmbiguousAccessorError(ReflectionError):
    """Two sibling accessors compete for the same property with incomparable types.

    Raised while building a reflector; the reflector for that class is never published.
    """

    def __init__(self, cls: type, property_name: str, direction: PropertyDirection, detail: str) -> None:
        self.type = cls
        self.property_name = property_name
        self.direction = direction
        super().__init__(
            f"Illegal overloaded {direction} method with ambiguous type for property '{property_name}' in class '{cls.__qualname__}'. {detail}"
        )


class NoSuchPropertyError(ReflectionError, AttributeError):
    def __init__(self, cls: type, property_name: str, direction: PropertyDirection) -> None:
        self.type = cls
        self.property_name = property_name
        self.direction = direction
        super().__init__(f"There is no {direction} for property named '{property_name}' in '{cls.__qualname__}'")


class NoDefaultConstructorError(ReflectionError):
    def __init__(self, cls: type) -> None:
        self.type = cls
        super().__init__(f"There is no default constructor for '{cls.__qualname__}'")


class UnsupportedOperationError(ReflectionError, TypeError):
    """The wrapped value does not support the requested operation (e.g. ``add`` on a record)."""


class TypeException(ReflectionError):
    """A type reference was declared without binding its type parameter."""
