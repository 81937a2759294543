# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

from .property_parser import PlaceholderOptions, PropertyParser, VariableTokenHandler
from .token_parser import GenericTokenParser, TokenHandler


__all__ = [
    "GenericTokenParser",
    "PlaceholderOptions",
    "PropertyParser",
    "TokenHandler",
    "VariableTokenHandler",
]
