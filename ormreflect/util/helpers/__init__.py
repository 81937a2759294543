# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

from . import generics, script_info, type_hints
from .frozendict import FrozenDict


__all__ = [
    "FrozenDict",
    "generics",
    "script_info",
    "type_hints",
]
