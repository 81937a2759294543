# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

from .type_reference import TypeReference


__all__ = [
    "TypeReference",
]
