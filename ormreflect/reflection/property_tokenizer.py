# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Splitting of property paths into segments.

A property path is a dotted chain of property names, each optionally followed by a bracketed index, e.g.
``order.items[2].price``. :class:`PropertyTokenizer` decomposes a path into its first segment and the remaining path:

    >>> from ormreflect.reflection.property_tokenizer import PropertyTokenizer
    >>> prop = PropertyTokenizer("items[2].name")
    >>> prop.name, prop.index, prop.indexed_name, prop.children
    ('items', '2', 'items[2]', 'name')
    >>> [segment.indexed_name for segment in PropertyTokenizer("a.b[key].c")]
    ['a', 'b[key]', 'c']

Tokenization is total: every string decomposes in exactly one way, and never raises.
"""

import typing


class PropertyTokenizer:
    __slots__ = ("children", "index", "indexed_name", "name")

    def __init__(self, fullname: str) -> None:
        name, dot, children = fullname.partition(".")
        self.children: str | None = children if dot else None

        self.indexed_name: str = name
        self.index: str | None = None

        bracket = name.find("[")
        if bracket > -1:
            self.index = name[bracket + 1 : -1]
            name = name[:bracket]

        self.name: str = name

    def has_next(self) -> bool:
        return self.children is not None

    def next(self) -> "PropertyTokenizer":
        if self.children is None:
            msg = f"Property path segment '{self.indexed_name}' has no children"
            raise StopIteration(msg)
        return PropertyTokenizer(self.children)

    def __iter__(self) -> typing.Iterator["PropertyTokenizer"]:
        segment = self
        while True:
            yield segment
            if not segment.has_next():
                return
            segment = segment.next()

    @typing.override
    def __repr__(self) -> str:
        return f"PropertyTokenizer(name={self.name!r}, index={self.index!r}, children={self.children!r})"
