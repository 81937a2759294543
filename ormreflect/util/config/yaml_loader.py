# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""YAML loader with support for the ``!include`` tag.

``!include path/to/file.yaml`` is replaced by the contents of that file. Relative paths are resolved against the
directory of the including file (or the working directory when loading from a string), and environment variables and
``~`` are expanded. Include cycles are rejected.
"""

import os
import pathlib

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import yaml


if TYPE_CHECKING:
    from io import IOBase


@runtime_checkable
class NamedStreamProtocol(Protocol):
    @property
    def name(self) -> str: ...


class IncludeLoader(yaml.SafeLoader):
    def __init__(self, stream: "IOBase | str", root: pathlib.Path | None = None, chain: tuple[pathlib.Path, ...] = ()) -> None:
        if root is None:
            root = pathlib.Path(stream.name).resolve().parent if isinstance(stream, NamedStreamProtocol) else pathlib.Path.cwd()

        self._root: pathlib.Path = root
        self._chain: tuple[pathlib.Path, ...] = chain

        super().__init__(stream)

    def include(self, node: yaml.Node) -> Any:
        value = self.construct_scalar(node)  # pyright: ignore[reportArgumentType]
        path = pathlib.Path(os.path.expandvars(str(value))).expanduser()
        if not path.is_absolute():
            path = self._root / path
        path = path.resolve()

        if path in self._chain:
            msg = f"Circular !include of '{path}'"
            raise yaml.constructor.ConstructorError(None, None, msg, node.start_mark)

        chain = (*self._chain, path)
        with path.open(encoding="UTF-8") as f:
            loader = IncludeLoader(f, root=path.parent, chain=chain)  # pyright: ignore[reportArgumentType]
            try:
                return loader.get_single_data()
            finally:
                loader.dispose()


IncludeLoader.add_constructor("!include", IncludeLoader.include)
