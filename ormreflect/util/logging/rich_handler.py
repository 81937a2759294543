# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import logging

from pathlib import Path
from typing import TYPE_CHECKING, Any, override

from rich.console import Console, ConsoleRenderable, RenderableType
from rich.containers import Renderables
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text


if TYPE_CHECKING:
    from rich.traceback import Traceback


class CustomRichHandler(RichHandler):
    """Compact :mod:`rich` handler printing ``[L:logger] message`` followed by the source location."""

    def __init__(self, *args: Any, show_path: bool = True, level_color_everything: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, console=Console(stderr=True), rich_tracebacks=True, enable_link_path=False, **kwargs)
        self.show_path = show_path
        self.level_color_everything = level_color_everything

    @staticmethod
    def is_simple(record: logging.LogRecord) -> bool:
        return bool(getattr(record, "simple", False))

    def get_level_style(self, record: logging.LogRecord) -> str:
        return f"logging.level.{record.levelname.lower()}"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = Text()
        if not self.is_simple(record):
            text.append("[", style="dim")
            text.append(record.levelname[0], style=self.get_level_style(record))
            text.append(f":{record.name}", style="dim")
            text.append("] ", style="dim")
        text.append(message)
        return text

    @override
    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: "Traceback | None",
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        if self.is_simple(record):
            return message_renderable

        renderables: list[ConsoleRenderable] = [message_renderable]
        if traceback:
            renderables.append(traceback)

        output = Table.grid(padding=(0, 1))
        output.expand = True
        output.add_column(ratio=1, style=self.get_level_style(record) if self.level_color_everything else "log.message", overflow="fold")

        row: list[RenderableType] = [Renderables(renderables)]
        if self.show_path:
            output.add_column(style="log.path")
            row.append(Text(f"{Path(record.pathname).name}:{record.lineno}"))

        output.add_row(*row)
        return output
