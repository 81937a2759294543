# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Scanning of text templates for delimited expressions.

:class:`GenericTokenParser` finds every expression between an open and a close token and replaces it with whatever
its :class:`TokenHandler` returns for the expression's content:

    >>> from ormreflect.parsing.token_parser import GenericTokenParser
    >>> class Upper:
    ...     def handle_token(self, content):
    ...         return content.upper()
    >>> parser = GenericTokenParser("${", "}", Upper())
    >>> parser.parse("Hello ${world}!")
    'Hello WORLD!'

A backslash before an open token (or before a close token inside an expression) escapes it, and an expression that is
never closed is kept verbatim:

    >>> parser.parse(r"\\${not} ${a\\}b} ${open")
    '${not} A}B ${open'

"""

from typing import Protocol, runtime_checkable


ESCAPE = "\\"


@runtime_checkable
class TokenHandler(Protocol):
    def handle_token(self, content: str) -> str: ...


class GenericTokenParser:
    def __init__(self, open_token: str, close_token: str, handler: TokenHandler) -> None:
        if not open_token or not close_token:
            msg = "Open and close tokens must not be empty"
            raise ValueError(msg)

        self.open_token = open_token
        self.close_token = close_token
        self.handler = handler

    def parse(self, text: str | None) -> str:
        if not text:
            return ""

        start = text.find(self.open_token)
        if start == -1:
            return text

        offset = 0
        builder: list[str] = []

        while start > -1:
            if start > 0 and text[start - 1] == ESCAPE:
                # Escaped open token, keep it without the escape character
                builder.append(text[offset : start - 1])
                builder.append(self.open_token)
                offset = start + len(self.open_token)
            else:
                builder.append(text[offset:start])
                offset = start + len(self.open_token)

                expression: list[str] = []
                end = text.find(self.close_token, offset)
                while end > -1:
                    if end > offset and text[end - 1] == ESCAPE:
                        # Escaped close token, part of the expression
                        expression.append(text[offset : end - 1])
                        expression.append(self.close_token)
                        offset = end + len(self.close_token)
                        end = text.find(self.close_token, offset)
                    else:
                        expression.append(text[offset:end])
                        break

                if end == -1:
                    # Unterminated expression, emitted verbatim from its open token onwards
                    builder.append(text[start:])
                    offset = len(text)
                else:
                    builder.append(self.handler.handle_token("".join(expression)))
                    offset = end + len(self.close_token)

            start = text.find(self.open_token, offset)

        if offset < len(text):
            builder.append(text[offset:])

        return "".join(builder)
