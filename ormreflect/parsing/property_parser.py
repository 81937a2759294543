# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Expansion of ``${key}`` placeholders from a mapping of variables.

    >>> from ormreflect.parsing.property_parser import PlaceholderOptions, PropertyParser
    >>> PropertyParser.parse("jdbc:${driver}://${host}", {"driver": "sqlite", "host": "localhost"})
    'jdbc:sqlite://localhost'

Default values are only honoured when enabled, either through the options or through the variables themselves:

    >>> PropertyParser.parse("${user:guest}", {})
    '${user:guest}'
    >>> PropertyParser.parse("${user:guest}", {}, PlaceholderOptions(enable_default_value=True))
    'guest'
    >>> PropertyParser.parse("${user?guest}", {
    ...     PropertyParser.KEY_ENABLE_DEFAULT_VALUE: "true",
    ...     PropertyParser.KEY_DEFAULT_VALUE_SEPARATOR: "?",
    ... })
    'guest'

Expansion never fails: placeholders that cannot be resolved are kept as they were written.
"""

import typing

from pydantic import Field

from ..util.config.base_model import BaseConfigModel
from ..util.logging import getLogger
from .token_parser import GenericTokenParser


log = getLogger(__name__)


class PlaceholderOptions(BaseConfigModel):
    open_token: str = Field(default="${", min_length=1, description="Token opening a placeholder")
    close_token: str = Field(default="}", min_length=1, description="Token closing a placeholder")
    enable_default_value: bool = Field(default=False, description="Whether 'key<separator>default' placeholders fall back to their default value")
    default_value_separator: str = Field(default=":", min_length=1, description="Separator between a placeholder key and its default value")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() == "true"


class VariableTokenHandler:
    """Resolves placeholder contents against a mapping of variables."""

    def __init__(self, variables: typing.Mapping[str, str] | None, options: PlaceholderOptions) -> None:
        self.variables = variables
        self.options = options

    def handle_token(self, content: str) -> str:
        if self.variables is not None:
            key = content

            if self.options.enable_default_value:
                key, separator, default_value = content.partition(self.options.default_value_separator)
                if separator:
                    return str(self.variables.get(key, default_value))

            if key in self.variables:
                return str(self.variables[key])

        log.debug("Leaving unresolved placeholder '%s' unchanged", content)
        return f"{self.options.open_token}{content}{self.options.close_token}"


class PropertyParser:
    KEY_PREFIX: typing.ClassVar[str] = "ormreflect.parsing.PropertyParser."
    #: Variable holding "true" when default values are enabled.
    KEY_ENABLE_DEFAULT_VALUE: typing.ClassVar[str] = f"{KEY_PREFIX}enable-default-value"
    #: Variable holding the default value separator.
    KEY_DEFAULT_VALUE_SEPARATOR: typing.ClassVar[str] = f"{KEY_PREFIX}default-value-separator"

    @classmethod
    def options_from_variables(cls, variables: typing.Mapping[str, str] | None) -> PlaceholderOptions:
        """Read the placeholder options carried by the special keys of *variables*."""
        if variables is None:
            return PlaceholderOptions()

        defaults = PlaceholderOptions()
        return PlaceholderOptions(
            enable_default_value=_parse_bool(variables.get(cls.KEY_ENABLE_DEFAULT_VALUE, str(defaults.enable_default_value))),
            default_value_separator=variables.get(cls.KEY_DEFAULT_VALUE_SEPARATOR, defaults.default_value_separator),
        )

    @classmethod
    def parse(cls, string: str | None, variables: typing.Mapping[str, str] | None, options: PlaceholderOptions | None = None) -> str:
        """Expand every placeholder in *string*.

        Args:
            string: The template to expand.
            variables: The values placeholders resolve to. When ``None``, every placeholder is left unchanged.
            options: Tokens and default value handling. Read from the special keys of *variables* when omitted.

        """
        if options is None:
            options = cls.options_from_variables(variables)

        handler = VariableTokenHandler(variables, options)
        parser = GenericTokenParser(options.open_token, options.close_token, handler)
        return parser.parse(string)
