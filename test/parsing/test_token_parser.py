# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import pytest

from ormreflect.parsing.token_parser import GenericTokenParser, TokenHandler


class Recorder:
    def __init__(self) -> None:
        self.tokens: list[str] = []

    def handle_token(self, content: str) -> str:
        self.tokens.append(content)
        return f"<{content}>"


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def parser(recorder: Recorder) -> GenericTokenParser:
    return GenericTokenParser("${", "}", recorder)


@pytest.mark.parsing
class TestGenericTokenParser:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", ""),
            (None, ""),
            ("plain text", "plain text"),
            ("${a}", "<a>"),
            ("x${a}y${b}z", "x<a>y<b>z"),
            ("${}", "<>"),
            ("${a}${b}", "<a><b>"),
            ("}${a}}", "}<a>}"),
        ],
    )
    def test_parse(self, parser, text, expected):
        assert parser.parse(text) == expected

    def test_escaped_open_token(self, parser, recorder):
        assert parser.parse("a\\${b}c") == "a${b}c"
        assert recorder.tokens == []

    def test_escaped_close_token(self, parser, recorder):
        assert parser.parse("${a\\}b}") == "<a}b>"
        assert recorder.tokens == ["a}b"]

    def test_unterminated(self, parser, recorder):
        assert parser.parse("a${b") == "a${b"
        assert parser.parse("${a} and ${b") == "<a> and ${b"
        assert recorder.tokens == ["a"]

    def test_multi_character_tokens(self, recorder):
        parser = GenericTokenParser("#{{", "}}", recorder)
        assert parser.parse("x #{{name}} y") == "x <name> y"

    def test_empty_tokens(self, recorder):
        with pytest.raises(ValueError, match="must not be empty"):
            GenericTokenParser("", "}", recorder)

    def test_handler_protocol(self, recorder):
        assert isinstance(recorder, TokenHandler)
