# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import logging

import pytest

from pydantic import BaseModel, Field

from ormreflect.util.logging.levels import LoggingLevel


class _LevelModel(BaseModel):
    level: LoggingLevel = Field(default=LoggingLevel.WARNING)


@pytest.mark.logging
class TestLoggingLevel:
    @pytest.mark.parametrize(
        ("input", "expected"),
        [
            (10, 10),
            (logging.INFO, logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("critical", logging.CRITICAL),
            ("5", 5),
            ("20", 20),
            ("0", 0),
            ("-1", -1),
            ("off", -1),
            ("no", -1),
            (True, logging.INFO),
            (False, -1),
        ],
    )
    def test_accepts_int_str_and_bool(self, input, expected):  # noqa: A002
        level = LoggingLevel(input)
        assert level.value == expected

    @pytest.mark.parametrize(
        "input",
        [
            "notalevel",
            3.14,
            None,
            [],
            {},
            -2,
        ],
    )
    def test_rejects_invalid(self, input):  # noqa: A002
        with pytest.raises((ValueError, TypeError)):
            LoggingLevel(input)

    @pytest.mark.parametrize(
        ("input", "expected_name", "expected_repr"),
        [
            ("DEBUG", "DEBUG", "LoggingLevel.DEBUG"),
            (logging.INFO, "INFO", "LoggingLevel.INFO"),
            ("warning", "WARNING", "LoggingLevel.WARNING"),
            (42, "42", "LoggingLevel(42)"),
            ("5", "5", "LoggingLevel(5)"),
            ("-1", "OFF", "LoggingLevel.OFF"),
        ],
    )
    def test_str_output(self, input, expected_name, expected_repr):  # noqa: A002
        level = LoggingLevel(input)
        assert level.name == expected_name
        assert str(level) == expected_name
        assert repr(level) == expected_repr

    def test_comparisons(self):
        assert LoggingLevel.DEBUG < LoggingLevel.INFO
        assert LoggingLevel.ERROR > logging.WARNING
        assert LoggingLevel("info") == logging.INFO
        assert LoggingLevel("info") == "INFO"
        assert hash(LoggingLevel.INFO) == hash(LoggingLevel(logging.INFO))
        assert not LoggingLevel.OFF.enabled
        assert LoggingLevel.NOTSET.enabled

    def test_pydantic_field(self):
        assert _LevelModel(level="debug").level == logging.DEBUG
        assert _LevelModel(level=LoggingLevel.ERROR).level == logging.ERROR
        assert _LevelModel(level=None).level == logging.WARNING
        assert _LevelModel().model_dump() == {"level": "WARNING"}

        with pytest.raises(ValueError, match="Unknown logging level string"):
            _LevelModel(level="banana")
