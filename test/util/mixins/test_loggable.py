# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

"""Unit tests for LoggableMixin."""

import logging

import pytest

from ormreflect.util.logging import ROOT_LOGGER_NAME
from ormreflect.util.mixins import LoggableMixin


class L(LoggableMixin):
    pass


class Named(LoggableMixin):
    __log_name__ = "custom"


class Child(LoggableMixin):
    def __init__(self, parent: LoggableMixin) -> None:
        self.instance_parent = parent


@pytest.mark.logging
class TestLoggableMixin:
    def test_simple(self):
        a = L()
        assert a.log is not None
        assert a.log.parent == logging.getLogger(ROOT_LOGGER_NAME)
        assert a.log.name == f"{ROOT_LOGGER_NAME}.L"

    def test_logger_is_cached(self):
        a = L()
        assert a.log is a.log
        assert "_LoggableMixin__log" in a.__dict__

    def test_custom_name(self):
        assert Named().log.name == f"{ROOT_LOGGER_NAME}.custom"

    def test_parent(self):
        parent = L()
        child = Child(parent)
        assert child.log.parent is parent.log
        assert child.log.name == f"{ROOT_LOGGER_NAME}.L.Child"
