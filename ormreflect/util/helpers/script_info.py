# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import os
import sys

from functools import cache


@cache
def is_unit_test() -> bool:
    """Test whether running in a unit test environment.

    Returns:
        bool: True if running under pytest, or if the ``UNIT_TEST`` environment variable is set to a truthy value.

    """
    if os.environ.get("PYTEST_VERSION") is not None:
        return True

    env = os.environ.get("UNIT_TEST", "").strip()
    return bool(env) and env.lower() not in ("false", "0", "no")


def is_documentation_build() -> bool:
    """Test whether running in a documentation build environment.

    Returns:
        bool: True if Sphinx has been imported.

    """
    return "sphinx" in sys.modules
