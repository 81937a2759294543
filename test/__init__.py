# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import warnings


# Quieten warnings in libraries we do not control
warnings.filterwarnings("ignore", module="sybil")
