# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
from .fixtures import *  # noqa: F401,F403
