# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""Distributed Switch wrappers."""
