# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""Uplink teaming state management for vSphere Distributed Switches."""

from .uplink_state import get_uplink_state, set_uplink_state

__all__ = ["get_uplink_state", "set_uplink_state"]
