# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""Constants shared across modules."""

UPLINK_STATE_ACTIVE = "active"
UPLINK_STATE_STANDBY = "standby"
UPLINK_STATE_UNUSED = "unused"

UPLINK_STATES = (UPLINK_STATE_ACTIVE, UPLINK_STATE_STANDBY, UPLINK_STATE_UNUSED)
