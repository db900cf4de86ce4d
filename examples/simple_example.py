# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""Simple example."""

import logging

from mfd_dvs_teaming import get_uplink_state, set_uplink_state
from mfd_dvs_teaming.vcenter.vcenter import VCenter

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.DEBUG)


if __name__ == "__main__":
    vcenter = VCenter("172.31.12.144", "administrator@vsphere.local", "***")
    print(vcenter.version)

    datacenter = vcenter.get_datacenter_by_name("PY-Datacenter")
    dswitches = [datacenter.get_dswitch_by_name(name) for name in ["PY-DSwitch-1", "PY-DSwitch-2"]]

    for record in get_uplink_state(dswitches, "Uplink_01"):
        print(record)

    set_uplink_state(dswitches, "Uplink_01", "standby", dry_run=True)
    set_uplink_state(dswitches, "Uplink_01", "standby")
    set_uplink_state(dswitches, "Uplink_02", "unused", confirm=lambda change: input(f"{change}? [y/N] ") == "y")

    for record in get_uplink_state(dswitches, "Uplink_01"):
        print(record)
