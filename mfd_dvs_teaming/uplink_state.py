# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""Get and set active/standby/unused state of DSwitch uplink on all its portgroups."""
import logging
from typing import Callable, Dict, Iterable, List, Optional, Union

from mfd_common_libs import log_levels, add_logging_level

from .const import UPLINK_STATE_ACTIVE, UPLINK_STATE_STANDBY, UPLINK_STATE_UNUSED, UPLINK_STATES
from .vcenter.distributed_switch.dswitch import DSwitch
from .vcenter.distributed_switch.portgroup import DSPortgroup
from .vcenter.exceptions import VCenterDSwitchWithoutPortgroups, VCenterInvalidUplinkState

logger = logging.getLogger(__name__)
add_logging_level(level_name="MODULE_DEBUG", level_value=log_levels.MODULE_DEBUG)


def _as_dswitches(dswitches: Union[DSwitch, Iterable[DSwitch]]) -> Iterable[DSwitch]:
    """Accept single DSwitch as well as iterable of them."""
    if isinstance(dswitches, DSwitch):
        return [dswitches]
    return dswitches


def _get_portgroups(dswitch: DSwitch) -> List[DSPortgroup]:
    """
    Get all portgroups of DSwitch.

    :param dswitch: DSwitch.

    :return: Portgroups.
    :raise VCenterDSwitchWithoutPortgroups: DSwitch has no portgroups.
    """
    portgroups = list(dswitch.portgroups)
    if not portgroups:
        raise VCenterDSwitchWithoutPortgroups(dswitch)
    logger.log(level=log_levels.MODULE_DEBUG, msg=f"{dswitch.name} portgroups: {portgroups}")
    return portgroups


def get_uplink_state(
    dswitches: Union[DSwitch, Iterable[DSwitch]], uplink_name: str
) -> List[Dict[str, Union[str, bool]]]:
    """
    Get state of uplink on every portgroup of DSwitches.

    Sample output:
    [{'portgroup': 'PG1', 'uplink': 'Uplink_01', 'is_active': True, 'is_standby': False, 'is_unused': False}]

    Records are returned only when every DSwitch is read, failure on any DSwitch discards
    records already collected from the previous ones.

    :param dswitches: DSwitch or DSwitches processed one by one.
    :param uplink_name: Name of uplink.

    :return: One record per portgroup.
    :raise VCenterUplinkMissing: Uplink is not configured on DSwitch.
    :raise VCenterDSwitchError: Uplinks or portgroups of DSwitch could not be listed.
    :raise VCenterDSwitchWithoutPortgroups: DSwitch has no portgroups.
    :raise VCenterTeamingPolicyError: Teaming policy of portgroup could not be read.
    :raise VCenterUplinkStateInconsistent: Uplink is not in exactly one state.
    """
    records = []
    for dswitch in _as_dswitches(dswitches):
        uplink = dswitch.get_uplink(uplink_name)
        for portgroup in _get_portgroups(dswitch):
            state = uplink.get_state(portgroup)
            records.append(
                {
                    "portgroup": portgroup.name,
                    "uplink": uplink.name,
                    "is_active": state == UPLINK_STATE_ACTIVE,
                    "is_standby": state == UPLINK_STATE_STANDBY,
                    "is_unused": state == UPLINK_STATE_UNUSED,
                }
            )
    return records


def set_uplink_state(
    dswitches: Union[DSwitch, Iterable[DSwitch]],
    uplink_name: str,
    state: str,
    dry_run: bool = False,
    confirm: Optional[Callable[[str], bool]] = None,
) -> None:
    """
    Set state of uplink on every portgroup of DSwitches.

    Portgroups where uplink already has requested state are skipped.
    First failure stops processing, portgroups changed before it stay changed.

    :param dswitches: DSwitch or DSwitches processed one by one.
    :param uplink_name: Name of uplink.
    :param state: Requested state active/standby/unused.
    :param dry_run: Compute changes without sending them.
    :param confirm: Called with change description before each change, returning False skips it.

    :raise VCenterInvalidUplinkState: Unknown state requested.
    :raise VCenterUplinkMissing: Uplink is not configured on DSwitch.
    :raise VCenterDSwitchError: Uplinks or portgroups of DSwitch could not be listed.
    :raise VCenterDSwitchWithoutPortgroups: DSwitch has no portgroups.
    :raise VCenterTeamingPolicyError: Teaming policy of portgroup could not be read or updated.
    :raise VCenterUplinkStateInconsistent: Uplink is not in exactly one state.
    """
    if state not in UPLINK_STATES:
        raise VCenterInvalidUplinkState(state, UPLINK_STATES)

    for dswitch in _as_dswitches(dswitches):
        uplink = dswitch.get_uplink(uplink_name)
        changed = 0
        for portgroup in _get_portgroups(dswitch):
            if uplink.set_state(portgroup, state, dry_run=dry_run, confirm=confirm):
                changed += 1
        logger.log(
            level=log_levels.MODULE_DEBUG,
            msg=f"{dswitch.name}: uplink {uplink_name} set to {state} on {changed} portgroup(s)",
        )
