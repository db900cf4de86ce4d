# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""Uplink teaming policy of DSPortgroup."""
from typing import Dict, Iterable, List

from pyVmomi import vim

from ..utils import unique_names
from ...const import UPLINK_STATE_ACTIVE, UPLINK_STATE_STANDBY, UPLINK_STATE_UNUSED, UPLINK_STATES


class TeamingPolicy(object):
    """
    Uplinks of portgroup split into active, standby and unused lists.

    vCenter keeps only ordered active and standby lists, every other uplink of DSwitch is unused.
    Order of active and standby lists is the failover order.
    """

    def __init__(self, active: Iterable[str], standby: Iterable[str], unused: Iterable[str]):
        """
        Initialize instance.

        :param active: Names of active uplinks.
        :param standby: Names of standby uplinks.
        :param unused: Names of unused uplinks.
        """
        self._uplinks = {
            UPLINK_STATE_ACTIVE: unique_names(active),
            UPLINK_STATE_STANDBY: unique_names(standby),
            UPLINK_STATE_UNUSED: unique_names(unused),
        }

    @classmethod
    def from_port_order(
        cls,
        port_order: vim.dvs.VmwareDistributedVirtualSwitch.UplinkPortOrderPolicy,
        uplink_names: Iterable[str],
    ) -> "TeamingPolicy":
        """
        Create policy from API uplink port order.

        :param port_order: Uplink port order of portgroup.
        :param uplink_names: Names of all uplinks configured on DSwitch.

        :return: Teaming policy.
        """
        active = unique_names(port_order.activeUplinkPort)
        standby = unique_names(port_order.standbyUplinkPort)
        unused = [name for name in uplink_names if name not in active and name not in standby]
        return cls(active, standby, unused)

    def __repr__(self):
        """Get string representation."""
        return f"{self.__class__.__name__}(active={self.active}, standby={self.standby}, unused={self.unused})"

    def __eq__(self, other: object) -> bool:
        """Compare uplink lists of both policies."""
        if not isinstance(other, TeamingPolicy):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    @property
    def active(self) -> List[str]:
        """Names of active uplinks."""
        return list(self._uplinks[UPLINK_STATE_ACTIVE])

    @property
    def standby(self) -> List[str]:
        """Names of standby uplinks."""
        return list(self._uplinks[UPLINK_STATE_STANDBY])

    @property
    def unused(self) -> List[str]:
        """Names of unused uplinks."""
        return list(self._uplinks[UPLINK_STATE_UNUSED])

    def as_dict(self) -> Dict[str, List[str]]:
        """
        Get uplink lists keyed by state.

        Sample output:
        {'active': ['Uplink_01'], 'standby': ['Uplink_02'], 'unused': ['Uplink_03', 'Uplink_04']}
        """
        return {state: list(names) for state, names in self._uplinks.items()}

    def get_states(self, uplink_name: str) -> List[str]:
        """
        Get all states in which uplink is listed.

        :param uplink_name: Name of uplink.

        :return: States, consistent policy gives exactly one.
        """
        return [state for state in UPLINK_STATES if uplink_name in self._uplinks[state]]

    def with_uplink_state(self, uplink_name: str, state: str) -> "TeamingPolicy":
        """
        Get copy of policy with uplink moved to the end of the list for given state.

        :param uplink_name: Name of uplink.
        :param state: Target state active/standby/unused.

        :return: New teaming policy.
        """
        uplinks = {current: [name for name in names if name != uplink_name] for current, names in self._uplinks.items()}
        uplinks[state].append(uplink_name)
        return TeamingPolicy(uplinks[UPLINK_STATE_ACTIVE], uplinks[UPLINK_STATE_STANDBY], uplinks[UPLINK_STATE_UNUSED])

    def to_port_order(self) -> vim.dvs.VmwareDistributedVirtualSwitch.UplinkPortOrderPolicy:
        """
        Get API uplink port order for this policy.

        Unused uplinks are those left out of both lists.

        :return: Uplink port order overriding the inherited one.
        """
        port_order = vim.dvs.VmwareDistributedVirtualSwitch.UplinkPortOrderPolicy()
        port_order.inherited = False
        port_order.activeUplinkPort = self.active
        port_order.standbyUplinkPort = self.standby
        return port_order
