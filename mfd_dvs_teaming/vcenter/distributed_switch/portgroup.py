# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""DSPortgroup wrapper."""
import logging
from typing import TYPE_CHECKING

from pyVmomi import vim, vmodl
from mfd_common_libs import log_levels, add_logging_level

from .teaming_policy import TeamingPolicy
from ..exceptions import (
    VCenterResourceMissing,
    VCenterTeamingPolicyError,
)

if TYPE_CHECKING:
    from .dswitch import DSwitch

logger = logging.getLogger(__name__)
add_logging_level(level_name="MODULE_DEBUG", level_value=log_levels.MODULE_DEBUG)


class DSPortgroup(object):
    """DSPortgroup wrapper."""

    def __init__(self, name: str, dswitch: "DSwitch"):
        """
        Initialize instance.

        :param name: Name of portgroup.
        :param dswitch: DSwitch.
        """
        self._name = name
        self._dswitch = dswitch

    def __repr__(self):
        """Get string representation."""
        return f"{self.__class__.__name__}('{self.name}')"

    @property
    def content(self) -> vim.dvs.DistributedVirtualPortgroup:
        """Get content of DSPortgroup in API."""
        for pg in self._dswitch.content.portgroup:
            if pg.name == self._name and isinstance(pg, vim.dvs.DistributedVirtualPortgroup):
                return pg
        raise VCenterResourceMissing(self)

    @property
    def name(self) -> str:
        """Name for DSPortgroup."""
        return self._name

    @property
    def teaming_policy(self) -> TeamingPolicy:
        """
        Get active, standby and unused uplinks of portgroup.

        :raise VCenterTeamingPolicyError: Policy could not be read.
        :raise VCenterDSwitchError: Uplinks of DSwitch could not be read.
        """
        try:
            default_port_config = self.content.config.defaultPortConfig
            uplink_names = self._dswitch.uplink_names
        except VCenterResourceMissing as e:
            raise VCenterTeamingPolicyError(self, f"portgroup not found on {self._dswitch}") from e
        except vmodl.MethodFault as e:
            raise VCenterTeamingPolicyError(self, f"cannot read config: {e.msg}") from e

        teaming = getattr(default_port_config, "uplinkTeamingPolicy", None)
        port_order = getattr(teaming, "uplinkPortOrder", None)
        if port_order is None:
            raise VCenterTeamingPolicyError(self, "uplink teaming policy is missing")

        policy = TeamingPolicy.from_port_order(port_order, uplink_names)
        logger.log(level=log_levels.MODULE_DEBUG, msg=f"Portgroup {self.name} teaming: {policy}")
        return policy

    @teaming_policy.setter
    def teaming_policy(self, value: TeamingPolicy) -> None:
        """
        Set active and standby uplinks of portgroup, all the others become unused.

        :param value: Teaming policy.
        :raise VCenterTeamingPolicyError: Policy could not be updated.
        """
        try:
            dsp_config = vim.dvs.DistributedVirtualPortgroup.ConfigSpec()
            dsp_config.configVersion = self.content.config.configVersion
            dsp_config.defaultPortConfig = vim.dvs.VmwareDistributedVirtualSwitch.VmwarePortConfigPolicy()
            dsp_config.defaultPortConfig.uplinkTeamingPolicy = (
                vim.dvs.VmwareDistributedVirtualSwitch.UplinkPortTeamingPolicy()
            )
            dsp_config.defaultPortConfig.uplinkTeamingPolicy.inherited = False
            dsp_config.defaultPortConfig.uplinkTeamingPolicy.uplinkPortOrder = value.to_port_order()
            logger.log(
                level=log_levels.MODULE_DEBUG,
                msg=f"Reconfigure portgroup: {self.name} spec\n{dsp_config}",
            )
            self._dswitch.vcenter.wait_for_tasks([self.content.ReconfigureDVPortgroup_Task(dsp_config)])
        except VCenterResourceMissing as e:
            raise VCenterTeamingPolicyError(self, f"portgroup not found on {self._dswitch}") from e
        except vmodl.MethodFault as e:
            raise VCenterTeamingPolicyError(self, f"cannot update teaming policy: {e.msg}") from e
