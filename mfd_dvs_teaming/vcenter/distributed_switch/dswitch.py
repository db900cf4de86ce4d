# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""DSwitch wrapper."""
import logging
from pyVmomi import vim, vmodl
from typing import List, TYPE_CHECKING

from mfd_common_libs import log_levels, add_logging_level

from .uplink import DSUplink
from .portgroup import DSPortgroup
from ..exceptions import VCenterDSwitchError, VCenterUplinkMissing
from ..utils import get_obj_from_iter

if TYPE_CHECKING:
    from ..datacenter import Datacenter
    from ..vcenter import VCenter

logger = logging.getLogger(__name__)
add_logging_level(level_name="MODULE_DEBUG", level_value=log_levels.MODULE_DEBUG)


class DSwitch(object):
    """DSwitch wrapper."""

    def __init__(self, name: str, datacenter: "Datacenter"):
        """
        Initialize instance.

        :param name: Name of dswitch.
        :param datacenter: Datacenter.
        """
        self._name = name
        self._datacenter = datacenter

    def __repr__(self):
        """Get string representation."""
        return f"{self.__class__.__name__}('{self.name}')"

    @property
    def content(self) -> vim.dvs.VmwareDistributedVirtualSwitch:
        """Get content of DS in API."""
        return get_obj_from_iter(
            self._datacenter.vcenter.create_view(
                self._datacenter.network_folder,
                [vim.dvs.VmwareDistributedVirtualSwitch],
            ),
            self.name,
        )

    @property
    def name(self) -> str:
        """Get name of DSwitch."""
        return self._name

    @property
    def vcenter(self) -> "VCenter":
        """Get VCenter for this dswitch."""
        return self._datacenter.vcenter

    @property
    def portgroups(self) -> List["DSPortgroup"]:
        """
        Get all portgroups from DS, the uplink portgroup is tagged and skipped.

        :raise VCenterDSwitchError: Portgroups could not be listed.
        """
        try:
            return [
                DSPortgroup(pg.name, self)
                for pg in self.content.portgroup
                if isinstance(pg, vim.dvs.DistributedVirtualPortgroup) and len(pg.tag) == 0
            ]
        except vmodl.MethodFault as e:
            raise VCenterDSwitchError(self, f"cannot list portgroups: {e.msg}") from e

    @property
    def uplink_names(self) -> List[str]:
        """
        Get names of uplinks configured on DS.

        :raise VCenterDSwitchError: Uplink port policy could not be read.
        """
        try:
            return list(self.content.config.uplinkPortPolicy.uplinkPortName)
        except vmodl.MethodFault as e:
            raise VCenterDSwitchError(self, f"cannot read uplinks: {e.msg}") from e

    def get_uplink(self, name: str) -> "DSUplink":
        """
        Get specific uplink from DS.

        :param name: Name of uplink.

        :return: Uplink.
        :raise VCenterUplinkMissing: Uplink is not configured on DS.
        :raise VCenterDSwitchError: Uplink port policy could not be read.
        """
        uplink_names = self.uplink_names
        if name not in uplink_names:
            raise VCenterUplinkMissing(self, name, uplink_names)
        logger.log(level=log_levels.MODULE_DEBUG, msg=f"Found uplink {name} on {self.name}")
        return DSUplink(name, self)
