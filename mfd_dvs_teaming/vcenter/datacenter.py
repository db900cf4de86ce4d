# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""Datacenter wrapper."""
from typing import Any, Generator, TYPE_CHECKING

from pyVmomi import vim

from .distributed_switch.dswitch import DSwitch
from .utils import get_obj_from_iter

if TYPE_CHECKING:
    from .vcenter import VCenter


class Datacenter(object):
    """Datacenter wrapper."""

    def __init__(self, name: str, vcenter: "VCenter"):
        """
        Initialize instance.

        :param name: Name of datacenter.
        :param vcenter: VCenter.
        """
        self._name = name
        self._vcenter = vcenter

    def __repr__(self):
        """Get string representation."""
        return f"{self.__class__.__name__}('{self.name}')"

    @property
    def content(self) -> "vim.Datacenter":
        """Content of datacenter in API."""
        return get_obj_from_iter(
            self.vcenter.create_view(self.vcenter.content.rootFolder, [vim.Datacenter]),
            self.name,
        )

    @property
    def name(self) -> str:
        """Get name of datacenter."""
        return self._name

    @property
    def vcenter(self) -> "VCenter":
        """Get VCenter for this datacenter."""
        return self._vcenter

    @property
    def network_folder(self) -> "vim.Folder":
        """Get network folder of datacenter."""
        return self.content.networkFolder

    @property
    def dswitches(self) -> Generator["DSwitch", Any, None]:
        """Get all dswitches."""
        return (
            DSwitch(ds.name, self)
            for ds in self.vcenter.create_view(self.network_folder, [vim.dvs.VmwareDistributedVirtualSwitch])
        )

    def get_dswitch_by_name(self, name: str) -> "DSwitch":
        """
        Get specific DSwitch from datacenter.

        :param name: Name of DSwitch.
        :return: DSwitch.
        """
        return get_obj_from_iter(self.dswitches, name)
