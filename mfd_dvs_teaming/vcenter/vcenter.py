# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""VCenter wrapper."""
import logging
from itertools import chain
from http.client import HTTPException
from socket import error as socket_error
from atexit import register as exit_register
from typing import List, Any, Generator, Iterable, Optional, Type, Union, TYPE_CHECKING
from pyVim import connect as pyvmomi_connect
from pyVmomi import vim
from pyVmomi import vmodl
from packaging.version import parse as version_parse, Version

from mfd_common_libs import log_levels, add_logging_level
from .datacenter import Datacenter
from .utils import get_obj_from_iter
from .exceptions import VCenterInvalidLogin, VCenterSocketError

if TYPE_CHECKING:
    from .distributed_switch.dswitch import DSwitch

logger = logging.getLogger(__name__)
add_logging_level(level_name="MODULE_DEBUG", level_value=log_levels.MODULE_DEBUG)


class VCenter:
    """VCenter wrapper."""

    def __init__(self, ip: str, login: str, password: str, port: int = 443):
        """
        Initialize instance.

        :param ip: VCenter IP address.
        :param login: Login name.
        :param password: Password.
        :param port: Port number.
        """
        self.__service = None
        self._content = None
        self._ip = ip
        self._login = login
        self._password = password
        self._port = port

    def __repr__(self):
        """Get string representation."""
        return f"{self.__class__.__name__}('{self._ip}')"

    @property
    def content(self) -> "vim.ServiceInstanceContent":
        """Get content of VCenter in API, reconnecting when session is gone."""
        try:
            if self.__service:
                if self._content.sessionManager.currentSession:
                    return self._content
                logger.log(level=log_levels.MODULE_DEBUG, msg=f"{self._ip} the session has expired")
        except (HTTPException, ConnectionError):
            logger.log(level=log_levels.MODULE_DEBUG, msg=f"{self._ip} HTTP connection error, reconnecting")

        self._content = self._reconnect()
        return self._content

    def wait_for_tasks(self, tasks: List["vim.Task"]) -> None:
        """
        Wait until all tasks succeed.

        :param tasks: List of task to process.
        :raise vmodl.MethodFault: Fault of the first task that failed.
        """
        pending = {str(task) for task in tasks}
        if not pending:
            return

        filter_spec = vmodl.query.PropertyCollector.FilterSpec(
            objectSet=[vmodl.query.PropertyCollector.ObjectSpec(obj=task) for task in tasks],
            propSet=[vmodl.query.PropertyCollector.PropertySpec(type=vim.Task, pathSet=["info.state"], all=False)],
        )
        collector = self.content.propertyCollector
        pcfilter = collector.CreateFilter(filter_spec, True)
        try:
            version = None
            while pending:
                update = collector.WaitForUpdates(version)
                for filter_set in update.filterSet:
                    for obj_set in filter_set.objectSet:
                        self._process_task_update(obj_set, pending)
                version = update.version
        finally:
            pcfilter.Destroy()

    @staticmethod
    def _process_task_update(obj_set: "vmodl.query.PropertyCollector.ObjectUpdate", pending: set) -> None:
        """
        Drop finished task from pending set.

        :param obj_set: Property collector update of a single task.
        :param pending: Names of tasks still running.
        :raise vmodl.MethodFault: Task failed.
        """
        task = obj_set.obj
        if str(task) not in pending:
            return
        for change in obj_set.changeSet:
            if change.name == "info":
                state = change.val.state
            elif change.name == "info.state":
                state = change.val
            else:
                continue

            if state == vim.TaskInfo.State.success:
                pending.discard(str(task))
            elif state == vim.TaskInfo.State.error:
                raise task.info.error

    @property
    def datacenters(self) -> Generator["Datacenter", Any, None]:
        """Get all datacenters."""
        return (Datacenter(dc.name, self) for dc in self.create_view(self.content.rootFolder, [vim.Datacenter]))

    def get_datacenter_by_name(self, name: str) -> "Datacenter":
        """Get specific datacenter from VCenter.

        :param name: Name of datacenter.

        :return: Specific datacenter.
        """
        return get_obj_from_iter(self.datacenters, name)

    @property
    def dswitches(self) -> Iterable["DSwitch"]:
        """Get all dswitches from all datacenters."""
        return chain(*(dc.dswitches for dc in self.datacenters))

    def get_dswitch_by_name(self, name: str) -> "DSwitch":
        """
        Get specific DSwitch from VCenter.

        :param name: Name of DSwitch.

        :return: DSwitch.
        """
        return get_obj_from_iter(self.dswitches, name)

    def create_view(
        self,
        folder: Union["vim.Folder", "vim.Datacenter"],
        types: Optional[List[Type["vim.ManagedEntity"]]],
    ) -> List[Union["vim.dvs.VmwareDistributedVirtualSwitch", "vim.Datacenter"]]:
        """
        Create a ContainerView managed object for this session.

        :param folder: A reference to an instance of a Folder or Datacenter.
        :param types: An optional list of managed entity types.

        :return: Container view.
        """
        return self.content.viewManager.CreateContainerView(folder, types, False).view

    def _connect(self) -> "vim.ServiceInstanceContent":
        """
        Connect to the specified server using API.

        :return: Service content.
        """
        try:
            logger.log(level=log_levels.MODULE_DEBUG, msg=f"Connecting to: {self._ip}")

            self.__service = pyvmomi_connect.SmartConnect(
                host=self._ip,
                user=self._login,
                pwd=self._password,
                port=self._port,
                connectionPoolTimeout=-1,
                disableSslCertValidation=True,
            )
            exit_register(self._disconnect)
            return self.__service.RetrieveServiceContent()
        except vim.fault.InvalidLogin:
            raise VCenterInvalidLogin(f"Invalid login for {self._login}@{self._ip}")
        except socket_error:
            raise VCenterSocketError(f"Unable to connect to {self._ip}:{self._port}")

    def _disconnect(self) -> None:
        """Disconnect from server."""
        if self.__service:
            pyvmomi_connect.Disconnect(self.__service)
            self.__service = None
            self._content = None

    def _reconnect(self) -> "vim.ServiceInstanceContent":
        """
        Reconnect to server.

        :return: Service content.
        """
        self._disconnect()
        return self._connect()

    @property
    def version(self) -> Version:
        """Get version of vSphere."""
        return version_parse(self.content.about.apiVersion)
