# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT

import pytest
from pyVmomi import vim

from mfd_dvs_teaming.vcenter.datacenter import Datacenter
from mfd_dvs_teaming.vcenter.distributed_switch.dswitch import DSwitch
from mfd_dvs_teaming.vcenter.distributed_switch.portgroup import DSPortgroup
from mfd_dvs_teaming.vcenter.distributed_switch.uplink import DSUplink
from mfd_dvs_teaming.vcenter.vcenter import VCenter

UPLINK_NAMES = ["Uplink_01", "Uplink_02", "Uplink_03", "Uplink_04"]


def make_dvs_portgroup(mocker, name, active, standby, tag=None):
    """Fake portgroup whose reconfigure task stores the submitted uplink order."""
    pg = mocker.MagicMock(spec=vim.dvs.DistributedVirtualPortgroup)
    pg.name = name
    pg.tag = tag or []
    pg.config = mocker.MagicMock()
    pg.config.configVersion = "7"
    port_order = pg.config.defaultPortConfig.uplinkTeamingPolicy.uplinkPortOrder
    port_order.activeUplinkPort = list(active)
    port_order.standbyUplinkPort = list(standby)

    def reconfigure(spec):
        new_order = spec.defaultPortConfig.uplinkTeamingPolicy.uplinkPortOrder
        port_order.activeUplinkPort = list(new_order.activeUplinkPort)
        port_order.standbyUplinkPort = list(new_order.standbyUplinkPort)
        return f"task-{name}"

    pg.ReconfigureDVPortgroup_Task = mocker.MagicMock(side_effect=reconfigure)
    return pg


def make_dswitch_content(mocker, name, portgroups, uplink_names=None):
    """Fake DSwitch with given portgroups and its tagged uplink portgroup."""
    ds = mocker.MagicMock()
    ds.name = name
    uplink_pg = make_dvs_portgroup(mocker, f"{name}-DVUplinks", [], [], tag=[mocker.MagicMock()])
    ds.portgroup = list(portgroups) + [uplink_pg]
    ds.config.uplinkPortPolicy.uplinkPortName = list(UPLINK_NAMES if uplink_names is None else uplink_names)
    return ds


def port_order(pg_content):
    return pg_content.config.defaultPortConfig.uplinkTeamingPolicy.uplinkPortOrder


@pytest.fixture()
def vcenter():
    vcenter = VCenter("172.31.12.144", "user", "secret")
    return vcenter


@pytest.fixture()
def dswitch_view():
    return []


@pytest.fixture()
def vcenter_mock(mocker, dswitch_view):
    vcenter = mocker.MagicMock()
    datacenter_content = mocker.MagicMock()
    datacenter_content.name = "PY-Datacenter"

    def create_view(folder, types):
        if types == [vim.Datacenter]:
            return [datacenter_content]
        return list(dswitch_view)

    vcenter.create_view.side_effect = create_view
    return vcenter


@pytest.fixture()
def datacenter(vcenter_mock):
    datacenter = Datacenter("PY-Datacenter", vcenter_mock)
    return datacenter


@pytest.fixture()
def make_dswitch(mocker, datacenter, dswitch_view):
    def _make_dswitch(name, portgroups, uplink_names=None):
        contents = [
            make_dvs_portgroup(mocker, pg_name, active, standby) for pg_name, (active, standby) in portgroups.items()
        ]
        dswitch_view.append(make_dswitch_content(mocker, name, contents, uplink_names))
        return DSwitch(name, datacenter)

    return _make_dswitch


@pytest.fixture()
def dswitch(make_dswitch):
    return make_dswitch(
        "PY-DSwitch",
        {
            "PY-DSPortgroup-1": (["Uplink_01", "Uplink_02"], ["Uplink_03"]),
            "PY-DSPortgroup-2": (["Uplink_02"], ["Uplink_01"]),
        },
    )


@pytest.fixture()
def dsportgroup(dswitch):
    dsportgroup = DSPortgroup("PY-DSPortgroup-1", dswitch)
    return dsportgroup


@pytest.fixture()
def dsuplink(dswitch):
    dsuplink = DSUplink("Uplink_01", dswitch)
    return dsuplink


@pytest.fixture()
def vcenter_named_entities():
    class DummyNamedThing:
        def __init__(self, name):
            self._name = name

        def __repr__(self):
            return self._name

        @property
        def name(self):
            return self._name

    names = ("Named-1", "Named-2", "Named-3")
    return [DummyNamedThing(n) for n in names]
