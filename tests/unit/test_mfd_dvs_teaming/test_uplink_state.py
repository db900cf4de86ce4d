# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
import pytest
from pyVmomi import vim

from mfd_dvs_teaming import get_uplink_state, set_uplink_state
from mfd_dvs_teaming.vcenter.exceptions import (
    VCenterDSwitchError,
    VCenterDSwitchWithoutPortgroups,
    VCenterInvalidUplinkState,
    VCenterTeamingError,
    VCenterTeamingPolicyError,
    VCenterUplinkMissing,
    VCenterUplinkStateInconsistent,
)
from .fixtures import port_order

DV_UPLINKS = ["dvUplink1", "dvUplink2", "dvUplink3"]


@pytest.fixture()
def two_portgroups_dswitch(make_dswitch):
    return make_dswitch(
        "PY-DSwitch-A",
        {
            "PY-PG-1": (["dvUplink1", "dvUplink2"], []),
            "PY-PG-2": (["dvUplink1"], ["dvUplink2"]),
        },
        DV_UPLINKS,
    )


@pytest.fixture()
def empty_dswitch(make_dswitch):
    return make_dswitch("PY-DSwitch-Empty", {}, DV_UPLINKS)


def reconfigure_calls(dswitch):
    return [pg.ReconfigureDVPortgroup_Task.call_count for pg in dswitch.content.portgroup]


class TestGetUplinkState:
    def test_records(self, dswitch):
        assert get_uplink_state(dswitch, "Uplink_01") == [
            {
                "portgroup": "PY-DSPortgroup-1",
                "uplink": "Uplink_01",
                "is_active": True,
                "is_standby": False,
                "is_unused": False,
            },
            {
                "portgroup": "PY-DSPortgroup-2",
                "uplink": "Uplink_01",
                "is_active": False,
                "is_standby": True,
                "is_unused": False,
            },
        ]

    @pytest.mark.parametrize("uplink", ["Uplink_01", "Uplink_02", "Uplink_03", "Uplink_04"])
    def test_exactly_one_flag(self, dswitch, uplink):
        for record in get_uplink_state(dswitch, uplink):
            assert [record["is_active"], record["is_standby"], record["is_unused"]].count(True) == 1

    def test_multiple_dswitches_in_order(self, dswitch, make_dswitch):
        other = make_dswitch("PY-DSwitch-B", {"PY-PG-B": ([], ["Uplink_01"])})
        records = get_uplink_state([dswitch, other], "Uplink_01")
        assert [r["portgroup"] for r in records] == ["PY-DSPortgroup-1", "PY-DSPortgroup-2", "PY-PG-B"]

    def test_unknown_uplink(self, dswitch):
        with pytest.raises(VCenterUplinkMissing):
            get_uplink_state(dswitch, "dvUplink1")

    def test_no_portgroups(self, empty_dswitch):
        with pytest.raises(VCenterDSwitchWithoutPortgroups, match="PY-DSwitch-Empty"):
            get_uplink_state(empty_dswitch, "dvUplink1")

    def test_policy_fetch_failure(self, mocker, dswitch):
        pg = dswitch.content.portgroup[1]
        type(pg).config = mocker.PropertyMock(side_effect=vim.fault.NotFound(msg="gone"))
        with pytest.raises(VCenterTeamingPolicyError):
            get_uplink_state(dswitch, "Uplink_01")

    def test_uplink_in_two_lists(self, dswitch):
        port_order(dswitch.content.portgroup[0]).standbyUplinkPort = ["Uplink_01"]
        with pytest.raises(VCenterUplinkStateInconsistent):
            get_uplink_state(dswitch, "Uplink_01")

    def test_portgroup_listing_fault(self, mocker, dswitch):
        type(dswitch.content).portgroup = mocker.PropertyMock(side_effect=vim.fault.NoPermission(msg="denied"))
        with pytest.raises(VCenterTeamingError, match="denied") as exc_info:
            get_uplink_state(dswitch, "Uplink_01")
        assert isinstance(exc_info.value, VCenterDSwitchError)

    def test_failure_discards_records_of_earlier_dswitches(self, dswitch, make_dswitch):
        empty = make_dswitch("PY-DSwitch-NoPG", {})
        with pytest.raises(VCenterDSwitchWithoutPortgroups, match="PY-DSwitch-NoPG"):
            get_uplink_state([dswitch, empty], "Uplink_01")


class TestSetUplinkState:
    def test_active_to_standby_on_two_portgroups(self, two_portgroups_dswitch):
        set_uplink_state(two_portgroups_dswitch, "dvUplink1", "standby")

        pg1, pg2, _ = two_portgroups_dswitch.content.portgroup
        assert port_order(pg1).activeUplinkPort == ["dvUplink2"]
        assert port_order(pg1).standbyUplinkPort == ["dvUplink1"]
        assert port_order(pg2).activeUplinkPort == []
        assert port_order(pg2).standbyUplinkPort == ["dvUplink2", "dvUplink1"]
        for record in get_uplink_state(two_portgroups_dswitch, "dvUplink1"):
            assert not record["is_active"] and record["is_standby"]

    def test_second_call_is_noop(self, two_portgroups_dswitch):
        set_uplink_state(two_portgroups_dswitch, "dvUplink1", "unused")
        assert reconfigure_calls(two_portgroups_dswitch) == [1, 1, 0]
        set_uplink_state(two_portgroups_dswitch, "dvUplink1", "unused")
        assert reconfigure_calls(two_portgroups_dswitch) == [1, 1, 0]

    @pytest.mark.parametrize(
        "state, flag", [("active", "is_active"), ("standby", "is_standby"), ("unused", "is_unused")]
    )
    def test_set_then_get(self, dswitch, state, flag):
        set_uplink_state(dswitch, "Uplink_03", state)
        for record in get_uplink_state(dswitch, "Uplink_03"):
            assert record[flag] is True
            assert [record["is_active"], record["is_standby"], record["is_unused"]].count(True) == 1

    def test_only_mismatching_portgroups_updated(self, dswitch):
        set_uplink_state(dswitch, "Uplink_01", "active")
        assert reconfigure_calls(dswitch) == [0, 1, 0]

    def test_dry_run(self, two_portgroups_dswitch):
        set_uplink_state(two_portgroups_dswitch, "dvUplink1", "standby", dry_run=True)
        assert reconfigure_calls(two_portgroups_dswitch) == [0, 0, 0]
        assert port_order(two_portgroups_dswitch.content.portgroup[0]).activeUplinkPort == ["dvUplink1", "dvUplink2"]

    def test_confirm_per_portgroup(self, mocker, two_portgroups_dswitch):
        confirm = mocker.Mock(side_effect=[False, True])
        set_uplink_state(two_portgroups_dswitch, "dvUplink1", "standby", confirm=confirm)
        assert confirm.call_count == 2
        assert reconfigure_calls(two_portgroups_dswitch) == [0, 1, 0]

    def test_unknown_uplink(self, dswitch):
        with pytest.raises(VCenterUplinkMissing):
            set_uplink_state(dswitch, "dvUplink1", "standby")
        assert reconfigure_calls(dswitch) == [0, 0, 0]

    def test_invalid_state(self, dswitch):
        with pytest.raises(VCenterInvalidUplinkState, match="inherit"):
            set_uplink_state(dswitch, "Uplink_01", "inherit")

    def test_no_portgroups(self, empty_dswitch):
        with pytest.raises(VCenterDSwitchWithoutPortgroups):
            set_uplink_state(empty_dswitch, "dvUplink1", "active")

    def test_abort_on_first_failure_keeps_earlier_changes(self, make_dswitch):
        dswitch = make_dswitch(
            "PY-DSwitch-C",
            {
                "PY-PG-1": (["dvUplink1"], []),
                "PY-PG-2": (["dvUplink1"], []),
                "PY-PG-3": (["dvUplink1"], []),
            },
            DV_UPLINKS,
        )
        pg1, pg2, pg3, _ = dswitch.content.portgroup
        pg2.ReconfigureDVPortgroup_Task.side_effect = vim.fault.DvsFault(msg="host unreachable")

        with pytest.raises(VCenterTeamingPolicyError, match="host unreachable"):
            set_uplink_state(dswitch, "dvUplink1", "unused")

        assert port_order(pg1).activeUplinkPort == []
        assert port_order(pg2).activeUplinkPort == ["dvUplink1"]
        pg3.ReconfigureDVPortgroup_Task.assert_not_called()

    def test_failure_stops_following_dswitches(self, two_portgroups_dswitch, empty_dswitch, make_dswitch):
        last = make_dswitch("PY-DSwitch-Last", {"PY-PG-L": (["dvUplink1"], [])}, DV_UPLINKS)
        with pytest.raises(VCenterDSwitchWithoutPortgroups):
            set_uplink_state([two_portgroups_dswitch, empty_dswitch, last], "dvUplink1", "standby")
        assert reconfigure_calls(two_portgroups_dswitch) == [1, 1, 0]
        assert reconfigure_calls(last) == [0, 0]

    def test_portgroup_listing_fault(self, mocker, two_portgroups_dswitch):
        contents = list(two_portgroups_dswitch.content.portgroup)
        type(two_portgroups_dswitch.content).portgroup = mocker.PropertyMock(
            side_effect=vim.fault.NoPermission(msg="denied")
        )
        with pytest.raises(VCenterDSwitchError, match="cannot list portgroups: denied"):
            set_uplink_state(two_portgroups_dswitch, "dvUplink1", "standby")
        for pg in contents:
            pg.ReconfigureDVPortgroup_Task.assert_not_called()
