# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT

"""VCenter specific exceptions."""
from typing import Any, Iterable


class VCenterResourceMissing(Exception):
    """Resource is missing."""

    def __init__(self, resource: Any):
        """
        Initialize instance.

        :param resource: Name of resource.
        """
        super().__init__(resource)


class VCenterInvalidLogin(Exception):
    """Invalid VCenter login used."""


class VCenterSocketError(Exception):
    """VCenter socket error."""


class VCenterTeamingError(Exception):
    """Base for uplink teaming failures."""


class VCenterUplinkMissing(VCenterTeamingError):
    """Uplink is not configured on DSwitch."""

    def __init__(self, dswitch: Any, uplink_name: str, uplink_names: Iterable[str]):
        """
        Initialize instance.

        :param dswitch: DSwitch.
        :param uplink_name: Name of missing uplink.
        :param uplink_names: Names of uplinks configured on DSwitch.
        """
        super().__init__(f"{dswitch}: uplink {uplink_name} not found in: {list(uplink_names)}")


class VCenterDSwitchError(VCenterTeamingError):
    """DSwitch configuration could not be read."""

    def __init__(self, dswitch: Any, message: str):
        """
        Initialize instance.

        :param dswitch: DSwitch.
        :param message: Exception message.
        """
        super().__init__(f"{dswitch}: {message}")


class VCenterDSwitchWithoutPortgroups(VCenterTeamingError):
    """DSwitch has no portgroups."""

    def __init__(self, dswitch: Any):
        """
        Initialize instance.

        :param dswitch: DSwitch.
        """
        super().__init__(f"{dswitch}: no portgroups found")


class VCenterTeamingPolicyError(VCenterTeamingError):
    """Teaming policy of portgroup could not be read or updated."""

    def __init__(self, portgroup: Any, message: str):
        """
        Initialize instance.

        :param portgroup: Portgroup.
        :param message: Exception message.
        """
        super().__init__(f"{portgroup}: {message}")


class VCenterUplinkStateInconsistent(VCenterTeamingError):
    """Uplink is not in exactly one of active, standby and unused lists."""

    def __init__(self, portgroup: Any, uplink_name: str, states: Iterable[str]):
        """
        Initialize instance.

        :param portgroup: Portgroup.
        :param uplink_name: Name of uplink.
        :param states: States in which uplink was found.
        """
        states = list(states)
        found = ", ".join(states) if states else "none"
        super().__init__(f"{portgroup}: uplink {uplink_name} expected in exactly one state, found in: {found}")


class VCenterInvalidUplinkState(VCenterTeamingError):
    """Requested uplink state is not supported."""

    def __init__(self, state: str, allowed: Iterable[str]):
        """
        Initialize instance.

        :param state: Requested state.
        :param allowed: Supported states.
        """
        super().__init__(f"Invalid uplink state: {state}, expected one of: {', '.join(allowed)}")
