# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""DSUplink wrapper."""
import logging
from typing import Callable, Optional, TYPE_CHECKING

from mfd_common_libs import log_levels, add_logging_level

from ..exceptions import VCenterUplinkStateInconsistent

if TYPE_CHECKING:
    from .dswitch import DSwitch
    from .portgroup import DSPortgroup
    from .teaming_policy import TeamingPolicy

logger = logging.getLogger(__name__)
add_logging_level(level_name="MODULE_DEBUG", level_value=log_levels.MODULE_DEBUG)


class DSUplink(object):
    """DSUplink wrapper."""

    def __init__(self, name: str, dswitch: "DSwitch"):
        """
        Initialize instance.

        :param name: Name of uplink.
        :param dswitch: Distributed Switch.
        """
        self._name = name
        self._dswitch = dswitch

    def __repr__(self):
        """Get string representation."""
        return f"{self.__class__.__name__}('{self.name}')"

    @property
    def name(self) -> str:
        """Get name for DSUplink."""
        return self._name

    def get_state(self, portgroup: "DSPortgroup") -> str:
        """
        Get state of uplink in portgroup teaming policy.

        :param portgroup: Portgroup.

        :return: State active/standby/unused.
        """
        return self._get_state(portgroup, portgroup.teaming_policy)

    def set_state(
        self,
        portgroup: "DSPortgroup",
        state: str,
        dry_run: bool = False,
        confirm: Optional[Callable[[str], bool]] = None,
    ) -> bool:
        """
        Move uplink to active/standby/unused list of portgroup teaming policy.

        Nothing is sent when uplink already has requested state.

        :param portgroup: Portgroup.
        :param state: Requested state.
        :param dry_run: Only log the change.
        :param confirm: Called with change description, returning False skips the change.

        :return: True if portgroup was reconfigured.
        """
        policy = portgroup.teaming_policy
        current = self._get_state(portgroup, policy)
        if current == state:
            logger.log(
                level=log_levels.MODULE_DEBUG,
                msg=f"Uplink {self.name} already {state} on {portgroup.name}, skipping",
            )
            return False

        new_policy = policy.with_uplink_state(self.name, state)
        description = f"Set uplink {self.name} on {self._dswitch.name}/{portgroup.name} from {current} to {state}"
        if dry_run:
            logger.log(level=logging.INFO, msg=f"Dry run: {description}, new teaming: {new_policy}")
            return False
        if confirm is not None and not confirm(description):
            logger.log(level=logging.INFO, msg=f"Skipped: {description}")
            return False

        logger.log(level=log_levels.MODULE_DEBUG, msg=description)
        portgroup.teaming_policy = new_policy
        return True

    def _get_state(self, portgroup: "DSPortgroup", policy: "TeamingPolicy") -> str:
        """
        Get state of uplink from already fetched teaming policy.

        :param portgroup: Portgroup the policy belongs to.
        :param policy: Teaming policy.

        :return: State active/standby/unused.
        :raise VCenterUplinkStateInconsistent: Uplink is not in exactly one state.
        """
        states = policy.get_states(self.name)
        if len(states) != 1:
            raise VCenterUplinkStateInconsistent(portgroup, self.name, states)
        return states[0]
