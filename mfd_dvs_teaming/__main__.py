# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT
"""Command line for getting and setting DSwitch uplink state."""
import argparse
import logging
import os
import sys
from typing import Iterator, List, Optional

from mfd_common_libs import log_levels, add_logging_level
from pyVmomi import vmodl

from .const import UPLINK_STATES
from .uplink_state import get_uplink_state, set_uplink_state
from .vcenter.distributed_switch.dswitch import DSwitch
from .vcenter.exceptions import (
    VCenterInvalidLogin,
    VCenterResourceMissing,
    VCenterSocketError,
    VCenterTeamingError,
)
from .vcenter.vcenter import VCenter

logger = logging.getLogger(__name__)
add_logging_level(level_name="MODULE_DEBUG", level_value=log_levels.MODULE_DEBUG)


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="mfd-dvs-teaming",
        description="Get or set active/standby/unused state of an uplink on all portgroups of DSwitches.",
    )
    parser.add_argument("--vcenter", default=os.getenv("VCENTER_HOST"), help="VCenter address [VCENTER_HOST]")
    parser.add_argument("--user", default=os.getenv("VCENTER_USER"), help="VCenter login [VCENTER_USER]")
    parser.add_argument(
        "--password", default=os.getenv("VCENTER_PASSWORD"), help="VCenter password [VCENTER_PASSWORD]"
    )
    parser.add_argument(
        "--port", type=int, default=os.getenv("VCENTER_PORT", "443"), help="VCenter port [VCENTER_PORT]"
    )
    parser.add_argument("--datacenter", help="Look for DSwitches only in this datacenter")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log API calls")

    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser("get", help="Show uplink state on every portgroup")
    _add_target_arguments(get_parser)

    set_parser = subparsers.add_parser("set", help="Move uplink to given state on every portgroup")
    _add_target_arguments(set_parser)
    set_parser.add_argument("--state", required=True, choices=UPLINK_STATES, help="Requested uplink state")
    set_parser.add_argument("--dry-run", action="store_true", help="Show changes without applying them")
    set_parser.add_argument("--confirm", action="store_true", help="Ask before changing each portgroup")
    return parser


def _add_target_arguments(parser: argparse.ArgumentParser) -> None:
    """Add DSwitch and uplink selection."""
    parser.add_argument(
        "--dswitch", required=True, action="append", help="Name of DSwitch, may be given multiple times"
    )
    parser.add_argument("--uplink", required=True, help="Name of uplink, e.g. Uplink_01")


def _get_dswitches(vcenter: VCenter, names: List[str], datacenter: Optional[str]) -> Iterator[DSwitch]:
    """Resolve DSwitch names one by one while they are processed."""
    for name in names:
        if datacenter:
            yield vcenter.get_datacenter_by_name(datacenter).get_dswitch_by_name(name)
        else:
            yield vcenter.get_dswitch_by_name(name)


def _prompt(description: str) -> bool:
    """Ask user to confirm single change, closed input counts as no."""
    try:
        answer = input(f"{description}? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run command line.

    :param argv: Arguments, sys.argv is used when None.

    :return: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    for option in ("vcenter", "user", "password"):
        if not getattr(args, option):
            parser.error(f"--{option} is required")

    logging.basicConfig(level=log_levels.MODULE_DEBUG if args.verbose else logging.INFO)

    vcenter = VCenter(args.vcenter, args.user, args.password, args.port)
    dswitches = _get_dswitches(vcenter, args.dswitch, args.datacenter)
    try:
        if args.command == "get":
            for record in get_uplink_state(dswitches, args.uplink):
                print(
                    f"{record['portgroup']}\t{record['uplink']}\t"
                    f"active={record['is_active']}\tstandby={record['is_standby']}\tunused={record['is_unused']}"
                )
        else:
            set_uplink_state(
                dswitches,
                args.uplink,
                args.state,
                dry_run=args.dry_run,
                confirm=_prompt if args.confirm else None,
            )
    except (VCenterTeamingError, VCenterResourceMissing, VCenterInvalidLogin, VCenterSocketError) as e:
        logger.log(level=log_levels.MODULE_DEBUG, msg=f"{args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except vmodl.MethodFault as e:
        logger.log(level=log_levels.MODULE_DEBUG, msg=f"{args.command} failed", exc_info=True)
        print(f"Error: {e.msg}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
