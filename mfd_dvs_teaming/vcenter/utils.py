# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: MIT

"""Various utilities."""

from typing import TypeVar, Iterable, Optional, List

from mfd_dvs_teaming.vcenter.exceptions import VCenterResourceMissing

T = TypeVar("T")


def get_obj_from_iter(iter_obj: Iterable[T], name: str) -> T:
    """
    Get object from iterable object by name.

    :param iter_obj: Iterable object, consumed while searching.
    :param name: Name for the object.

    :return: Object.
    :raise VCenterResourceMissing: Exception when object was not found.
    """
    seen = []
    for obj in iter_obj:
        if obj.name == name:
            return obj
        seen.append(obj)
    raise VCenterResourceMissing(f"{name} in:{seen}")


def unique_names(names: Optional[Iterable[str]]) -> List[str]:
    """
    Drop repeated names keeping the first occurrence order.

    :param names: Names, None is treated as empty.

    :return: List of names.
    """
    result = []
    for name in names or []:
        if name not in result:
            result.append(name)
    return result
