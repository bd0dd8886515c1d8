"""Enumerations for typed vmcli arguments."""

from enum import Enum


class VmResetOpType(str, Enum):
    """How a power operation treats the guest."""
    TRY_SOFT = "trySoft"
    REQUIRE_SOFT = "requireSoft"
    HARD = "hard"


class VirtualDiskAdapterType(str, Enum):
    """Adapter a new virtual disk is created for."""
    IDE = "ide"
    BUSLOGIC = "buslogic"
    LSILOGIC = "lsilogic"


class VirtualDiskType(int, Enum):
    """Allocation layout of a new virtual disk, as vmcli numbers them."""
    SINGLE_GROWABLE = 0
    SPLIT_GROWABLE = 1
    SINGLE_PREALLOCATED = 2
    SPLIT_PREALLOCATED = 3
