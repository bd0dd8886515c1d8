"""Disk module: virtual disk creation and per-disk settings."""

import logging
import threading
from pathlib import Path
from typing import Any, List, Optional, Union

from .base import VmcliModule
from ..models import VirtualDiskAdapterType, VirtualDiskType


logger = logging.getLogger(__name__)

Cancel = Optional[threading.Event]


class DiskModule(VmcliModule):
    """
    Wraps `vmcli Disk`.

    Most setters take a disk label (e.g. "sata0:1") and a value that is passed
    to vmcli verbatim.
    """

    module_name = "Disk"

    def create(
        self,
        file_path: Union[str, Path],
        adapter_type: VirtualDiskAdapterType,
        size: str,
        disk_type: VirtualDiskType = VirtualDiskType.SINGLE_GROWABLE,
        cancel_event: Cancel = None,
    ) -> List[Path]:
        """
        Create a standalone .vmdk.

        Args:
            file_path: Path of the descriptor file to create
            adapter_type: Adapter the disk is created for
            size: Size expression understood by vmcli, e.g. "20GB"
            disk_type: Allocation layout

        Returns:
            The .vmdk files that now exist for this disk (split disks have several)
        """
        builder = self.command(
            None, "create",
            "--filepath", str(file_path),
            "--adapter", VirtualDiskAdapterType(adapter_type),
            "--size", size,
            "--type", VirtualDiskType(disk_type),
        )
        self.execute(builder, cancel_event)

        path = Path(file_path)
        if not path.parent.parts:
            return [path]
        files = sorted(path.parent.glob(f"{path.stem}*.vmdk"))
        logger.debug(f"Disk files created for {path}: {[str(f) for f in files]}")
        return files

    def query(self, vmx_path: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, cancel_event=cancel_event)

    def is_present(self, vmx_path: str, disk_label: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, disk_label, verb="IsPresent", cancel_event=cancel_event)

    def branch(self, vmx_path: str, disk_label: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "Branch", disk_label, cancel_event=cancel_event)

    def branch_cancel(self, vmx_path: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "BranchCancel", cancel_event=cancel_event)

    def connection_control(self, vmx_path: str, disk_label: str, connect_op: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "ConnectionControl", disk_label, connect_op, cancel_event=cancel_event)

    def convert_alloc_type(
        self, vmx_path: str, disk_label: str, disk_path: str, alloc_type: str, cancel_event: Cancel = None
    ) -> None:
        self._run(vmx_path, "ConvertAllocType", disk_label, disk_path, alloc_type, cancel_event=cancel_event)

    def convert_alloc_type_cancel(self, vmx_path: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "ConvertAllocTypeCancel", cancel_event=cancel_event)

    def extend(self, vmx_path: str, disk_label: str, new_num_sectors: int, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "Extended", disk_label, new_num_sectors, cancel_event=cancel_event)

    def move(self, vmx_path: str, from_label: str, to_label: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "Move", from_label, to_label, cancel_event=cancel_event)

    def purge(self, vmx_path: str, disk_label: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "Purge", disk_label, cancel_event=cancel_event)

    def set_allow_guest_control(self, vmx_path: str, disk_label: str, allow: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetAllowGuestControl", disk_label, allow, cancel_event=cancel_event)

    def set_backing_info(
        self,
        vmx_path: str,
        disk_label: str,
        backing_type: str,
        backing_path: str,
        client_device: str,
        cancel_event: Cancel = None,
    ) -> None:
        self._run(
            vmx_path, "SetBackingInfo", disk_label, backing_type, backing_path, client_device,
            cancel_event=cancel_event,
        )

    def set_bandwidth_cap(self, vmx_path: str, disk_label: str, cap: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetBandwidthCap", disk_label, cap, cancel_event=cancel_event)

    def set_cbrc_cache_enabled(self, vmx_path: str, enable: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetCbrcCacheEnabled", enable, cancel_event=cancel_event)

    def set_ctk_enabled(self, vmx_path: str, disk_label: str, enabled: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetCtkEnabled", disk_label, enabled, cancel_event=cancel_event)

    def set_digest(self, vmx_path: str, disk_label: str, digest: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetDigest", disk_label, digest, cancel_event=cancel_event)

    def set_uuid(self, vmx_path: str, disk_label: str, uuid: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetDiskUUID", disk_label, uuid, cancel_event=cancel_event)

    def set_uuid_enabled(self, vmx_path: str, enable: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetDiskUuidEnabled", enable, cancel_event=cancel_event)

    def set_exclusive_access(self, vmx_path: str, disk_label: str, exclusive: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetExclusiveAccess", disk_label, exclusive, cancel_event=cancel_event)

    def set_global_ctk_disallowed(self, vmx_path: str, disallow: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetGlobalCtkDisallowed", disallow, cancel_event=cancel_event)

    def set_hard_disk_host_buffer(self, vmx_path: str, mode: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetHardDiskHostBuffer", mode, cancel_event=cancel_event)

    def set_hard_disk_page_align(self, vmx_path: str, mode: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetHardDiskPageAlign", mode, cancel_event=cancel_event)

    def set_hide_type_of_read_only_part(self, vmx_path: str, hide: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetHideTypeOfROnlyPart", hide, cancel_event=cancel_event)

    def set_mode(self, vmx_path: str, disk_label: str, mode: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetMode", disk_label, mode, cancel_event=cancel_event)

    def set_policy(self, vmx_path: str, disk_label: str, policy: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetPolicy", disk_label, policy, cancel_event=cancel_event)

    def set_present(self, vmx_path: str, disk_label: str, present: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetPresent", disk_label, present, cancel_event=cancel_event)

    def set_read_only(self, vmx_path: str, disk_label: str, read_only: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetReadOnly", disk_label, read_only, cancel_event=cancel_event)

    def set_reservation(self, vmx_path: str, disk_label: str, reservation: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetReservation", disk_label, reservation, cancel_event=cancel_event)

    def set_shares(self, vmx_path: str, disk_label: str, shares: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetShares", disk_label, shares, cancel_event=cancel_event)

    def set_sharing(self, vmx_path: str, disk_label: str, sharing: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetSharing", disk_label, sharing, cancel_event=cancel_event)

    def set_spif_filters(self, vmx_path: str, disk_label: str, spif_spec_list: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetSpifFilters", disk_label, spif_spec_list, cancel_event=cancel_event)

    def set_start_connected(self, vmx_path: str, disk_label: str, start_connected: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetStartConnected", disk_label, start_connected, cancel_event=cancel_event)

    def set_throughput_cap(self, vmx_path: str, disk_label: str, cap: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetThroughputCap", disk_label, cap, cancel_event=cancel_event)

    def set_write_through(self, vmx_path: str, disk_label: str, write_through: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetWriteThrough", disk_label, write_through, cancel_event=cancel_event)
