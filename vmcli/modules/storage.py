"""
Storage controller modules: Nvme and Sata.

Both controllers share most of their verbs; the few that differ (Sata has
Move, IsPresent, HasNoDevice and SetNumaNode, and the two spell the
max-devices verb differently) live on the subclasses.
"""

import threading
from typing import Any, Optional

from .base import VmcliModule

Cancel = Optional[threading.Event]


class _ControllerModule(VmcliModule):
    MAX_DEVICES_VERB = "SetMaxDevices"

    def query(self, vmx_path: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, cancel_event=cancel_event)

    def purge(self, vmx_path: str, device_label: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "Purge", device_label, cancel_event=cancel_event)

    def set_present(self, vmx_path: str, device_label: str, enabled: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetPresent", device_label, enabled, cancel_event=cancel_event)

    def set_type(self, vmx_path: str, device_label: str, hba_type: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetType", device_label, hba_type, cancel_event=cancel_event)

    def set_pci_slot_number(self, vmx_path: str, device_label: str, slot: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetPciSlotNumber", device_label, slot, cancel_event=cancel_event)

    def set_max_devices(self, vmx_path: str, device_label: str, max_devices: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, self.MAX_DEVICES_VERB, device_label, max_devices, cancel_event=cancel_event)

    def is_child_present(self, vmx_path: str, device_label: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, device_label, verb="IsChildPresent", cancel_event=cancel_event)

    def find_first_free(self, vmx_path: str, device_label: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, device_label, verb="FindFirstFree", cancel_event=cancel_event)


class NvmeModule(_ControllerModule):
    module_name = "Nvme"
    MAX_DEVICES_VERB = "SetMaxDevice"

    def set_bus_type(self, vmx_path: str, device_label: str, bus_type: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetBusType", device_label, bus_type, cancel_event=cancel_event)


class SataModule(_ControllerModule):
    module_name = "Sata"

    def move(self, vmx_path: str, from_label: str, to_label: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "Move", from_label, to_label, cancel_event=cancel_event)

    def is_present(self, vmx_path: str, device_label: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, device_label, verb="IsPresent", cancel_event=cancel_event)

    def has_no_device(self, vmx_path: str, device_label: str, cancel_event: Cancel = None) -> str:
        return self.execute(self.command(vmx_path, "HasNoDevice", device_label), cancel_event)

    def set_numa_node(self, vmx_path: str, device_label: str, numa_node: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetNumaNode", device_label, numa_node, cancel_event=cancel_event)
