"""ConfigParams and Chipset modules."""

import threading
from typing import Any, Optional

from .base import VmcliModule


class ConfigParamsModule(VmcliModule):
    module_name = "ConfigParams"

    def query(self, vmx_path: str, cancel_event: Optional[threading.Event] = None) -> Any:
        return self._query(vmx_path, cancel_event=cancel_event)

    def set_entry(
        self,
        vmx_path: str,
        entry_name: str,
        entry_value: str,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        """Set a raw .vmx entry, e.g. entry_names.MEMORY_SIZE."""
        self._run(vmx_path, "setentry", entry_name, entry_value, cancel_event=cancel_event)


class ChipsetModule(VmcliModule):
    module_name = "Chipset"

    def query(self, vmx_path: str, cancel_event: Optional[threading.Event] = None) -> Any:
        return self._query(vmx_path, cancel_event=cancel_event)

    def set_vcpu_count(self, vmx_path: str, vcpu_count: int, cancel_event: Optional[threading.Event] = None) -> None:
        self._run(vmx_path, "SetVCpuCount", vcpu_count, cancel_event=cancel_event)

    def set_mem_size(self, vmx_path: str, memory_size_mb: int, cancel_event: Optional[threading.Event] = None) -> None:
        self._run(vmx_path, "SetMemSize", memory_size_mb, cancel_event=cancel_event)

    def set_simultaneous_threads(
        self, vmx_path: str, num_threads: int, cancel_event: Optional[threading.Event] = None
    ) -> None:
        self._run(vmx_path, "SetSimultaneousThreads", num_threads, cancel_event=cancel_event)

    def set_cores_per_socket(self, vmx_path: str, num_cores: int, cancel_event: Optional[threading.Event] = None) -> None:
        self._run(vmx_path, "SetCoresPerSocket", num_cores, cancel_event=cancel_event)
