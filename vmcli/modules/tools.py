"""Tools and VProbes modules."""

import threading
from typing import Any, Optional

from .base import VmcliModule


class ToolsModule(VmcliModule):
    module_name = "Tools"

    def query(self, vmx_path: str, cancel_event: Optional[threading.Event] = None) -> Any:
        return self._query(vmx_path, verb="Query", cancel_event=cancel_event)

    def install(
        self,
        vmx_path: str,
        cmdline: Optional[str] = None,
        backing_type: Optional[str] = None,
        backing_path: Optional[str] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self._install_or_upgrade("Install", vmx_path, cmdline, backing_type, backing_path, cancel_event)

    def upgrade(
        self,
        vmx_path: str,
        cmdline: Optional[str] = None,
        backing_type: Optional[str] = None,
        backing_path: Optional[str] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self._install_or_upgrade("Upgrade", vmx_path, cmdline, backing_type, backing_path, cancel_event)

    def _install_or_upgrade(self, verb, vmx_path, cmdline, backing_type, backing_path, cancel_event):
        builder = (
            self.command(vmx_path, verb)
            .add_flag("-c", cmdline)
            .add_flag("-bt", backing_type)
            .add_flag("-bp", backing_path)
        )
        self.execute(builder, cancel_event)


class VProbesModule(VmcliModule):
    module_name = "VProbes"

    def query(self, vmx_path: str, cancel_event: Optional[threading.Event] = None) -> Any:
        return self._query(vmx_path, verb="Query", cancel_event=cancel_event)

    def load(self, vmx_path: str, script_file: str, cancel_event: Optional[threading.Event] = None) -> None:
        self._run(vmx_path, "Load", script_file, cancel_event=cancel_event)

    def reset(self, vmx_path: str, cancel_event: Optional[threading.Event] = None) -> None:
        self._run(vmx_path, "Reset", cancel_event=cancel_event)

    def set_enabled(self, vmx_path: str, enabled: str, cancel_event: Optional[threading.Event] = None) -> None:
        self._run(vmx_path, "SetEnabled", enabled, cancel_event=cancel_event)
