"""Power module: start, stop and query the power state of a VM."""

import threading
from typing import Any, Optional

from .base import VmcliModule
from ..models import VmResetOpType


class PowerModule(VmcliModule):
    module_name = "Power"

    def query(self, vmx_path: str, cancel_event: Optional[threading.Event] = None) -> Any:
        """Return the power state document of the VM."""
        return self._query(vmx_path, cancel_event=cancel_event)

    def start(
        self,
        vmx_path: str,
        paused: bool = False,
        soft: bool = False,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        builder = self.command(vmx_path, "Start").add_flag("-p", paused).add_flag("-s", soft)
        self.execute(builder, cancel_event)

    def stop(
        self,
        vmx_path: str,
        op_type: VmResetOpType = VmResetOpType.TRY_SOFT,
        for_revert: bool = False,
        snapshot_id: Optional[int] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        builder = (
            self.command(vmx_path, "Stop")
            .add_flag("-o", VmResetOpType(op_type))
            .add_flag("-r", for_revert)
            .add_flag("-si", snapshot_id)
        )
        self.execute(builder, cancel_event)

    def pause(self, vmx_path: str, cancel_event: Optional[threading.Event] = None) -> None:
        self._run(vmx_path, "Pause", cancel_event=cancel_event)

    def unpause(self, vmx_path: str, cancel_event: Optional[threading.Event] = None) -> None:
        self._run(vmx_path, "Unpause", cancel_event=cancel_event)

    def reset(
        self,
        vmx_path: str,
        op_type: VmResetOpType = VmResetOpType.TRY_SOFT,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self.execute(self.command(vmx_path, "Reset").add_flag("-o", VmResetOpType(op_type)), cancel_event)

    def suspend(
        self,
        vmx_path: str,
        op_type: VmResetOpType = VmResetOpType.TRY_SOFT,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self.execute(self.command(vmx_path, "Suspend").add_flag("-o", VmResetOpType(op_type)), cancel_event)
