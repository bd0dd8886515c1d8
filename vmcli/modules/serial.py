"""Serial module: virtual serial ports."""

import threading
from typing import Any, Optional

from .base import VmcliModule

Cancel = Optional[threading.Event]


class SerialModule(VmcliModule):
    module_name = "Serial"

    def query(self, vmx_path: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, cancel_event=cancel_event)

    def connection_control(self, vmx_path: str, device_label: str, op_type: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "ConnectionControl", device_label, op_type, cancel_event=cancel_event)

    def purge(self, vmx_path: str, device_label: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "Purge", device_label, cancel_event=cancel_event)

    def set_allow_guest_control(self, vmx_path: str, device_label: str, allow: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetAllowGuestControl", device_label, allow, cancel_event=cancel_event)

    def set_backing_info(
        self,
        vmx_path: str,
        device_label: str,
        backing_type: str,
        backing_path: str,
        backing_path_net_proxy: str,
        pipe_end_point: str,
        net_end_point: str,
        cancel_event: Cancel = None,
    ) -> None:
        self._run(
            vmx_path, "SetBackingInfo", device_label,
            backing_type, backing_path, backing_path_net_proxy, pipe_end_point, net_end_point,
            cancel_event=cancel_event,
        )

    def set_present(self, vmx_path: str, device_label: str, enabled: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetPresent", device_label, enabled, cancel_event=cancel_event)

    def start_connected(self, vmx_path: str, device_label: str, start_connected: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "StartConnected", device_label, start_connected, cancel_event=cancel_event)

    def try_no_rx_loss(self, vmx_path: str, device_label: str, try_no_rx_loss: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "TryNoRxLoss", device_label, try_no_rx_loss, cancel_event=cancel_event)

    def yield_on_msr_read(self, vmx_path: str, device_label: str, yield_on_read: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "YieldOnMsrRead", device_label, yield_on_read, cancel_event=cancel_event)
