"""MKS module: mouse, keyboard and screen of a VM."""

import threading
from typing import Any, Optional

from .base import VmcliModule

Cancel = Optional[threading.Event]


class MksModule(VmcliModule):
    module_name = "MKS"

    def query(self, vmx_path: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, cancel_event=cancel_event)

    def capture_screenshot(self, vmx_path: str, file_name: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "captureScreenshot", file_name, cancel_event=cancel_event)

    def send_key_event(self, vmx_path: str, hid_code: str, modifier: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "sendKeyEvent", hid_code, modifier, cancel_event=cancel_event)

    def send_key_sequence(self, vmx_path: str, sequence: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "sendKeySequence", sequence, cancel_event=cancel_event)

    def set_accel_3d(self, vmx_path: str, enable: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetAccel3d", enable, cancel_event=cancel_event)

    def set_fullscreen_at_power_on(self, vmx_path: str, enable: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetFullscreenAtPowerOn", enable, cancel_event=cancel_event)

    def set_fullscreen_on_all_host_displays(self, vmx_path: str, enable: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetFullScreenOnAllHostDisplays", enable, cancel_event=cancel_event)

    def set_graphics_memory_kb(self, vmx_path: str, memory_kb: int, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetGraphicsMemoryKB", memory_kb, cancel_event=cancel_event)

    def set_guest_resolution(self, vmx_path: str, width: int, height: int, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetGuestResolution", width, height, cancel_event=cancel_event)

    def set_num_displays(self, vmx_path: str, num_displays: int, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetNumDisplays", num_displays, cancel_event=cancel_event)

    def set_renderer_3d(self, vmx_path: str, renderer: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetRenderer3d", renderer, cancel_event=cancel_event)

    def set_vram_size(self, vmx_path: str, vram_size: int, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetVramSize", vram_size, cancel_event=cancel_event)
