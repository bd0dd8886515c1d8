"""HGFS module: host/guest shared folders."""

import threading
from typing import Any, Optional

from .base import VmcliModule

Cancel = Optional[threading.Event]


class HgfsModule(VmcliModule):
    """Wraps `vmcli HGFS`. Shares are addressed by label, e.g. "sharedFolder0"."""

    module_name = "HGFS"

    def query(self, vmx_path: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, cancel_event=cancel_event)

    def set_enabled(self, vmx_path: str, share_label: str, enabled: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetEnabled", share_label, enabled, cancel_event=cancel_event)

    def set_expiration(self, vmx_path: str, share_label: str, expiration: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetExpiration", share_label, expiration, cancel_event=cancel_event)

    def set_follow_symlinks(self, vmx_path: str, share_label: str, follow: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetFollowSymlinks", share_label, follow, cancel_event=cancel_event)

    def set_guest_name(self, vmx_path: str, share_label: str, guest_name: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetGuestName", share_label, guest_name, cancel_event=cancel_event)

    def set_host_default_case(self, vmx_path: str, share_label: str, default_case: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetHostDefaultCase", share_label, default_case, cancel_event=cancel_event)

    def set_host_path(self, vmx_path: str, share_label: str, host_path: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetHostPath", share_label, host_path, cancel_event=cancel_event)

    def set_present(self, vmx_path: str, share_label: str, present: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetPresent", share_label, present, cancel_event=cancel_event)

    def set_read_access(self, vmx_path: str, share_label: str, read_access: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetReadAccess", share_label, read_access, cancel_event=cancel_event)

    def set_tags(self, vmx_path: str, share_label: str, tags: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetTags", share_label, tags, cancel_event=cancel_event)

    def set_write_access(self, vmx_path: str, share_label: str, writable: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetWriteAccess", share_label, writable, cancel_event=cancel_event)
