"""Snapshot module."""

import threading
from typing import Any, Optional

from .base import VmcliModule


class SnapshotModule(VmcliModule):
    module_name = "Snapshot"

    def query(self, vmx_path: str, cancel_event: Optional[threading.Event] = None) -> Any:
        """Return the snapshot tree of the VM."""
        return self._query(vmx_path, cancel_event=cancel_event)

    def take(
        self,
        vmx_path: str,
        name: str,
        native: bool = False,
        memory: bool = False,
        description: Optional[str] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        builder = (
            self.command(vmx_path, "Take")
            .add_flag("-n", native)
            .add_flag("-m", memory)
            .add_flag("-d", description)
            .add(name)
        )
        self.execute(builder, cancel_event)

    def revert(
        self,
        vmx_path: str,
        uid: str,
        native: bool = False,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self.execute(self.command(vmx_path, "Revert").add_flag("-n", native).add(uid), cancel_event)

    def delete(
        self,
        vmx_path: str,
        uid: str,
        delete_children: bool = False,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self.execute(self.command(vmx_path, "Delete").add_flag("-d", delete_children).add(uid), cancel_event)

    def clone(
        self,
        vmx_path: str,
        uid: str,
        file_path: str,
        name: str,
        overwrite: bool = False,
        linked: bool = False,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        """Clone the VM at snapshot uid into a new VM at file_path."""
        builder = (
            self.command(vmx_path, "Clone")
            .add_flag("-o", overwrite)
            .add_flag("-l", linked)
            .add(uid, file_path, name)
        )
        self.execute(builder, cancel_event)
