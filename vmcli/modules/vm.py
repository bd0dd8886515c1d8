"""VM and VMTemplate modules: create and deploy virtual machines."""

import threading
from pathlib import Path
from typing import Optional, Union

from .base import VmcliModule
from .. import guest_os_types


class VmModule(VmcliModule):
    module_name = "VM"

    def create(
        self,
        directory: Union[str, Path],
        name: str,
        guest_os_type: Optional[str] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Path:
        """
        Create a new virtual machine.

        Args:
            directory: Directory the VM files are written to
            name: VM name, also the .vmx file name
            guest_os_type: One of vmcli.guest_os_types (default: OTHER_64)

        Returns:
            Path of the created .vmx file
        """
        if not guest_os_type or not guest_os_type.strip():
            guest_os_type = guest_os_types.OTHER_64

        builder = self.command(
            None, "Create",
            "--name", name,
            "--dirpath", str(directory),
            "--custom-guesttype", guest_os_type,
        )
        self.execute(builder, cancel_event)
        return Path(directory) / f"{name}.vmx"


class VmTemplateModule(VmcliModule):
    module_name = "VMTemplate"

    def deploy(self, vmtx_path: str, cancel_event: Optional[threading.Event] = None) -> None:
        """Deploy a VM from a .vmtx template."""
        self.execute(self.command(None, "Deploy", "--path", vmtx_path), cancel_event)
