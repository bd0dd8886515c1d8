"""Locates the vmcli executable from settings or the platform default."""

import os
import sys
from pathlib import Path, PureWindowsPath
from typing import Mapping, Optional, Union

from vmcli.config import Settings
from vmcli.exceptions import ExecutableNotConfigured


WINDOWS_PROGRAM_FILES_X86 = r"C:\Program Files (x86)"


def default_vmcli_path(
    platform: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[Union[Path, PureWindowsPath]]:
    """
    Return where VMware Workstation installs vmcli on this platform, if known.

    Evaluated on every call from the given (or current) platform; only
    Windows has a default location.
    """
    platform = platform or sys.platform
    if platform != "win32":
        return None

    env = os.environ if environ is None else environ
    program_files = env.get("ProgramFiles(x86)") or WINDOWS_PROGRAM_FILES_X86
    path = PureWindowsPath(program_files, "VMware", "VMware Workstation", "vmcli.exe")
    return Path(path) if sys.platform == "win32" else path


class VmcliLocator:
    """Resolves the vmcli executable path for each invocation."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        platform: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.settings = settings or Settings()
        self.platform = platform
        self.environ = environ

    def get_vmcli_path(self) -> Union[Path, PureWindowsPath]:
        """
        Get the vmcli executable path.

        Raises:
            ExecutableNotConfigured: If no path is configured and the platform has no default
        """
        configured = self.settings.vmcli_path
        if configured and configured.strip():
            return Path(configured)

        default = default_vmcli_path(self.platform, self.environ)
        if default is not None:
            return default

        raise ExecutableNotConfigured()
