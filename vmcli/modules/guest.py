"""
Guest module: file and process operations inside a running guest.

All operations except query and tools_properties authenticate against the
guest with a username and password, passed to vmcli as -u/-p.
"""

import threading
from typing import Any, Optional

from .base import VmcliModule
from .command import CommandBuilder

Cancel = Optional[threading.Event]


class GuestModule(VmcliModule):
    module_name = "Guest"

    def _guest_command(self, vmx_path: str, verb: str, username: str, password: str) -> CommandBuilder:
        return self.command(vmx_path, verb, "-u", username, "-p", password)

    def query(self, vmx_path: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, verb="Query", cancel_event=cancel_event)

    def tools_properties(self, vmx_path: str, cancel_event: Cancel = None) -> str:
        return self.execute(self.command(vmx_path, "toolsproperties"), cancel_event)

    def env(self, vmx_path: str, username: str, password: str, cancel_event: Cancel = None) -> str:
        """Return the guest's environment as printed by vmcli."""
        return self.execute(self._guest_command(vmx_path, "env", username, password), cancel_event)

    def copy_from(
        self,
        vmx_path: str,
        username: str,
        password: str,
        from_path: str,
        to_path: str,
        overwrite: bool = False,
        cancel_event: Cancel = None,
    ) -> None:
        """Copy a file from the guest to the host."""
        builder = self._guest_command(vmx_path, "copyFrom", username, password).add_flag("-o", overwrite)
        self.execute(builder.add(from_path, to_path), cancel_event)

    def copy_to(
        self,
        vmx_path: str,
        username: str,
        password: str,
        from_path: str,
        to_path: str,
        overwrite: bool = False,
        cancel_event: Cancel = None,
    ) -> None:
        """Copy a file from the host into the guest."""
        builder = self._guest_command(vmx_path, "copyTo", username, password).add_flag("-o", overwrite)
        self.execute(builder.add(from_path, to_path), cancel_event)

    def create_temp_dir(
        self,
        vmx_path: str,
        username: str,
        password: str,
        prefix: str,
        suffix: str,
        directory: str,
        cancel_event: Cancel = None,
    ) -> str:
        builder = self._guest_command(vmx_path, "createTempDir", username, password).add(prefix, suffix, directory)
        return self.execute(builder, cancel_event)

    def create_temp_file(
        self,
        vmx_path: str,
        username: str,
        password: str,
        prefix: str,
        suffix: str,
        directory: str,
        cancel_event: Cancel = None,
    ) -> str:
        builder = self._guest_command(vmx_path, "createTempFile", username, password).add(prefix, suffix, directory)
        return self.execute(builder, cancel_event)

    def kill(self, vmx_path: str, username: str, password: str, pid: int, cancel_event: Cancel = None) -> None:
        self.execute(self._guest_command(vmx_path, "kill", username, password).add(pid), cancel_event)

    def ls(
        self,
        vmx_path: str,
        username: str,
        password: str,
        path: str,
        regexp: Optional[str] = None,
        index: Optional[int] = None,
        max_results: Optional[int] = None,
        seen: Optional[int] = None,
        cancel_event: Cancel = None,
    ) -> str:
        builder = (
            self._guest_command(vmx_path, "ls", username, password)
            .add_flag("-r", regexp)
            .add_flag("-i", index)
            .add_flag("-m", max_results)
            .add_flag("-s", seen)
            .add(path)
        )
        return self.execute(builder, cancel_event)

    def mkdir(
        self,
        vmx_path: str,
        username: str,
        password: str,
        path: str,
        create_parents: bool = False,
        cancel_event: Cancel = None,
    ) -> None:
        builder = self._guest_command(vmx_path, "mkdir", username, password).add_flag("--parent", create_parents)
        self.execute(builder.add(path), cancel_event)

    def mv(
        self,
        vmx_path: str,
        username: str,
        password: str,
        from_path: str,
        to_path: str,
        overwrite: bool = False,
        cancel_event: Cancel = None,
    ) -> None:
        builder = self._guest_command(vmx_path, "mv", username, password).add_flag("-o", overwrite)
        self.execute(builder.add(from_path, to_path), cancel_event)

    def mv_dir(
        self,
        vmx_path: str,
        username: str,
        password: str,
        from_path: str,
        to_path: str,
        overwrite: bool = False,
        cancel_event: Cancel = None,
    ) -> None:
        builder = self._guest_command(vmx_path, "mvdir", username, password).add_flag("-o", overwrite)
        self.execute(builder.add(from_path, to_path), cancel_event)

    def ps(
        self,
        vmx_path: str,
        username: str,
        password: str,
        pid: Optional[str] = None,
        cancel_event: Cancel = None,
    ) -> Any:
        """List guest processes, or only pid, as a JSON document."""
        builder = self._guest_command(vmx_path, "ps", username, password).add_flag("--pid", pid).json_format()
        return self.execute_json(builder, cancel_event)

    def rm(self, vmx_path: str, username: str, password: str, path: str, cancel_event: Cancel = None) -> None:
        self.execute(self._guest_command(vmx_path, "rm", username, password).add(path), cancel_event)

    def rm_dir(
        self,
        vmx_path: str,
        username: str,
        password: str,
        path: str,
        recursive: bool = False,
        cancel_event: Cancel = None,
    ) -> None:
        builder = self._guest_command(vmx_path, "rmdir", username, password).add_flag("-r", recursive)
        self.execute(builder.add(path), cancel_event)

    def run(
        self,
        vmx_path: str,
        username: str,
        password: str,
        program: str,
        program_args: Optional[str] = None,
        activate_window: bool = False,
        no_wait: bool = False,
        interactive: bool = False,
        working_directory: Optional[str] = None,
        environment: Optional[str] = None,
        cancel_event: Cancel = None,
    ) -> str:
        """
        Run a program in the guest.

        Args:
            program: Path of the program inside the guest
            program_args: Arguments for the program, passed as one token
            activate_window: Bring the program's window to the front (-aw)
            no_wait: Return without waiting for the program (-nw)
            interactive: Run in the interactive user session (-i)
            working_directory: Working directory inside the guest (-w)
            environment: Environment assignments for the program (-e)

        Returns:
            vmcli's stdout
        """
        builder = (
            self._guest_command(vmx_path, "run", username, password)
            .add_flag("-aw", activate_window)
            .add_flag("-nw", no_wait)
            .add_flag("-i", interactive)
            .add_flag("-w", working_directory)
            .add_flag("-e", environment)
            .add(program)
        )
        if program_args and program_args.strip():
            builder.add(program_args)
        return self.execute(builder, cancel_event)
