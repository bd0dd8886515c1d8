"""
Base class for vmcli module wrappers.

A module is a named sub-command group of vmcli ("Power", "Disk", ...). The
wrappers only build argument vectors; running them is the executor's job.
"""

import json
import logging
import threading
from typing import Any, List, Optional, Sequence, Union

from .command import CommandBuilder
from ..exec.executor import VmcliExecutor


logger = logging.getLogger(__name__)

Arguments = Union[CommandBuilder, Sequence[str]]


class VmcliModule:
    """
    Common behavior for all module wrappers.

    Subclasses set module_name and add one method per vmcli operation.
    Every method accepts an optional cancel_event that is passed on to the
    executor.
    """

    module_name = ""

    def __init__(self, executor: VmcliExecutor):
        self.executor = executor

    def command(self, target: Optional[str] = None, *tokens: Any) -> CommandBuilder:
        """Start an argument vector: [target] module tokens..."""
        builder = CommandBuilder()
        if target is not None:
            builder.add(target)
        if self.module_name:
            builder.add(self.module_name)
        return builder.add(*tokens)

    def execute(self, arguments: Arguments, cancel_event: Optional[threading.Event] = None) -> str:
        """Run an argument vector and return vmcli's stdout."""
        argv: List[str] = arguments.build() if isinstance(arguments, CommandBuilder) else list(arguments)
        output = self.executor.execute(argv, cancel_event)
        logger.debug(output)
        return output

    def execute_json(self, arguments: Arguments, cancel_event: Optional[threading.Event] = None) -> Any:
        """Run an argument vector and parse stdout as JSON."""
        return json.loads(self.execute(arguments, cancel_event))

    def _run(self, target: str, *tokens: Any, cancel_event: Optional[threading.Event] = None) -> None:
        self.execute(self.command(target, *tokens), cancel_event)

    def _query(
        self,
        target: str,
        *tokens: Any,
        verb: str = "query",
        cancel_event: Optional[threading.Event] = None,
    ) -> Any:
        return self.execute_json(self.command(target, verb, *tokens).json_format(), cancel_event)

    def get_version(self, cancel_event: Optional[threading.Event] = None) -> str:
        """Return the output of `vmcli --version`."""
        return self.execute(["--version"], cancel_event)

    def get_module_help(self, cancel_event: Optional[threading.Event] = None) -> str:
        """Return the help text of this module (or of vmcli itself for the root module)."""
        return self.execute(self.command(None, "--help"), cancel_event)


class RootModule(VmcliModule):
    """vmcli itself, without a module: version and top-level help."""

    module_name = ""
