"""
Execution gateway for vmcli invocations.

Every module wrapper ends up here: an argument vector goes in, and either the
captured stdout text comes out or a CommandFailed is raised.
"""

import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .output_collector import OutputCollector
from .process_runner import ProcessRunner
from ..exceptions import CommandFailed
from ..locator import VmcliLocator


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessExecutionResult:
    """Captured result of one vmcli process."""
    output: str
    error: str
    exit_code: int


class VmcliExecutor:
    """
    Runs vmcli and translates its result into text or a typed error.

    Each call spawns a fresh process with fresh collectors, so one executor
    can be shared by any number of callers and threads.
    """

    def __init__(self, locator: VmcliLocator, encoding: Optional[str] = None):
        """
        Initialize executor.

        Args:
            locator: Resolves the vmcli executable path on every call
            encoding: Text encoding of vmcli's streams (default: locale encoding)
        """
        self.locator = locator
        self.encoding = encoding

    def run(
        self,
        arguments: Sequence[str],
        cancel_event: Optional[threading.Event] = None,
    ) -> ProcessExecutionResult:
        """
        Run vmcli and collect both output streams.

        Args:
            arguments: Argument vector passed to vmcli as-is
            cancel_event: Optional event that aborts the wait when set

        Returns:
            ProcessExecutionResult with the joined stdout and stderr text

        Raises:
            ExecutableNotConfigured: If the vmcli path cannot be resolved
            ProcessStartError: If the process cannot be spawned
            InvocationCancelled: If cancel_event is set before vmcli exits
        """
        executable = self.locator.get_vmcli_path()
        arguments = list(arguments)

        logger.debug(f"Executing vmcli: {executable} {' '.join(arguments)}")

        with OutputCollector() as output_collector, OutputCollector() as error_collector:
            with ProcessRunner(
                executable,
                arguments,
                output_received=output_collector.receive,
                error_received=error_collector.receive,
                output_encoding=self.encoding,
                error_encoding=self.encoding,
            ) as runner:
                exit_code = runner.wait_for_exit(cancel_event)

            return ProcessExecutionResult(
                output=output_collector.finalize(),
                error=error_collector.finalize(),
                exit_code=exit_code,
            )

    def execute(
        self,
        arguments: Sequence[str],
        cancel_event: Optional[threading.Event] = None,
    ) -> str:
        """
        Run vmcli and return its stdout.

        Text on stderr alone is not a failure; it is logged as a warning.

        Raises:
            CommandFailed: If vmcli exits with a non-zero exit code
        """
        arguments = list(arguments)
        result = self.run(arguments, cancel_event)

        if result.error.strip():
            logger.warning(result.error.rstrip())

        if result.exit_code != 0:
            raise CommandFailed(result.exit_code, arguments, result.output, result.error)

        return result.output

    def execute_json(
        self,
        arguments: Sequence[str],
        cancel_event: Optional[threading.Event] = None,
    ) -> Any:
        """Run vmcli and parse its stdout as a single JSON document."""
        return json.loads(self.execute(arguments, cancel_event))
