"""
Execution module for the vmcli client.
Handles process launch, stream draining, and result translation.
"""

from .output_collector import OutputCollector
from .process_runner import ProcessRunner
from .executor import VmcliExecutor, ProcessExecutionResult

__all__ = [
    "OutputCollector",
    "ProcessRunner",
    "VmcliExecutor",
    "ProcessExecutionResult",
]
