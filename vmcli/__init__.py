"""Typed Python client for the VMware vmcli command-line utility."""

from .client import VmcliClient
from .config import Settings, load_settings
from .exceptions import (
    VmcliError,
    ConfigurationError,
    ExecutableNotConfigured,
    ProcessStartError,
    CommandFailed,
    InvocationCancelled,
)
from .exec import VmcliExecutor, ProcessExecutionResult
from .locator import VmcliLocator, default_vmcli_path

__version__ = "0.1.0"

__all__ = [
    "VmcliClient",
    "Settings",
    "load_settings",
    "VmcliError",
    "ConfigurationError",
    "ExecutableNotConfigured",
    "ProcessStartError",
    "CommandFailed",
    "InvocationCancelled",
    "VmcliExecutor",
    "ProcessExecutionResult",
    "VmcliLocator",
    "default_vmcli_path",
]
