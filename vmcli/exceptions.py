"""vmcli client exceptions."""

from typing import Iterable, Optional


class VmcliError(Exception):
    """Base class for all errors raised by the vmcli client."""


class ConfigurationError(VmcliError):
    """Raised when a settings file cannot be read or has the wrong shape."""


class ExecutableNotConfigured(VmcliError, FileNotFoundError):
    """Raised when the vmcli path is neither configured nor known for this platform."""

    def __init__(self, message: str = "Vmcli path was not specified."):
        super().__init__(message)


class ProcessStartError(VmcliError):
    """Raised when the operating system fails to spawn the child process."""

    def __init__(self, executable: str, reason: Optional[str] = None):
        self.executable = executable
        message = f"Cannot start the process '{executable}'."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class InvocationCancelled(VmcliError):
    """Raised when an invocation is cancelled while waiting on the child process.

    This is never a CommandFailed: the tool did not report anything.
    """

    def __init__(self, arguments: Iterable[str] = ()):
        self.arguments = tuple(arguments)
        super().__init__("vmcli invocation was cancelled.")


class CommandFailed(VmcliError):
    """Raised when vmcli exits with a non-zero exit code.

    Carries everything needed to reproduce the call by hand: the exit code,
    the argument vector in order, and both captured streams.
    """

    def __init__(
        self,
        exit_code: int,
        arguments: Iterable[str],
        output: Optional[str] = None,
        error: Optional[str] = None,
    ):
        self.exit_code = exit_code
        self.arguments = tuple(arguments)
        self.output = output
        self.error = error

        super().__init__(self.compose_message(exit_code, self.arguments, error))

    @staticmethod
    def compose_message(exit_code: int, arguments: Iterable[str], error: Optional[str]) -> str:
        """Build the human readable message for a failed invocation."""
        refined = (error or "").replace("\r", "").replace("\n", "").strip().rstrip(".")

        fragments = []
        if not refined:
            fragments.append("vmcli returned a non-zero exit code without any error text.")
        else:
            fragments.append(f"vmcli returned one or more errors: {refined}.")
        fragments.append(f"(Arguments: {' '.join(arguments)}, Exit code: {exit_code})")

        return " ".join(fragments)
