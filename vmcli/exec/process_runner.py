"""
Process runner owning one child process for the lifetime of one invocation.

stdout and stderr are drained on dedicated reader threads so a chatty child
can never fill a pipe and stall while the caller waits for it to exit.
"""

import io
import logging
import subprocess
import threading
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Union

from ..exceptions import InvocationCancelled, ProcessStartError


logger = logging.getLogger(__name__)

LineCallback = Callable[[str], None]


class ProcessRunner:
    """
    Launches a child process with redirected streams and relays its output lines.

    The process starts as soon as the runner is constructed. stdin is always a
    pipe so input can be sent later; stdout and stderr are only piped when a
    line callback is supplied for them, otherwise the child inherits ours.
    """

    # How often blocking waits wake up to look at the cancel event
    POLL_INTERVAL_SEC = 0.05

    def __init__(
        self,
        executable: Union[str, Path],
        arguments: Sequence[str],
        output_received: Optional[LineCallback] = None,
        error_received: Optional[LineCallback] = None,
        input_encoding: Optional[str] = None,
        output_encoding: Optional[str] = None,
        error_encoding: Optional[str] = None,
        terminate_on_close: bool = False,
    ):
        """
        Start the child process.

        Args:
            executable: Path of the program to run
            arguments: Ordered argument vector (without the executable)
            output_received: Called with each stdout line, terminator removed
            error_received: Called with each stderr line, terminator removed
            input_encoding: Text encoding for stdin (default: locale encoding)
            output_encoding: Text encoding for stdout (default: locale encoding)
            error_encoding: Text encoding for stderr (default: locale encoding)
            terminate_on_close: Kill the child on close() if it is still running

        Raises:
            ProcessStartError: If the operating system cannot spawn the process
        """
        self.executable = str(executable)
        self.arguments = [str(arg) for arg in arguments]
        self.terminate_on_close = terminate_on_close
        self._closed = False
        self._reader_errors: Dict[str, Exception] = {}
        self._output_streams: List[io.TextIOWrapper] = []

        try:
            self._process = subprocess.Popen(
                [self.executable, *self.arguments],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE if output_received else None,
                stderr=subprocess.PIPE if error_received else None,
                # Keeps Windows from flashing a console window per call
                creationflags=getattr(subprocess, "CREATE_NO_WINDOW", 0),
            )
        except (OSError, ValueError) as e:
            raise ProcessStartError(self.executable, str(e)) from e

        logger.debug(f"Started pid {self._process.pid}: {self.executable} {' '.join(self.arguments)}")

        self._stdin = io.TextIOWrapper(self._process.stdin, encoding=input_encoding)

        self._stdout_thread = self._start_reader(
            "stdout", self._process.stdout, output_received, output_encoding
        )
        self._stderr_thread = self._start_reader(
            "stderr", self._process.stderr, error_received, error_encoding
        )

    @property
    def pid(self) -> int:
        return self._process.pid

    @property
    def is_running(self) -> bool:
        """Whether the OS process has not exited yet. Not synchronized with the readers."""
        return self._process.poll() is None

    def _start_reader(
        self,
        name: str,
        pipe: Optional[io.BufferedReader],
        callback: Optional[LineCallback],
        encoding: Optional[str],
    ) -> Optional[threading.Thread]:
        if callback is None or pipe is None:
            return None

        stream = io.TextIOWrapper(pipe, encoding=encoding, errors="replace")
        self._output_streams.append(stream)

        thread = threading.Thread(
            target=self._read_stream,
            args=(name, stream, callback),
            name=f"vmcli-{name}-{self._process.pid}",
            daemon=True,
        )
        thread.start()
        return thread

    def _read_stream(self, name: str, stream: io.TextIOWrapper, callback: LineCallback) -> None:
        """Read lines until EOF, handing each one to the callback before reading the next."""
        with stream:
            try:
                for line in iter(stream.readline, ""):
                    if line.endswith("\n"):
                        line = line[:-1]
                    callback(line)
            except Exception as e:
                # Re-raised on the waiting thread by wait_for_exit()
                self._reader_errors[name] = e
                logger.debug(f"{name} callback failed for pid {self.pid}, discarding remaining output: {e}")
                # Keep the pipe empty so the child can still run to completion
                for _ in iter(stream.readline, ""):
                    pass

    def send_input(self, text: str) -> None:
        """
        Write a line to the child's stdin and flush it.

        Does nothing once stdin is closed or the child has closed its end.
        """
        if self._stdin.closed:
            return

        try:
            self._stdin.write(text + "\n")
            self._stdin.flush()
        except OSError as e:
            # BrokenPipeError on POSIX, EINVAL on Windows
            logger.debug(f"stdin of pid {self.pid} is no longer writable: {e}")
            self.close_input()

    def close_input(self) -> None:
        """Close the child's stdin so it sees end-of-file."""
        if self._stdin.closed:
            return

        try:
            self._stdin.close()
        except OSError as e:
            # The pipe is gone either way; close() still marks it closed
            logger.debug(f"Error closing stdin of pid {self.pid}: {e}")

    def wait_for_exit(self, cancel_event: Optional[threading.Event] = None) -> int:
        """
        Wait for both readers to drain and for the process to exit.

        The exit code is read only after the stdout and stderr readers have
        reached end-of-file, so no output written just before exit is lost.

        Args:
            cancel_event: When set, stop waiting and raise InvocationCancelled

        Returns:
            Process exit code

        Raises:
            InvocationCancelled: If cancel_event is set before completion
            Exception: Whatever a line callback raised
        """
        for name, thread in (("stdout", self._stdout_thread), ("stderr", self._stderr_thread)):
            if thread is None:
                continue
            self._join(thread, cancel_event)
            error = self._reader_errors.get(name)
            if error is not None:
                raise error

        if cancel_event is None:
            return self._process.wait()

        while True:
            self._check_cancelled(cancel_event)
            try:
                return self._process.wait(timeout=self.POLL_INTERVAL_SEC)
            except subprocess.TimeoutExpired:
                continue

    def _join(self, thread: threading.Thread, cancel_event: Optional[threading.Event]) -> None:
        if cancel_event is None:
            thread.join()
            return

        while thread.is_alive():
            self._check_cancelled(cancel_event)
            thread.join(self.POLL_INTERVAL_SEC)

    def _check_cancelled(self, cancel_event: threading.Event) -> None:
        if cancel_event.is_set():
            logger.debug(f"Cancelled while waiting on pid {self.pid}")
            raise InvocationCancelled(self.arguments)

    def close(self) -> None:
        """
        Release the pipes held for the child.

        The child is left running unless terminate_on_close was requested.
        Output streams whose reader is still active are left to that reader,
        which closes them when it reaches end-of-file.
        """
        if self._closed:
            return
        self._closed = True

        if self.terminate_on_close and self.is_running:
            logger.debug(f"Terminating pid {self.pid} on close")
            self._process.kill()
            self._process.wait()

        self.close_input()

        readers = [t for t in (self._stdout_thread, self._stderr_thread) if t is not None]
        for stream, thread in zip(self._output_streams, readers):
            if not thread.is_alive():
                stream.close()

    def __enter__(self) -> "ProcessRunner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
