"""Shared fixtures: stub executables standing in for vmcli."""

import sys
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from vmcli.config import Settings
from vmcli.exec import VmcliExecutor
from vmcli.locator import VmcliLocator


@pytest.fixture
def make_stub(tmp_path) -> Callable[..., Path]:
    """
    Create an executable Python script that plays the part of vmcli.

    The body is plain Python with `sys` already imported.
    """
    if sys.platform == "win32":
        pytest.skip("stub executables rely on a shebang line")

    def _make(body: str, name: str = "vmcli") -> Path:
        path = tmp_path / name
        path.write_text(f"#!{sys.executable}\nimport sys\n{textwrap.dedent(body)}")
        path.chmod(0o755)
        return path

    return _make


@pytest.fixture
def executor_for() -> Callable[[Path], VmcliExecutor]:
    """Build an executor whose locator points at the given stub."""

    def _executor(stub: Path) -> VmcliExecutor:
        return VmcliExecutor(VmcliLocator(Settings(vmcli_path=str(stub))))

    return _executor
