"""Tests for vmcli path resolution."""

from pathlib import Path

import pytest

from vmcli.config import Settings
from vmcli.exceptions import ExecutableNotConfigured
from vmcli.locator import VmcliLocator, default_vmcli_path


class TestDefaultPath:
    """Test the platform default."""

    def test_windows_default_uses_program_files_x86(self):
        path = default_vmcli_path("win32", {"ProgramFiles(x86)": r"D:\Apps"})

        assert str(path) == r"D:\Apps\VMware\VMware Workstation\vmcli.exe"

    def test_windows_default_without_environment(self):
        path = default_vmcli_path("win32", {})

        assert str(path) == r"C:\Program Files (x86)\VMware\VMware Workstation\vmcli.exe"

    @pytest.mark.parametrize("platform", ["linux", "darwin", "freebsd13"])
    def test_no_default_elsewhere(self, platform):
        assert default_vmcli_path(platform, {}) is None


class TestVmcliLocator:
    """Test configured path precedence."""

    def test_configured_path_wins(self):
        locator = VmcliLocator(Settings(vmcli_path="/opt/vmcli"), platform="win32")

        assert locator.get_vmcli_path() == Path("/opt/vmcli")

    def test_blank_configured_path_falls_back_to_default(self):
        locator = VmcliLocator(Settings(vmcli_path="   "), platform="win32", environ={})

        assert str(locator.get_vmcli_path()).endswith(r"VMware Workstation\vmcli.exe")

    def test_not_configured_on_other_platforms(self):
        locator = VmcliLocator(Settings(), platform="linux")

        with pytest.raises(ExecutableNotConfigured):
            locator.get_vmcli_path()

    def test_settings_changes_seen_on_next_lookup(self):
        settings = Settings()
        locator = VmcliLocator(settings, platform="linux")

        with pytest.raises(ExecutableNotConfigured):
            locator.get_vmcli_path()

        settings.vmcli_path = "/usr/local/bin/vmcli"
        assert locator.get_vmcli_path() == Path("/usr/local/bin/vmcli")
