"""
Tests for the module wrappers.
The executor is mocked; each test checks the exact argument vector built.
"""

import threading
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from vmcli import guest_os_types
from vmcli.client import VmcliClient
from vmcli.config import Settings
from vmcli.exec import VmcliExecutor
from vmcli.models import VirtualDiskAdapterType, VirtualDiskType, VmResetOpType
from vmcli.modules import (
    ChipsetModule,
    ConfigParamsModule,
    DiskModule,
    EthernetModule,
    GuestModule,
    HgfsModule,
    MksModule,
    NvmeModule,
    PowerModule,
    RootModule,
    SataModule,
    SerialModule,
    SnapshotModule,
    ToolsModule,
    VmModule,
    VmTemplateModule,
    VProbesModule,
)


@pytest.fixture
def executor():
    mock = MagicMock(spec=VmcliExecutor)
    mock.execute.return_value = ""
    return mock


class TestPowerModule:
    """Test Power argument vectors."""

    def test_start_plain(self, executor):
        PowerModule(executor).start("vm.vmx")

        executor.execute.assert_called_once_with(["vm.vmx", "Power", "Start"], None)

    def test_start_with_flags(self, executor):
        PowerModule(executor).start("vm.vmx", paused=True, soft=True)

        executor.execute.assert_called_once_with(["vm.vmx", "Power", "Start", "-p", "-s"], None)

    def test_stop_defaults_to_try_soft(self, executor):
        PowerModule(executor).stop("vm.vmx")

        executor.execute.assert_called_once_with(["vm.vmx", "Power", "Stop", "-o", "trySoft"], None)

    def test_stop_for_revert_with_snapshot(self, executor):
        PowerModule(executor).stop("vm.vmx", VmResetOpType.HARD, for_revert=True, snapshot_id=0)

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Power", "Stop", "-o", "hard", "-r", "-si", "0"], None
        )

    def test_stop_accepts_plain_string_op_type(self, executor):
        PowerModule(executor).suspend("vm.vmx", "requireSoft")

        executor.execute.assert_called_once_with(["vm.vmx", "Power", "Suspend", "-o", "requireSoft"], None)

    def test_query_parses_json(self, executor):
        executor.execute.return_value = '{"PowerState": "off"}'

        document = PowerModule(executor).query("vm.vmx")

        assert document == {"PowerState": "off"}
        executor.execute.assert_called_once_with(["vm.vmx", "Power", "query", "--format", "json"], None)

    def test_cancel_event_is_forwarded(self, executor):
        cancel = threading.Event()

        PowerModule(executor).pause("vm.vmx", cancel_event=cancel)

        executor.execute.assert_called_once_with(["vm.vmx", "Power", "Pause"], cancel)


class TestSnapshotModule:
    """Test Snapshot argument vectors."""

    def test_take_with_memory_and_description(self, executor):
        SnapshotModule(executor).take("vm.vmx", "nightly", memory=True, description="before upgrade")

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Snapshot", "Take", "-m", "-d", "before upgrade", "nightly"], None
        )

    def test_revert_native(self, executor):
        SnapshotModule(executor).revert("vm.vmx", "3", native=True)

        executor.execute.assert_called_once_with(["vm.vmx", "Snapshot", "Revert", "-n", "3"], None)

    def test_delete_with_children(self, executor):
        SnapshotModule(executor).delete("vm.vmx", "3", delete_children=True)

        executor.execute.assert_called_once_with(["vm.vmx", "Snapshot", "Delete", "-d", "3"], None)

    def test_linked_clone(self, executor):
        SnapshotModule(executor).clone("vm.vmx", "3", "/vms/copy/copy.vmx", "copy", linked=True)

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Snapshot", "Clone", "-l", "3", "/vms/copy/copy.vmx", "copy"], None
        )


class TestGuestModule:
    """Test Guest argument vectors."""

    def test_credentials_precede_operands(self, executor):
        GuestModule(executor).copy_to("vm.vmx", "admin", "s3cret", "a.txt", "C:/a.txt", overwrite=True)

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Guest", "copyTo", "-u", "admin", "-p", "s3cret", "-o", "a.txt", "C:/a.txt"], None
        )

    def test_rm_dir_includes_path(self, executor):
        GuestModule(executor).rm_dir("vm.vmx", "admin", "pw", "/tmp/work", recursive=True)

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Guest", "rmdir", "-u", "admin", "-p", "pw", "-r", "/tmp/work"], None
        )

    def test_ps_returns_json(self, executor):
        executor.execute.return_value = '[{"pid": 4}]'

        processes = GuestModule(executor).ps("vm.vmx", "admin", "pw", pid="4")

        assert processes == [{"pid": 4}]
        executor.execute.assert_called_once_with(
            ["vm.vmx", "Guest", "ps", "-u", "admin", "-p", "pw", "--pid", "4", "--format", "json"], None
        )

    def test_run_skips_blank_program_args(self, executor):
        executor.execute.return_value = "ok\n"

        output = GuestModule(executor).run("vm.vmx", "admin", "pw", "/bin/true", program_args="  ", no_wait=True)

        assert output == "ok\n"
        executor.execute.assert_called_once_with(
            ["vm.vmx", "Guest", "run", "-u", "admin", "-p", "pw", "-nw", "/bin/true"], None
        )

    def test_ls_options(self, executor):
        GuestModule(executor).ls("vm.vmx", "u", "p", "/etc", regexp=".*conf", max_results=10)

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Guest", "ls", "-u", "u", "-p", "p", "-r", ".*conf", "-m", "10", "/etc"], None
        )

    def test_query_uses_capitalized_verb(self, executor):
        executor.execute.return_value = "{}"

        GuestModule(executor).query("vm.vmx")

        executor.execute.assert_called_once_with(["vm.vmx", "Guest", "Query", "--format", "json"], None)


class TestDiskModule:
    """Test Disk argument vectors and created-file discovery."""

    def test_create_returns_matching_vmdk_files(self, executor, tmp_path):
        disk = tmp_path / "data.vmdk"

        def create_files(arguments, cancel_event):
            for name in ("data.vmdk", "data-s001.vmdk", "data-s002.vmdk", "other.vmdk"):
                (tmp_path / name).write_text("")
            return ""

        executor.execute.side_effect = create_files

        files = DiskModule(executor).create(
            disk, VirtualDiskAdapterType.LSILOGIC, "20GB", VirtualDiskType.SPLIT_GROWABLE
        )

        assert files == [tmp_path / "data-s001.vmdk", tmp_path / "data-s002.vmdk", tmp_path / "data.vmdk"]
        executor.execute.assert_called_once_with(
            ["Disk", "create", "--filepath", str(disk), "--adapter", "lsilogic",
             "--size", "20GB", "--type", "1"],
            None,
        )

    def test_create_bare_file_name(self, executor):
        files = DiskModule(executor).create("disk.vmdk", "ide", "1GB")

        assert files == [Path("disk.vmdk")]
        assert executor.execute.call_args[0][0][-2:] == ["--type", "0"]

    def test_extend_keeps_vmcli_verb(self, executor):
        DiskModule(executor).extend("vm.vmx", "sata0:1", 4194304)

        executor.execute.assert_called_once_with(["vm.vmx", "Disk", "Extended", "sata0:1", "4194304"], None)

    def test_is_present(self, executor):
        executor.execute.return_value = "true"

        assert DiskModule(executor).is_present("vm.vmx", "sata0:1") is True
        executor.execute.assert_called_once_with(
            ["vm.vmx", "Disk", "IsPresent", "sata0:1", "--format", "json"], None
        )


class TestVmModules:
    """Test VM and VMTemplate argument vectors."""

    def test_create_returns_vmx_path(self, executor, tmp_path):
        vmx = VmModule(executor).create(tmp_path, "build", guest_os_types.UBUNTU_LINUX_64)

        assert vmx == tmp_path / "build.vmx"
        executor.execute.assert_called_once_with(
            ["VM", "Create", "--name", "build", "--dirpath", str(tmp_path),
             "--custom-guesttype", "ubuntu-64"],
            None,
        )

    @pytest.mark.parametrize("guest_os_type", [None, "", "  "])
    def test_create_defaults_guest_type(self, executor, guest_os_type):
        VmModule(executor).create("/vms", "x", guest_os_type)

        assert executor.execute.call_args[0][0][-1] == "other-64"

    def test_deploy(self, executor):
        VmTemplateModule(executor).deploy("/vms/base.vmtx")

        executor.execute.assert_called_once_with(["VMTemplate", "Deploy", "--path", "/vms/base.vmtx"], None)


class TestEthernetModule:
    """Test Ethernet argument vectors."""

    def test_query(self, executor):
        executor.execute.return_value = '{"ethernet0": {}}'

        assert EthernetModule(executor).query("vm.vmx") == {"ethernet0": {}}
        executor.execute.assert_called_once_with(["vm.vmx", "Ethernet", "query", "--format", "json"], None)

    def test_move_uses_move_device_verb(self, executor):
        EthernetModule(executor).move("vm.vmx", "ethernet0", "ethernet1")

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Ethernet", "MoveDevice", "ethernet0", "ethernet1"], None
        )

    def test_set_connection_type(self, executor):
        EthernetModule(executor).set_connection_type("vm.vmx", "ethernet0", "nat")

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Ethernet", "SetConnectionType", "ethernet0", "nat"], None
        )

    def test_set_custom_type_backing(self, executor):
        EthernetModule(executor).set_custom_type_backing("vm.vmx", "ethernet0", "vmnet8", "en0", "NAT")

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Ethernet", "SetCustomTypeBacking", "ethernet0", "vmnet8", "en0", "NAT"], None
        )

    def test_set_dvs_type_backing(self, executor):
        EthernetModule(executor).set_dvs_type_backing("vm.vmx", "ethernet0", "sw-1", "p-2", "pg-3", "c-4")

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Ethernet", "SetDvsTypeBacking", "ethernet0", "sw-1", "p-2", "pg-3", "c-4"], None
        )

    def test_wake_on_packet_receive_verb(self, executor):
        EthernetModule(executor).set_wake_on_packet_receive("vm.vmx", "ethernet0", "true")

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Ethernet", "SetWakeOnPcktRcv", "ethernet0", "true"], None
        )


class TestHgfsModule:
    """Test HGFS argument vectors."""

    def test_query(self, executor):
        executor.execute.return_value = "{}"

        HgfsModule(executor).query("vm.vmx")

        executor.execute.assert_called_once_with(["vm.vmx", "HGFS", "query", "--format", "json"], None)

    def test_set_host_path(self, executor):
        HgfsModule(executor).set_host_path("vm.vmx", "sharedFolder0", "/srv/share")

        executor.execute.assert_called_once_with(
            ["vm.vmx", "HGFS", "SetHostPath", "sharedFolder0", "/srv/share"], None
        )


class TestSerialModule:
    """Test Serial argument vectors."""

    def test_query(self, executor):
        executor.execute.return_value = "{}"

        SerialModule(executor).query("vm.vmx")

        executor.execute.assert_called_once_with(["vm.vmx", "Serial", "query", "--format", "json"], None)

    def test_connection_control(self, executor):
        SerialModule(executor).connection_control("vm.vmx", "serial0", "connect")

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Serial", "ConnectionControl", "serial0", "connect"], None
        )

    def test_set_backing_info(self, executor):
        SerialModule(executor).set_backing_info(
            "vm.vmx", "serial0", "pipe", "/tmp/com1", "proxy", "client", "server"
        )

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Serial", "SetBackingInfo", "serial0",
             "pipe", "/tmp/com1", "proxy", "client", "server"],
            None,
        )


class TestVProbesModule:
    """Test VProbes argument vectors."""

    def test_query_uses_capitalized_verb(self, executor):
        executor.execute.return_value = "{}"

        VProbesModule(executor).query("vm.vmx")

        executor.execute.assert_called_once_with(["vm.vmx", "VProbes", "Query", "--format", "json"], None)

    def test_load(self, executor):
        VProbesModule(executor).load("vm.vmx", "/scripts/trace.emt")

        executor.execute.assert_called_once_with(["vm.vmx", "VProbes", "Load", "/scripts/trace.emt"], None)

    def test_reset(self, executor):
        VProbesModule(executor).reset("vm.vmx")

        executor.execute.assert_called_once_with(["vm.vmx", "VProbes", "Reset"], None)

    def test_set_enabled(self, executor):
        VProbesModule(executor).set_enabled("vm.vmx", "true")

        executor.execute.assert_called_once_with(["vm.vmx", "VProbes", "SetEnabled", "true"], None)


class TestOtherModules:
    """Test the remaining wrappers."""

    def test_config_params_set_entry(self, executor):
        ConfigParamsModule(executor).set_entry("vm.vmx", "memsize", "4096")

        executor.execute.assert_called_once_with(["vm.vmx", "ConfigParams", "setentry", "memsize", "4096"], None)

    def test_chipset_vcpus(self, executor):
        ChipsetModule(executor).set_vcpu_count("vm.vmx", 4)

        executor.execute.assert_called_once_with(["vm.vmx", "Chipset", "SetVCpuCount", "4"], None)

    def test_mks_resolution(self, executor):
        MksModule(executor).set_guest_resolution("vm.vmx", 1920, 1080)

        executor.execute.assert_called_once_with(["vm.vmx", "MKS", "SetGuestResolution", "1920", "1080"], None)

    def test_tools_install_options(self, executor):
        ToolsModule(executor).install("vm.vmx", backing_type="file", backing_path="/isos/tools.iso")

        executor.execute.assert_called_once_with(
            ["vm.vmx", "Tools", "Install", "-bt", "file", "-bp", "/isos/tools.iso"], None
        )

    @pytest.mark.parametrize("module_class, verb", [
        (NvmeModule, "SetMaxDevice"),
        (SataModule, "SetMaxDevices"),
    ])
    def test_max_devices_verb(self, executor, module_class, verb):
        module_class(executor).set_max_devices("vm.vmx", "c0", "8")

        executor.execute.assert_called_once_with(
            ["vm.vmx", module_class.module_name, verb, "c0", "8"], None
        )

    def test_root_version_and_help(self, executor):
        root = RootModule(executor)
        root.get_version()
        root.get_module_help()

        assert [c[0][0] for c in executor.execute.call_args_list] == [["--version"], ["--help"]]

    def test_module_help(self, executor):
        PowerModule(executor).get_module_help()

        executor.execute.assert_called_once_with(["Power", "--help"], None)


class TestVmcliClient:
    """Test the client facade."""

    def test_modules_share_one_executor(self, executor):
        client = VmcliClient(executor=executor)

        assert all(module.executor is executor for module in client.modules.values())
        assert client.power.executor is executor

    def test_modules_keyed_by_lowercase_name(self, executor):
        client = VmcliClient(executor=executor)

        assert set(client.modules) == {
            "chipset", "configparams", "disk", "ethernet", "guest", "hgfs", "mks", "nvme",
            "power", "sata", "serial", "snapshot", "tools", "vm", "vmtemplate", "vprobes",
        }
        assert client.modules["vm"] is client.vm

    def test_builds_executor_from_settings(self):
        client = VmcliClient(Settings(vmcli_path="/opt/vmcli"))

        assert client.executor.locator.get_vmcli_path() == Path("/opt/vmcli")

    def test_get_version(self, executor):
        executor.execute.return_value = "1.2.3\n"

        assert VmcliClient(executor=executor).get_version() == "1.2.3\n"
