"""Client exposing every vmcli module wrapper over one shared executor."""

from typing import Dict, Optional

from .config import Settings, load_settings
from .exec.executor import VmcliExecutor
from .locator import VmcliLocator
from .modules import (
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
    VmcliModule,
    VmModule,
    VmTemplateModule,
    VProbesModule,
)


class VmcliClient:
    """
    Entry point for library users.

        client = VmcliClient()
        state = client.power.query("C:/VMs/build/build.vmx")

    Settings are loaded with load_settings() unless given. Each wrapper is
    stateless apart from the executor, so one client can be shared freely.
    """

    def __init__(self, settings: Optional[Settings] = None, executor: Optional[VmcliExecutor] = None):
        if executor is None:
            executor = VmcliExecutor(VmcliLocator(settings if settings is not None else load_settings()))
        self.executor = executor

        self.vmcli = RootModule(executor)
        self.chipset = ChipsetModule(executor)
        self.config_params = ConfigParamsModule(executor)
        self.disk = DiskModule(executor)
        self.ethernet = EthernetModule(executor)
        self.guest = GuestModule(executor)
        self.hgfs = HgfsModule(executor)
        self.mks = MksModule(executor)
        self.nvme = NvmeModule(executor)
        self.power = PowerModule(executor)
        self.sata = SataModule(executor)
        self.serial = SerialModule(executor)
        self.snapshot = SnapshotModule(executor)
        self.tools = ToolsModule(executor)
        self.vm = VmModule(executor)
        self.vm_template = VmTemplateModule(executor)
        self.vprobes = VProbesModule(executor)

    @property
    def modules(self) -> Dict[str, VmcliModule]:
        """Wrappers keyed by lower-cased vmcli module name."""
        return {
            module.module_name.lower(): module
            for module in vars(self).values()
            if isinstance(module, VmcliModule) and module.module_name
        }

    def get_version(self) -> str:
        return self.vmcli.get_version()
