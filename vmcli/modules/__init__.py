"""Module wrappers: one class per vmcli sub-command group."""

from .command import CommandBuilder
from .base import VmcliModule, RootModule
from .config import ConfigParamsModule, ChipsetModule
from .disk import DiskModule
from .ethernet import EthernetModule
from .guest import GuestModule
from .hgfs import HgfsModule
from .mks import MksModule
from .power import PowerModule
from .serial import SerialModule
from .snapshot import SnapshotModule
from .storage import NvmeModule, SataModule
from .tools import ToolsModule, VProbesModule
from .vm import VmModule, VmTemplateModule

__all__ = [
    "CommandBuilder",
    "VmcliModule",
    "RootModule",
    "ChipsetModule",
    "ConfigParamsModule",
    "DiskModule",
    "EthernetModule",
    "GuestModule",
    "HgfsModule",
    "MksModule",
    "NvmeModule",
    "PowerModule",
    "SataModule",
    "SerialModule",
    "SnapshotModule",
    "ToolsModule",
    "VProbesModule",
    "VmModule",
    "VmTemplateModule",
]
