"""Ethernet module: virtual network adapters."""

import threading
from typing import Any, Optional

from .base import VmcliModule

Cancel = Optional[threading.Event]


class EthernetModule(VmcliModule):
    module_name = "Ethernet"

    def query(self, vmx_path: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, cancel_event=cancel_event)

    def is_present(self, vmx_path: str, device_label: str, cancel_event: Cancel = None) -> Any:
        return self._query(vmx_path, device_label, verb="IsPresent", cancel_event=cancel_event)

    def connection_control(self, vmx_path: str, connect_op: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "ConnectionControl", connect_op, cancel_event=cancel_event)

    def move(self, vmx_path: str, from_label: str, to_label: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "MoveDevice", from_label, to_label, cancel_event=cancel_event)

    def purge(self, vmx_path: str, device_label: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "Purge", device_label, cancel_event=cancel_event)

    def set_address_type(self, vmx_path: str, address_type1: str, address_type2: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetAddressType", address_type1, address_type2, cancel_event=cancel_event)

    def set_allow_guest_control(self, vmx_path: str, device_label: str, allow: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetAllowGuestControl", device_label, allow, cancel_event=cancel_event)

    def set_connection_type(self, vmx_path: str, device_label: str, connection_type: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetConnectionType", device_label, connection_type, cancel_event=cancel_event)

    def set_custom_type_backing(
        self,
        vmx_path: str,
        device_label: str,
        vnet: str,
        bsd_name: str,
        display_name: str,
        cancel_event: Cancel = None,
    ) -> None:
        self._run(
            vmx_path, "SetCustomTypeBacking", device_label, vnet, bsd_name, display_name,
            cancel_event=cancel_event,
        )

    def set_dvs_type_backing(
        self,
        vmx_path: str,
        device_label: str,
        switch_id: str,
        port_id: str,
        portgroup_id: str,
        connection_id: str,
        cancel_event: Cancel = None,
    ) -> None:
        self._run(
            vmx_path, "SetDvsTypeBacking", device_label, switch_id, port_id, portgroup_id, connection_id,
            cancel_event=cancel_event,
        )

    def set_external_id(self, vmx_path: str, device_label: str, external_id: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetExternalId", device_label, external_id, cancel_event=cancel_event)

    def set_features(self, vmx_path: str, device_label: str, features: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetFeatures", device_label, features, cancel_event=cancel_event)

    def set_link_state_propagation(self, vmx_path: str, device_label: str, enable: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetLinkStatePropagation", device_label, enable, cancel_event=cancel_event)

    def set_network_name(self, vmx_path: str, device_label: str, network_name: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetNetworkName", device_label, network_name, cancel_event=cancel_event)

    def set_migrate_control(self, vmx_path: str, device_label: str, migrate_control: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetMigrateControl", device_label, migrate_control, cancel_event=cancel_event)

    def set_nioc_type_backing(
        self,
        vmx_path: str,
        device_label: str,
        reservation: str,
        shares: str,
        limit: str,
        cancel_event: Cancel = None,
    ) -> None:
        self._run(
            vmx_path, "SetNiocTypeBacking", device_label, reservation, shares, limit,
            cancel_event=cancel_event,
        )

    def set_opaque_network_type_backing(
        self,
        vmx_path: str,
        device_label: str,
        network_id: str,
        network_type: str,
        cancel_event: Cancel = None,
    ) -> None:
        self._run(
            vmx_path, "SetOpaqueNetworkTypeBacking", device_label, network_id, network_type,
            cancel_event=cancel_event,
        )

    def set_pci_slot_number(self, vmx_path: str, device_label: str, slot: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetPciSlotNumber", device_label, slot, cancel_event=cancel_event)

    def set_present(self, vmx_path: str, device_label: str, present: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetPresent", device_label, present, cancel_event=cancel_event)

    def set_pvn_type_backing(self, vmx_path: str, device_label: str, pvn_id: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetPvnTypeBacking", device_label, pvn_id, cancel_event=cancel_event)

    def set_security_policy(
        self,
        vmx_path: str,
        device_label: str,
        no_promisc: str,
        down_when_addr_mismatch: str,
        no_forged_src_addr: str,
        cancel_event: Cancel = None,
    ) -> None:
        self._run(
            vmx_path, "SetSecurityPolicy", device_label, no_promisc, down_when_addr_mismatch, no_forged_src_addr,
            cancel_event=cancel_event,
        )

    def set_start_connected(self, vmx_path: str, device_label: str, start_connected: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetStartConnected", device_label, start_connected, cancel_event=cancel_event)

    def set_transfer_latency(
        self, vmx_path: str, device_label: str, tx_latency: str, rx_latency: str, cancel_event: Cancel = None
    ) -> None:
        self._run(vmx_path, "SetTransferLatency", device_label, tx_latency, rx_latency, cancel_event=cancel_event)

    def set_transfer_rate(
        self,
        vmx_path: str,
        device_label: str,
        tx_drop_rate: str,
        rx_drop_rate: str,
        tx_drop_size: str,
        rx_drop_size: str,
        tx_bandwidth_limit: str,
        rx_bandwidth_limit: str,
        cancel_event: Cancel = None,
    ) -> None:
        self._run(
            vmx_path, "SetTransferRate", device_label,
            tx_drop_rate, rx_drop_rate, tx_drop_size, rx_drop_size, tx_bandwidth_limit, rx_bandwidth_limit,
            cancel_event=cancel_event,
        )

    def set_upt_compatibility(self, vmx_path: str, device_label: str, enabled: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetUptCompatibility", device_label, enabled, cancel_event=cancel_event)

    def set_virtual_device(self, vmx_path: str, device_label: str, virtual_device: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetVirtualDevice", device_label, virtual_device, cancel_event=cancel_event)

    def set_wake_on_packet_receive(self, vmx_path: str, device_label: str, enable: str, cancel_event: Cancel = None) -> None:
        self._run(vmx_path, "SetWakeOnPcktRcv", device_label, enable, cancel_event=cancel_event)
