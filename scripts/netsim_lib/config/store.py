"""
Configuration store for the simulated device.

ConfigurationStore owns every piece of mutable device state that commands
read and change. Each state family has its own lock; every public method
takes exactly one lock, performs one read or one mutation and releases it.
Reads return deep copies so callers never hold references into the store.
"""

import copy
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Optional

from .constants import STORE_LOCK_TIMEOUT, DEFAULT_VLAN_ID
from .dataclasses import (
    InterfaceConfig,
    SwitchportConfig,
    StaticRoute,
    AreaConfig,
    OSPFConfig,
    AclEntry,
    AccessControlList,
    VlanConfig,
    PasswordStore,
    NtpAssociation,
    NtpConfig,
)
from .validation import calculate_broadcast

if TYPE_CHECKING:
    from ..profiles.dataclasses import DeviceProfile


class StoreBusyError(Exception):
    """Raised when a store lock cannot be acquired within the timeout."""
    pass


class ConfigurationStore:
    """Shared device state: interfaces, routes, OSPF, ACLs, VLANs, passwords, NTP."""

    def __init__(
        self,
        profile: Optional["DeviceProfile"] = None,
        lock_timeout: float = STORE_LOCK_TIMEOUT,
    ):
        self._lock_timeout = lock_timeout

        self._interface_lock = threading.Lock()  # ifconfig, ip address and switchports
        self._route_lock = threading.Lock()
        self._ospf_lock = threading.Lock()
        self._acl_lock = threading.Lock()
        self._vlan_lock = threading.Lock()
        self._password_lock = threading.Lock()
        self._ntp_lock = threading.Lock()

        self._ifconfig: dict[str, InterfaceConfig] = {}
        self._ip_interfaces: dict[str, InterfaceConfig] = {}
        self._switchports: dict[str, SwitchportConfig] = {}
        self._routes: dict[str, StaticRoute] = {}
        self._ospf = OSPFConfig()
        self._acls: dict[str, AccessControlList] = {}
        self._vlans: dict[int, VlanConfig] = {}
        self._passwords = PasswordStore()
        self._ntp = NtpConfig()

        if profile is None:
            from ..profiles.dataclasses import default_profile
            profile = default_profile()
        self._seed(profile)

    def _seed(self, profile: "DeviceProfile") -> None:
        for iface in profile.ifconfig:
            self._ifconfig[iface.name] = _build_interface(
                iface.name, iface.address, iface.prefix_len, iface.enabled
            )
        for iface in profile.interfaces:
            if iface.address is None or iface.prefix_len is None:
                self._ip_interfaces[iface.name] = InterfaceConfig(name=iface.name, is_up=iface.enabled)
            else:
                self._ip_interfaces[iface.name] = _build_interface(
                    iface.name, iface.address, iface.prefix_len, iface.enabled
                )
        for vlan in profile.vlans:
            self._vlans[vlan.vlan_id] = VlanConfig(vlan_id=vlan.vlan_id, name=vlan.name, state=vlan.state)
        if DEFAULT_VLAN_ID not in self._vlans:
            self._vlans[DEFAULT_VLAN_ID] = VlanConfig(vlan_id=DEFAULT_VLAN_ID, name="default")

    @contextmanager
    def _locked(self, lock: threading.Lock, family: str):
        if not lock.acquire(timeout=self._lock_timeout):
            raise StoreBusyError(f"{family} store is busy, command aborted")
        try:
            yield
        finally:
            lock.release()

    # =========================================================================
    # ifconfig interfaces
    # =========================================================================

    def ifconfig_get(self, name: str) -> Optional[InterfaceConfig]:
        with self._locked(self._interface_lock, "interface"):
            return copy.deepcopy(self._ifconfig.get(name))

    def ifconfig_all(self) -> list[InterfaceConfig]:
        with self._locked(self._interface_lock, "interface"):
            return [copy.deepcopy(self._ifconfig[n]) for n in sorted(self._ifconfig)]

    def ifconfig_set_address(self, name: str, ip_address: str, prefix_len: int) -> InterfaceConfig:
        """Create or replace an ifconfig interface. New addresses come up enabled."""
        iface = _build_interface(name, ip_address, prefix_len, True)
        with self._locked(self._interface_lock, "interface"):
            self._ifconfig[name] = iface
            return copy.deepcopy(iface)

    def ifconfig_set_state(self, name: str, is_up: bool) -> bool:
        """Bring an ifconfig interface up or down. Returns False if it does not exist."""
        with self._locked(self._interface_lock, "interface"):
            iface = self._ifconfig.get(name)
            if iface is None:
                return False
            iface.is_up = is_up
            return True

    # =========================================================================
    # Router interfaces (ip address store)
    # =========================================================================

    def interface_ensure(self, name: str) -> InterfaceConfig:
        """Register a router interface if missing. New interfaces start shut down."""
        with self._locked(self._interface_lock, "interface"):
            iface = self._ip_interfaces.setdefault(name, InterfaceConfig(name=name))
            return copy.deepcopy(iface)

    def interface_get(self, name: str) -> Optional[InterfaceConfig]:
        with self._locked(self._interface_lock, "interface"):
            return copy.deepcopy(self._ip_interfaces.get(name))

    def interface_all(self) -> list[InterfaceConfig]:
        with self._locked(self._interface_lock, "interface"):
            return [copy.deepcopy(self._ip_interfaces[n]) for n in sorted(self._ip_interfaces)]

    def interface_set_address(self, name: str, ip_address: str, prefix_len: int) -> InterfaceConfig:
        """Assign an address, keeping the interface's admin state."""
        with self._locked(self._interface_lock, "interface"):
            existing = self._ip_interfaces.get(name)
            is_up = existing.is_up if existing is not None else False
            iface = _build_interface(name, ip_address, prefix_len, is_up)
            self._ip_interfaces[name] = iface
            return copy.deepcopy(iface)

    def interface_clear_address(self, name: str) -> bool:
        with self._locked(self._interface_lock, "interface"):
            iface = self._ip_interfaces.get(name)
            if iface is None or iface.ip_address is None:
                return False
            iface.ip_address = None
            iface.prefix_len = None
            iface.broadcast = None
            return True

    def interface_set_state(self, name: str, is_up: bool) -> None:
        with self._locked(self._interface_lock, "interface"):
            iface = self._ip_interfaces.setdefault(name, InterfaceConfig(name=name))
            iface.is_up = is_up

    # =========================================================================
    # Switchports
    # =========================================================================

    def switchport_get(self, name: str) -> Optional[SwitchportConfig]:
        with self._locked(self._interface_lock, "interface"):
            return copy.deepcopy(self._switchports.get(name))

    def switchport_all(self) -> dict[str, SwitchportConfig]:
        with self._locked(self._interface_lock, "interface"):
            return copy.deepcopy(self._switchports)

    def switchport_set_mode(self, name: str, mode: str) -> None:
        with self._locked(self._interface_lock, "interface"):
            self._switchports.setdefault(name, SwitchportConfig()).mode = mode

    def switchport_set_access_vlan(self, name: str, vlan_id: int) -> None:
        with self._locked(self._interface_lock, "interface"):
            self._switchports.setdefault(name, SwitchportConfig()).access_vlan = vlan_id

    # =========================================================================
    # Static routes
    # =========================================================================

    def route_add(self, destination: str, netmask: str, next_hop: str) -> None:
        with self._locked(self._route_lock, "route"):
            self._routes[destination] = StaticRoute(destination, netmask, next_hop)

    def route_delete(self, destination: str) -> bool:
        with self._locked(self._route_lock, "route"):
            return self._routes.pop(destination, None) is not None

    def route_all(self) -> list[StaticRoute]:
        with self._locked(self._route_lock, "route"):
            return [copy.deepcopy(self._routes[d]) for d in sorted(self._routes)]

    # =========================================================================
    # OSPF
    # =========================================================================

    def ospf_set_process(self, process_id: int) -> None:
        with self._locked(self._ospf_lock, "OSPF"):
            self._ospf.process_id = process_id

    def ospf_set_router_id(self, router_id: str) -> None:
        with self._locked(self._ospf_lock, "OSPF"):
            self._ospf.router_id = router_id

    def ospf_add_network(self, network: str, mask_bits: int, area_id: str) -> None:
        """Add a network statement. The area is created if it does not exist."""
        with self._locked(self._ospf_lock, "OSPF"):
            self._ospf.networks[network] = mask_bits
            self._ospf.network_areas[network] = area_id
            self._ospf.areas.setdefault(area_id, AreaConfig())

    def ospf_add_passive(self, interface: str) -> None:
        with self._locked(self._ospf_lock, "OSPF"):
            self._ospf.passive_interfaces.add(interface)

    def ospf_set_distance(self, distance: int) -> None:
        with self._locked(self._ospf_lock, "OSPF"):
            self._ospf.distance = distance

    def ospf_set_default_originate(self, enabled: bool = True) -> None:
        with self._locked(self._ospf_lock, "OSPF"):
            self._ospf.default_information_originate = enabled

    def ospf_configure_area(
        self,
        area_id: str,
        authentication: Optional[bool] = None,
        stub: Optional[bool] = None,
        default_cost: Optional[int] = None,
    ) -> None:
        """Update the given area settings, leaving the others untouched."""
        with self._locked(self._ospf_lock, "OSPF"):
            area = self._ospf.areas.setdefault(area_id, AreaConfig())
            if authentication is not None:
                area.authentication = authentication
            if stub is not None:
                area.stub = stub
            if default_cost is not None:
                area.default_cost = default_cost

    def ospf_add_neighbor(self, address: str, priority: Optional[int] = None) -> None:
        with self._locked(self._ospf_lock, "OSPF"):
            self._ospf.neighbors[address] = priority

    def ospf_snapshot(self) -> OSPFConfig:
        with self._locked(self._ospf_lock, "OSPF"):
            return copy.deepcopy(self._ospf)

    # =========================================================================
    # Access lists
    # =========================================================================

    def acl_append(self, acl_id: str, entry: AclEntry) -> int:
        """Append an entry, creating the list on first use. Returns the new length."""
        with self._locked(self._acl_lock, "ACL"):
            acl = self._acls.setdefault(acl_id, AccessControlList(id=acl_id))
            acl.entries.append(copy.deepcopy(entry))
            return len(acl.entries)

    def acl_delete(self, acl_id: str) -> bool:
        with self._locked(self._acl_lock, "ACL"):
            return self._acls.pop(acl_id, None) is not None

    def acl_get(self, acl_id: str) -> Optional[AccessControlList]:
        with self._locked(self._acl_lock, "ACL"):
            return copy.deepcopy(self._acls.get(acl_id))

    def acl_all(self) -> list[AccessControlList]:
        with self._locked(self._acl_lock, "ACL"):
            return [copy.deepcopy(acl) for acl in self._acls.values()]

    # =========================================================================
    # VLANs
    # =========================================================================

    def vlan_ensure(self, vlan_id: int) -> VlanConfig:
        """Create a VLAN with the default VLANxxxx name if it does not exist."""
        with self._locked(self._vlan_lock, "VLAN"):
            vlan = self._vlans.setdefault(vlan_id, VlanConfig(vlan_id=vlan_id, name=f"VLAN{vlan_id:04d}"))
            return copy.deepcopy(vlan)

    def vlan_get(self, vlan_id: int) -> Optional[VlanConfig]:
        with self._locked(self._vlan_lock, "VLAN"):
            return copy.deepcopy(self._vlans.get(vlan_id))

    def vlan_set_name(self, vlan_id: int, name: str) -> bool:
        with self._locked(self._vlan_lock, "VLAN"):
            vlan = self._vlans.get(vlan_id)
            if vlan is None:
                return False
            vlan.name = name
            return True

    def vlan_set_state(self, vlan_id: int, state: str) -> bool:
        with self._locked(self._vlan_lock, "VLAN"):
            vlan = self._vlans.get(vlan_id)
            if vlan is None:
                return False
            vlan.state = state
            return True

    def vlan_delete(self, vlan_id: int) -> bool:
        """Delete a VLAN. The default VLAN is never removed."""
        if vlan_id == DEFAULT_VLAN_ID:
            return False
        with self._locked(self._vlan_lock, "VLAN"):
            return self._vlans.pop(vlan_id, None) is not None

    def vlan_all(self) -> list[VlanConfig]:
        with self._locked(self._vlan_lock, "VLAN"):
            return [copy.deepcopy(self._vlans[v]) for v in sorted(self._vlans)]

    # =========================================================================
    # Passwords
    # =========================================================================

    def set_enable_password(self, password: str) -> None:
        with self._locked(self._password_lock, "password"):
            self._passwords.enable_password = password

    def set_enable_secret(self, digest: str) -> None:
        with self._locked(self._password_lock, "password"):
            self._passwords.enable_secret = digest

    def passwords(self) -> PasswordStore:
        with self._locked(self._password_lock, "password"):
            return copy.deepcopy(self._passwords)

    # =========================================================================
    # NTP
    # =========================================================================

    def ntp_add_server(self, address: str) -> bool:
        """Add an NTP server and a matching unsynchronised association."""
        with self._locked(self._ntp_lock, "NTP"):
            if address in self._ntp.servers:
                return False
            self._ntp.servers.append(address)
            self._ntp.associations.append(NtpAssociation(address=address))
            return True

    def ntp_remove_server(self, address: str) -> bool:
        with self._locked(self._ntp_lock, "NTP"):
            if address not in self._ntp.servers:
                return False
            self._ntp.servers.remove(address)
            self._ntp.associations = [a for a in self._ntp.associations if a.address != address]
            return True

    def ntp_clear_associations(self) -> int:
        """Reset every association to the unsynchronised state. Returns how many were reset."""
        with self._locked(self._ntp_lock, "NTP"):
            self._ntp.associations = [NtpAssociation(address=address) for address in self._ntp.servers]
            return len(self._ntp.associations)

    def ntp_set_master(self, enabled: bool = True) -> None:
        with self._locked(self._ntp_lock, "NTP"):
            self._ntp.master = enabled

    def ntp_set_authenticate(self, enabled: bool = True) -> None:
        with self._locked(self._ntp_lock, "NTP"):
            self._ntp.authenticate = enabled

    def ntp_add_authentication_key(self, key_number: int, value: str) -> None:
        with self._locked(self._ntp_lock, "NTP"):
            self._ntp.authentication_keys[key_number] = value

    def ntp_add_trusted_key(self, key_number: int) -> bool:
        """Trust a key. Returns False if no authentication key has that number."""
        with self._locked(self._ntp_lock, "NTP"):
            if key_number not in self._ntp.authentication_keys:
                return False
            self._ntp.trusted_keys.add(key_number)
            return True

    def ntp_set_source(self, interface: str) -> None:
        with self._locked(self._ntp_lock, "NTP"):
            self._ntp.source_interface = interface

    def ntp_snapshot(self) -> NtpConfig:
        with self._locked(self._ntp_lock, "NTP"):
            return copy.deepcopy(self._ntp)


def _build_interface(name: str, ip_address: str, prefix_len: int, is_up: bool) -> InterfaceConfig:
    return InterfaceConfig(
        name=name,
        ip_address=ip_address,
        prefix_len=prefix_len,
        broadcast=str(calculate_broadcast(ip_address, prefix_len)),
        is_up=is_up,
    )
