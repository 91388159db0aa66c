"""
Configuration dataclasses for the simulated device.

These define the structure of the device state held by the
ConfigurationStore and of the CliConfig persisted to startup-config.json.
"""

from dataclasses import dataclass, field
from typing import Optional

from .constants import DEFAULT_HOSTNAME
from .validation import prefix_to_netmask


@dataclass
class InterfaceConfig:
    """An interface in either the ifconfig store or the ip address store."""
    name: str
    ip_address: Optional[str] = None
    prefix_len: Optional[int] = None
    broadcast: Optional[str] = None  # Derived from ip_address and prefix_len
    is_up: bool = False

    @property
    def netmask(self) -> Optional[str]:
        if self.prefix_len is None:
            return None
        return prefix_to_netmask(self.prefix_len)


@dataclass
class SwitchportConfig:
    """Layer 2 settings of an interface."""
    mode: str = "access"  # "access" or "trunk"
    access_vlan: int = 1


@dataclass
class StaticRoute:
    """A static route, keyed in the store by its destination prefix."""
    destination: str
    netmask: str
    next_hop: str  # Next-hop IP address or exit interface name


@dataclass
class AreaConfig:
    """Per-area OSPF settings."""
    authentication: bool = False
    stub: bool = False
    default_cost: Optional[int] = None


@dataclass
class OSPFConfig:
    """The single OSPF process, built up by router-config sub-commands."""
    passive_interfaces: set[str] = field(default_factory=set)
    distance: Optional[int] = None
    default_information_originate: bool = False
    router_id: Optional[str] = None
    areas: dict[str, AreaConfig] = field(default_factory=dict)
    networks: dict[str, int] = field(default_factory=dict)  # network address -> mask bits
    network_areas: dict[str, str] = field(default_factory=dict)  # network address -> area id
    neighbors: dict[str, Optional[int]] = field(default_factory=dict)  # neighbor IP -> priority
    process_id: Optional[int] = None


@dataclass
class AclEntry:
    """A single access-list rule. Order within the list is significant."""
    action: str  # "allow" or "deny"
    source: str
    destination: str = "any"
    protocol: Optional[str] = None  # None for standard entries
    source_operator: Optional[str] = None
    source_port: Optional[str] = None
    destination_operator: Optional[str] = None
    destination_port: Optional[str] = None
    matches: Optional[int] = None

    @property
    def keyword(self) -> str:
        """Action as typed on a Cisco CLI."""
        return "permit" if self.action == "allow" else "deny"


@dataclass
class AccessControlList:
    """An ordered list of ACL entries."""
    id: str
    entries: list[AclEntry] = field(default_factory=list)

    @property
    def extended(self) -> bool:
        return any(e.protocol is not None for e in self.entries)


@dataclass
class VlanConfig:
    """A VLAN created with 'vlan <id>'."""
    vlan_id: int
    name: str
    state: str = "active"  # "active" or "suspend"


@dataclass
class PasswordStore:
    """Enable credentials. The secret is stored as a one-way digest."""
    enable_password: Optional[str] = None
    enable_secret: Optional[str] = None


@dataclass
class NtpAssociation:
    """A simulated NTP association shown by 'show ntp associations'."""
    address: str
    ref_clock: str = ".INIT."
    stratum: int = 16
    when: str = "-"
    poll: int = 64
    reach: int = 0
    delay: float = 0.0
    offset: float = 0.0
    disp: float = 0.01


@dataclass
class NtpConfig:
    """NTP settings configured in global configuration mode."""
    servers: list[str] = field(default_factory=list)
    master: bool = False
    authenticate: bool = False
    authentication_keys: dict[int, str] = field(default_factory=dict)
    trusted_keys: set[int] = field(default_factory=set)
    source_interface: Optional[str] = None
    associations: list[NtpAssociation] = field(default_factory=list)


@dataclass
class CliConfig:
    """The subset of configuration persisted to startup-config.json."""
    hostname: str = DEFAULT_HOSTNAME
    startup_config: list[str] = field(default_factory=list)  # Rendered running-config lines
    last_written: Optional[str] = None
    password_encryption: bool = False
