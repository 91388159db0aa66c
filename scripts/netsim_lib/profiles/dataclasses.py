"""
Device profile dataclasses for netsim.

A device profile describes the simulated hardware the session starts with:
hostname, version banner, host-style (ifconfig) interfaces, router
interfaces and VLANs.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..config.constants import (
    DEFAULT_HOSTNAME,
    DEFAULT_VERSION,
    DEFAULT_IFCONFIG_INTERFACE,
    DEFAULT_IFCONFIG_ADDRESS,
    DEFAULT_IFCONFIG_PREFIX,
    DEFAULT_VLAN_ID,
    DEFAULT_VLAN_NAME,
)


@dataclass
class ProfileInterface:
    """An interface declared by a profile."""
    name: str
    address: Optional[str] = None
    prefix_len: Optional[int] = None
    enabled: bool = True


@dataclass
class ProfileVlan:
    """A VLAN declared by a profile."""
    vlan_id: int
    name: str
    state: str = "active"


@dataclass
class DeviceProfile:
    """Starting state of a simulated device."""
    name: str = "default"
    hostname: str = DEFAULT_HOSTNAME
    version: str = DEFAULT_VERSION
    ifconfig: List[ProfileInterface] = field(default_factory=list)
    interfaces: List[ProfileInterface] = field(default_factory=list)  # Router interfaces (ip address store)
    vlans: List[ProfileVlan] = field(default_factory=list)


def default_profile() -> DeviceProfile:
    """Built-in profile used when no --profile is given."""
    return DeviceProfile(
        ifconfig=[
            ProfileInterface(
                name=DEFAULT_IFCONFIG_INTERFACE,
                address=DEFAULT_IFCONFIG_ADDRESS,
                prefix_len=DEFAULT_IFCONFIG_PREFIX,
            ),
        ],
        vlans=[ProfileVlan(vlan_id=DEFAULT_VLAN_ID, name=DEFAULT_VLAN_NAME)],
    )
