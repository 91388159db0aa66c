"""
Device profile loader for netsim.

Functions for loading device profiles from YAML files.
"""

from pathlib import Path

import yaml

from .dataclasses import (
    ProfileInterface,
    ProfileVlan,
    DeviceProfile,
)
from .validation import (
    ProfileValidationError,
    validate_device_profile,
)
from ..config.constants import DEFAULT_HOSTNAME, DEFAULT_VERSION


def parse_device_profile(data: dict) -> DeviceProfile:
    """Parse a device profile from YAML data dict."""
    ifconfig = [
        ProfileInterface(
            name=i['name'],
            address=i['address'],
            prefix_len=i.get('prefix_len', 24),
            enabled=i.get('enabled', True)
        )
        for i in data.get('ifconfig', [])
    ]

    # Router interfaces may be declared without an address
    interfaces = []
    for i in data.get('interfaces', []):
        address = i.get('address')
        interfaces.append(ProfileInterface(
            name=i['name'],
            address=address,
            prefix_len=i.get('prefix_len', 24) if address else None,
            enabled=i.get('enabled', False)
        ))

    vlans = [
        ProfileVlan(
            vlan_id=v['id'],
            name=v.get('name', f"VLAN{v['id']:04d}"),
            state=v.get('state', 'active')
        )
        for v in data.get('vlans', [])
    ]

    return DeviceProfile(
        name=data['name'],
        hostname=data.get('hostname', DEFAULT_HOSTNAME),
        version=data.get('version', DEFAULT_VERSION),
        ifconfig=ifconfig,
        interfaces=interfaces,
        vlans=vlans,
    )


def load_device_profile(profile_path: Path) -> DeviceProfile:
    """
    Load a device profile from YAML file.

    Args:
        profile_path: Path to the profile YAML file

    Returns:
        Parsed DeviceProfile

    Raises:
        FileNotFoundError: If the profile doesn't exist
        ProfileValidationError: If the profile YAML is invalid
    """
    if not profile_path.exists():
        raise FileNotFoundError(f"Device profile not found: {profile_path}")

    with open(profile_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ProfileValidationError(f"YAML syntax error in {profile_path}: {e}")

    if not isinstance(data, dict):
        raise ProfileValidationError(f"Profile YAML must be a dict, got {type(data).__name__}")

    # Validate
    errors = validate_device_profile(data)
    if errors:
        name = data.get('name', profile_path.stem)
        raise ProfileValidationError(f"Profile '{name}' validation failed:\n  " + "\n  ".join(errors))

    return parse_device_profile(data)
