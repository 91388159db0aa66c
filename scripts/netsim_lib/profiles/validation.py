"""
Device profile validation for netsim.

Functions for validating device profile YAML structures.
"""

from typing import List

from ..config.constants import VLAN_ID_MIN, VLAN_ID_MAX
from ..config.validation import validate_hostname, validate_interface_name, validate_ipv4


class ProfileValidationError(Exception):
    """Raised when profile validation fails."""
    pass


def _validate_interfaces(section: str, items, errors: List[str], require_address: bool) -> None:
    if not isinstance(items, list):
        errors.append(f"{section} must be a list")
        return

    names = []
    for i, iface in enumerate(items):
        if not isinstance(iface, dict):
            errors.append(f"{section}[{i}]: must be a mapping")
            continue
        name = iface.get('name')
        if not name:
            errors.append(f"{section}[{i}]: missing 'name' field")
        elif not validate_interface_name(str(name)):
            errors.append(f"{section}[{i}]: invalid interface name '{name}'")
        elif name in names:
            errors.append(f"Duplicate interface name in {section}: {name}")
        else:
            names.append(name)

        if 'enabled' in iface and not isinstance(iface['enabled'], bool):
            errors.append(f"{section}[{i}]: enabled must be true or false")

        address = iface.get('address')
        if address is None:
            if require_address:
                errors.append(f"{section}[{i}]: missing 'address' field")
            continue
        if not validate_ipv4(str(address)):
            errors.append(f"{section}[{i}]: invalid IPv4 address '{address}'")
        prefix_len = iface.get('prefix_len', 24)
        if isinstance(prefix_len, bool) or not isinstance(prefix_len, int) or not 0 <= prefix_len <= 32:
            errors.append(f"{section}[{i}]: prefix_len must be an integer between 0 and 32")


def validate_device_profile(data: dict) -> List[str]:
    """
    Validate a device profile YAML structure.
    Returns list of error messages (empty if valid).
    """
    errors = []

    if 'name' not in data:
        errors.append("Missing required field: name")

    hostname = data.get('hostname')
    if hostname is not None and not validate_hostname(str(hostname)):
        errors.append(f"Invalid hostname '{hostname}': must start with a letter, contain only letters, digits and hyphens")

    version = data.get('version')
    if version is not None and not isinstance(version, str):
        errors.append("version must be a string")

    _validate_interfaces('ifconfig', data.get('ifconfig', []), errors, require_address=True)
    _validate_interfaces('interfaces', data.get('interfaces', []), errors, require_address=False)

    vlans = data.get('vlans', [])
    if not isinstance(vlans, list):
        errors.append("vlans must be a list")
        return errors

    vlan_ids = []
    for i, vlan in enumerate(vlans):
        if not isinstance(vlan, dict):
            errors.append(f"vlans[{i}]: must be a mapping")
            continue
        vlan_id = vlan.get('id')
        if isinstance(vlan_id, bool) or not isinstance(vlan_id, int) or not VLAN_ID_MIN <= vlan_id <= VLAN_ID_MAX:
            errors.append(f"vlans[{i}]: id must be an integer between {VLAN_ID_MIN} and {VLAN_ID_MAX}")
        elif vlan_id in vlan_ids:
            errors.append(f"Duplicate VLAN id: {vlan_id}")
        else:
            vlan_ids.append(vlan_id)
        state = vlan.get('state', 'active')
        if state not in ('active', 'suspend'):
            errors.append(f"vlans[{i}]: state must be 'active' or 'suspend'")

    return errors
