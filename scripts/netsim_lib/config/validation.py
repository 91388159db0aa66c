"""
Validation functions for netsim configuration.

IP address, mask and identifier validation utilities, plus the address
arithmetic the interface commands rely on.
"""

import hashlib
import ipaddress
import re
from typing import Union


HOSTNAME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9-]{0,62}$')
INTERFACE_NAME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9/.:-]*$')

# Cisco type 7 translation table
_TYPE7_XLAT = "dsfd;kfoA,.iyewrkldJKDHSUBsgvca69834ncxv9873254k;fg87"


def validate_ipv4(ip: str) -> bool:
    """Validate an IPv4 address."""
    try:
        ipaddress.IPv4Address(ip)
        return True
    except ipaddress.AddressValueError:
        return False


def is_number(text: str) -> bool:
    """True for a plain ASCII decimal number such as '24'."""
    return text.isascii() and text.isdigit()


def validate_hostname(name: str) -> bool:
    """Validate a device hostname (letter first, letters/digits/hyphens, max 63)."""
    return bool(HOSTNAME_RE.match(name))


def validate_interface_name(name: str) -> bool:
    """Validate an interface name such as GigabitEthernet0/0 or ens33."""
    return bool(INTERFACE_NAME_RE.match(name))


def parse_ipv4(value: str) -> ipaddress.IPv4Address:
    """Parse an IPv4 address, raising ValueError with a readable message."""
    try:
        return ipaddress.IPv4Address(value)
    except ipaddress.AddressValueError:
        raise ValueError(f"Invalid IP address: {value}")


def parse_prefix_len(value: str) -> int:
    """
    Parse a mask into a prefix length.

    Accepts a bare prefix length ("24" or "/24"), a dotted netmask
    ("255.255.255.0") or a dotted wildcard mask ("0.0.0.255").
    """
    text = value.lstrip("/")
    if is_number(text):
        prefix_len = int(text)
        if not 0 <= prefix_len <= 32:
            raise ValueError(f"Invalid prefix length {prefix_len}: must be between 0 and 32")
        return prefix_len
    try:
        return ipaddress.IPv4Network(f"0.0.0.0/{text}").prefixlen
    except (ipaddress.AddressValueError, ipaddress.NetmaskValueError, ValueError):
        raise ValueError(f"Invalid mask: {value}")


def prefix_to_netmask(prefix_len: int) -> str:
    """Convert a prefix length to a dotted netmask."""
    return str(ipaddress.IPv4Network(f"0.0.0.0/{prefix_len}").netmask)


def calculate_broadcast(
    ip: Union[str, ipaddress.IPv4Address], prefix_len: int
) -> ipaddress.IPv4Address:
    """
    Calculate the broadcast address for an address and prefix length.

    The mask is built as all-ones shifted left by (32 - prefix_len) and the
    broadcast is the address OR the inverted mask, over 32 bits.

    Examples:
        calculate_broadcast("192.168.1.1", 24) -> 192.168.1.255
        calculate_broadcast("10.0.0.5", 30)    -> 10.0.0.7
    """
    if not 0 <= prefix_len <= 32:
        raise ValueError(f"Invalid prefix length {prefix_len}: must be between 0 and 32")
    ip_u32 = int(ipaddress.IPv4Address(ip))
    mask = (0xFFFFFFFF << (32 - prefix_len)) & 0xFFFFFFFF
    return ipaddress.IPv4Address(ip_u32 | (~mask & 0xFFFFFFFF))


def hash_secret(value: str) -> str:
    """One-way digest used for the enable secret."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def encrypt_type7(value: str, seed: int = 2) -> str:
    """Obfuscate a password the way 'service password-encryption' displays it."""
    encoded = f"{seed:02d}"
    for i, char in enumerate(value):
        encoded += f"{ord(char) ^ ord(_TYPE7_XLAT[(seed + i) % len(_TYPE7_XLAT)]):02X}"
    return encoded
