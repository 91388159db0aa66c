"""
netsim_lib.repl.display - Display functions for REPL

This package contains functions for displaying device state:
- config: rich tables and text views used by the show commands
"""

from .config import (
    console,
    show_command_help,
    show_ifconfig_interface,
    show_ifconfig,
    show_interfaces,
    show_ip_interface_brief,
    show_routes,
    show_ospf,
    show_access_lists,
    show_vlans,
    show_ntp,
    show_ntp_associations,
)

__all__ = [
    'console',
    'show_command_help',
    'show_ifconfig_interface',
    'show_ifconfig',
    'show_interfaces',
    'show_ip_interface_brief',
    'show_routes',
    'show_ospf',
    'show_access_lists',
    'show_vlans',
    'show_ntp',
    'show_ntp_associations',
]
