"""
Command registry for the netsim REPL.

One entry per full command name. Multi-word names ("show ip route") are
matched by the dispatcher at word boundaries; which of them are usable
depends on the current mode (see modes.py).
"""

from types import MappingProxyType
from typing import Mapping

from .command import Command
from .commands import (
    cmd_enable, cmd_disable, cmd_configure_terminal, cmd_exit, cmd_end, cmd_help, cmd_do,
    cmd_hostname, cmd_clock_set, cmd_enable_password, cmd_enable_secret,
    cmd_service_password_encryption, cmd_write_memory, cmd_copy_running_config,
    cmd_ntp_server, cmd_no_ntp_server, cmd_ntp_master, cmd_ntp_authenticate,
    cmd_ntp_authentication_key, cmd_ntp_trusted_key, cmd_ntp_source,
    cmd_clear_ntp_associations, cmd_reload, cmd_debug_all, cmd_undebug_all,
    cmd_interface, cmd_ip_address, cmd_no_ip_address, cmd_shutdown, cmd_no_shutdown,
    cmd_switchport, cmd_ifconfig,
    cmd_ip_route, cmd_no_ip_route, cmd_router_ospf, cmd_network, cmd_router_id,
    cmd_passive_interface, cmd_distance, cmd_default_information_originate, cmd_area,
    cmd_neighbor,
    cmd_access_list, cmd_no_access_list,
    cmd_vlan, cmd_no_vlan, cmd_name, cmd_state,
    cmd_show_running_config, cmd_show_startup_config, cmd_show_version, cmd_show_clock,
    cmd_show_uptime, cmd_show_interfaces, cmd_show_ip_interface_brief, cmd_show_ip_route,
    cmd_show_ip_ospf, cmd_show_access_lists, cmd_show_vlan, cmd_show_ntp,
    cmd_show_ntp_associations, cmd_show_history, cmd_show_login, cmd_show_sessions,
    cmd_show_controllers, cmd_show_processes,
)


# (name, description, handler, suggestions)
COMMAND_TABLE = [
    # Session
    ("enable", "Enter privileged EXEC mode", cmd_enable, ()),
    ("disable", "Return to user EXEC mode", cmd_disable, ()),
    ("configure terminal", "Enter global configuration mode", cmd_configure_terminal, ()),
    ("exit", "Exit to the previous mode", cmd_exit, ()),
    ("end", "Return to privileged EXEC mode", cmd_end, ()),
    ("help", "List the commands available in this mode", cmd_help, ()),
    ("do", "Run an EXEC command from configuration mode", cmd_do, ("<exec-command>",)),

    # System
    ("hostname", "Set the system hostname", cmd_hostname, ("<name>",)),
    ("clock set", "Set the system clock", cmd_clock_set, ("<hh:mm:ss> <day> <month> <year>",)),
    ("enable password", "Set the enable password", cmd_enable_password, ("<password>",)),
    ("enable secret", "Set the enable secret (stored as a digest)", cmd_enable_secret, ("<secret>",)),
    ("service password-encryption", "Obfuscate passwords in the configuration",
     cmd_service_password_encryption, ()),
    ("write memory", "Save the running configuration to startup-config", cmd_write_memory, ()),
    ("copy running-config", "Copy the running configuration", cmd_copy_running_config,
     ("startup-config", "<file-name>")),
    ("ntp server", "Configure an NTP server", cmd_ntp_server, ("<ip-address>",)),
    ("no ntp server", "Remove an NTP server", cmd_no_ntp_server, ("<ip-address>",)),
    ("ntp master", "Act as an authoritative NTP server", cmd_ntp_master, ()),
    ("ntp authenticate", "Enable NTP authentication", cmd_ntp_authenticate, ()),
    ("ntp authentication-key", "Define an NTP authentication key", cmd_ntp_authentication_key,
     ("<key-number> md5 <value>",)),
    ("ntp trusted-key", "Trust an NTP authentication key", cmd_ntp_trusted_key, ("<key-number>",)),
    ("ntp source", "Set the NTP source interface", cmd_ntp_source, ("<interface>",)),
    ("clear ntp associations", "Reset NTP associations", cmd_clear_ntp_associations, ()),
    ("reload", "Restart the device", cmd_reload, ()),
    ("debug all", "Enable all debugging", cmd_debug_all, ()),
    ("undebug all", "Disable all debugging", cmd_undebug_all, ()),

    # Interfaces
    ("interface", "Select an interface to configure", cmd_interface, ("<interface-name>",)),
    ("ip address", "Set the interface IP address", cmd_ip_address, ("<address> <netmask>",)),
    ("no ip address", "Remove the interface IP address", cmd_no_ip_address, ()),
    ("shutdown", "Administratively disable the interface", cmd_shutdown, ()),
    ("no shutdown", "Enable the interface", cmd_no_shutdown, ()),
    ("switchport", "Set layer 2 interface options", cmd_switchport, ("mode", "access")),
    ("ifconfig", "Display or configure host interfaces", cmd_ifconfig,
     ("<interface>", "<interface> up|down", "<interface> <address> <netmask>")),

    # Routing
    ("ip route", "Add a static route", cmd_ip_route, ("<prefix> <netmask> <next-hop>",)),
    ("no ip route", "Remove a static route", cmd_no_ip_route, ("<prefix>",)),
    ("router ospf", "Configure the OSPF process", cmd_router_ospf, ("<process-id>",)),
    ("network", "Enable OSPF on a network", cmd_network, ("<address> <wildcard> area <area-id>",)),
    ("router-id", "Set the OSPF router ID", cmd_router_id, ("<ipv4-address>",)),
    ("passive-interface", "Suppress OSPF on an interface", cmd_passive_interface, ("<interface>",)),
    ("distance", "Set the OSPF administrative distance", cmd_distance, ("<1-255>",)),
    ("default-information originate", "Advertise a default route",
     cmd_default_information_originate, ()),
    ("area", "Configure OSPF area options", cmd_area,
     ("<area-id> authentication", "<area-id> stub", "<area-id> default-cost <cost>")),
    ("neighbor", "Configure an OSPF neighbor", cmd_neighbor, ("<ipv4-address> [priority <0-255>]",)),

    # Access lists
    ("access-list", "Add an access list entry", cmd_access_list, ("<id> permit|deny",)),
    ("no access-list", "Delete an access list", cmd_no_access_list, ("<id>",)),

    # VLANs
    ("vlan", "Create or select a VLAN", cmd_vlan, ("<1-4094>",)),
    ("no vlan", "Delete a VLAN", cmd_no_vlan, ("<2-4094>",)),
    ("name", "Set the VLAN name", cmd_name, ("<vlan-name>",)),
    ("state", "Set the VLAN state", cmd_state, ("active", "suspend")),

    # Show
    ("show running-config", "Show the running configuration", cmd_show_running_config, ()),
    ("show startup-config", "Show the saved startup configuration", cmd_show_startup_config, ()),
    ("show version", "Show the software version", cmd_show_version, ()),
    ("show clock", "Show the system clock", cmd_show_clock, ()),
    ("show uptime", "Show the system uptime", cmd_show_uptime, ()),
    ("show interfaces", "Show interface status", cmd_show_interfaces, ("<interface>",)),
    ("show ip interface brief", "Show a summary of interface addresses", cmd_show_ip_interface_brief, ()),
    ("show ip route", "Show the routing table", cmd_show_ip_route, ()),
    ("show ip ospf", "Show the OSPF process", cmd_show_ip_ospf, ()),
    ("show access-lists", "Show access lists", cmd_show_access_lists, ("<id>",)),
    ("show vlan", "Show the VLAN database", cmd_show_vlan, ()),
    ("show ntp", "Show the NTP configuration", cmd_show_ntp, ("associations",)),
    ("show ntp associations", "Show NTP associations", cmd_show_ntp_associations, ()),
    ("show history", "Show the command history", cmd_show_history, ()),
    ("show login", "Show login settings", cmd_show_login, ()),
    ("show sessions", "Show open connections", cmd_show_sessions, ()),
    ("show controllers", "Show interface controller status", cmd_show_controllers,
     ("<interface-type> <interface-number>",)),
    ("show processes", "Show active processes", cmd_show_processes, ("cpu", "cpu history", "memory")),
]


def build_registry() -> Mapping[str, Command]:
    """Build the read-only command registry."""
    commands = {}
    for name, description, handler, suggestions in COMMAND_TABLE:
        if name in commands:
            raise ValueError(f"Duplicate command name: {name}")
        commands[name] = Command(name, description, handler, tuple(suggestions))
    return MappingProxyType(commands)
