"""
netsim_lib.repl.commands - Command handlers for REPL

This package contains command handler functions organized by feature area:
- session: Mode changes, help and 'do'
- system: Hostname, clock, passwords, NTP, saving configuration, reload, debug
- interfaces: Interface mode commands and ifconfig
- routing: Static routes and OSPF
- acl: Access lists
- vlan: VLAN database commands
- show: Show commands

Every handler has the signature handler(args, ctx, clock).
"""

# Session operations
from .session import (
    cmd_enable,
    cmd_disable,
    cmd_configure_terminal,
    cmd_exit,
    cmd_end,
    cmd_help,
    cmd_do,
)

# System operations
from .system import (
    parse_clock_args,
    save_running_config,
    cmd_hostname,
    cmd_clock_set,
    cmd_enable_password,
    cmd_enable_secret,
    cmd_service_password_encryption,
    cmd_write_memory,
    cmd_copy_running_config,
    cmd_ntp_server,
    cmd_no_ntp_server,
    cmd_ntp_master,
    cmd_ntp_authenticate,
    cmd_ntp_authentication_key,
    cmd_ntp_trusted_key,
    cmd_ntp_source,
    cmd_clear_ntp_associations,
    cmd_reload,
    cmd_debug_all,
    cmd_undebug_all,
)

# Interface operations
from .interfaces import (
    cmd_interface,
    cmd_ip_address,
    cmd_no_ip_address,
    cmd_shutdown,
    cmd_no_shutdown,
    cmd_switchport,
    cmd_ifconfig,
)

# Routing operations
from .routing import (
    cmd_ip_route,
    cmd_no_ip_route,
    cmd_router_ospf,
    cmd_network,
    cmd_router_id,
    cmd_passive_interface,
    cmd_distance,
    cmd_default_information_originate,
    cmd_area,
    cmd_neighbor,
)

# Access list operations
from .acl import (
    acl_kind,
    cmd_access_list,
    cmd_no_access_list,
)

# VLAN operations
from .vlan import (
    parse_vlan_id,
    cmd_vlan,
    cmd_no_vlan,
    cmd_name,
    cmd_state,
)

# Show operations
from .show import (
    format_uptime,
    cmd_show_running_config,
    cmd_show_startup_config,
    cmd_show_version,
    cmd_show_clock,
    cmd_show_uptime,
    cmd_show_interfaces,
    cmd_show_ip_interface_brief,
    cmd_show_ip_route,
    cmd_show_ip_ospf,
    cmd_show_access_lists,
    cmd_show_vlan,
    cmd_show_ntp,
    cmd_show_ntp_associations,
    cmd_show_history,
    cmd_show_login,
    cmd_show_sessions,
    cmd_show_controllers,
    cmd_show_processes,
)

__all__ = [
    # Session
    'cmd_enable',
    'cmd_disable',
    'cmd_configure_terminal',
    'cmd_exit',
    'cmd_end',
    'cmd_help',
    'cmd_do',
    # System
    'parse_clock_args',
    'save_running_config',
    'cmd_hostname',
    'cmd_clock_set',
    'cmd_enable_password',
    'cmd_enable_secret',
    'cmd_service_password_encryption',
    'cmd_write_memory',
    'cmd_copy_running_config',
    'cmd_ntp_server',
    'cmd_no_ntp_server',
    'cmd_ntp_master',
    'cmd_ntp_authenticate',
    'cmd_ntp_authentication_key',
    'cmd_ntp_trusted_key',
    'cmd_ntp_source',
    'cmd_clear_ntp_associations',
    'cmd_reload',
    'cmd_debug_all',
    'cmd_undebug_all',
    # Interfaces
    'cmd_interface',
    'cmd_ip_address',
    'cmd_no_ip_address',
    'cmd_shutdown',
    'cmd_no_shutdown',
    'cmd_switchport',
    'cmd_ifconfig',
    # Routing
    'cmd_ip_route',
    'cmd_no_ip_route',
    'cmd_router_ospf',
    'cmd_network',
    'cmd_router_id',
    'cmd_passive_interface',
    'cmd_distance',
    'cmd_default_information_originate',
    'cmd_area',
    'cmd_neighbor',
    # ACL
    'acl_kind',
    'cmd_access_list',
    'cmd_no_access_list',
    # VLAN
    'parse_vlan_id',
    'cmd_vlan',
    'cmd_no_vlan',
    'cmd_name',
    'cmd_state',
    # Show
    'format_uptime',
    'cmd_show_running_config',
    'cmd_show_startup_config',
    'cmd_show_version',
    'cmd_show_clock',
    'cmd_show_uptime',
    'cmd_show_interfaces',
    'cmd_show_ip_interface_brief',
    'cmd_show_ip_route',
    'cmd_show_ip_ospf',
    'cmd_show_access_lists',
    'cmd_show_vlan',
    'cmd_show_ntp',
    'cmd_show_ntp_associations',
    'cmd_show_history',
    'cmd_show_login',
    'cmd_show_sessions',
    'cmd_show_controllers',
    'cmd_show_processes',
]
