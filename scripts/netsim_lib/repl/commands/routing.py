"""
Routing commands for REPL.

This module contains static routes and the OSPF router configuration.
All OSPF sub-commands accumulate into the single OSPF process.
"""

import ipaddress

from netsim_lib.common import info
from netsim_lib.config import (
    is_number,
    validate_ipv4,
    validate_interface_name,
    parse_prefix_len,
    prefix_to_netmask,
)

from ..command import CommandError
from ..context import CliContext, Clock
from ..modes import enter_router


def _parse_int(text: str, low: int, high: int, what: str) -> int:
    if not is_number(text) or not low <= int(text) <= high:
        raise CommandError(f"Invalid {what} '{text}': expected a number between {low} and {high}")
    return int(text)


def _parse_area_id(text: str) -> str:
    if is_number(text) or validate_ipv4(text):
        return text
    raise CommandError(f"Invalid area id '{text}': expected a number or dotted decimal")


# =============================================================================
# Static routes
# =============================================================================

def cmd_ip_route(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """ip route <prefix> <netmask> <next-hop|exit-interface>"""
    if len(args) != 3:
        raise CommandError("Usage: ip route <prefix> <netmask> <next-hop|interface>")
    destination, mask, next_hop = args
    if not validate_ipv4(destination):
        raise CommandError(f"Invalid IP address: {destination}")
    try:
        prefix_len = parse_prefix_len(mask)
    except ValueError as e:
        raise CommandError(str(e))
    if not validate_ipv4(next_hop) and not validate_interface_name(next_hop):
        raise CommandError(f"Invalid next hop '{next_hop}': expected an IP address or interface name")
    ctx.store.route_add(destination, prefix_to_netmask(prefix_len), next_hop)


def cmd_no_ip_route(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if not args:
        raise CommandError("Usage: no ip route <prefix>")
    if not ctx.store.route_delete(args[0]):
        raise CommandError(f"No static route to {args[0]}")


# =============================================================================
# OSPF
# =============================================================================

def cmd_router_ospf(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: router ospf <process-id>")
    ctx.store.ospf_set_process(_parse_int(args[0], 1, 65535, "process id"))
    enter_router(ctx)


def cmd_network(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """network <address> <wildcard|mask|bits> area <area-id>"""
    if len(args) != 4 or args[2] != "area":
        raise CommandError("Usage: network <address> <wildcard-mask> area <area-id>")
    address, mask, _, area_text = args
    if not validate_ipv4(address):
        raise CommandError(f"Invalid IP address: {address}")
    if mask == "0.0.0.0":
        mask_bits = 32  # A zero wildcard matches a single host
    else:
        try:
            mask_bits = parse_prefix_len(mask)
        except ValueError as e:
            raise CommandError(str(e))
    area_id = _parse_area_id(area_text)

    network = ipaddress.IPv4Network(f"{address}/{mask_bits}", strict=False)
    ctx.store.ospf_add_network(str(network.network_address), mask_bits, area_id)


def cmd_router_id(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1 or not validate_ipv4(args[0]):
        raise CommandError("Usage: router-id <ipv4-address>")
    ctx.store.ospf_set_router_id(args[0])


def cmd_passive_interface(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if not args:
        raise CommandError("Usage: passive-interface <interface>")
    name = "".join(args)
    if not validate_interface_name(name):
        raise CommandError(f"Invalid interface name: {name}")
    ctx.store.ospf_add_passive(name)


def cmd_distance(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: distance <1-255>")
    ctx.store.ospf_set_distance(_parse_int(args[0], 1, 255, "distance"))


def cmd_default_information_originate(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if args:
        raise CommandError("'default-information originate' does not accept additional arguments")
    ctx.store.ospf_set_default_originate(True)


def cmd_area(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """area <area-id> authentication | stub | default-cost <cost>"""
    if len(args) < 2:
        raise CommandError("Usage: area <area-id> authentication|stub|default-cost <cost>")
    area_id = _parse_area_id(args[0])
    option = args[1]

    if option == "authentication" and len(args) == 2:
        ctx.store.ospf_configure_area(area_id, authentication=True)
    elif option == "stub" and len(args) == 2:
        ctx.store.ospf_configure_area(area_id, stub=True)
    elif option == "default-cost" and len(args) == 3:
        cost = _parse_int(args[2], 0, 16777215, "default cost")
        ctx.store.ospf_configure_area(area_id, default_cost=cost)
    else:
        raise CommandError("Usage: area <area-id> authentication|stub|default-cost <cost>")


def cmd_neighbor(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """neighbor <ipv4-address> [priority <0-255>]"""
    if not args or not validate_ipv4(args[0]):
        raise CommandError("Usage: neighbor <ipv4-address> [priority <0-255>]")
    priority = None
    if len(args) == 3 and args[1] == "priority":
        priority = _parse_int(args[2], 0, 255, "priority")
    elif len(args) != 1:
        raise CommandError("Usage: neighbor <ipv4-address> [priority <0-255>]")
    ctx.store.ospf_add_neighbor(args[0], priority)
    info(f"OSPF neighbor {args[0]} configured")
