"""
Interface commands for REPL.

Router interfaces are configured from interface mode ('interface', 'ip
address', 'shutdown', 'switchport'). Host-style interfaces are handled by
'ifconfig', which keeps its own table; the two are not synchronised.
"""

from netsim_lib.common import info
from netsim_lib.config import (
    is_number,
    validate_interface_name,
    parse_ipv4,
    parse_prefix_len,
)
from netsim_lib.config.constants import VLAN_ID_MIN, VLAN_ID_MAX

from ..command import CommandError
from ..context import CliContext, Clock
from ..modes import enter_interface
from ..display import show_ifconfig, show_ifconfig_interface


def _selected_interface(ctx: CliContext) -> str:
    if not ctx.selected_interface:
        raise CommandError("No interface selected. Use the 'interface' command first")
    return ctx.selected_interface


def _parse_address(address: str, mask: str) -> tuple[str, int]:
    try:
        ip = parse_ipv4(address)
        prefix_len = parse_prefix_len(mask)
    except ValueError as e:
        raise CommandError(str(e))
    return str(ip), prefix_len


# =============================================================================
# Interface mode
# =============================================================================

def cmd_interface(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """Select an interface, e.g. 'interface GigabitEthernet0/1' or 'interface gi 0/1'."""
    if not args:
        raise CommandError("Usage: interface <name>")
    name = "".join(args)
    if not validate_interface_name(name):
        raise CommandError(f"Invalid interface name: {name}")
    ctx.store.interface_ensure(name)
    enter_interface(ctx, name)


def cmd_ip_address(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """ip address <address> <mask|prefix-length>"""
    name = _selected_interface(ctx)
    if len(args) != 2:
        raise CommandError("Usage: ip address <address> <netmask|prefix-length>")
    address, prefix_len = _parse_address(args[0], args[1])
    iface = ctx.store.interface_set_address(name, address, prefix_len)
    info(f"{name}: {iface.ip_address}/{iface.prefix_len} broadcast {iface.broadcast}")


def cmd_no_ip_address(args: list[str], ctx: CliContext, clock: Clock) -> None:
    name = _selected_interface(ctx)
    if args:
        raise CommandError("'no ip address' does not accept additional arguments")
    if not ctx.store.interface_clear_address(name):
        raise CommandError(f"No IP address configured on {name}")


def cmd_shutdown(args: list[str], ctx: CliContext, clock: Clock) -> None:
    name = _selected_interface(ctx)
    if args:
        raise CommandError("'shutdown' does not accept additional arguments")
    ctx.store.interface_set_state(name, False)


def cmd_no_shutdown(args: list[str], ctx: CliContext, clock: Clock) -> None:
    name = _selected_interface(ctx)
    if args:
        raise CommandError("'no shutdown' does not accept additional arguments")
    ctx.store.interface_set_state(name, True)


def cmd_switchport(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """
    switchport mode access|trunk
    switchport access vlan <id>

    Assigning an access VLAN creates the VLAN if needed.
    """
    name = _selected_interface(ctx)

    if len(args) == 2 and args[0] == "mode":
        if args[1] not in ("access", "trunk"):
            raise CommandError(f"Invalid switchport mode '{args[1]}': expected access or trunk")
        ctx.store.switchport_set_mode(name, args[1])
        return

    if len(args) == 3 and args[0] == "access" and args[1] == "vlan":
        text = args[2]
        if not is_number(text) or not VLAN_ID_MIN <= int(text) <= VLAN_ID_MAX:
            raise CommandError(f"Invalid VLAN id '{text}': expected a number between {VLAN_ID_MIN} and {VLAN_ID_MAX}")
        vlan_id = int(text)
        ctx.store.vlan_ensure(vlan_id)
        ctx.store.switchport_set_access_vlan(name, vlan_id)
        return

    raise CommandError("Usage: switchport mode access|trunk | switchport access vlan <id>")


# =============================================================================
# ifconfig
# =============================================================================

def cmd_ifconfig(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """
    ifconfig                                   list interfaces
    ifconfig <iface>                           show one interface
    ifconfig <iface> up|down                   change state
    ifconfig <iface> <address> up              set address with a /24 mask
    ifconfig <iface> <address> <mask> [up]     set address and mask
    ifconfig <iface> <address> netmask <mask>
    """
    if not args:
        show_ifconfig(ctx.store.ifconfig_all())
        return

    name = args[0]
    if len(args) == 1:
        iface = ctx.store.ifconfig_get(name)
        if iface is None:
            raise CommandError(f"Interface {name} not found")
        show_ifconfig_interface(iface)
        return

    if len(args) == 2 and args[1] in ("up", "down"):
        is_up = args[1] == "up"
        if not ctx.store.ifconfig_set_state(name, is_up):
            raise CommandError(f"Interface {name} not found")
        info(f"{name} {'up and running' if is_up else 'down and stopped'}")
        return

    if not validate_interface_name(name):
        raise CommandError(f"Invalid interface name: {name}")

    rest = args[2:]
    if rest == ["up"]:
        mask = "24"
    elif len(rest) == 1:
        mask = rest[0]
    elif len(rest) == 2 and rest[0] == "netmask":
        mask = rest[1]
    elif len(rest) == 2 and rest[1] == "up":
        mask = rest[0]
    else:
        raise CommandError("Usage: ifconfig <iface> <address> <mask|up>")

    address, prefix_len = _parse_address(args[1], mask)
    show_ifconfig_interface(ctx.store.ifconfig_set_address(name, address, prefix_len))
