"""
Configuration display functions for the netsim REPL.

These functions render the device state held by the ConfigurationStore
for the show commands, using rich tables.
"""

from typing import Mapping

from rich.console import Console
from rich.table import Table

from netsim_lib.common import Colors
from netsim_lib.config import (
    InterfaceConfig,
    SwitchportConfig,
    StaticRoute,
    OSPFConfig,
    AccessControlList,
    VlanConfig,
    NtpConfig,
)
from netsim_lib.config.render import acl_rule

console = Console(highlight=False)


def _status(iface: InterfaceConfig) -> str:
    return "up" if iface.is_up else "administratively down"


def show_command_help(commands: Mapping, is_legal) -> None:
    """List the commands available in the current mode."""
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Command")
    table.add_column("Description")
    for name in sorted(commands):
        if is_legal(name):
            table.add_row(name, commands[name].description)
    console.print(table)
    print("Type '<command> ?' to list the next keyword")


def show_ifconfig_interface(iface: InterfaceConfig) -> None:
    """Show one ifconfig interface in ifconfig style."""
    flags = "UP,BROADCAST,RUNNING,MULTICAST" if iface.is_up else "BROADCAST,MULTICAST"
    print(f"{Colors.BOLD}{iface.name}{Colors.NC}: flags=<{flags}>  mtu 1500")
    print(f"        inet {iface.ip_address}  netmask {iface.netmask}  broadcast {iface.broadcast}")


def show_ifconfig(interfaces: list[InterfaceConfig]) -> None:
    if not interfaces:
        print("No interfaces configured.")
        return
    for iface in interfaces:
        show_ifconfig_interface(iface)
        print()


def show_interfaces(interfaces: list[InterfaceConfig], switchports: Mapping[str, SwitchportConfig]) -> None:
    """Detailed view of router interfaces."""
    if not interfaces:
        print("No interfaces found.")
        return
    for iface in interfaces:
        protocol = "up" if iface.is_up else "down"
        print(f"{iface.name} is {_status(iface)}, line protocol is {protocol}")
        if iface.ip_address:
            print(f"  Internet address is {iface.ip_address}/{iface.prefix_len}, broadcast {iface.broadcast}")
        else:
            print("  No Internet address configured")
        sw = switchports.get(iface.name)
        if sw:
            vlan = f", access VLAN {sw.access_vlan}" if sw.mode == "access" else ""
            print(f"  Switchport mode {sw.mode}{vlan}")
        print("  MTU 1500 bytes, BW 1000000 Kbit/sec, DLY 10 usec")
        print("  Encapsulation ARPA, loopback not set")


def show_ip_interface_brief(interfaces: list[InterfaceConfig]) -> None:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Interface")
    table.add_column("IP-Address")
    table.add_column("OK?")
    table.add_column("Method")
    table.add_column("Status")
    table.add_column("Protocol")
    for iface in interfaces:
        table.add_row(
            iface.name,
            iface.ip_address or "unassigned",
            "YES",
            "manual" if iface.ip_address else "unset",
            _status(iface),
            "up" if iface.is_up else "down",
        )
    console.print(table)


def show_routes(routes: list[StaticRoute], interfaces: list[InterfaceConfig]) -> None:
    """Routing table: connected networks followed by static routes."""
    print("Codes: C - connected, S - static")
    print()
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Code")
    table.add_column("Network")
    table.add_column("Netmask")
    table.add_column("Via")
    for iface in interfaces:
        if iface.ip_address and iface.is_up:
            table.add_row("C", iface.ip_address, iface.netmask, f"directly connected, {iface.name}")
    for route in routes:
        table.add_row("S", route.destination, route.netmask, route.next_hop)
    if table.row_count == 0:
        print("Gateway of last resort is not set")
        return
    console.print(table)


def show_ospf(ospf: OSPFConfig) -> None:
    """Show the OSPF process configuration."""
    if ospf.process_id is None:
        print("%OSPF: Router process not configured")
        return
    router_id = ospf.router_id or "not set"
    print(f"{Colors.BOLD}Routing Process \"ospf {ospf.process_id}\" with ID {router_id}{Colors.NC}")
    if ospf.distance is not None:
        print(f" Administrative distance {ospf.distance}")
    if ospf.default_information_originate:
        print(" Originating default route")
    if ospf.passive_interfaces:
        print(f" Passive interfaces: {', '.join(sorted(ospf.passive_interfaces))}")

    if ospf.networks:
        table = Table(title="Networks", show_header=True, header_style="bold", box=None)
        table.add_column("Network")
        table.add_column("Mask bits")
        table.add_column("Area")
        for network, bits in ospf.networks.items():
            table.add_row(network, str(bits), ospf.network_areas.get(network, "0"))
        console.print(table)

    for area_id, area in ospf.areas.items():
        details = []
        if area.authentication:
            details.append("authentication")
        if area.stub:
            details.append("stub")
        if area.default_cost is not None:
            details.append(f"default-cost {area.default_cost}")
        print(f" Area {area_id}: {', '.join(details) if details else 'normal'}")

    for address, priority in ospf.neighbors.items():
        prio = f" priority {priority}" if priority is not None else ""
        print(f" Neighbor {address}{prio}")


def show_access_lists(acls: list[AccessControlList]) -> None:
    if not acls:
        print("No access lists configured.")
        return
    for acl in acls:
        kind = "Extended" if acl.extended else "Standard"
        print(f"{kind} IP access list {acl.id}")
        for seq, entry in enumerate(acl.entries, start=1):
            matches = f" ({entry.matches} matches)" if entry.matches else ""
            print(f"    {seq * 10} {entry.keyword} {acl_rule(entry)}{matches}")


def show_vlans(vlans: list[VlanConfig], switchports: Mapping[str, SwitchportConfig]) -> None:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("VLAN")
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("Ports")
    for vlan in vlans:
        ports = sorted(
            name for name, sw in switchports.items()
            if sw.mode == "access" and sw.access_vlan == vlan.vlan_id
        )
        status = "active" if vlan.state == "active" else "act/lshut"
        table.add_row(str(vlan.vlan_id), vlan.name, status, ", ".join(ports))
    console.print(table)


def show_ntp(ntp: NtpConfig) -> None:
    """Summary of NTP configuration."""
    print(f"NTP master: {'enabled' if ntp.master else 'disabled'}")
    print(f"NTP authentication: {'enabled' if ntp.authenticate else 'disabled'}")
    if ntp.source_interface:
        print(f"NTP source interface: {ntp.source_interface}")
    if ntp.authentication_keys:
        trusted = ", ".join(str(k) for k in sorted(ntp.trusted_keys)) or "none"
        print(f"Authentication keys: {', '.join(str(k) for k in sorted(ntp.authentication_keys))} (trusted: {trusted})")
    if ntp.servers:
        print("NTP servers:")
        for server in ntp.servers:
            print(f"  {server}")
    else:
        print("No NTP servers configured.")


def show_ntp_associations(ntp: NtpConfig) -> None:
    if not ntp.associations:
        print("No NTP associations.")
        return
    table = Table(show_header=True, header_style="bold", box=None)
    for column in ("address", "ref clock", "st", "when", "poll", "reach", "delay", "offset", "disp"):
        table.add_column(column)
    for assoc in ntp.associations:
        table.add_row(
            assoc.address,
            assoc.ref_clock,
            str(assoc.stratum),
            assoc.when,
            str(assoc.poll),
            str(assoc.reach),
            f"{assoc.delay:.3f}",
            f"{assoc.offset:.3f}",
            f"{assoc.disp:.3f}",
        )
    console.print(table)
    print(" * sys.peer, # selected, + candidate, - outlyer, x falseticker, ~ configured")
