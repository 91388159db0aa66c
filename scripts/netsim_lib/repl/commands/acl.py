"""
Access list commands for REPL.

Numbered lists 1-99 and 1300-1999 take standard entries only, 100-199 and
2000-2699 take extended entries only. Named lists take either. Entries are
appended in the order they are typed.
"""

import re
from typing import Optional

from netsim_lib.config import AclEntry, is_number, validate_ipv4

from ..command import CommandError
from ..context import CliContext, Clock


STANDARD_RANGES = ((1, 99), (1300, 1999))
EXTENDED_RANGES = ((100, 199), (2000, 2699))

PROTOCOLS = ("ip", "tcp", "udp", "icmp", "gre", "esp", "ahp", "eigrp", "ospf", "pim")
PORT_PROTOCOLS = ("tcp", "udp")
PORT_OPERATORS = ("eq", "neq", "gt", "lt", "range")

ACL_NAME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9_-]*$')
PORT_NAME_RE = re.compile(r'^[a-z][a-z0-9-]*$')

# Permitted action keywords and how they are stored
ACTIONS = {"permit": "allow", "allow": "allow", "deny": "deny"}


def acl_kind(acl_id: str) -> Optional[str]:
    """'standard' or 'extended' for numbered lists, None for named lists."""
    if not is_number(acl_id):
        return None
    number = int(acl_id)
    if any(low <= number <= high for low, high in STANDARD_RANGES):
        return "standard"
    if any(low <= number <= high for low, high in EXTENDED_RANGES):
        return "extended"
    raise CommandError(
        f"Invalid access list number {acl_id}: use 1-99 or 1300-1999 (standard), "
        "100-199 or 2000-2699 (extended)"
    )


def _is_protocol(token: str) -> bool:
    return token in PROTOCOLS or (is_number(token) and int(token) <= 255)


def _parse_address(tokens: list[str], i: int) -> tuple[str, int]:
    """Parse 'any', 'host <ip>' or '<ip> [<wildcard>]' starting at tokens[i]."""
    if i >= len(tokens):
        raise CommandError("Incomplete access list entry: missing address")
    token = tokens[i]
    if token == "any":
        return "any", i + 1
    if token == "host":
        if i + 1 >= len(tokens) or not validate_ipv4(tokens[i + 1]):
            raise CommandError("Expected an IP address after 'host'")
        return f"host {tokens[i + 1]}", i + 2
    if not validate_ipv4(token):
        raise CommandError(f"Invalid address '{token}': expected any, host <ip> or <ip> [<wildcard>]")
    if i + 1 < len(tokens) and validate_ipv4(tokens[i + 1]):
        return f"{token} {tokens[i + 1]}", i + 2
    return token, i + 1


def _parse_port(token: str) -> str:
    if is_number(token) and int(token) <= 65535:
        return token
    if PORT_NAME_RE.match(token):
        return token
    raise CommandError(f"Invalid port '{token}'")


def _parse_port_match(tokens: list[str], i: int, protocol: str) -> tuple[Optional[str], Optional[str], int]:
    """Parse an optional '<op> <port>' or 'range <lo> <hi>' at tokens[i]."""
    if i >= len(tokens) or tokens[i] not in PORT_OPERATORS:
        return None, None, i
    operator = tokens[i]
    if protocol not in PORT_PROTOCOLS:
        raise CommandError(f"Port matching is only valid for tcp and udp, not {protocol}")
    if operator == "range":
        if i + 2 >= len(tokens):
            raise CommandError("Usage: range <low-port> <high-port>")
        low, high = _parse_port(tokens[i + 1]), _parse_port(tokens[i + 2])
        if is_number(low) and is_number(high) and int(low) > int(high):
            raise CommandError(f"Invalid port range {low}-{high}")
        return operator, f"{low} {high}", i + 3
    if i + 1 >= len(tokens):
        raise CommandError(f"Expected a port after '{operator}'")
    return operator, _parse_port(tokens[i + 1]), i + 2


def parse_standard_entry(action: str, tokens: list[str]) -> AclEntry:
    source, i = _parse_address(tokens, 0)
    if i != len(tokens):
        raise CommandError(f"Unexpected input in standard access list entry: {' '.join(tokens[i:])}")
    return AclEntry(action=action, source=source)


def parse_extended_entry(action: str, tokens: list[str]) -> AclEntry:
    if not tokens or not _is_protocol(tokens[0]):
        raise CommandError(f"Extended access list entries need a protocol: {', '.join(PROTOCOLS)} or 0-255")
    protocol = tokens[0]
    source, i = _parse_address(tokens, 1)
    source_operator, source_port, i = _parse_port_match(tokens, i, protocol)
    destination, i = _parse_address(tokens, i)
    destination_operator, destination_port, i = _parse_port_match(tokens, i, protocol)
    if i != len(tokens):
        raise CommandError(f"Unexpected input in extended access list entry: {' '.join(tokens[i:])}")
    return AclEntry(
        action=action,
        source=source,
        destination=destination,
        protocol=protocol,
        source_operator=source_operator,
        source_port=source_port,
        destination_operator=destination_operator,
        destination_port=destination_port,
    )


def cmd_access_list(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """access-list <id> permit|allow|deny <entry>"""
    if len(args) < 3:
        raise CommandError("Usage: access-list <id> permit|deny <source> | <protocol> <source> <destination>")
    acl_id, action_text, tokens = args[0], args[1], args[2:]

    if not is_number(acl_id) and not ACL_NAME_RE.match(acl_id):
        raise CommandError(f"Invalid access list name: {acl_id}")
    action = ACTIONS.get(action_text)
    if action is None:
        raise CommandError(f"Invalid action '{action_text}': expected permit, allow or deny")

    kind = acl_kind(acl_id)
    if kind is None:
        kind = "extended" if _is_protocol(tokens[0]) else "standard"

    if kind == "standard":
        entry = parse_standard_entry(action, tokens)
    else:
        entry = parse_extended_entry(action, tokens)

    ctx.store.acl_append(acl_id, entry)


def cmd_no_access_list(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: no access-list <id>")
    if not ctx.store.acl_delete(args[0]):
        raise CommandError(f"Access list {args[0]} does not exist")
