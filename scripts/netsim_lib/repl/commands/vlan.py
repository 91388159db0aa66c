"""
VLAN commands for REPL.

'vlan <id>' creates the VLAN if needed and enters VLAN mode, where 'name'
and 'state' edit it. VLAN 1 always exists and cannot be deleted.
"""

import re

from netsim_lib.config import is_number
from netsim_lib.config.constants import VLAN_ID_MIN, VLAN_ID_MAX, DEFAULT_VLAN_ID

from ..command import CommandError
from ..context import CliContext, Clock
from ..modes import enter_vlan


VLAN_NAME_RE = re.compile(r'^[A-Za-z0-9_.-]{1,32}$')


def parse_vlan_id(text: str) -> int:
    if not is_number(text) or not VLAN_ID_MIN <= int(text) <= VLAN_ID_MAX:
        raise CommandError(f"Invalid VLAN id '{text}': expected a number between {VLAN_ID_MIN} and {VLAN_ID_MAX}")
    return int(text)


def _selected_vlan(ctx: CliContext) -> int:
    if ctx.selected_vlan is None:
        raise CommandError("No VLAN selected. Use the 'vlan' command first")
    return ctx.selected_vlan


def cmd_vlan(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: vlan <1-4094>")
    vlan_id = parse_vlan_id(args[0])
    ctx.store.vlan_ensure(vlan_id)
    enter_vlan(ctx, vlan_id)


def cmd_no_vlan(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: no vlan <2-4094>")
    vlan_id = parse_vlan_id(args[0])
    if vlan_id == DEFAULT_VLAN_ID:
        raise CommandError("Default VLAN 1 may not be deleted")
    if not ctx.store.vlan_delete(vlan_id):
        raise CommandError(f"VLAN {vlan_id} does not exist")


def cmd_name(args: list[str], ctx: CliContext, clock: Clock) -> None:
    vlan_id = _selected_vlan(ctx)
    if len(args) != 1 or not VLAN_NAME_RE.match(args[0]):
        raise CommandError("Usage: name <vlan-name> (single word, up to 32 characters)")
    if not ctx.store.vlan_set_name(vlan_id, args[0]):
        raise CommandError(f"VLAN {vlan_id} does not exist")


def cmd_state(args: list[str], ctx: CliContext, clock: Clock) -> None:
    vlan_id = _selected_vlan(ctx)
    if len(args) != 1 or args[0] not in ("active", "suspend"):
        raise CommandError("Usage: state active|suspend")
    if not ctx.store.vlan_set_state(vlan_id, args[0]):
        raise CommandError(f"VLAN {vlan_id} does not exist")
