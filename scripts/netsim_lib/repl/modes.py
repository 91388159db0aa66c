"""
Mode state machine for the netsim REPL.

Each mode has a hand-maintained allowlist of exact command names plus name
prefixes. A command outside the allowlist of the current mode is treated
exactly like an unknown command by the dispatcher.
"""

from typing import Callable, Optional

from .command import CommandError
from .context import CliContext, Mode


# Exact command names and name prefixes allowed in each mode
MODE_COMMANDS: dict[Mode, tuple[frozenset[str], tuple[str, ...]]] = {
    Mode.USER: (
        frozenset({
            "enable", "exit", "help", "show version", "show clock", "show uptime",
            "show sessions", "show controllers", "show history",
        }),
        (),
    ),
    Mode.PRIVILEGED: (
        frozenset({
            "enable", "disable", "exit", "configure terminal", "help",
            "write memory", "clock set", "copy running-config", "reload",
            "debug all", "undebug all", "clear ntp associations",
        }),
        ("ifconfig", "show"),
    ),
    Mode.CONFIG: (
        frozenset({
            "hostname", "interface", "vlan", "no vlan", "help", "write memory",
            "exit", "end", "do", "ip route", "no ip route", "router ospf",
            "access-list", "no access-list", "enable password", "enable secret",
            "service password-encryption", "no ntp server",
        }),
        ("ifconfig", "ntp"),
    ),
    Mode.INTERFACE: (
        frozenset({
            "interface", "ip address", "no ip address", "shutdown", "no shutdown",
            "switchport", "help", "write memory", "exit", "end", "do",
        }),
        (),
    ),
    Mode.VLAN: (
        frozenset({"vlan", "name", "state", "help", "exit", "end", "do"}),
        (),
    ),
    Mode.ROUTER: (
        frozenset({
            "network", "router-id", "passive-interface", "distance",
            "default-information originate", "area", "neighbor",
            "help", "exit", "end", "do",
        }),
        (),
    ),
}

PARENT_MODES: dict[Mode, Optional[Mode]] = {
    Mode.USER: None,
    Mode.PRIVILEGED: Mode.USER,
    Mode.CONFIG: Mode.PRIVILEGED,
    Mode.INTERFACE: Mode.CONFIG,
    Mode.VLAN: Mode.CONFIG,
    Mode.ROUTER: Mode.CONFIG,
}

CONFIG_MODES = frozenset({Mode.CONFIG, Mode.INTERFACE, Mode.VLAN, Mode.ROUTER})

# Exec commands that 'do' refuses to run from configuration mode
DO_REFUSED_COMMANDS = frozenset({"configure terminal", "enable", "disable", "exit"})


def legal_commands_for(mode: Mode) -> Callable[[str], bool]:
    """Return a predicate telling whether a command name is legal in a mode."""
    exact, prefixes = MODE_COMMANDS[mode]

    def is_legal(name: str) -> bool:
        return name in exact or name.startswith(prefixes)

    return is_legal


def _clear_selections(ctx: CliContext) -> None:
    ctx.selected_interface = None
    ctx.selected_vlan = None


def enter_privileged(ctx: CliContext) -> None:
    ctx.mode = Mode.PRIVILEGED
    _clear_selections(ctx)


def enter_config(ctx: CliContext) -> None:
    ctx.mode = Mode.CONFIG
    _clear_selections(ctx)


def enter_interface(ctx: CliContext, name: str) -> None:
    ctx.mode = Mode.INTERFACE
    ctx.selected_vlan = None
    ctx.selected_interface = name


def enter_vlan(ctx: CliContext, vlan_id: int) -> None:
    ctx.mode = Mode.VLAN
    ctx.selected_interface = None
    ctx.selected_vlan = vlan_id


def enter_router(ctx: CliContext) -> None:
    ctx.mode = Mode.ROUTER
    _clear_selections(ctx)


def exit_mode(ctx: CliContext) -> Mode:
    """Pop to the parent mode. Returns the new mode."""
    parent = PARENT_MODES[ctx.mode]
    if parent is None:
        raise CommandError("Already at the top level, no mode to exit")
    ctx.mode = parent
    _clear_selections(ctx)
    return parent


def end_mode(ctx: CliContext) -> None:
    """Return to privileged mode from any configuration mode."""
    if ctx.mode not in CONFIG_MODES:
        raise CommandError("'end' is only available in configuration modes")
    enter_privileged(ctx)
