"""
Session commands for REPL.

This module contains the commands that move between CLI modes (enable,
disable, configure terminal, exit, end), the help listing and 'do'.
"""

from netsim_lib.common import info, prompt_secret
from netsim_lib.config import hash_secret

from ..command import CommandError, require_no_arguments
from ..context import CliContext, Clock, Mode
from ..modes import (
    CONFIG_MODES,
    DO_REFUSED_COMMANDS,
    legal_commands_for,
    enter_privileged,
    enter_config,
    exit_mode,
    end_mode,
)
from ..dispatcher import find_command
from ..display import show_command_help


def cmd_enable(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """Enter privileged mode, asking for the enable secret or password if one is set."""
    require_no_arguments("enable", args)

    if ctx.mode != Mode.USER:
        info("Already in privileged mode")
        return

    passwords = ctx.store.passwords()
    if passwords.enable_secret:
        entered = prompt_secret("Password")
        if entered is None:
            raise CommandError("Password entry cancelled")
        if hash_secret(entered) != passwords.enable_secret:
            raise CommandError("Access denied: incorrect enable secret")
    elif passwords.enable_password:
        entered = prompt_secret("Password")
        if entered is None:
            raise CommandError("Password entry cancelled")
        if entered != passwords.enable_password:
            raise CommandError("Access denied: incorrect enable password")

    enter_privileged(ctx)


def cmd_disable(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """Leave privileged mode."""
    require_no_arguments("disable", args)
    ctx.mode = Mode.USER


def cmd_configure_terminal(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("configure terminal", args)
    enter_config(ctx)
    info("Enter configuration commands, one per line. End with 'end'.")


def cmd_exit(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """Return to the parent mode."""
    require_no_arguments("exit", args)
    exit_mode(ctx)


def cmd_end(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("end", args)
    end_mode(ctx)


def cmd_help(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """List the commands available in the current mode."""
    show_command_help(ctx.commands, legal_commands_for(ctx.mode))


def cmd_do(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """Run a privileged exec command without leaving configuration mode."""
    if ctx.mode not in CONFIG_MODES:
        raise CommandError("'do' is only available in configuration modes")
    if not args:
        raise CommandError("Incomplete command: do <exec command>")

    text = " ".join(args)
    command = find_command(text, ctx.commands, Mode.PRIVILEGED)
    if command is None:
        raise CommandError(f"Invalid exec command: {text}")
    if command.name in DO_REFUSED_COMMANDS:
        raise CommandError(f"'{command.name}' cannot be run with 'do'")

    saved_mode = ctx.mode
    saved_interface = ctx.selected_interface
    saved_vlan = ctx.selected_vlan
    ctx.mode = Mode.PRIVILEGED
    try:
        command.execute(text[len(command.name):].split(), ctx, clock)
    finally:
        ctx.mode = saved_mode
        ctx.selected_interface = saved_interface
        ctx.selected_vlan = saved_vlan
