"""
System commands for REPL.

This module contains device-wide settings (hostname, clock, passwords and
NTP), saving the running configuration, reload and debugging.
"""

import re
from datetime import datetime
from pathlib import Path
from time import monotonic

from netsim_lib.common import log, info, prompt_confirm
from netsim_lib.config import (
    is_number,
    validate_hostname,
    validate_ipv4,
    validate_interface_name,
    hash_secret,
    save_config,
    render_running_config,
    running_config_lines,
)
from netsim_lib.config.constants import CLOCK_YEAR_MIN, CLOCK_YEAR_MAX, MONTHS

from ..command import CommandError, require_no_arguments
from ..context import CliContext, Clock, Mode


TIME_RE = re.compile(r'^(\d{1,2}):(\d{2}):(\d{2})$', re.ASCII)


# =============================================================================
# Hostname and clock
# =============================================================================

def cmd_hostname(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: hostname <name>")
    name = args[0]
    if not validate_hostname(name):
        raise CommandError(
            f"Invalid hostname '{name}': must start with a letter and contain only "
            "letters, digits and hyphens (max 63 characters)"
        )
    ctx.config.hostname = name


def parse_clock_args(args: list[str]) -> tuple[str, str]:
    """
    Validate 'clock set' arguments.

    Returns the (time, date) strings to store. Raises CommandError naming
    the expected range of the first invalid field.
    """
    if len(args) != 4:
        raise CommandError("Usage: clock set <hh:mm:ss> <day 1-31> <month> <year 1993-2035>")
    time_text, day_text, month_text, year_text = args

    match = TIME_RE.match(time_text)
    if not match:
        raise CommandError(f"Invalid time '{time_text}': expected hh:mm:ss between 00:00:00 and 23:59:59")
    hours, minutes, seconds = (int(part) for part in match.groups())
    if hours > 23 or minutes > 59 or seconds > 59:
        raise CommandError(f"Invalid time '{time_text}': expected hh:mm:ss between 00:00:00 and 23:59:59")

    if not is_number(day_text) or not 1 <= int(day_text) <= 31:
        raise CommandError(f"Invalid day '{day_text}': expected a number between 1 and 31")

    month = month_text.capitalize()
    if month not in MONTHS:
        raise CommandError(f"Invalid month '{month_text}': expected a month name, January to December")

    if not is_number(year_text) or not CLOCK_YEAR_MIN <= int(year_text) <= CLOCK_YEAR_MAX:
        raise CommandError(f"Invalid year '{year_text}': expected a year between {CLOCK_YEAR_MIN} and {CLOCK_YEAR_MAX}")

    return f"{hours:02d}:{minutes:02d}:{seconds:02d}", f"{int(day_text)} {month} {int(year_text)}"


def cmd_clock_set(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """Set the simulated clock. Nothing changes unless every field is valid."""
    new_time, new_date = parse_clock_args(args)
    clock.time = new_time
    clock.date = new_date
    info(f"Clock set to {clock.time} {clock.date}")


# =============================================================================
# Passwords
# =============================================================================

def cmd_enable_password(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: enable password <password>")
    ctx.store.set_enable_password(args[0])


def cmd_enable_secret(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """Store a one-way digest of the enable secret."""
    if len(args) != 1:
        raise CommandError("Usage: enable secret <secret>")
    ctx.store.set_enable_secret(hash_secret(args[0]))


def cmd_service_password_encryption(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if args:
        raise CommandError("'service password-encryption' does not accept additional arguments")
    ctx.config.password_encryption = True
    info("Password encryption enabled")


# =============================================================================
# Saving configuration
# =============================================================================

def save_running_config(ctx: CliContext) -> None:
    """Copy the running configuration into the startup configuration and persist it."""
    ctx.config.startup_config = running_config_lines(ctx)
    ctx.config.last_written = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    try:
        save_config(ctx.config, ctx.config_file)
    except OSError as e:
        raise CommandError(f"Could not write {ctx.config_file}: {e}")


def cmd_write_memory(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if args:
        raise CommandError("'write memory' does not accept additional arguments")
    print("Building configuration...")
    save_running_config(ctx)


def cmd_copy_running_config(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """Copy the running configuration to startup-config or to a file."""
    if len(args) != 1:
        raise CommandError("Usage: copy running-config <startup-config|file-name>")
    destination = args[0]

    if destination == "startup-config":
        save_running_config(ctx)
        return

    path = Path(destination)
    try:
        path.write_text(render_running_config(ctx))
    except (OSError, ValueError) as e:
        raise CommandError(f"Could not write {path}: {e}")
    log(f"Running configuration copied to {path}")


# =============================================================================
# NTP
# =============================================================================

def cmd_ntp_server(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: ntp server <ip-address>")
    if not validate_ipv4(args[0]):
        raise CommandError(f"Invalid IP address: {args[0]}")
    if not ctx.store.ntp_add_server(args[0]):
        raise CommandError(f"NTP server {args[0]} is already configured")


def cmd_no_ntp_server(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: no ntp server <ip-address>")
    if not ctx.store.ntp_remove_server(args[0]):
        raise CommandError(f"NTP server {args[0]} is not configured")


def cmd_ntp_master(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if args:
        raise CommandError("'ntp master' does not accept additional arguments")
    ctx.store.ntp_set_master(True)


def cmd_ntp_authenticate(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if args:
        raise CommandError("'ntp authenticate' does not accept additional arguments")
    ctx.store.ntp_set_authenticate(True)


def _parse_key_number(text: str) -> int:
    if not is_number(text) or int(text) == 0:
        raise CommandError(f"Invalid key number '{text}': must be a positive integer")
    return int(text)


def cmd_ntp_authentication_key(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """ntp authentication-key <key-number> md5 <value>"""
    if len(args) != 3 or args[1] != "md5":
        raise CommandError("Usage: ntp authentication-key <key-number> md5 <key-value>")
    ctx.store.ntp_add_authentication_key(_parse_key_number(args[0]), args[2])


def cmd_ntp_trusted_key(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: ntp trusted-key <key-number>")
    key_number = _parse_key_number(args[0])
    if not ctx.store.ntp_add_trusted_key(key_number):
        raise CommandError(f"Authentication key {key_number} is not defined")


def cmd_ntp_source(args: list[str], ctx: CliContext, clock: Clock) -> None:
    if len(args) != 1:
        raise CommandError("Usage: ntp source <interface>")
    if not validate_interface_name(args[0]):
        raise CommandError(f"Invalid interface name: {args[0]}")
    ctx.store.ntp_set_source(args[0])

def cmd_clear_ntp_associations(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("clear ntp associations", args)
    ctx.store.ntp_clear_associations()
    print("NTP associations cleared and reinitialized.")


# =============================================================================
# Reload and debugging
# =============================================================================

BOOTSTRAP_BANNER = (
    "System Bootstrap, Version 15.1(4)M4, RELEASE SOFTWARE (fc1)",
    "Technical Support: http://www.cisco.com/techsupport",
    "Copyright (c) 2010 by cisco Systems, Inc.",
    "Total memory size = 512 MB - On-board = 512 MB, DIMM0 = 0 MB",
)

YES_NO_ERROR = "Invalid input. Please enter 'yes' or 'no'."


def cmd_reload(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """
    Offer to save, then restart the session in user mode.

    The running configuration survives the reload; only the mode and the
    uptime counter are reset.
    """
    require_no_arguments("reload", args)

    save = prompt_confirm("System configuration has been modified. Save? [yes/no]:", default=True)
    if save is None:
        raise CommandError(YES_NO_ERROR)
    if save:
        print("Building configuration...")
        save_running_config(ctx)
        print("[OK]")
    else:
        print("Configuration not saved.")

    proceed = prompt_confirm("Proceed with reload? [yes/no]:", default=True)
    if proceed is None:
        raise CommandError(YES_NO_ERROR)
    if not proceed:
        print("Reload aborted.")
        return

    for line in BOOTSTRAP_BANNER:
        print(line)
    ctx.mode = Mode.USER
    ctx.selected_interface = None
    ctx.selected_vlan = None
    clock.started_at = monotonic()
    print()
    print("Press RETURN to get started!")


def cmd_debug_all(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("debug all", args)
    answer = prompt_confirm("This may severely impact network performance. Continue? (yes/[no]):", default=False)
    if answer is None:
        raise CommandError(YES_NO_ERROR)
    if not answer:
        print("Returned")
        return
    ctx.debug_all = True
    print("All possible debugging has been turned on")


def cmd_undebug_all(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("undebug all", args)
    ctx.debug_all = False
    print("All possible debugging has been turned off")
