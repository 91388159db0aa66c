#!/usr/bin/env python3
"""
netsim_repl.py - Interactive network device CLI simulator

Presents a router-style command line (user, privileged and configuration
modes) backed by an in-memory device configuration. The running
configuration can be saved to startup-config.json with 'write memory'.
"""

import argparse
import sys
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from netsim_lib import __version__
from netsim_lib.common import Colors, error, info
from netsim_lib.config import (
    ConfigurationStore,
    STARTUP_CONFIG_FILE,
    HISTORY_FILE,
    load_config,
)
from netsim_lib.profiles import ProfileValidationError, load_device_profile, default_profile
from netsim_lib.repl import (
    Mode,
    Clock,
    CliContext,
    CommandCompleter,
    build_registry,
    get_prompt_text,
    resolve_and_execute,
)


# =============================================================================
# Colors and Styling
# =============================================================================

NETSIM_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
})

QUIT_COMMANDS = ("quit",)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Interactive network device CLI simulator"
    )
    parser.add_argument(
        "--config-file", type=Path, default=STARTUP_CONFIG_FILE,
        help=f"Startup configuration file (default: {STARTUP_CONFIG_FILE})"
    )
    parser.add_argument(
        "--profile", type=Path, default=None,
        help="Device profile YAML describing interfaces and VLANs"
    )
    parser.add_argument(
        "--history-file", type=Path, default=HISTORY_FILE,
        help=f"Command history file (default: {HISTORY_FILE})"
    )
    parser.add_argument("--version", action="version", version=f"netsim {__version__}")
    return parser.parse_args(argv)


def build_context(config_file: Path, profile_path=None, history_file=None) -> CliContext:
    """
    Create the session context from a device profile and the saved config.

    Raises:
        FileNotFoundError: If the profile doesn't exist
        ProfileValidationError: If the profile is invalid
    """
    profile = load_device_profile(profile_path) if profile_path else default_profile()
    if profile_path:
        info(f"Loaded device profile '{profile.name}' from {profile_path}")

    config = load_config(config_file)
    if not config_file.exists():
        config.hostname = profile.hostname

    return CliContext(
        store=ConfigurationStore(profile),
        config=config,
        commands=build_registry(),
        config_file=config_file,
        version=profile.version,
        history_file=history_file,
    )


def is_session_end(line: str, ctx: CliContext) -> bool:
    """'quit' anywhere, or 'exit' from user mode, ends the session."""
    text = line.strip()
    if text in QUIT_COMMANDS:
        return True
    return text == "exit" and ctx.mode == Mode.USER


def run_repl(argv=None) -> int:
    """Main REPL entry point."""
    args = parse_args(argv)

    try:
        ctx = build_context(args.config_file, args.profile, args.history_file)
    except (FileNotFoundError, ProfileValidationError) as e:
        error(str(e))
        return 1

    print()
    print(f"{Colors.BOLD}netsim {__version__}{Colors.NC} - {ctx.version}")
    print("Type 'help' for commands, '?' after a partial command to list completions, 'exit' to quit")
    print()

    clock = Clock()
    session = PromptSession(
        history=FileHistory(str(args.history_file)),
        completer=CommandCompleter(ctx, ctx.commands),
        style=NETSIM_STYLE,
    )

    # Main loop
    while True:
        try:
            line = session.prompt(get_prompt_text(ctx))
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break

        if is_session_end(line, ctx):
            break
        resolve_and_execute(line, ctx.commands, ctx, clock)

    print("Goodbye!")
    return 0


def main() -> None:
    sys.exit(run_repl())


if __name__ == "__main__":
    main()
