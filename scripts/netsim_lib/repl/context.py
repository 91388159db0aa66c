"""
Session context and prompt utilities for the netsim REPL.

This module contains:
- Mode: The CLI modes a session moves between
- Clock: The simulated device clock passed to every command
- CliContext: Current mode, selections and configuration state
- get_prompt_text: Generates the prompt string for the current mode
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from time import monotonic
from typing import Any, Mapping, Optional

from ..config import CliConfig, ConfigurationStore, STARTUP_CONFIG_FILE
from ..config.constants import DEFAULT_VERSION


class Mode(Enum):
    USER = "user"
    PRIVILEGED = "privileged"
    CONFIG = "config"
    INTERFACE = "interface"
    VLAN = "vlan"
    ROUTER = "router"


# Prompt suffix shown after the hostname in each mode
PROMPT_SUFFIXES = {
    Mode.USER: ">",
    Mode.PRIVILEGED: "#",
    Mode.CONFIG: "(config)#",
    Mode.INTERFACE: "(config-if)#",
    Mode.VLAN: "(config-vlan)#",
    Mode.ROUTER: "(config-router)#",
}


def _now_time() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _now_date() -> str:
    now = datetime.now()
    return f"{now.day} {now.strftime('%B')} {now.year}"


@dataclass
class Clock:
    """Simulated device clock. Time and date are the strings set by 'clock set'."""
    time: str = field(default_factory=_now_time)
    date: str = field(default_factory=_now_date)
    started_at: float = field(default_factory=monotonic)

    def uptime_seconds(self) -> int:
        return int(monotonic() - self.started_at)


@dataclass
class CliContext:
    """Tracks the current mode, selections and configuration state."""
    store: ConfigurationStore = field(default_factory=ConfigurationStore)
    config: CliConfig = field(default_factory=CliConfig)
    mode: Mode = Mode.USER
    selected_interface: Optional[str] = None
    selected_vlan: Optional[int] = None
    commands: Mapping[str, Any] = field(default_factory=dict)  # The command registry, used by 'help' and 'do'
    config_file: Path = STARTUP_CONFIG_FILE
    version: str = DEFAULT_VERSION
    history_file: Optional[Path] = None  # Read by 'show history'
    debug_all: bool = False


def get_prompt_text(ctx: CliContext) -> str:
    """Generate the prompt string based on hostname and current mode."""
    return f"{ctx.config.hostname}{PROMPT_SUFFIXES[ctx.mode]} "
