"""
netsim_lib.repl - REPL components for netsim

This package contains the modular components for the netsim interactive CLI:
- context: Mode enum, clock and session context
- modes: Per-mode command allowlists and mode transitions
- command: Command descriptor and CommandError
- registry: The command registry
- dispatcher: Command resolution, completion and execution
- completer: Tab completion
- display/: Show output rendering
- commands/: Command handlers
"""

from .context import Mode, Clock, CliContext, get_prompt_text
from .command import Command, CommandError
from .modes import legal_commands_for
from .registry import build_registry
from .dispatcher import DispatchResult, find_command, complete, resolve_and_execute
from .completer import CommandCompleter

__all__ = [
    'Mode',
    'Clock',
    'CliContext',
    'get_prompt_text',
    'Command',
    'CommandError',
    'legal_commands_for',
    'build_registry',
    'DispatchResult',
    'find_command',
    'complete',
    'resolve_and_execute',
    'CommandCompleter',
]
