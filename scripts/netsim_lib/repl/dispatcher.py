"""
Command resolution and dispatch for the netsim REPL.

Input is matched against the registry restricted to the current mode.
A command name matches when the input equals it or continues with
whitespace right after it; among matches the longest name wins, so
"show ip route" beats "show" and "showx" matches nothing. Input ending in
'?' lists the next tokens instead of executing.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..common import log, error
from ..config import StoreBusyError
from .command import Command, CommandError
from .context import CliContext, Clock, Mode
from .modes import CONFIG_MODES, DO_REFUSED_COMMANDS, legal_commands_for


STATUS_OK = "ok"
STATUS_ERROR = "error"
STATUS_INVALID = "invalid"
STATUS_COMPLETION = "completion"
STATUS_EMPTY = "empty"

NO_SUGGESTION_MARKER = "<cr>"


@dataclass
class DispatchResult:
    """Outcome of one line of input."""
    status: str
    command: Optional[str] = None
    message: Optional[str] = None
    suggestions: list[str] = field(default_factory=list)


def is_word_prefix(name: str, text: str) -> bool:
    """True if text is name, or starts with name followed by whitespace."""
    if text == name:
        return True
    return text.startswith(name) and text[len(name)].isspace()


def find_command(text: str, commands: Mapping[str, Command], mode: Mode) -> Optional[Command]:
    """Longest registered command legal in mode that prefixes text at a word boundary."""
    is_legal = legal_commands_for(mode)
    best = None
    for name, command in commands.items():
        if not is_legal(name) or not is_word_prefix(name, text):
            continue
        if best is None or len(name) > len(best.name):
            best = command
    return best


def complete(
    prefix: str,
    commands: Mapping[str, Command],
    mode: Mode,
    exclude: frozenset = frozenset(),
) -> list[str]:
    """
    Next-token suggestions for a partial command.

    For each legal command name starting with prefix, the number of leading
    prefix words equal to the name's words selects the name token to offer.
    A name the prefix fully consumes offers its static suggestions instead,
    or '<cr>' when it has none. Names in exclude are never offered.
    """
    is_legal = legal_commands_for(mode)
    prefix_words = prefix.split()
    suggestions = set()

    for name, command in commands.items():
        if name in exclude or not is_legal(name) or not name.startswith(prefix):
            continue
        name_words = name.split()
        consumed = 0
        for typed, word in zip(prefix_words, name_words):
            if typed != word:
                break
            consumed += 1

        if consumed < len(name_words):
            suggestions.add(name_words[consumed])
        elif command.suggestions:
            suggestions.update(command.suggestions)
        else:
            suggestions.add(NO_SUGGESTION_MARKER)

    return sorted(suggestions)


def completion_target(body: str, mode: Mode) -> tuple[str, Mode, frozenset]:
    """
    Prefix, mode and excluded names to complete for the text before '?'.

    In a configuration mode "do <partial>" completes the partial exec
    command the way 'do' would resolve it.
    """
    if mode in CONFIG_MODES and body.startswith("do") and body[2:3].isspace():
        return body[3:].strip(), Mode.PRIVILEGED, DO_REFUSED_COMMANDS
    return body.strip(), mode, frozenset()


def resolve_and_execute(
    raw_input: str,
    commands: Mapping[str, Command],
    ctx: CliContext,
    clock: Clock,
) -> DispatchResult:
    """
    Resolve one line of input and run it.

    Results are printed as well as returned. No exception escapes for
    unknown input, command failures or a busy store.
    """
    text = raw_input.strip()
    if not text:
        return DispatchResult(STATUS_EMPTY)

    if text.endswith("?"):
        prefix, mode, exclude = completion_target(text[:-1], ctx.mode)
        suggestions = complete(prefix, commands, mode, exclude)
        if not suggestions:
            message = f"No matching commands found for '{text[:-1].strip()}?'"
            print(message)
            return DispatchResult(STATUS_COMPLETION, message=message)
        for suggestion in suggestions:
            print(suggestion)
        return DispatchResult(STATUS_COMPLETION, suggestions=suggestions)

    command = find_command(text, commands, ctx.mode)
    if command is None:
        message = f"Invalid command: {text}"
        print(message)
        return DispatchResult(STATUS_INVALID, message=message)

    args = text[len(command.name):].split()
    try:
        command.execute(args, ctx, clock)
    except (CommandError, StoreBusyError) as e:
        error(f"Error: {e}")
        return DispatchResult(STATUS_ERROR, command=command.name, message=str(e))

    log(f"Command '{command.name}' executed successfully.")
    return DispatchResult(STATUS_OK, command=command.name)
