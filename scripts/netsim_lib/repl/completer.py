"""
Tab completion for the netsim REPL.

This module provides mode-aware command completion using prompt_toolkit.
Only command keywords are completed; arguments are left to the user.
"""

from typing import Mapping

from prompt_toolkit.completion import Completer, Completion

from .command import Command
from .context import CliContext, Mode
from .modes import CONFIG_MODES, DO_REFUSED_COMMANDS, legal_commands_for


class CommandCompleter(Completer):
    """Completes the next keyword of the commands legal in the current mode."""

    def __init__(self, ctx: CliContext, commands: Mapping[str, Command]):
        self.ctx = ctx
        self.commands = commands

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        words = text.split()

        if not words or text.endswith(' '):
            # Complete the next keyword after the typed words
            typed = words
            word = ""
        else:
            # Complete the word being typed
            typed = words[:-1]
            word = words[-1]

        for item in self._next_keywords(typed):
            if item.startswith(word):
                yield Completion(item, start_position=-len(word))

    def _next_keywords(self, typed: list[str]) -> list[str]:
        """Keywords that can follow the typed words, in sorted order."""
        mode = self.ctx.mode
        exclude = frozenset()
        if mode in CONFIG_MODES and typed[:1] == ["do"]:
            # 'do' takes an exec command
            typed = typed[1:]
            mode = Mode.PRIVILEGED
            exclude = DO_REFUSED_COMMANDS

        is_legal = legal_commands_for(mode)
        keywords = set()
        for name in self.commands:
            if name in exclude or not is_legal(name):
                continue
            name_words = name.split()
            if len(name_words) > len(typed) and name_words[:len(typed)] == typed:
                keywords.add(name_words[len(typed)])
        return sorted(keywords)
