"""
Command descriptor for the netsim REPL.

Every registry entry is a Command wrapping a plain handler function with the
signature handler(args, ctx, clock). Handlers return None on success and
raise CommandError with a user-facing message on failure.
"""

from dataclasses import dataclass
from typing import Callable

from .context import CliContext, Clock


class CommandError(Exception):
    """Raised by a command handler when the command cannot be carried out."""
    pass


Handler = Callable[[list[str], CliContext, Clock], None]


@dataclass(frozen=True)
class Command:
    """An immutable registry entry."""
    name: str
    description: str
    handler: Handler
    suggestions: tuple[str, ...] = ()  # Shown by '?' once the name is fully typed

    def execute(self, args: list[str], ctx: CliContext, clock: Clock) -> None:
        self.handler(args, ctx, clock)


def require_no_arguments(name: str, args: list[str]) -> None:
    """Reject trailing input after a command that takes no arguments."""
    if args:
        raise CommandError(f"Invalid input after '{name}': {' '.join(args)}")
