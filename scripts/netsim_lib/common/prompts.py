"""
Interactive prompt utilities for the REPL.

Provides wrappers around prompt_toolkit for collecting hidden input
(enable password and secret) and yes/no answers (reload, debug all).
"""

from typing import Optional

from prompt_toolkit import prompt


YES_ANSWERS = ("yes", "y")
NO_ANSWERS = ("no", "n")


def prompt_secret(label: str) -> Optional[str]:
    """
    Prompt for a value without echoing it.

    Args:
        label: Prompt text to display

    Returns:
        User input string, or None if cancelled (Ctrl+C/Ctrl+D)
    """
    try:
        return prompt(f"{label}: ", is_password=True)
    except (KeyboardInterrupt, EOFError):
        return None


def prompt_confirm(question: str, default: bool) -> Optional[bool]:
    """
    Ask a yes/no question.

    An empty answer picks the default.

    Returns:
        True or False, or None if the answer is neither yes nor no or the
        prompt was cancelled (Ctrl+C/Ctrl+D)
    """
    try:
        answer = prompt(f"{question} ").strip().lower()
    except (KeyboardInterrupt, EOFError):
        return None
    if not answer:
        return default
    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    return None
