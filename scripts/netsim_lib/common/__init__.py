"""
netsim_lib.common - Shared utilities for netsim tools

This module provides:
- colors: ANSI color codes and logging functions
- prompts: Interactive prompt utilities
"""

from .colors import Colors, log, warn, error, info
from .prompts import prompt_secret, prompt_confirm

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info',
    'prompt_secret', 'prompt_confirm',
]
