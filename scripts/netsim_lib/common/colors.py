"""
Terminal output helpers for netsim.

The REPL reports its own events with a colored tag: [+] for a command that
completed, [!] for a recoverable problem such as an unreadable
startup-config, [ERROR] for a rejected command and [i] for mode and
session notices. Device output (show commands, prompts) is printed plain.
"""


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    NC = "\033[0m"  # No Color / Reset


def log(msg: str) -> None:
    """Log a success message in green."""
    print(f"{Colors.GREEN}[+]{Colors.NC} {msg}")


def warn(msg: str) -> None:
    """Log a warning message in yellow."""
    print(f"{Colors.YELLOW}[!]{Colors.NC} {msg}")


def error(msg: str) -> None:
    """Log an error message in red."""
    print(f"{Colors.RED}[ERROR]{Colors.NC} {msg}")


def info(msg: str) -> None:
    """Log an informational message in cyan."""
    print(f"{Colors.CYAN}[i]{Colors.NC} {msg}")
