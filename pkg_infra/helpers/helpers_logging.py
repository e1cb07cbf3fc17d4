"""Console output helpers for the pkg-infra CLI.

Color is dropped when ``NO_COLOR`` is set in the environment.
"""

import os


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    RED = '\033[91m'
    DIM = '\033[2m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


def _paint(msg: str, *codes: str) -> str:
    if os.environ.get("NO_COLOR"):
        return msg
    return f"{''.join(codes)}{msg}{Colors.RESET}"


def print_header(msg: str) -> None:
    """Print a header message."""
    print(_paint(msg, Colors.HEADER, Colors.BOLD))


def print_info(msg: str) -> None:
    """Print an info message."""
    print(_paint(msg, Colors.CYAN))


def print_success(msg: str) -> None:
    """Print a success message."""
    print(_paint(f"✓ {msg}", Colors.GREEN))


def print_skipped(msg: str) -> None:
    """Print a message for a step that had nothing to do."""
    print(_paint(f"⊘ {msg}", Colors.DIM))


def print_error(msg: str) -> None:
    """Print an error message."""
    print(_paint(f"❌ {msg}", Colors.RED))
