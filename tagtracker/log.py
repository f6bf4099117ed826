"""Console logging helpers."""
import datetime
import sys

DEBUG_MODE: bool = False


def set_debug(enabled: bool) -> None:
    """Toggle debug output for the running process."""
    global DEBUG_MODE
    DEBUG_MODE = enabled


def log(message: str) -> None:
    """Print an operator-facing message."""
    print(message, flush=True)


def log_error(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


def debug_log(message: str) -> None:
    """Print timestamped debug message if debug mode is enabled."""
    if DEBUG_MODE:
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{timestamp}] {message}", file=sys.stderr, flush=True)
