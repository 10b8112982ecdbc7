"""
Reusable logging and print setup for the filetree tools.

Functions:
    setup_logging      - Configure and return a logger.
    set_print_logger   - Set the logger for print_error.
    monkeypatch_print  - Replace built-in print with rich print.
    print_error        - Print and log an error message.

Environment:
    FILETREE_LOGFILE   - log file used when no logfile is passed.
    FILETREE_LOGLEVEL  - level name used when no loglevel is passed (default INFO).
"""

import logging
import os
from typing import Optional
import builtins
from rich import print as rich_print
from rich.markup import escape
import sys

# Module-level variable to hold the logger for print_error
_print_logger = None


def resolve_loglevel(loglevel: Optional[int | str] = None) -> int:
    """Turn a level name or number into a logging level, falling back to FILETREE_LOGLEVEL."""
    if loglevel is None:
        loglevel = os.getenv("FILETREE_LOGLEVEL", "INFO")
    if isinstance(loglevel, int):
        return loglevel
    level = logging.getLevelName(loglevel.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {loglevel!r}")
    return level


def setup_logging(app_name: str = "filetree", loglevel: Optional[int | str] = None, logfile: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the application.
    Logs to ``logfile``, else to $FILETREE_LOGFILE, else to ~/.<app_name>/log.txt.
    Returns the configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(resolve_loglevel(loglevel))
    formatter = logging.Formatter('%(asctime)s %(levelname)s %(process)d %(message)s')
    if logfile is None:
        logfile = os.getenv("FILETREE_LOGFILE")
    if logfile is None:
        log_dir = os.path.expanduser(f"~/.{app_name}")
        os.makedirs(log_dir, exist_ok=True)
        logfile = os.path.join(log_dir, "log.txt")
    handler = logging.FileHandler(logfile)

    # Remove and close any existing handlers
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    set_print_logger(logger)
    logger.debug(f"Logger initialized for {app_name}, writing to {logfile}")
    return logger


def set_print_logger(logger: logging.Logger):
    """
    Set the logger to be used by print_error.
    """
    global _print_logger
    _print_logger = logger


def monkeypatch_print():
    """
    Monkeypatch built-in print to use rich.print for all output (no logging).
    """
    def print_to_rich(*args, **kwargs):
        rich_print(*args, **kwargs)
    builtins.print = print_to_rich  # monkeypatch print


def print_error(message: str, **kwargs):
    """
    Print and log an error message (stderr and error level), using the logger set by set_print_logger.
    """
    print(f"[bold red]{escape(message)}[/bold red]", file=sys.stderr, **kwargs)
    if _print_logger is not None:
        _print_logger.error(message)
