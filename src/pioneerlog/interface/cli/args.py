from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the demo command-line schema and translates the parsed namespace
into the declarative configuration accepted by LoggerManager.configure().
"""

import argparse
from typing import Any, Dict, List, Optional

from pioneerlog.config import DEFAULT_LOGGER_NAME
from pioneerlog.domain.levels import Severity
from pioneerlog.handlers.rotating_file import OpenMode

DEFAULT_MAX_BYTES = 10 * 1024
DEFAULT_BACKUPS = 3

_LEVEL_CHOICES: List[str] = [s.name for s in Severity]

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the pioneerlog demo.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="pioneerlog-demo",
        description="Log messages through console and rotating file handlers.",
    )

    p.add_argument(
        "messages",
        nargs="*",
        help="Messages to log. Without messages, one sample line per level is logged.",
    )

    # --- Logger ---
    p.add_argument(
        "--logger",
        dest="logger_name",
        default=DEFAULT_LOGGER_NAME,
        help="Name of the logger to configure and use.",
    )
    p.add_argument(
        "--level",
        type=str.upper,
        choices=_LEVEL_CHOICES,
        default="INFO",
        help="Logger threshold.",
    )
    p.add_argument(
        "--at",
        dest="emit_level",
        type=str.upper,
        choices=_LEVEL_CHOICES[1:],
        default="INFO",
        help="Level used for positional messages.",
    )

    # --- Console Handler ---
    p.add_argument(
        "--console-level",
        type=str.upper,
        choices=_LEVEL_CHOICES,
        default="DEBUG",
        help="Console handler threshold.",
    )
    p.add_argument(
        "--no-colors",
        action="store_true",
        help="Disable ANSI colors on the console.",
    )

    # --- Rotating File Handler ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Enable a rotating file handler writing to this path.",
    )
    p.add_argument(
        "--file-level",
        type=str.upper,
        choices=_LEVEL_CHOICES,
        default="INFO",
        help="File handler threshold.",
    )
    p.add_argument(
        "--mode",
        choices=[m.value for m in OpenMode],
        default=OpenMode.APPEND.value,
        help="Open mode: a (append), w (truncate), x (exclusive create).",
    )
    p.add_argument(
        "--max-bytes",
        type=int,
        default=DEFAULT_MAX_BYTES,
        help="Rotate before the file would exceed this size.",
    )
    p.add_argument(
        "--backups",
        type=int,
        default=DEFAULT_BACKUPS,
        help="Number of rotated backups kept.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON configuration file; replaces the handler options above.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Show the library's internal diagnostics on stderr.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the parsed arguments into a declarative configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Mapping with handler specs and one logger entry.
    """
    handlers: Dict[str, Any] = {
        "console": {
            "type": "console",
            "level": args.console_level,
            "use_colors": not args.no_colors,
        },
    }

    if args.log_file:
        handlers["file"] = {
            "type": "rotating_file",
            "level": args.file_level,
            "filename": args.log_file,
            "mode": args.mode,
            "max_bytes": args.max_bytes,
            "max_backup_count": args.backups,
        }

    return {
        "handlers": handlers,
        "loggers": {
            args.logger_name: {"level": args.level, "handlers": list(handlers)},
        },
    }


def resolve_logger_name(args: argparse.Namespace, config_loggers: Optional[List[str]] = None) -> str:
    """
    Pick the logger the demo writes to.

    An explicit --logger wins; with a configuration file, the first logger it
    declares is used when --logger was left at its default.
    """
    if args.logger_name != DEFAULT_LOGGER_NAME or not config_loggers:
        return args.logger_name
    if DEFAULT_LOGGER_NAME in config_loggers:
        return DEFAULT_LOGGER_NAME
    return config_loggers[0]
