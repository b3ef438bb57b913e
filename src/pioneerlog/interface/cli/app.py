from __future__ import annotations

"""
Command Line Interface (CLI) Demo Controller.

Orchestrates the demo lifecycle: argument parsing, configuration of the
process-wide manager (from flags or a JSON file), message emission, and
handler shutdown.
"""

import logging
import sys
from typing import List, Optional

from pioneerlog.config import build_config_from_dict, load_config_file
from pioneerlog.core.manager import get_default_manager
from pioneerlog.domain.errors import PioneerLogError
from pioneerlog.domain.levels import Severity, rank_of
from pioneerlog.interface.cli import args as cli_args

logger = logging.getLogger(__name__)

SAMPLE_MESSAGES = {
    Severity.DEBUG: "This is a debug message",
    Severity.INFO: "This is an info message",
    Severity.WARN: "This is a warning",
    Severity.ERROR: "This is an error",
    Severity.CRITICAL: "This is critical",
}

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the demo workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 1 for logging failures).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Internal diagnostics go to stderr only when requested
    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s | %(name)s | %(message)s",
        )

    manager = get_default_manager()

    try:
        # 3. Resolve configuration source
        if args.config_file:
            config = load_config_file(args.config_file)
        else:
            config = build_config_from_dict(cli_args.args_to_config(args))

        manager.configure(config)
        target = manager.get_logger(
            cli_args.resolve_logger_name(args, list(config.loggers))
        )
        logger.debug(f"Demo writing through {target!r}")

        # 4. Emission phase
        if args.messages:
            level = rank_of(args.emit_level)
            for message in args.messages:
                target.log(level, message)
        else:
            for level, message in SAMPLE_MESSAGES.items():
                target.log(level, message)

    except (PioneerLogError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        manager.shutdown()

    return 0
