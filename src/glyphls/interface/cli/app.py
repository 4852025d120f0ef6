from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading,
terminal capability resolution, entry scanning, listing and output. Fatal
errors are reported on stderr and mapped to exit codes.
"""

import json
import sys
from typing import List, Optional

import colorama

from glyphls.core.pipeline.engine import build_listing
from glyphls.core.services.config_loader import load_configuration
from glyphls.core.services.scanner import scan_entries
from glyphls.domain.errors import GlyphlsError
from glyphls.infra.logging import LoggingConfig, configure_logging, get_logger
from glyphls.infra.terminal import get_terminal_width, resolve_color_mode
from glyphls.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 fatal error, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, so stdout only carries the listing)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # Enables VT processing on legacy Windows consoles; no-op elsewhere
    colorama.just_fix_windows_console()

    try:
        # 3. Configuration (fatal before any rendering)
        config = load_configuration(args.config_path)

        if args.dump_config:
            print(json.dumps(config.to_dict(), ensure_ascii=False, indent=2))
            return 0

        # 4. Terminal capabilities, resolved once
        use_color = resolve_color_mode(args.color, sys.stdout)
        terminal_width = get_terminal_width()
        options = cli_args.args_to_options(args, use_color=use_color, terminal_width=terminal_width)
        logger.debug("Options resolved: color=%s width=%d", use_color, terminal_width)

        # 5. Discovery and rendering
        scan = scan_entries(args.path)
        result = build_listing(scan.entries, config, options)

    except GlyphlsError as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    # 6. Output rendering phase
    for line in result.lines:
        print(line)

    return 0

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
