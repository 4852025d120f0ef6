from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into the
ListingOptions consumed by the listing engine.
"""

import argparse
from typing import Optional

from glyphls import __version__
from glyphls.core.rendering.executables import ExecutableDetector
from glyphls.domain.listing_models import ListingOptions
from glyphls.infra.terminal import COLOR_AUTO, COLOR_MODES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the glyphls CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="glyphls",
        description=(
            "A simple implementation of the `ls` command that uses Nerd Font "
            "icons and colored output by default."
        ),
    )

    # --- Target ---
    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="The entry that must be displayed. Can also be a glob pattern.",
    )

    # --- Layout and Filtering ---
    p.add_argument(
        "-1",
        dest="single_column",
        action="store_true",
        help="Force output to be one entry per line.",
    )
    p.add_argument(
        "-a", "--all",
        dest="show_all",
        action="store_true",
        help="Show all files and folders, disabling the `ignore` configuration.",
    )
    p.add_argument(
        "--color",
        dest="color",
        choices=COLOR_MODES,
        default=COLOR_AUTO,
        help="Colorize the output: auto (default, when stdout is a terminal), always or never.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Read overrides from this TOML file instead of $XDG_CONFIG_HOME/ll.toml.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the merged configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this file (rotated).",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_options(
        args: argparse.Namespace,
        *,
        use_color: bool,
        terminal_width: int,
        detector: Optional[ExecutableDetector] = None,
) -> ListingOptions:
    """
    Translate the argparse Namespace into listing options.

    Terminal capabilities are passed in already resolved so this mapping
    stays free of I/O.

    Args:
        args: Parsed command-line arguments.
        use_color: Resolved color capability.
        terminal_width: Resolved terminal width.
        detector: Optional executable detection strategy.

    Returns:
        ListingOptions: Options for the listing engine.
    """
    return ListingOptions(
        single_column=bool(args.single_column),
        show_all=bool(args.show_all),
        use_color=use_color,
        terminal_width=terminal_width,
        detector=detector,
    )
