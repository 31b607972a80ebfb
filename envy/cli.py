"""envy CLI: print shell export statements from a YAML config.

Usage:
    envy [CONFIG_FILE]

Add to your shell profile:

    eval "$(envy)"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import CONFIG_ENV_VAR, DEFAULT_CONFIG_NAME
from .errors import handle_error
from .meta import APP_ID, EXAMPLE_CMD, PURPOSE, VERSION_STRING
from .pipeline import ExportRequest, run_pipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_ID,
        description=PURPOSE,
        epilog=f"Typical use: {EXAMPLE_CMD}",
    )
    parser.add_argument(
        "config_file",
        nargs="?",
        metavar="CONFIG_FILE",
        help=f"YAML config path (default: ${CONFIG_ENV_VAR} or ~/{DEFAULT_CONFIG_NAME})",
    )
    parser.add_argument("--version", action="version", version=VERSION_STRING)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the envy CLI."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return run_pipeline(ExportRequest(config_path=args.config_file))
    except (Exception, KeyboardInterrupt) as exc:
        return handle_error(exc, verbose=args.verbose)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
