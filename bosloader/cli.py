"""CLI entrypoint for bos-loader."""

from __future__ import annotations

import argparse
import sys
from functools import partial
from pathlib import Path

from .aggregator import Aggregator
from .config import CONFIG_FILENAME, entries_from_args, load_config
from .errors import ConfigurationError
from .logging import configure_logging, get_logger
from .service import create_app, run_service

_LOGGER = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bos-loader",
        description=(
            "Serves the contents of BOS component files (.jsx) in a specified directory "
            "as a JSON object properly formatted for preview on a BOS gateway."
        ),
    )
    parser.add_argument(
        "account",
        nargs="?",
        help="NEAR account to use as component author in preview.",
    )
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        default=Path("."),
        help="Path to directory containing component files (defaults to current directory).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=3030,
        help="Port to serve on.",
    )
    parser.add_argument(
        "-c",
        "--use-config",
        action="store_true",
        help=f"Use config file in current dir (./{CONFIG_FILENAME}) to set account and path; "
        "account and --path are ignored.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(CONFIG_FILENAME),
        help="Location of the config file used with --use-config.",
    )
    parser.add_argument(
        "-w",
        "--web-engine",
        action="store_true",
        help="Run in BOS Web Engine mode (also serves .tsx files).",
    )
    parser.add_argument(
        "-r",
        "--replacements",
        type=Path,
        help="Path to file with replacements map.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for bos-loader."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        if args.use_config:
            entries = load_config(args.config).entries
        else:
            entries = entries_from_args(args.account, args.path, args.replacements)
    except ConfigurationError as exc:
        parser.exit(1, f"{exc}\n")

    factory = partial(
        Aggregator,
        entries,
        web_engine=bool(args.web_engine),
        replacements=args.replacements,
    )

    extensions = ".jsx/.tsx" if args.web_engine else ".jsx"
    _LOGGER.info("Serving %s files from:", extensions)
    for entry in entries:
        _LOGGER.info("  %s as account %s", entry.path, entry.account)

    run_service(create_app(factory), port=args.port)


if __name__ == "__main__":
    main(sys.argv[1:])
