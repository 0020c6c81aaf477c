"""Command-line interface: list matching files or clean and transfer them."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from . import logger as log_setup
from .cleaner import clean
from .config import Config, ConfigError
from .mover import move_files
from .scanner import scan

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def _level(text: str) -> str:
    if text.strip().lower() not in log_setup.LEVELS:
        raise argparse.ArgumentTypeError(f"invalid logging level: {text!r}")
    return text


def _boolean(text: str) -> bool:
    match text:
        case "true":
            return True
        case "false":
            return False
    raise argparse.ArgumentTypeError(f"invalid value {text!r}: expected true or false")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``run`` and ``list`` commands."""
    parser = argparse.ArgumentParser(
        prog="FileTamer", description="CLI utility for cleaning and moving files"
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "-l",
        "--logging-level",
        type=_level,
        default="DEBUG",
        help="Level for program logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    run = commands.add_parser("run", help="Clean and transfer matching files")
    run.add_argument("source", type=Path, metavar="SOURCE", help="Path to source directory")
    run.add_argument("target", type=Path, metavar="TARGET", help="Path to target directory")
    run.add_argument("-c", "--config", type=Path, metavar="CONFIG", help="Path to config file")
    run.add_argument(
        "--dry-run",
        type=_boolean,
        nargs="?",
        const=True,
        default=False,
        help="Perform a dry run (show what would be done)",
    )

    listing = commands.add_parser("list", help="List matching files")
    listing.add_argument("source", type=Path, metavar="SOURCE", help="Path to source directory")
    listing.add_argument(
        "-c", "--config", type=Path, metavar="CONFIG", help="Path to config file"
    )
    return parser


def load_config(path: str | Path | None) -> Config:
    """Load the configuration at ``path``, or the defaults when it is None.

    Raises ConfigError when the file cannot be read or parsed.
    """
    if path is None:
        return Config()
    return Config.from_file(path)


def run_command(
    source: str | Path,
    target: str | Path,
    config_path: str | Path | None = None,
    dry_run: bool = False,
) -> list[Path]:
    """Scan ``source``, clean the matches, then transfer them to ``target``."""
    source = Path(source)
    config = load_config(config_path)
    files = scan(source, config.filters)
    for path in files:
        logger.debug("%s", path)

    clean(files, source, config.cleanup, dry_run)
    move_files(files, source, Path(target), config.transfer, dry_run)

    logger.info("Number of files in source folder: %d", len(files))
    print(f"Number of files in source folder: {len(files)}")
    return files


def list_command(source: str | Path, config_path: str | Path | None = None) -> list[Path]:
    """Scan ``source``, log every matching file and return them."""
    config = load_config(config_path)
    files = scan(Path(source), config.filters)
    for path in files:
        logger.info("%s", path)
    return files


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command line; returns the exit status."""
    args = build_parser().parse_args(argv)
    handler = log_setup.init(args.logging_level)
    try:
        logger.info("FileTamer program started!")
        logger.debug("Arguments: %s", args)
        try:
            if args.command == "run":
                run_command(args.source, args.target, args.config, args.dry_run)
            else:
                list_command(args.source, args.config)
        except ConfigError as exc:
            logger.error("Error loading config: %s", exc)
            return 1
        logger.info("Operations completed.")
        return 0
    finally:
        logging.getLogger().removeHandler(handler)
        handler.close()