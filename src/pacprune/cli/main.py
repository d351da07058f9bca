"""CLI entrypoint for pacprune."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from functools import partial
from pathlib import Path

from pacprune import __version__
from pacprune.config import PacpruneConfig, load_config, validate_config_file
from pacprune.constants.branding import CLI_DESCRIPTION
from pacprune.constants.reporting import DONE_MESSAGE
from pacprune.engine import clean_package_caches
from pacprune.engine.ordering import PacsortOracle
from pacprune.exceptions import ConfigError, PacpruneError
from pacprune.exceptions.validation import format_errors
from pacprune.model import CleanResult
from pacprune.system import BatchRemover, display_text, query_installed_packages


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="pacprune",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    clean = subparsers.add_parser("clean", help="Remove old package archives from the cache directories")
    clean.add_argument("-c", "--config", type=Path, help="Explicit config file")
    clean.add_argument(
        "-d",
        "--cache-dir",
        type=Path,
        action="append",
        default=None,
        help="Cache directory to clean (repeat for multiple; replaces configured cache_dirs)",
    )
    clean.add_argument(
        "-k",
        "--keep-installed",
        type=_non_negative_int,
        default=None,
        help="Archives to keep per installed package",
    )
    clean.add_argument(
        "-u",
        "--keep-uninstalled",
        type=_non_negative_int,
        default=None,
        help="Archives to keep per package that is no longer installed",
    )
    clean.add_argument("-n", "--dry-run", action="store_true", help="Show the deletion plan without removing files")
    clean.add_argument("--no-pager", action="store_true", help="Print the report instead of paging it")
    clean.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without cleaning")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "clean":
        parser.error(f"Unsupported command: {args.command}")

    try:
        config = _apply_overrides(load_config(args.config), args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if not args.dry_run and not sys.stdin.isatty():
        print("A terminal is required to confirm deletion; use --dry-run to only report.", file=sys.stderr)
        return 2

    try:
        result = clean_package_caches(
            cache_dirs=config.cache_paths,
            policy=config.policy,
            oracle=PacsortOracle(config.oracle_command),
            installed_query=partial(query_installed_packages, config.installed_command),
            display=partial(display_text, pager=None if args.no_pager else config.pager),
            remover=BatchRemover(config.privilege_command),
            batch_size=config.batch_size,
            dry_run=args.dry_run,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except PacpruneError as exc:
        print(f"Cache cleaning error: {exc}", file=sys.stderr)
        return 1

    return _report_outcome(result)


def _apply_overrides(config: PacpruneConfig, args: argparse.Namespace) -> PacpruneConfig:
    """Layer CLI flags over the loaded config."""
    if args.cache_dir:
        config = replace(config, cache_dirs=tuple(str(path) for path in args.cache_dir))
    if args.keep_installed is not None:
        config = replace(config, keep_installed=args.keep_installed)
    if args.keep_uninstalled is not None:
        config = replace(config, keep_uninstalled=args.keep_uninstalled)
    return config


def _report_outcome(result: CleanResult) -> int:
    if result.outcome is None:
        return 0
    print(DONE_MESSAGE)
    if result.outcome.failed_batches:
        print(f"{result.outcome.failed_batches} removal batch(es) failed.", file=sys.stderr)
        return 1
    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
