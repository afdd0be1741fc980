"""Command-line entry points for repotidy."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from .branches import ConfirmationProvider, StdinConfirmation, Thresholds, sweep_branches
from .config import RepotidySettings, get_settings
from .git import GitRunner
from .routes import format_endpoints, scan_directory

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the repotidy commands."""

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def run_sweep(
    args: argparse.Namespace,
    *,
    settings: RepotidySettings | None = None,
    runner: GitRunner | None = None,
    confirmation: ConfirmationProvider | None = None,
    clock: Callable[[], datetime] = _utc_now,
) -> int:
    """Run a branch sweep and return the process exit code."""

    try:
        settings = settings or get_settings()
        configure_logging(settings.log_level)
        directory = Path(args.directory or os.getcwd())
        logger.info("Using directory: %s", directory)

        runner = runner or GitRunner(Path(settings.git_path) if settings.git_path else None)
        thresholds = Thresholds.from_days(
            clock(),
            stale_days=settings.stale_days,
            merged_days=settings.merged_days,
        )
        asyncio.run(
            sweep_branches(
                directory,
                runner=runner,
                thresholds=thresholds,
                confirmation=confirmation or StdinConfirmation(),
                max_concurrency=settings.max_concurrency,
                color=sys.stdout.isatty(),
            )
        )
    except Exception as exc:
        logger.debug("Branch sweep failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def run_routes(args: argparse.Namespace) -> int:
    """Print the route inventory for a directory and return the exit code."""

    directory = Path(args.directory or os.getcwd())
    try:
        endpoints = scan_directory(directory)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(format_endpoints(endpoints))
    return 0


def build_sweep_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Delete stale and already-merged branches from the origin remote "
            "after interactive confirmation."
        )
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Path to the git working copy (default: current directory)",
    )
    return parser


def build_routes_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List app.<method>(path) route declarations as a Markdown report."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory of route files to scan (default: current directory)",
    )
    return parser


def sweep_main(argv: list[str] | None = None) -> None:
    parser = build_sweep_parser()
    args = parser.parse_args(argv)
    exit_code = run_sweep(args)
    if exit_code:
        raise SystemExit(exit_code)


def routes_main(argv: list[str] | None = None) -> None:
    parser = build_routes_parser()
    args = parser.parse_args(argv)
    exit_code = run_routes(args)
    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    sweep_main()
