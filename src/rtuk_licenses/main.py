"""Command-line entry point for the RTÜK license crawler.

Run after installation::

    rtuk-licenses [--output-dir DIR] [--log-level LEVEL] [--timeout SECONDS]
                  [--only {internet,satellite}]

or as a module::

    python -m rtuk_licenses

Options override the corresponding ``RTUK_*`` environment variables.

Exit codes:
    0 — Run completed (steps whose fetch failed are logged and skipped).
    1 — A response could not be parsed or an output file could not be written.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rtuk_licenses.config.settings import Settings, get_settings
from rtuk_licenses.core.exceptions import HTMLParseError, RecordWriteError
from rtuk_licenses.core.logging_config import configure_logging
from rtuk_licenses.scraper.pipeline import PIPELINES, run_pipelines

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rtuk-licenses",
        description="Download RTÜK broadcast license listings as JSON files.",
    )
    parser.add_argument("--output-dir", help="directory receiving the JSON files")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="log verbosity",
    )
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument(
        "--only",
        choices=PIPELINES,
        action="append",
        help="run only this pipeline (repeatable)",
    )
    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return a copy of ``settings`` with the CLI options applied."""
    overrides: dict[str, object] = {}
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    if not overrides:
        return settings
    return Settings(**{**settings.model_dump(), **overrides})


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging and run the pipelines.

    Raises:
        SystemExit: With code 1 on a fatal parse or write error.
    """
    args = build_parser().parse_args(argv)
    settings = _apply_overrides(get_settings(), args)
    configure_logging(settings.log_level)

    logger.info("crawler: output directory %s", settings.output_dir)
    try:
        run_pipelines(settings, pipelines=args.only or PIPELINES)
    except (HTMLParseError, RecordWriteError) as exc:
        logger.critical("crawler: fatal error, aborting: %s", exc)
        sys.exit(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
