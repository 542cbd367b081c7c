"""Model Linter command line.

Runs the build hook over the configured locales and exits non-zero when a locale
could not be linted (or, with --strict, when any warning was found).
"""

import argparse
import json
import logging
import sys
from typing import Optional

import structlog

from model_linter.config import get_settings
from model_linter.hook import model_linter_hook
from model_linter.sinks import stderr_sink

EXIT_OK = 0
EXIT_WARNINGS = 1
EXIT_FAILED = 2


def configure_logging(debug: bool, level: str) -> None:
    """Configure structured logging. Logs go to stderr so stdout stays machine-readable."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="model-linter",
        description="Check language model files for duplicate phrases and values, "
                    "stray whitespace and unbalanced variable brackets",
    )
    parser.add_argument("--models-dir", help="Directory holding <locale>.json model files")
    parser.add_argument(
        "--locale",
        action="append",
        dest="locales",
        help="Locale to lint (repeatable). Defaults to the LOCALES setting.",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="text: warnings on stderr; json: reports on stdout",
    )
    parser.add_argument("--strict", action="store_true", help="Exit with 1 when any warning is found")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.DEBUG, settings.LOG_LEVEL)

    sink = stderr_sink if args.format == "text" else None
    reports = model_linter_hook(locales=args.locales, models_dir=args.models_dir, sink=sink)

    if args.format == "json":
        payload = {locale: report.model_dump(mode="json") for locale, report in reports.items()}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for report in reports.values():
            if report.error:
                print(f"❌ Error: {report.error}", file=sys.stderr)

    if any(r.error for r in reports.values()):
        return EXIT_FAILED
    if args.strict and any(r.warnings for r in reports.values()):
        return EXIT_WARNINGS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
