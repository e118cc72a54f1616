"""CLI entry-point for the fractional radix converter.

Usage:
    python -m src.cli 2 0.1 0.25 0.5
    python -m src.cli 0.5 0.75                  (base defaults to 2)
    python -m src.cli --base 60 0.16666 --max-digits 12
    python -m src.cli 16 0.8 --format json
    python -m src.cli 8 0.3 oops --strict       (abort on the first bad value)

When ``--base`` is absent and the first positional is an integer, it is the
target base; otherwise the base defaults to 2 and every positional is a value.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from src.cli import __version__
from src.cli.exit_codes import ExitCode
from src.core.domain.conversion import DEFAULT_SEPARATOR, ConverterConfig, FormatterConfig
from src.core.math.radix import DEFAULT_MAX_DIGITS, MIN_BASE, InvalidBase, InvalidInput
from src.report.batch import ON_INVALID_ABORT, ON_INVALID_SKIP, build_batch
from src.report.json_report import render_json
from src.report.table import render_table

logger = logging.getLogger(__name__)

DEFAULT_BASE = MIN_BASE


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fracradix",
        description="Convert base-10 fractions in [0, 1) to an arbitrary integer base.",
    )
    p.add_argument(
        "positionals",
        nargs="*",
        metavar="[BASE] VALUE",
        help="Optional target base followed by decimal values in [0, 1).",
    )
    p.add_argument(
        "-b",
        "--base",
        type=int,
        default=None,
        help=f"Target base (>= {MIN_BASE}). Overrides a leading positional base.",
    )
    p.add_argument(
        "--max-digits",
        type=int,
        default=DEFAULT_MAX_DIGITS,
        help="Maximum fractional digits before truncation (default: %(default)s).",
    )
    p.add_argument(
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="Text written after every digit (default: %(default)r).",
    )
    p.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Fixed decimals for the Base 10 column (default: as typed).",
    )
    p.add_argument(
        "--format",
        dest="output_format",
        choices=("table", "json"),
        default="table",
        help="Output format (default: %(default)s).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Abort on the first invalid value instead of skipping it.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging on stderr.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _split_base(positionals: list[str], base: int | None) -> tuple[int, list[str]]:
    """Resolve the target base and the remaining value tokens."""
    if base is not None:
        return base, positionals
    if positionals:
        try:
            return int(positionals[0]), positionals[1:]
        except ValueError:
            pass
    return DEFAULT_BASE, positionals


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = ok, 1 = values skipped, 2 = error)."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    base, values = _split_base(args.positionals, args.base)

    try:
        converter_config = ConverterConfig(max_digits=args.max_digits)
        formatter_config = FormatterConfig(
            separator=args.separator,
            value_precision=args.precision,
        )
    except ValidationError as e:
        logger.error(f"Invalid options: {e}")
        return ExitCode.ERROR

    on_invalid = ON_INVALID_ABORT if args.strict else ON_INVALID_SKIP
    try:
        batch = build_batch(values, base, converter_config, on_invalid=on_invalid)
    except InvalidBase as e:
        logger.error(str(e))
        return ExitCode.ERROR
    except InvalidInput as e:
        logger.error(f"Aborting: {e}")
        return ExitCode.ERROR

    if args.output_format == "json":
        print(render_json(batch, formatter_config))
    else:
        print(render_table(batch.base, batch.records, formatter_config))

    if batch.has_rejections:
        return ExitCode.PARTIAL
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
