"""Command-line entry point: print unique random lotto tickets."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from lotto649.config import ConfigLoadError, GeneratorConfig, load_config
from lotto649.engine import TicketGenerator, TicketSpaceExhaustedError
from lotto649.engine.report import format_line, render_json
from lotto649.logging_utils import configure_root_logger, get_logger, verbosity_to_level

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

logger = get_logger(__name__)


def positive_int(value: str) -> int:
    try:
        number = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer.") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}.")
    return number


def non_negative_int(value: str) -> int:
    try:
        number = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer.") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}.")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lotto649",
        description=(
            "Generate unique random 6/49 lotto tickets. "
            "Not suitable for gambling stakes or cryptographic use."
        ),
    )
    parser.add_argument(
        "count",
        nargs="?",
        type=positive_int,
        default=None,
        help="Number of tickets to generate (default: 5).",
    )
    parser.add_argument("--seed", type=non_negative_int, default=None, help="Fixed seed for a reproducible run.")
    parser.add_argument(
        "--no-bonus",
        dest="bonus",
        action="store_false",
        default=None,
        help="Draw main numbers only, without a bonus number.",
    )
    parser.add_argument("--number-max", type=positive_int, default=None, help="Highest number in the pool (default: 49).")
    parser.add_argument("--main-count", type=positive_int, default=None, help="Main numbers per ticket (default: 6).")
    parser.add_argument(
        "--max-retries",
        dest="max_retries_per_ticket",
        type=positive_int,
        default=None,
        help="Draw attempts allowed per ticket before giving up.",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["text", "json"],
        default=None,
        help="Output format (default: text).",
    )
    parser.add_argument("--config", default=None, help="YAML or JSON config file.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log to stderr (-vv for debug).")
    return parser


def resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge defaults, the optional config file and explicit CLI flags."""
    base = load_config(args.config) if args.config else GeneratorConfig()
    overrides: dict[str, Any] = {
        key: value
        for key, value in vars(args).items()
        if key in GeneratorConfig.model_fields and value is not None
    }
    return GeneratorConfig.model_validate({**base.model_dump(), **overrides})


def run(config: GeneratorConfig) -> int:
    generator = TicketGenerator.from_seed(
        config.seed,
        config.to_rules(),
        max_retries_per_ticket=config.max_retries_per_ticket,
    )
    logger.info("Run seed: %d", generator.seed)

    if config.output_format == "json":
        tickets = generator.generate(config.count)
        print(render_json(tickets, rules=generator.rules, seed=generator.seed))
    else:
        for item in generator.iter_tickets(config.count):
            print(format_line(item), flush=True)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_root_logger(verbosity_to_level(args.verbose))

    try:
        config = resolve_config(args)
    except (ConfigLoadError, FileNotFoundError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    try:
        return run(config)
    except TicketSpaceExhaustedError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    raise SystemExit(main())
