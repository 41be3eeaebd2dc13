import argparse
import logging
import os
import sys
from typing import List, Optional

import yaml
from dotenv import load_dotenv

from scaled_decimal.config import default_precision_from_env, load_accessor_config
from scaled_decimal.logging_utils import configure_logging
from scaled_decimal.precision import decimal_to_integer, integer_to_decimal

logger = logging.getLogger("main")


def build_parser(default_precision: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaled-decimal",
        description="Convert between decimals and their scaled integer form",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    to_integer = subparsers.add_parser("to-integer", help="Scale a decimal to its integer form")
    to_integer.add_argument("value", help="Decimal value, e.g. 1.2345")
    to_integer.add_argument("--precision", type=int, default=default_precision,
                            help=f"Fractional digits (default: {default_precision})")

    to_decimal = subparsers.add_parser("to-decimal", help="Convert a scaled integer to a decimal")
    to_decimal.add_argument("value", help="Scaled integer value, e.g. 12345")
    to_decimal.add_argument("--precision", type=int, default=default_precision,
                            help=f"Fractional digits (default: {default_precision})")

    check_config = subparsers.add_parser("check-config", help="Validate an accessor config file (YAML)")
    check_config.add_argument("path", help="Path to the accessor configuration file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = build_parser(default_precision_from_env())
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    configure_logging(verbose=args.verbose)

    if args.command == "check-config":
        if not os.path.exists(args.path):
            logger.error(f"Accessor config file not found at {args.path}")
            return 1
        try:
            config = load_accessor_config(args.path)
        except (ValueError, yaml.YAMLError, OSError) as e:
            logger.error(f"Failed to load accessor config: {e}")
            return 1

        for attribute, options in config.accessors.items():
            print(f"{attribute}\t{options.resolve_source(attribute)}\t{options.precision}")
        logger.info(f"Accessor config {args.path} is valid ({len(config.accessors)} accessor(s))")
        return 0

    try:
        if args.command == "to-integer":
            result = decimal_to_integer(args.value, args.precision)
        else:
            result = integer_to_decimal(args.value, args.precision)
    except ValueError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    print(result)
    if result is None:
        logger.warning(f"{args.value!r} is not a numeric value")
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
