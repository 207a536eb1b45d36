""" Script to print the configuration data used by the web controllers as JSON """

import argparse
import json
import sys
from datetime import date, datetime
from typing import List, Optional

from config.settings import settings
from scripts.logging_config import setup_logger
from utils.configuration_data import (
    collect_packages,
    error_reporting,
    get_basic_steps,
    get_specific_steps,
    has_forbidden_functions,
    load_intro_config,
)
from utils.exceptions import (
    FileLoadException,
    InvalidRangeException,
    UnsupportedGranularityException,
)
from utils.range_set_builder import RangeSetBuilder
from utils.translator import Translator

logger = setup_logger("get_configuration_data")


def parse_date(date_str: str) -> date:
    """Parses a date string in the format '%Y-%m-%d'."""
    return datetime.strptime(date_str, "%Y-%m-%d").date()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print configuration data for the web controllers."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    date_range = subparsers.add_parser("date-range", help="Range picker configuration.")
    date_range.add_argument("--start", type=parse_date, required=True)
    date_range.add_argument("--end", type=parse_date, required=True)
    date_range.add_argument("--first", type=parse_date, required=True)
    date_range.add_argument("--view-range", default=settings.DEFAULT_VIEW_RANGE)
    date_range.add_argument("--custom", action="store_true", help="start and end were picked by hand")
    date_range.add_argument("--today", type=parse_date, default=None)

    packages = subparsers.add_parser("packages", help="Installed packages.")
    packages.add_argument("--path", default=settings.PACKAGES_MANIFEST_PATH)

    steps = subparsers.add_parser("steps", help="Intro tour steps of a route.")
    steps.add_argument("--route", required=True)
    steps.add_argument("--page", default="")

    reporting = subparsers.add_parser("error-reporting", help="Label of an error reporting value.")
    reporting.add_argument("value", type=int)

    subparsers.add_parser("forbidden-functions", help="Check the disabled functions setting.")

    return parser


def run(args: argparse.Namespace):
    translator = Translator.from_file(settings.TRANSLATIONS_PATH)

    if args.command == "date-range":
        builder = RangeSetBuilder(translator=translator)
        range_set = builder.build(
            args.start, args.end, args.first, args.view_range,
            is_custom_range=args.custom, today=args.today,
        )
        return range_set.to_payload()

    if args.command == "packages":
        return [{"name": package.name, "version": package.version} for package in collect_packages(args.path)]

    if args.command == "steps":
        intro_config = load_intro_config()
        if args.page:
            return get_specific_steps(args.route, args.page, intro_config, translator)
        return get_basic_steps(args.route, intro_config, translator)

    if args.command == "error-reporting":
        return error_reporting(args.value)

    return has_forbidden_functions()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        result = run(args)
    except FileLoadException as error:
        logger.error(error)
        return 1
    except InvalidRangeException as error:
        logger.error(error)
        return 1
    except UnsupportedGranularityException as error:
        logger.error(error)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
